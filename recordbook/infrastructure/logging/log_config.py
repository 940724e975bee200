"""Centralized logging configuration.

Applies per-category log levels from Settings so that the chattier loggers
(e.g. every store insert, every skipped line during a load) can be turned up
without flooding the interactive menus.

Usage:
    from recordbook.infrastructure.logging.log_config import setup_logging
    setup_logging()   # Call once at startup (in the CLI entry point)
"""

import logging
import sys

from recordbook.config import Settings, get_settings


# ── Logger-name → Settings-field mapping ────────────────────────────
#
# Each entry maps one or more Python logger names to a Settings field.
# When setup_logging() runs, it sets the level of each listed logger
# to the value of the corresponding setting.

_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_store": [
        "recordbook.infrastructure.storage.in_memory_record_store",
        "RecordStore",
    ],
    "log_level_storage": [
        "recordbook.infrastructure.storage.delimited_file",
        "recordbook.infrastructure.codecs",
    ],
    "log_level_cli": [
        "recordbook.presentation.cli",
    ],
}


def setup_logging(settings: Settings | None = None) -> None:
    """Configure Python logging levels from application settings.

    Call this once during startup.
    """
    settings = settings or get_settings()
    root_level = _parse_level(settings.log_level)

    # ── Root logger ────────────────────────────────────────────────
    root = logging.getLogger()
    root.setLevel(root_level)

    # Logs go to stderr so they never interleave with menu output on stdout.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(levelname)-8s %(name)s — %(message)s",
            )
        )
        root.addHandler(handler)

    # ── Per-category loggers ───────────────────────────────────────
    for settings_field, logger_names in _CATEGORY_MAP.items():
        raw_level: str = getattr(settings, settings_field, "INFO")
        level = _parse_level(raw_level)

        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured — root=%s, store=%s, storage=%s, cli=%s",
        settings.log_level,
        settings.log_level_store,
        settings.log_level_storage,
        settings.log_level_cli,
    )


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
