"""Colored operation logger — ANSI-colored console logging for record stores.

Provides an OperationLogger with color-coded output per store operation,
making it easy to follow what a session did to its collections.

Color scheme:
    🟢 Green   — Add
    🔵 Blue    — Update
    🟣 Magenta — Delete
    🟡 Yellow  — Save / Load
    ⚪ Gray    — Not found
    🔴 Red     — Errors
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    GRAY = "\033[90m"


# ── Operation Definitions ────────────────────────────────────────────

class StoreOperation:
    """Predefined store operations with colors and icons."""

    ADD = ("ADD", _Colors.GREEN, "➕")
    UPDATE = ("UPDATE", _Colors.BLUE, "✏️")
    DELETE = ("DELETE", _Colors.MAGENTA, "🗑️")
    SAVE = ("SAVE", _Colors.YELLOW, "💾")
    LOAD = ("LOAD", _Colors.YELLOW, "📂")
    NOT_FOUND = ("NOT_FOUND", _Colors.GRAY, "∅")


# ── OperationLogger ──────────────────────────────────────────────────

class OperationLogger:
    """Color-coded logger for record store operations.

    Usage:
        log = OperationLogger("RecordStore.Transaction")
        log.step_complete(StoreOperation.ADD, "Coffee", size=3)
        log.not_found("update", "Tea")
        with log.timed_step(StoreOperation.SAVE, "transactions.txt"):
            ...
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, op: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = op
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_details(kwargs)}){_Colors.RESET}"
        self._logger.debug(formatted)

    def step_complete(self, op: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = op
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_details(kwargs)}){_Colors.RESET}"
        self._logger.info(formatted)

    def step_error(self, op: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        label, _, icon = op
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    def not_found(self, action: str, key: Any) -> None:
        """Log a soft not-found outcome; the caller carries on."""
        label, color, icon = StoreOperation.NOT_FOUND
        self._logger.info(
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{color}{action}: no record with key {key!r}{_Colors.RESET}"
        )

    @contextmanager
    def timed_step(self, op: tuple[str, str, str], message: str, **kwargs: Any):
        """Context manager that logs start/end with elapsed time.

        Usage:
            with log.timed_step(StoreOperation.LOAD, str(path)):
                records = read_records(path, codec)
        """
        self.step_start(op, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(op, f"{message} — failed after {elapsed:.3f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step_complete(op, f"{message} — {elapsed:.3f}s", **kwargs)


def _details(kwargs: dict[str, Any]) -> str:
    return " | ".join(f"{k}={v}" for k, v in kwargs.items())
