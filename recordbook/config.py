import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from recordbook.domain.entities.fitness import (
    DEFAULT_CALORIE_GOAL,
    DEFAULT_CARBS_GOAL,
    DEFAULT_FATS_GOAL,
    DEFAULT_PROTEIN_GOAL,
)

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables (prefix ``RECORDBOOK_``)."""

    app_title: str = "Record Book"
    app_version: str = "0.1.0"

    # Default save/load locations (relative to data_dir unless absolute)
    data_dir: str = "data"
    transactions_file: str = "transactions.txt"
    recipes_file: str = "recipes.txt"
    rooms_file: str = "rooms.txt"
    movies_file: str = "movies.txt"

    # Skip malformed lines on load (False) or stop at the first one (True)
    strict_load: bool = False

    currency_symbol: str = "$"

    # Movie rentals
    rental_period_days: int = 7
    late_fee_per_day: float = 1.5

    # Fitness tracker defaults for newly registered users
    daily_calorie_goal: float = DEFAULT_CALORIE_GOAL
    daily_protein_goal: float = DEFAULT_PROTEIN_GOAL
    daily_carbs_goal: float = DEFAULT_CARBS_GOAL
    daily_fats_goal: float = DEFAULT_FATS_GOAL

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "WARNING"               # Root / app-wide
    log_level_store: str = "WARNING"         # in-memory record stores
    log_level_storage: str = "WARNING"       # delimited file save/load
    log_level_cli: str = "WARNING"           # interactive menus

    model_config = SettingsConfigDict(
        env_prefix="RECORDBOOK_",
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def model_post_init(self, __context: object) -> None:
        data_dir = Path(self.data_dir)
        if data_dir.exists() and not data_dir.is_dir():
            _config_logger.warning("data_dir %s is not a directory", data_dir)

    def data_path(self, filename: str) -> Path:
        """Resolve a file name against ``data_dir``; absolute paths pass through."""
        path = Path(filename)
        if path.is_absolute():
            return path
        return Path(self.data_dir) / path


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
