"""Unit tests for application settings configuration."""

from pathlib import Path

from recordbook.config import Settings
from recordbook.domain.entities import NutritionGoals


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-level .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_defaults(monkeypatch):
    monkeypatch.delenv("RECORDBOOK_LATE_FEE_PER_DAY", raising=False)
    monkeypatch.delenv("RECORDBOOK_RENTAL_PERIOD_DAYS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.rental_period_days == 7
    assert settings.late_fee_per_day == 1.5
    assert settings.daily_calorie_goal == 2000
    assert settings.strict_load is False


def test_env_prefix_overrides(monkeypatch):
    monkeypatch.setenv("RECORDBOOK_LATE_FEE_PER_DAY", "2.25")
    monkeypatch.setenv("RECORDBOOK_STRICT_LOAD", "true")
    settings = Settings(_env_file=None)
    assert settings.late_fee_per_day == 2.25
    assert settings.strict_load is True


def test_data_path(tmp_path):
    settings = Settings(_env_file=None, data_dir=str(tmp_path))
    assert settings.data_path("rooms.txt") == tmp_path / "rooms.txt"

    absolute = tmp_path / "elsewhere" / "rooms.txt"
    assert settings.data_path(str(absolute)) == absolute


def test_nutrition_defaults_match_domain_defaults():
    settings = Settings(_env_file=None)
    defaults = NutritionGoals()
    assert (
        settings.daily_calorie_goal,
        settings.daily_protein_goal,
        settings.daily_carbs_goal,
        settings.daily_fats_goal,
    ) == (defaults.calories, defaults.protein, defaults.carbs, defaults.fats)
