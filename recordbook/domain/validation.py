"""Construction-time checks shared by the domain entities."""

from collections.abc import Iterable

from recordbook.domain.exceptions import ValidationError
from recordbook.domain.text import is_blank

RATING_MIN = 1
RATING_MAX = 5


def require_text(field: str, value: str | None) -> str:
    if is_blank(value):
        raise ValidationError(field, "is required")
    return value  # type: ignore[return-value]


def require_present(field: str, value: object) -> None:
    if value is None:
        raise ValidationError(field, "is required")


def require_rating(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("rating", f"must be a whole number, got {value!r}")
    if not RATING_MIN <= value <= RATING_MAX:
        raise ValidationError(
            "rating", f"must be between {RATING_MIN} and {RATING_MAX}, got {value}"
        )
    return value


def clean_items(values: Iterable[str]) -> tuple[str, ...]:
    """Strip each item and drop empty ones."""
    return tuple(item.strip() for item in values if item and item.strip())
