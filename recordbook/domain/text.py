"""Case-insensitive text comparison shared by every lookup and filter."""

from typing import Any


def fold(value: str) -> str:
    """Normalise a string for caseless comparison."""
    return value.casefold()


def same_text(left: str, right: str) -> bool:
    return fold(left) == fold(right)


def contains_text(haystack: str, needle: str) -> bool:
    return fold(needle) in fold(haystack)


def keys_match(left: Any, right: Any) -> bool:
    """Compare identity keys: strings caselessly, tuples element-wise, anything else by equality."""
    if isinstance(left, str) and isinstance(right, str):
        return same_text(left, right)
    if isinstance(left, tuple) and isinstance(right, tuple):
        return len(left) == len(right) and all(
            keys_match(a, b) for a, b in zip(left, right)
        )
    return left == right


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
