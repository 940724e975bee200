"""Text conversions for individual fields of a persisted line."""

import math
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from recordbook.domain.exceptions import ValidationError

_TRUE = "True"
_FALSE = "False"

LIST_SEPARATOR = ","


def format_bool(value: bool) -> str:
    return _TRUE if value else _FALSE


def parse_bool(raw: str) -> bool:
    """Accept ``True``/``False`` in any letter case."""
    text = raw.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def format_flag(value: bool) -> str:
    return "1" if value else "0"


def parse_flag(raw: str) -> bool:
    return raw.strip() == "1"


def parse_decimal(raw: str) -> Decimal:
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ValueError(f"not a number: {raw!r}") from exc
    if not value.is_finite():
        raise ValueError(f"not a finite number: {raw!r}")
    return value


def parse_float(raw: str) -> float:
    value = float(raw.strip())
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {raw!r}")
    return value


def parse_datetime(raw: str) -> datetime:
    return datetime.fromisoformat(raw.strip())


def parse_date(raw: str) -> date:
    return date.fromisoformat(raw.strip())


def join_list(items: tuple | list) -> str:
    texts = [str(item) for item in items]
    for text in texts:
        if LIST_SEPARATOR in text:
            raise ValidationError("item", f"{text!r} may not contain {LIST_SEPARATOR!r}")
    return LIST_SEPARATOR.join(texts)


def split_list(raw: str) -> list[str]:
    """Split a comma list; an empty field is an empty list."""
    if not raw.strip():
        return []
    return [item.strip() for item in raw.split(LIST_SEPARATOR)]
