"""Predicate builders and reducers used to query record collections.

Predicates take a record and return a bool; they read fields by attribute
name so they work across every record shape. Reducers fold an iterable of
projected values into a single result and are handed to
``RecordRepository.aggregate``.
"""

from collections.abc import Callable, Iterable
from decimal import Decimal
from operator import attrgetter
from typing import Any

from recordbook.domain.text import contains_text, fold, same_text

Predicate = Callable[[Any], bool]
Reducer = Callable[[Iterable[Any]], Any]


# ── Predicates ───────────────────────────────────────────────────────

def field_equals(field_name: str, value: Any) -> Predicate:
    """Match records whose field equals ``value``; strings compare caselessly."""
    getter = attrgetter(field_name)

    def predicate(record: Any) -> bool:
        current = getter(record)
        if isinstance(current, str) and isinstance(value, str):
            return same_text(current, value)
        return current == value

    return predicate


def field_contains(field_name: str, term: str) -> Predicate:
    """Case-insensitive substring match on a text field."""
    getter = attrgetter(field_name)
    return lambda record: contains_text(getter(record), term)


def any_item_contains(field_name: str, term: str) -> Predicate:
    """Case-insensitive substring match against any element of a tuple field."""
    getter = attrgetter(field_name)
    return lambda record: any(contains_text(item, term) for item in getter(record))


def field_between(
    field_name: str,
    low: Any,
    high: Any,
    *,
    transform: Callable[[Any], Any] | None = None,
) -> Predicate:
    """Inclusive range check on a numeric or date field.

    ``transform`` is applied to the field value before comparing, e.g.
    ``datetime.date`` to compare timestamps by calendar day.
    """
    getter = attrgetter(field_name)

    def predicate(record: Any) -> bool:
        current = getter(record)
        if transform is not None:
            current = transform(current)
        return low <= current <= high

    return predicate


def all_of(*predicates: Predicate) -> Predicate:
    return lambda record: all(p(record) for p in predicates)


def any_of(*predicates: Predicate) -> Predicate:
    return lambda record: any(p(record) for p in predicates)


def negate(predicate: Predicate) -> Predicate:
    return lambda record: not predicate(record)


# ── Reducers ─────────────────────────────────────────────────────────

def total(values: Iterable[Any]) -> Any:
    """Sum of the values. Decimal inputs stay Decimal; empty input is 0."""
    result: Any = 0
    for value in values:
        result = result + value
    return result


def average(values: Iterable[Any]) -> Any:
    """Arithmetic mean; the mean of nothing is 0."""
    items = list(values)
    if not items:
        return 0
    mean = total(items) / len(items)
    if isinstance(mean, Decimal):
        return mean
    return float(mean)


def count(values: Iterable[Any]) -> int:
    return sum(1 for _ in values)


def count_true(values: Iterable[Any]) -> int:
    """Number of truthy values — for boolean projections."""
    return sum(1 for value in values if value)


def group_by(reducer: Reducer = total) -> Reducer:
    """Build a reducer over ``(key, value)`` pairs that reduces each group.

    Text keys group caselessly; each group is labelled with the first spelling
    seen, and groups come back in first-seen order.
    """

    def grouped(pairs: Iterable[tuple[Any, Any]]) -> dict[Any, Any]:
        labels: dict[Any, Any] = {}
        buckets: dict[Any, list[Any]] = {}
        for key, value in pairs:
            norm = fold(key) if isinstance(key, str) else key
            if norm not in buckets:
                labels[norm] = key
                buckets[norm] = []
            buckets[norm].append(value)
        return {labels[norm]: reducer(values) for norm, values in buckets.items()}

    return grouped


def distinct(values: Iterable[Any]) -> list[Any]:
    """Unique values in first-seen order; text compares caselessly."""
    seen: set[Any] = set()
    result: list[Any] = []
    for value in values:
        norm = fold(value) if isinstance(value, str) else value
        if norm in seen:
            continue
        seen.add(norm)
        result.append(value)
    return result
