"""List-backed record store: the concrete RecordRepository used by every service."""

from collections.abc import Callable, Iterator
from operator import attrgetter
from pathlib import Path
from typing import Any, TypeVar

from recordbook.application.interfaces import RecordCodec, RecordRepository
from recordbook.domain.exceptions import ValidationError
from recordbook.domain.text import is_blank, keys_match
from recordbook.infrastructure.logging.colored_logger import OperationLogger, StoreOperation
from recordbook.infrastructure.storage.delimited_file import (
    ensure_encodable,
    read_records,
    write_records,
)

T = TypeVar("T")


class InMemoryRecordStore(RecordRepository[T]):
    """Ordered, in-memory collection of frozen records.

    Lookups scan from the front and stop at the first record whose identity
    key matches (strings compare caselessly). Records are immutable, so the
    store hands out the records themselves; the list holding them is never
    exposed.
    """

    def __init__(
        self,
        name: str,
        *,
        key: Callable[[T], Any] = attrgetter("key"),
        codec: RecordCodec[T] | None = None,
    ):
        self._name = name
        self._key = key
        self._codec = codec
        self._records: list[T] = []
        self._log = OperationLogger(f"RecordStore.{name}")

    @property
    def name(self) -> str:
        return self._name

    # ── Insert ──────────────────────────────────────────────────────

    def add(self, record: T) -> T:
        key = self._key(record)
        if is_blank(key):
            raise ValidationError("key", f"{self._name} record has no identity key")
        self._check_encodable(record)
        self._records.append(record)
        self._log.step_complete(StoreOperation.ADD, repr(key), size=len(self._records))
        return record

    # ── Query ───────────────────────────────────────────────────────

    def find_all(self, predicate: Callable[[T], bool] | None = None) -> Iterator[T]:
        snapshot = tuple(self._records)
        if predicate is None:
            return iter(snapshot)
        return (record for record in snapshot if predicate(record))

    def get_by_key(self, key: Any) -> T | None:
        index = self._index_of(key)
        return None if index is None else self._records[index]

    def aggregate(
        self,
        selector: Callable[[T], Any],
        reducer: Callable[..., Any],
        predicate: Callable[[T], bool] | None = None,
    ) -> Any:
        return reducer(selector(record) for record in self.find_all(predicate))

    def sorted_by(self, sort_key: Callable[[T], Any], *, reverse: bool = False) -> list[T]:
        """Sorted copy; the stored order is left alone."""
        return sorted(self._records, key=sort_key, reverse=reverse)

    def list_records(self) -> list[T]:
        return list(self._records)

    def index_of(self, key: Any) -> int | None:
        """Zero-based position of the first match, or None."""
        return self._index_of(key)

    # ── Update / delete ─────────────────────────────────────────────

    def update_by_key(
        self,
        key: Any,
        factory: Callable[[T], T],
        *,
        keep_position: bool = False,
    ) -> T | None:
        """Swap the first match for ``factory(old)``.

        By default the old record is removed and the new one appended, so an
        edited record moves to the end. ``keep_position`` puts the new record
        in the old slot instead. If ``factory`` raises, nothing changes.
        """
        index = self._index_of(key)
        if index is None:
            self._log.not_found("update", key)
            return None

        replacement = factory(self._records[index])
        if is_blank(self._key(replacement)):
            raise ValidationError("key", f"{self._name} record has no identity key")
        self._check_encodable(replacement)

        if keep_position:
            self._records[index] = replacement
        else:
            del self._records[index]
            self._records.append(replacement)
        self._log.step_complete(
            StoreOperation.UPDATE, repr(key), position="kept" if keep_position else "end"
        )
        return replacement

    def delete_by_key(self, key: Any) -> T | None:
        index = self._index_of(key)
        if index is None:
            self._log.not_found("delete", key)
            return None
        removed = self._records.pop(index)
        self._log.step_complete(StoreOperation.DELETE, repr(key), size=len(self._records))
        return removed

    def clear(self) -> None:
        self._records.clear()

    # ── Persistence ─────────────────────────────────────────────────

    def save_to_file(self, path: str | Path) -> int:
        codec = self._require_codec()
        with self._log.timed_step(StoreOperation.SAVE, str(path)):
            return write_records(path, tuple(self._records), codec)

    def load_from_file(self, path: str | Path, *, strict: bool = False) -> int:
        """Append records parsed from ``path`` to what is already held.

        Parsing finishes before anything is appended, so a strict-mode
        failure leaves the store untouched.
        """
        codec = self._require_codec()
        with self._log.timed_step(StoreOperation.LOAD, str(path)):
            loaded = read_records(path, codec, strict=strict)
            self._records.extend(loaded)
        return len(loaded)

    # ── Internals ───────────────────────────────────────────────────

    def _index_of(self, key: Any) -> int | None:
        for index, record in enumerate(self._records):
            if keys_match(self._key(record), key):
                return index
        return None

    def _check_encodable(self, record: T) -> None:
        """A store with a codec only holds records it can write back out."""
        if self._codec is not None:
            ensure_encodable(record, self._codec)

    def _require_codec(self) -> RecordCodec[T]:
        if self._codec is None:
            raise TypeError(f"{self._name} store has no line codec; it cannot be saved or loaded")
        return self._codec

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._records))

    def __repr__(self) -> str:
        return f"InMemoryRecordStore(name={self._name!r}, size={len(self._records)})"
