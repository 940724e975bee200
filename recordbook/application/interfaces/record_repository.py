"""Abstract repository interface (port) for an ordered record collection."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class RecordRepository(ABC, Generic[T]):
    """Port for record storage — implemented in the infrastructure layer.

    Records are kept in insertion order and looked up by an identity key.
    Keys are not unique: every lookup resolves to the first match.
    """

    @abstractmethod
    def add(self, record: T) -> T:
        """Append a record to the end of the collection."""
        ...

    @abstractmethod
    def find_all(self, predicate: Callable[[T], bool] | None = None) -> Iterator[T]:
        """Lazily yield the records matching ``predicate`` (all when None)."""
        ...

    @abstractmethod
    def get_by_key(self, key: Any) -> T | None:
        """Return the first record whose identity key matches, or None."""
        ...

    @abstractmethod
    def aggregate(
        self,
        selector: Callable[[T], Any],
        reducer: Callable[..., Any],
        predicate: Callable[[T], bool] | None = None,
    ) -> Any:
        """Fold the projection of every (matching) record with ``reducer``."""
        ...

    @abstractmethod
    def update_by_key(
        self,
        key: Any,
        factory: Callable[[T], T],
        *,
        keep_position: bool = False,
    ) -> T | None:
        """Replace the first match with ``factory(old)``. Returns None when not found."""
        ...

    @abstractmethod
    def delete_by_key(self, key: Any) -> T | None:
        """Remove the first match and return it, or None when not found."""
        ...

    @abstractmethod
    def list_records(self) -> list[T]:
        """Snapshot of every record in order."""
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def save_to_file(self, path: str | Path) -> int:
        """Rewrite ``path`` with every record. Returns the number written."""
        ...

    @abstractmethod
    def load_from_file(self, path: str | Path, *, strict: bool = False) -> int:
        """Append the records parsed from ``path``. Returns the number appended."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...
