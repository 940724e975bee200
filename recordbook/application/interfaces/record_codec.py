"""Abstract interface for turning records into delimited text lines and back."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class RecordCodec(ABC, Generic[T]):
    """Port for one record shape's flat-file line format."""

    delimiter: str = "|"
    field_count: int

    @abstractmethod
    def encode(self, record: T) -> list[str]:
        """Return the record's fields, in file order, as text."""
        ...

    @abstractmethod
    def decode(self, fields: list[str]) -> T:
        """Build a record from exactly ``field_count`` text fields.

        Raises ValueError (or a subclass) when a field cannot be parsed.
        """
        ...
