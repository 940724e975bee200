from .delimited_file import read_records, write_records
from .in_memory_record_store import InMemoryRecordStore

__all__ = [
    "InMemoryRecordStore",
    "read_records",
    "write_records",
]
