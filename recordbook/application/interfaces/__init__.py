from .record_codec import RecordCodec
from .record_repository import RecordRepository

__all__ = [
    "RecordCodec",
    "RecordRepository",
]
