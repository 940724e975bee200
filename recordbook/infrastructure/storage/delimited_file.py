"""Flat-file persistence: one record per line, fields separated by ``|``.

Layout:
    <field1>|<field2>|...|<fieldN>

The field order and count come from the record's codec. Saving always
truncates and rewrites the whole file. Loading skips lines that do not decode
(including lines that are not valid UTF-8) unless ``strict`` is set.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TypeVar

from recordbook.application.interfaces import RecordCodec
from recordbook.domain.exceptions import RecordFileNotFoundError, RecordParseError, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

ENCODING = "utf-8"


def ensure_encodable(record: T, codec: RecordCodec[T]) -> list[str]:
    """Return the record's fields, or raise ValidationError if they would not load back.

    A field may not contain the delimiter or a line break.
    """
    fields = codec.encode(record)
    for value in fields:
        if codec.delimiter in value:
            raise ValidationError("field", f"{value!r} may not contain {codec.delimiter!r}")
        if "\n" in value or "\r" in value:
            raise ValidationError("field", f"{value!r} may not contain a line break")
    return fields


def encode_line(record: T, codec: RecordCodec[T]) -> str:
    return codec.delimiter.join(ensure_encodable(record, codec))


def decode_line(line: str, codec: RecordCodec[T], line_no: int = 0) -> T:
    """Decode one line, raising RecordParseError when it does not fit the codec."""
    parts = line.split(codec.delimiter)
    if len(parts) != codec.field_count:
        raise RecordParseError(
            line_no, line, f"expected {codec.field_count} fields, got {len(parts)}"
        )
    try:
        return codec.decode(parts)
    except (ValueError, ArithmeticError) as exc:
        raise RecordParseError(line_no, line, str(exc)) from exc


def write_records(path: str | Path, records: Iterable[T], codec: RecordCodec[T]) -> int:
    """Truncate ``path`` and write one line per record. Returns the number written."""
    dest = Path(path)
    if dest.parent and not dest.parent.exists():
        dest.parent.mkdir(parents=True, exist_ok=True)

    lines = [encode_line(record, codec) for record in records]
    with dest.open("w", encoding=ENCODING, newline="\n") as fh:
        for line in lines:
            fh.write(line)
            fh.write("\n")

    logger.info("Wrote %d records to %s", len(lines), dest)
    return len(lines)


def read_records(path: str | Path, codec: RecordCodec[T], *, strict: bool = False) -> list[T]:
    """Parse every well-formed line of ``path``.

    Malformed lines are dropped silently (DEBUG log only) unless ``strict``,
    in which case the first one raises RecordParseError.
    """
    src = Path(path)
    if not src.is_file():
        raise RecordFileNotFoundError(str(src))

    records: list[T] = []
    skipped = 0
    with src.open("rb") as fh:
        for line_no, raw in enumerate(fh, start=1):
            try:
                line = _decode_bytes(raw, line_no)
                if not line.strip():
                    continue
                records.append(decode_line(line, codec, line_no))
            except RecordParseError as exc:
                if strict:
                    raise
                skipped += 1
                logger.debug("Skipping %s %s", src, exc)

    logger.info("Read %d records from %s (%d skipped)", len(records), src, skipped)
    return records


def _decode_bytes(raw: bytes, line_no: int) -> str:
    try:
        return raw.decode(ENCODING).rstrip("\r\n")
    except UnicodeDecodeError as exc:
        shown = raw.decode(ENCODING, errors="replace").rstrip("\r\n")
        raise RecordParseError(line_no, shown, f"not valid {ENCODING} text") from exc
