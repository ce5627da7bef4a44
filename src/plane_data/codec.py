"""Text codec for the plane data file.

Layout:
    <name>
    <cruise>
    <wingspan>
    <desc>
    <blank line>
    <name>
    ...
    <desc of last record, no trailing newline>

Blank lines in front of a name line are skipped, which is how the
separator gets absorbed. A record that is cut short by end of file is
dropped: that is how decoding ends, not a failure.
"""

from __future__ import annotations
import io
from typing import Iterable, Optional, TextIO

from .normalize import normalize_record
from .records import FIELDS, MAX_RECORDS, Record, RecordStore


def _read_line(stream: TextIO) -> Optional[str]:
    """Read one line without its terminator, or None at end of stream."""
    line = stream.readline()
    if line == "":
        return None
    return line.split("\n", 1)[0]


def read_record(stream: TextIO) -> Optional[Record]:
    """Read the next record, or None if the stream ends before it is complete."""
    line = _read_line(stream)
    while line == "":
        line = _read_line(stream)
    if line is None:
        return None

    values = [line[: FIELDS[0].max_chars]]
    for spec in FIELDS[1:]:
        line = _read_line(stream)
        if line is None:
            return None
        values.append(line[: spec.max_chars])
    return Record(*values)


def decode(stream: TextIO, capacity: int = MAX_RECORDS) -> RecordStore:
    """Decode up to `capacity` records from a text stream.

    Fields are normalized after the whole read completes.
    """
    raw: list[Record] = []
    while len(raw) < capacity:
        rec = read_record(stream)
        if rec is None:
            break
        raw.append(rec)
    return RecordStore((normalize_record(r) for r in raw), capacity=capacity)


def encode(records: Iterable[Record], stream: TextIO) -> None:
    """Write records in file layout; the last one gets no trailing newline."""
    items = list(records)
    for i, r in enumerate(items):
        stream.write(f"{r.name}\n{r.cruise}\n{r.wingspan}\n")
        if i == len(items) - 1:
            stream.write(r.desc)
        else:
            stream.write(f"{r.desc}\n\n")


def loads(text: str, capacity: int = MAX_RECORDS) -> RecordStore:
    return decode(io.StringIO(text, newline=None), capacity=capacity)


def dumps(records: Iterable[Record]) -> str:
    buf = io.StringIO()
    encode(records, buf)
    return buf.getvalue()
