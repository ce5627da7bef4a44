"""Aircraft records and the bounded store that holds them.

A record has four text fields, always in this order:
    name, cruise speed, wingspan, description

Each field has a fixed buffer size that includes one character of
terminator budget, so the stored value is at most ``size - 1`` characters.
The store keeps file order and never holds more than MAX_RECORDS records.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

from .errors import FieldError


MAX_RECORDS = 10

SEPARATOR_RULE = "-" * 34


@dataclass(frozen=True)
class FieldSpec:
    attr: str
    size: int
    label: str

    @property
    def max_chars(self) -> int:
        return max(self.size - 1, 0)


FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("name", 50, "name"),
    FieldSpec("cruise", 10, "cruise speed"),
    FieldSpec("wingspan", 20, "wingspan"),
    FieldSpec("desc", 100, "description"),
)


@dataclass(frozen=True)
class Record:
    name: str = ""
    cruise: str = ""
    wingspan: str = ""
    desc: str = ""


def field_spec(selector: str) -> FieldSpec:
    """Look up a field by attribute name.

    Raises:
        FieldError: if `selector` does not name a record field.
    """
    for spec in FIELDS:
        if spec.attr == selector:
            return spec
    names = ", ".join(s.attr for s in FIELDS)
    raise FieldError(f"unknown field {selector!r} (expected one of: {names})")


class RecordStore:
    """Ordered, capacity-bounded collection of records."""

    def __init__(self, records=(), capacity: int = MAX_RECORDS):
        self.capacity = capacity
        self._records: list[Record] = []
        for r in records:
            if not self.append(r):
                break

    @property
    def full(self) -> bool:
        return len(self._records) >= self.capacity

    def append(self, record: Record) -> bool:
        """Add a record at the end. Returns False (and drops it) if full."""
        if self.full:
            return False
        self._records.append(record)
        return True

    def replace(self, index: int, record: Record) -> None:
        self._records[index] = record

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RecordStore):
            return self._records == other._records
        if isinstance(other, (list, tuple)):
            return self._records == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"RecordStore({self._records!r})"


def describe(r: Record) -> str:
    """Render a record as the multi-line block shown to the user."""
    return (
        f"Name:     {r.name}\n"
        f"Speed:    {r.cruise} mph\n"
        f"Wingspan: {r.wingspan}\n"
        f"Type:     {r.desc}\n"
        f"{SEPARATOR_RULE}"
    )
