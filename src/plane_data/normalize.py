"""Field normalization.

Every value that ends up in a Record passes through here:
- cut to the field's size minus the terminator budget
- strip leading and trailing ASCII whitespace

Cutting happens before stripping, so a value padded past its cap keeps
only what fits and then loses the padding.
"""

from __future__ import annotations
from dataclasses import replace

from .records import FIELDS, Record, field_spec


# isspace() in the C locale; str.strip() with no argument would also eat
# Unicode spaces.
ASCII_WHITESPACE = " \t\n\r\x0b\x0c"


def normalize_field(raw: str, size: int) -> str:
    """Return the stored form of `raw` for a field of buffer size `size`."""
    if size <= 1:
        return ""
    return raw[: size - 1].strip(ASCII_WHITESPACE)


def normalize_record(r: Record) -> Record:
    """Normalize every field of a record."""
    return Record(*(normalize_field(getattr(r, s.attr), s.size) for s in FIELDS))


def edit_field(r: Record, selector: str, value: str) -> Record:
    """Return a copy of `r` with one field set to the normalized `value`.

    Raises:
        FieldError: if `selector` is not a field name.
    """
    spec = field_spec(selector)
    return replace(r, **{spec.attr: normalize_field(value, spec.size)})
