"""String formats: UTC offset parsing and ISO 8601 rendering.

Functions:
    parse_utc_offset: Parse a UTC offset string into nanoseconds.
    parse_utc_offset_unchecked: Parse an already validated offset string.
    is_fixed_offset_identifier: Check for a minute-precision offset string.
    iso_date_string: Render a time value as ISO 8601.
"""

from __future__ import annotations

from epochal.format.iso8601 import iso_date_string
from epochal.format.offset import (
    UTCOffsetFields,
    is_fixed_offset_identifier,
    parse_utc_offset,
    parse_utc_offset_fields,
    parse_utc_offset_unchecked,
)

__all__ = [
    "UTCOffsetFields",
    "is_fixed_offset_identifier",
    "iso_date_string",
    "parse_utc_offset",
    "parse_utc_offset_fields",
    "parse_utc_offset_unchecked",
]
