"""Conversions between millisecond time values and exact nanoseconds.

Examples:
    >>> from epochal.core.calendar import CalendarFields
    >>> from epochal.convert import get_utc_epoch_nanoseconds

    >>> get_utc_epoch_nanoseconds(CalendarFields(1970, 0, 1), microsecond=500)
    500000
"""

from __future__ import annotations

from epochal.convert.epoch import (
    clip_bigint_to_int64,
    clip_double_to_int64,
    epoch_milliseconds_from_nanoseconds,
    get_utc_epoch_nanoseconds,
)

__all__ = [
    "get_utc_epoch_nanoseconds",
    "clip_bigint_to_int64",
    "clip_double_to_int64",
    "epoch_milliseconds_from_nanoseconds",
]
