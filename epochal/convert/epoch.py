"""Epoch conversion between millisecond time values and nanoseconds.

Time values carry millisecond resolution in a float, which cannot hold
nanosecond instants exactly beyond about 104 days from the epoch. This
module promotes a calendar reading to an exact ``int`` count of
nanoseconds, and saturates values into the signed 64-bit range used for
time zone database lookups.

Functions:
    get_utc_epoch_nanoseconds: Exact nanoseconds of calendar fields read as UTC.
    clip_bigint_to_int64: Saturate an integer to the signed 64-bit range.
    clip_double_to_int64: Saturate a float to the signed 64-bit range.
    epoch_milliseconds_from_nanoseconds: Floor nanoseconds to a time value.

Examples:
    >>> from epochal.core.calendar import CalendarFields
    >>> get_utc_epoch_nanoseconds(CalendarFields(1970, 0, 1), microsecond=500)
    500000
    >>> clip_bigint_to_int64(2**70)
    9223372036854775807
"""

from __future__ import annotations

import math

from epochal._internal.constants import (
    INT64_MAX,
    INT64_MIN,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
)
from epochal.core.calendar import CalendarFields, make_date, make_day, make_time
from epochal.errors import InvariantError, ValidationError


def get_utc_epoch_nanoseconds(
    fields: CalendarFields,
    *,
    microsecond: int = 0,
    nanosecond: int = 0,
) -> int:
    """Return the exact epoch nanoseconds of a calendar reading in UTC.

    The calendar fields are combined at millisecond resolution with
    ``make_day``, ``make_time`` and ``make_date``; the sub-millisecond
    remainders are added only after promotion to ``int``.

    Args:
        fields: The calendar reading. The caller guarantees that it lies
            within the range that ``make_date`` can represent.
        microsecond: Microseconds past the millisecond (0-999).
        nanosecond: Nanoseconds past the microsecond (0-999).

    Returns:
        Nanoseconds since the epoch.

    Raises:
        ValidationError: If a remainder is outside 0-999.
        InvariantError: If the fields do not produce an integral time value.

    Examples:
        >>> get_utc_epoch_nanoseconds(CalendarFields(1970, 0, 1), nanosecond=1)
        1
        >>> get_utc_epoch_nanoseconds(CalendarFields(1969, 11, 31, 23, 59, 59, 999))
        -1000000
    """
    if not 0 <= microsecond <= 999:
        raise ValidationError(f"microsecond must be between 0 and 999, got {microsecond}")
    if not 0 <= nanosecond <= 999:
        raise ValidationError(f"nanosecond must be between 0 and 999, got {nanosecond}")

    date = make_day(fields.year, fields.month, fields.day)
    time = make_time(fields.hour, fields.minute, fields.second, fields.millisecond)
    ms = make_date(date, time)

    if not math.isfinite(ms) or ms != math.trunc(ms):
        raise InvariantError(f"calendar fields produced a non-integral time value: {ms!r}")

    return (
        int(ms) * NANOS_PER_MILLISECOND
        + microsecond * NANOS_PER_MICROSECOND
        + nanosecond
    )


def clip_bigint_to_int64(value: int) -> int:
    """Saturate an integer to the signed 64-bit range.

    Time zone rules carry no information this far from the epoch, so the
    nearest bound is an acceptable stand-in for lookups.

    Examples:
        >>> clip_bigint_to_int64(-(2**64))
        -9223372036854775808
        >>> clip_bigint_to_int64(42)
        42
    """
    if value < INT64_MIN:
        return INT64_MIN
    if value > INT64_MAX:
        return INT64_MAX
    return value


def clip_double_to_int64(value: float) -> int:
    """Saturate a float to the signed 64-bit range, truncating toward zero.

    Raises:
        InvariantError: If ``value`` is NaN.

    Examples:
        >>> clip_double_to_int64(1.5e300)
        9223372036854775807
        >>> clip_double_to_int64(-2.9)
        -2
    """
    if math.isnan(value):
        raise InvariantError("cannot saturate NaN to a 64-bit integer")
    if value < INT64_MIN:
        return INT64_MIN
    if value > INT64_MAX:
        return INT64_MAX
    return clip_bigint_to_int64(math.trunc(value))


def epoch_milliseconds_from_nanoseconds(nanoseconds: int) -> float:
    """Return the time value containing an epoch-nanosecond instant.

    Examples:
        >>> epoch_milliseconds_from_nanoseconds(-1)
        -1.0
        >>> epoch_milliseconds_from_nanoseconds(1_999_999)
        1.0
    """
    return float(nanoseconds // NANOS_PER_MILLISECOND)


__all__ = [
    "get_utc_epoch_nanoseconds",
    "clip_bigint_to_int64",
    "clip_double_to_int64",
    "epoch_milliseconds_from_nanoseconds",
]
