"""ISO 8601 rendering of time values.

This module renders a time value in the simplified ISO 8601 format used
for date interchange:

    YYYY-MM-DDTHH:mm:ss.sssZ

Years outside 0000-9999 use the expanded six-digit form with an explicit
sign (``-000001``, ``+275760``).

Examples:
    >>> iso_date_string(0.0)
    '1970-01-01T00:00:00.000Z'
    >>> iso_date_string(8.64e15)
    '+275760-09-13T00:00:00.000Z'
"""

from __future__ import annotations

from epochal._internal.numeric import is_finite
from epochal.core.calendar import (
    date_from_time,
    hour_from_time,
    min_from_time,
    month_from_time,
    ms_from_time,
    sec_from_time,
    year_from_time,
)
from epochal.errors import ValidationError


def _format_year(year: int) -> str:
    if year < 0:
        return f"-{-year:06d}"
    if year > 9999:
        return f"+{year:06d}"
    return f"{year:04d}"


def iso_date_string(t: float) -> str:
    """Format a time value as an ISO 8601 UTC string.

    Args:
        t: A finite time value.

    Returns:
        The string ``YYYY-MM-DDTHH:mm:ss.sssZ``.

    Raises:
        ValidationError: If ``t`` is not finite; an invalid date has no
            string form.

    Examples:
        >>> iso_date_string(-62198755200000.0)
        '-000001-01-01T00:00:00.000Z'
        >>> iso_date_string(1705322200123.0)
        '2024-01-15T12:36:40.123Z'
    """
    if not is_finite(t):
        raise ValidationError(f"cannot format an invalid time value: {t!r}")

    return (
        f"{_format_year(year_from_time(t))}-{month_from_time(t) + 1:02d}-{date_from_time(t):02d}"
        f"T{hour_from_time(t):02d}:{min_from_time(t):02d}:{sec_from_time(t):02d}"
        f".{ms_from_time(t):03d}Z"
    )


__all__ = ["iso_date_string"]
