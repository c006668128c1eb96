"""Calendar arithmetic on time values.

A time value is a float count of milliseconds since the epoch,
1970-01-01T00:00:00Z, in the proleptic Gregorian calendar. NaN denotes an
invalid date. Valid, clipped time values lie in [-8.64e15, 8.64e15].

Every function here is pure and total over floats. Non-finite input never
raises: the decomposition functions return 0 (or the maximum 32-bit year
from ``year_from_time``) and the constructors return NaN.

Months are 0-indexed (0 = January) and days of the month are 1-indexed,
matching the field layout of ``CalendarFields``.

Examples:
    >>> t = make_date(make_day(2024, 1, 29), make_time(12, 30, 0, 0))
    >>> year_from_time(t), month_from_time(t), date_from_time(t)
    (2024, 1, 29)
    >>> week_day(0.0)  # 1970-01-01 was a Thursday
    4
"""

from __future__ import annotations

import bisect
import math
from dataclasses import dataclass
from typing import Self

from epochal._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_PER_MEAN_YEAR,
    HOURS_PER_DAY,
    INT32_MAX,
    INT32_MIN,
    MAX_TIME_VALUE,
    MINUTES_PER_HOUR,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    SECONDS_PER_MINUTE,
)
from epochal._internal.numeric import floor, is_finite, modulo, to_integer_or_infinity
from epochal.errors import InvariantError, ValidationError

# First day-within-year of each month, indexed by [in_leap_year][month].
# Index 12 holds the length of the year.
_MONTH_STARTS: tuple[tuple[int, ...], tuple[int, ...]] = (
    DAYS_BEFORE_MONTH,
    tuple(days + (1 if month >= 2 else 0) for month, days in enumerate(DAYS_BEFORE_MONTH)),
)


def day(t: float) -> float:
    """Return the day number containing time value ``t``."""
    return floor(t / MS_PER_DAY)


def time_within_day(t: float) -> float:
    """Return the milliseconds elapsed since midnight, in [0, 86400000)."""
    return modulo(t, MS_PER_DAY)


def days_in_year(year: int) -> int:
    """Return the number of days in a year of the proleptic Gregorian calendar.

    Century years are leap years only when divisible by 400, so the
    400 and 100 rules are tested before the 4 rule.

    Args:
        year: The year (can be zero or negative).

    Returns:
        366 for leap years, 365 otherwise.

    Examples:
        >>> days_in_year(2000)
        366
        >>> days_in_year(1900)
        365
        >>> days_in_year(2024)
        366
    """
    if year % 400 == 0:
        return 366
    if year % 100 == 0:
        return 365
    if year % 4 == 0:
        return 366
    return 365


def day_from_year(year: int) -> float:
    """Return the day number of the first day of ``year``.

    Each term counts the years divisible by 1, 4, 100 and 400 between the
    epoch and the start of ``year``; Python's floor division gives the
    correct (negative) counts before the epoch.

    Examples:
        >>> day_from_year(1970)
        0.0
        >>> day_from_year(2000)
        10957.0
        >>> day_from_year(1969)
        -365.0
    """
    return float(
        365 * (year - 1970)
        + (year - 1969) // 4
        - (year - 1901) // 100
        + (year - 1601) // 400
    )


def time_from_year(year: int) -> float:
    """Return the time value of the first instant of ``year``."""
    return MS_PER_DAY * day_from_year(year)


def year_from_time(t: float) -> int:
    """Return the year containing time value ``t``.

    The year is estimated from the mean Gregorian year length and then
    corrected by at most one year against the bounds of ``time_from_year``.

    Args:
        t: A time value.

    Returns:
        The year, or the maximum signed 32-bit integer when ``t`` is not
        finite.

    Examples:
        >>> year_from_time(0.0)
        1970
        >>> year_from_time(-1.0)
        1969
        >>> year_from_time(float("nan"))
        2147483647
    """
    if not is_finite(t):
        return INT32_MAX

    year = math.floor(t / (DAYS_PER_MEAN_YEAR * MS_PER_DAY) + 1970)

    year_t = time_from_year(year)
    if year_t > t:
        year -= 1
    elif year_t + days_in_year(year) * MS_PER_DAY <= t:
        year += 1

    return year


def day_within_year(t: float) -> int:
    """Return the 0-indexed day of the year containing ``t`` (0 if not finite)."""
    if not is_finite(t):
        return 0
    return int(day(t) - day_from_year(year_from_time(t)))


def in_leap_year(t: float) -> bool:
    """Return True if ``t`` falls in a leap year."""
    return days_in_year(year_from_time(t)) == 366


def month_from_time(t: float) -> int:
    """Return the 0-indexed month (0 = January) containing ``t``.

    Examples:
        >>> month_from_time(make_date(make_day(2024, 1, 29), 0.0))
        1
        >>> month_from_time(make_date(make_day(2023, 2, 1), 0.0))
        2
    """
    starts = _MONTH_STARTS[in_leap_year(t)]
    within = day_within_year(t)

    if within >= starts[12]:
        raise InvariantError(
            f"day {within} is past the end of a {starts[12]}-day year"
        )

    return bisect.bisect_right(starts, within, 0, 12) - 1


def date_from_time(t: float) -> int:
    """Return the 1-indexed day of the month containing ``t``."""
    starts = _MONTH_STARTS[in_leap_year(t)]
    return day_within_year(t) - starts[month_from_time(t)] + 1


def week_day(t: float) -> int:
    """Return the day of the week (0 = Sunday, 6 = Saturday); 0 if not finite."""
    if not is_finite(t):
        return 0
    return int(modulo(day(t) + 4, 7))


def hour_from_time(t: float) -> int:
    """Return the hour (0-23) of ``t``; 0 if not finite."""
    if not is_finite(t):
        return 0
    return int(modulo(floor(t / MS_PER_HOUR), HOURS_PER_DAY))


def min_from_time(t: float) -> int:
    """Return the minute (0-59) of ``t``; 0 if not finite."""
    if not is_finite(t):
        return 0
    return int(modulo(floor(t / MS_PER_MINUTE), MINUTES_PER_HOUR))


def sec_from_time(t: float) -> int:
    """Return the second (0-59) of ``t``; 0 if not finite."""
    if not is_finite(t):
        return 0
    return int(modulo(floor(t / MS_PER_SECOND), SECONDS_PER_MINUTE))


def ms_from_time(t: float) -> int:
    """Return the millisecond (0-999) of ``t``; 0 if not finite."""
    if not is_finite(t):
        return 0
    return int(modulo(t, MS_PER_SECOND))


def make_time(hour: float, minute: float, second: float, millisecond: float) -> float:
    """Combine time-of-day fields into milliseconds.

    Fields are truncated toward zero and may be out of their usual range;
    the arithmetic is plain IEEE 754, so ``make_time(25, 0, 0, 0)`` is
    one hour into the following day.

    Args:
        hour: Hours.
        minute: Minutes.
        second: Seconds.
        millisecond: Milliseconds.

    Returns:
        The millisecond total, or NaN if any argument is not finite.

    Examples:
        >>> make_time(1, 2, 3, 4)
        3723004.0
        >>> make_time(1.9, 0, 0, 0)
        3600000.0
    """
    if not is_finite(hour, minute, second, millisecond):
        return math.nan

    h = to_integer_or_infinity(hour)
    m = to_integer_or_infinity(minute)
    s = to_integer_or_infinity(second)
    milli = to_integer_or_infinity(millisecond)

    return ((h * MS_PER_HOUR + m * MS_PER_MINUTE) + s * MS_PER_SECOND) + milli


def _days_since_epoch(year: int, month: int) -> int:
    """Return the day number of the first day of a 0-indexed ``month``."""
    leap = days_in_year(year) == 366
    return int(day_from_year(year)) + _MONTH_STARTS[leap][month]


def make_day(year: float, month: float, date: float) -> float:
    """Return the day number of a calendar date.

    Months outside 0-11 carry into the year, and ``date`` may be any
    integer, so ``make_day(2023, 12, 1) == make_day(2024, 0, 1)`` and
    ``make_day(2024, 0, 0)`` is 2023-12-31.

    Args:
        year: The year.
        month: The 0-indexed month.
        date: The 1-indexed day of the month.

    Returns:
        The day number, or NaN if any argument is not finite or the
        normalized year is outside the signed 32-bit range.

    Examples:
        >>> make_day(1970, 0, 1)
        0.0
        >>> make_day(2023, 12, 1) == make_day(2024, 0, 1)
        True
    """
    if not is_finite(year, month, date):
        return math.nan

    y = to_integer_or_infinity(year)
    m = to_integer_or_infinity(month)
    dt = to_integer_or_infinity(date)

    ym = y + floor(m / 12)
    if not is_finite(ym):
        return math.nan

    mn = int(modulo(m, 12))

    if not INT32_MIN <= ym <= INT32_MAX:
        return math.nan

    return float(_days_since_epoch(int(ym), mn)) + dt - 1


def make_date(day: float, time: float) -> float:
    """Combine a day number and a time within the day into a time value.

    Returns:
        ``day * 86400000 + time``, or NaN if either argument or the
        result is not finite.
    """
    if not is_finite(day, time):
        return math.nan

    tv = day * MS_PER_DAY + time
    if not is_finite(tv):
        return math.nan

    return tv


def time_clip(t: float) -> float:
    """Clip a time value to the representable range.

    Examples:
        >>> time_clip(8.64e15)
        8640000000000000.0
        >>> time_clip(8.64e15 + 1)
        nan
        >>> time_clip(-1.5)
        -1.0
    """
    if not is_finite(t):
        return math.nan

    if abs(t) > MAX_TIME_VALUE:
        return math.nan

    return to_integer_or_infinity(t)


@dataclass(frozen=True)
class CalendarFields:
    """Calendar fields of a time value in UTC.

    Attributes:
        year: The year (signed 32-bit).
        month: The month, 0-11.
        day: The day of the month, 1-31.
        hour: The hour, 0-23.
        minute: The minute, 0-59.
        second: The second, 0-59.
        millisecond: The millisecond, 0-999.

    Examples:
        >>> CalendarFields.from_time_value(0.0)
        CalendarFields(year=1970, month=0, day=1, hour=0, minute=0, second=0, millisecond=0)
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    @classmethod
    def from_time_value(cls, t: float) -> Self:
        """Decompose a finite time value into calendar fields.

        Raises:
            ValidationError: If ``t`` is not finite.
        """
        if not is_finite(t):
            raise ValidationError(f"cannot decompose a non-finite time value: {t!r}")

        return cls(
            year=year_from_time(t),
            month=month_from_time(t),
            day=date_from_time(t),
            hour=hour_from_time(t),
            minute=min_from_time(t),
            second=sec_from_time(t),
            millisecond=ms_from_time(t),
        )

    def to_time_value(self) -> float:
        """Return the time value of these fields, read as UTC."""
        return make_date(
            make_day(self.year, self.month, self.day),
            make_time(self.hour, self.minute, self.second, self.millisecond),
        )


def time_value_to_fields(t: float) -> CalendarFields:
    """Decompose a finite time value into ``CalendarFields``."""
    return CalendarFields.from_time_value(t)


__all__ = [
    "day",
    "time_within_day",
    "days_in_year",
    "day_from_year",
    "time_from_year",
    "year_from_time",
    "day_within_year",
    "in_leap_year",
    "month_from_time",
    "date_from_time",
    "week_day",
    "hour_from_time",
    "min_from_time",
    "sec_from_time",
    "ms_from_time",
    "make_time",
    "make_day",
    "make_date",
    "time_clip",
    "CalendarFields",
    "time_value_to_fields",
]
