"""Internal constants for Epochal.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time value unit conversions (milliseconds, as floats)
MS_PER_SECOND: float = 1000.0
MS_PER_MINUTE: float = 60_000.0
MS_PER_HOUR: float = 3_600_000.0
MS_PER_DAY: float = 86_400_000.0

HOURS_PER_DAY: int = 24
MINUTES_PER_HOUR: int = 60
SECONDS_PER_MINUTE: int = 60

# Exact unit conversions (nanoseconds, as ints)
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_DAY: int = 86_400 * NANOS_PER_SECOND

# Largest magnitude a time value may have after TimeClip
MAX_TIME_VALUE: float = 8.64e15

# Mean length of a Gregorian year, used to estimate a year from a time value
DAYS_PER_MEAN_YEAR: float = 365.2425

# Signed 32-bit range for years
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1

# Signed 64-bit range for time zone database lookups
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# Cumulative days before each month (0-indexed), for non-leap years.
# The final entry is the length of the year.
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0,    # January
    31,   # February
    59,   # March
    90,   # April
    120,  # May
    151,  # June
    181,  # July
    212,  # August
    243,  # September
    273,  # October
    304,  # November
    334,  # December
    365,
)


__all__ = [
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "HOURS_PER_DAY",
    "MINUTES_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_DAY",
    "MAX_TIME_VALUE",
    "DAYS_PER_MEAN_YEAR",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "DAYS_BEFORE_MONTH",
]
