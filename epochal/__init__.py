"""Epochal: time values, calendar fields and time zone offsets.

Epochal converts between millisecond time values (floats counting
milliseconds since 1970-01-01T00:00:00Z, NaN for an invalid date) and
calendar fields, promotes them to exact nanosecond instants, parses UTC
offset strings, and resolves the offsets of named and fixed-offset time
zones, including readings skipped or repeated by daylight saving time.

Calendar Arithmetic:
    day, time_within_day, days_in_year, day_from_year, time_from_year,
    year_from_time, day_within_year, in_leap_year, month_from_time,
    date_from_time, week_day, hour_from_time, min_from_time,
    sec_from_time, ms_from_time, make_time, make_day, make_date, time_clip

Epoch Nanoseconds:
    get_utc_epoch_nanoseconds, clip_bigint_to_int64, clip_double_to_int64

Time Zones:
    named_zone_epoch_candidates, named_zone_offset_nanoseconds,
    named_zone_offset_milliseconds, system_zone_identifier,
    clear_system_zone_cache, local_time, utc_time

UTC Offsets:
    is_fixed_offset_identifier, parse_utc_offset, parse_utc_offset_unchecked

Exceptions:
    EpochalError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse an offset string
    TimezoneError: Unknown time zone
    InvariantError: Broken internal precondition

Example:
    >>> from epochal import make_date, make_day, make_time, iso_date_string
    >>> t = make_date(make_day(2024, 1, 29), make_time(23, 59, 59, 999))
    >>> iso_date_string(t)
    '2024-02-29T23:59:59.999Z'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Calendar arithmetic
from epochal.core.calendar import (
    CalendarFields,
    date_from_time,
    day,
    day_from_year,
    day_within_year,
    days_in_year,
    hour_from_time,
    in_leap_year,
    make_date,
    make_day,
    make_time,
    min_from_time,
    month_from_time,
    ms_from_time,
    sec_from_time,
    time_clip,
    time_from_year,
    time_value_to_fields,
    time_within_day,
    week_day,
    year_from_time,
)

# Epoch nanoseconds
from epochal.convert.epoch import (
    clip_bigint_to_int64,
    clip_double_to_int64,
    get_utc_epoch_nanoseconds,
)

# Formats
from epochal.format.iso8601 import iso_date_string
from epochal.format.offset import (
    UTCOffsetFields,
    is_fixed_offset_identifier,
    parse_utc_offset,
    parse_utc_offset_unchecked,
)

# Units
from epochal.units.timezone import TimeZoneIdentifier

# Time zones
from epochal.tz import (
    SystemZoneCache,
    TimeZoneResolver,
    ZoneInfoDatabase,
    clear_system_zone_cache,
    local_time,
    named_zone_epoch_candidates,
    named_zone_offset_milliseconds,
    named_zone_offset_nanoseconds,
    system_zone_identifier,
    utc_time,
)

# Exceptions
from epochal.errors import (
    EpochalError,
    InvariantError,
    ParseError,
    TimezoneError,
    ValidationError,
)

__all__: list[str] = [
    "__version__",
    # Calendar arithmetic
    "CalendarFields",
    "date_from_time",
    "day",
    "day_from_year",
    "day_within_year",
    "days_in_year",
    "hour_from_time",
    "in_leap_year",
    "make_date",
    "make_day",
    "make_time",
    "min_from_time",
    "month_from_time",
    "ms_from_time",
    "sec_from_time",
    "time_clip",
    "time_from_year",
    "time_value_to_fields",
    "time_within_day",
    "week_day",
    "year_from_time",
    # Epoch nanoseconds
    "clip_bigint_to_int64",
    "clip_double_to_int64",
    "get_utc_epoch_nanoseconds",
    # Formats
    "iso_date_string",
    "UTCOffsetFields",
    "is_fixed_offset_identifier",
    "parse_utc_offset",
    "parse_utc_offset_unchecked",
    # Units
    "TimeZoneIdentifier",
    # Time zones
    "SystemZoneCache",
    "TimeZoneResolver",
    "ZoneInfoDatabase",
    "clear_system_zone_cache",
    "local_time",
    "named_zone_epoch_candidates",
    "named_zone_offset_milliseconds",
    "named_zone_offset_nanoseconds",
    "system_zone_identifier",
    "utc_time",
    # Exceptions
    "EpochalError",
    "ValidationError",
    "ParseError",
    "TimezoneError",
    "InvariantError",
]
