"""Time zone resolution against the rules database.

This module provides:
    - TimeZoneResolver: offsets of named zones and the system zone
    - SystemZoneCache: the cached system zone identifier
    - TimeZoneDatabase / ZoneInfoDatabase: the rules database
"""

from __future__ import annotations

from epochal.tz.cache import SystemZoneCache
from epochal.tz.database import TimeZoneDatabase, ZoneInfoDatabase
from epochal.tz.resolution import (
    TimeZoneResolver,
    clear_system_zone_cache,
    default_resolver,
    local_time,
    named_zone_epoch_candidates,
    named_zone_offset_milliseconds,
    named_zone_offset_nanoseconds,
    set_default_resolver,
    system_zone_identifier,
    utc_time,
)

__all__: list[str] = [
    "SystemZoneCache",
    "TimeZoneDatabase",
    "ZoneInfoDatabase",
    "TimeZoneResolver",
    "clear_system_zone_cache",
    "default_resolver",
    "local_time",
    "named_zone_epoch_candidates",
    "named_zone_offset_milliseconds",
    "named_zone_offset_nanoseconds",
    "set_default_resolver",
    "system_zone_identifier",
    "utc_time",
]
