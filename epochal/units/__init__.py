"""Temporal units.

This module provides:
    - TimeZoneIdentifier: named or fixed-offset time zone identifier
"""

from __future__ import annotations

from epochal.units.timezone import TimeZoneIdentifier, parse_time_zone_identifier

__all__: list[str] = [
    "TimeZoneIdentifier",
    "parse_time_zone_identifier",
]
