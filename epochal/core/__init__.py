"""Core calendar arithmetic.

This module provides:
    - Calendar arithmetic on millisecond time values
    - CalendarFields: the UTC calendar fields of a time value
"""

from __future__ import annotations

from epochal.core.calendar import CalendarFields, time_value_to_fields

__all__: list[str] = [
    "CalendarFields",
    "time_value_to_fields",
]
