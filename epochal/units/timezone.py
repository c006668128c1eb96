"""Time zone identifiers.

This module provides the TimeZoneIdentifier class, which tells apart the
two kinds of identifier a time zone can have:

    - named: a key into the time zone rules database ("America/New_York")
    - fixed offset: a literal minute-precision UTC offset ("+05:30")

Only the identifier is modelled here; offsets of named zones come from
the rules database in ``epochal.tz``.
"""

from __future__ import annotations

from typing import ClassVar

from epochal._internal.constants import NANOS_PER_MINUTE
from epochal.errors import TimezoneError
from epochal.format.offset import is_fixed_offset_identifier, parse_utc_offset_unchecked


class TimeZoneIdentifier:
    """A named or fixed-offset time zone identifier.

    Attributes:
        name: The identifier as given.
        offset_minutes: The UTC offset in minutes for fixed-offset
            identifiers, None for named ones.

    Examples:
        >>> tz = TimeZoneIdentifier.parse("+05:30")
        >>> tz.is_fixed_offset, tz.offset_minutes
        (True, 330)

        >>> tz = TimeZoneIdentifier.parse("Europe/Paris")
        >>> tz.is_named
        True

        >>> str(TimeZoneIdentifier.from_offset_minutes(-90))
        '-01:30'
    """

    __slots__ = ("_name", "_offset_minutes")

    # UTC singleton instance (lazily initialized)
    _utc_instance: ClassVar[TimeZoneIdentifier | None] = None

    # A fixed offset must stay below one day
    _MAX_OFFSET_MINUTES: ClassVar[int] = 24 * 60 - 1

    def __init__(self, name: str, offset_minutes: int | None = None) -> None:
        """Create an identifier.

        Prefer ``parse``, which works out the kind of identifier from the
        string.

        Args:
            name: The identifier text.
            offset_minutes: The offset of a fixed-offset identifier, or
                None for a named one.

        Raises:
            TimezoneError: If the name is empty or the offset is out of range.
        """
        if not isinstance(name, str) or not name:
            raise TimezoneError(f"time zone identifier must be a non-empty string, got {name!r}")

        if offset_minutes is not None and abs(offset_minutes) > self._MAX_OFFSET_MINUTES:
            raise TimezoneError(
                f"offset_minutes {offset_minutes} is outside valid range "
                f"[-{self._MAX_OFFSET_MINUTES}, {self._MAX_OFFSET_MINUTES}]"
            )

        self._name: str = name
        self._offset_minutes: int | None = offset_minutes

    @classmethod
    def utc(cls) -> TimeZoneIdentifier:
        """Return the named identifier "UTC".

        All calls return the same instance.
        """
        if cls._utc_instance is None:
            cls._utc_instance = cls("UTC")
        return cls._utc_instance

    @classmethod
    def from_offset_minutes(cls, minutes: int) -> TimeZoneIdentifier:
        """Create a fixed-offset identifier with canonical ``±HH:MM`` text."""
        sign = "-" if minutes < 0 else "+"
        hours, mins = divmod(abs(minutes), 60)
        return cls(f"{sign}{hours:02d}:{mins:02d}", minutes)

    @classmethod
    def parse(cls, s: str) -> TimeZoneIdentifier:
        """Parse a time zone identifier.

        Strings that match the minute-precision offset grammar are
        fixed-offset identifiers. Any other string starting with a sign is
        rejected; everything else is taken as a named identifier.

        Raises:
            TimezoneError: If ``s`` is empty or a malformed offset.

        Examples:
            >>> TimeZoneIdentifier.parse("-0800").offset_minutes
            -480
            >>> TimeZoneIdentifier.parse("+05:30:15")  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            TimezoneError: Invalid offset time zone identifier: '+05:30:15'
        """
        if not isinstance(s, str):
            raise TimezoneError(f"Expected string, got {type(s).__name__}")

        if is_fixed_offset_identifier(s):
            offset_minutes = parse_utc_offset_unchecked(s) // NANOS_PER_MINUTE
            return cls(s, offset_minutes)

        if s[:1] in ("+", "-"):
            raise TimezoneError(f"Invalid offset time zone identifier: {s!r}")

        return cls(s)

    @property
    def name(self) -> str:
        return self._name

    @property
    def offset_minutes(self) -> int | None:
        return self._offset_minutes

    @property
    def offset_nanoseconds(self) -> int | None:
        """Return the fixed offset in nanoseconds, or None for named zones."""
        if self._offset_minutes is None:
            return None
        return self._offset_minutes * NANOS_PER_MINUTE

    @property
    def is_fixed_offset(self) -> bool:
        return self._offset_minutes is not None

    @property
    def is_named(self) -> bool:
        return self._offset_minutes is None

    def __eq__(self, other: object) -> bool:
        """Fixed offsets compare by offset; named zones by case-folded name."""
        if not isinstance(other, TimeZoneIdentifier):
            return NotImplemented
        if self.is_fixed_offset or other.is_fixed_offset:
            return self._offset_minutes == other._offset_minutes
        return self._name.lower() == other._name.lower()

    def __hash__(self) -> int:
        if self._offset_minutes is not None:
            return hash(self._offset_minutes)
        return hash(self._name.lower())

    def __repr__(self) -> str:
        if self._offset_minutes is not None:
            return f"TimeZoneIdentifier({self._name!r}, offset_minutes={self._offset_minutes})"
        return f"TimeZoneIdentifier({self._name!r})"

    def __str__(self) -> str:
        """Return the name, or the canonical ``±HH:MM`` form of a fixed offset."""
        if self._offset_minutes is None:
            return self._name
        return self.from_offset_minutes(self._offset_minutes).name


def parse_time_zone_identifier(s: str) -> TimeZoneIdentifier:
    """Parse a time zone identifier string (see ``TimeZoneIdentifier.parse``)."""
    return TimeZoneIdentifier.parse(s)


__all__ = ["TimeZoneIdentifier", "parse_time_zone_identifier"]
