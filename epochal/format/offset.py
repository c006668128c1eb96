"""UTC offset string parsing.

A UTC offset string is a sign followed by a two-digit hour and optional
minute, second and fractional-second parts:

    ±HH
    ±HH:MM            ±HHMM
    ±HH:MM:SS         ±HHMMSS
    ±HH:MM:SS.fffffffff  ±HHMMSS,fffffffff

Hours run 00-23, minutes and seconds 00-59, and the fraction has 1-9
digits after a ``.`` or ``,``. The extended (colon) and basic forms may
not be mixed within one string.

Offsets without a seconds part are "minute precision"; only those are
valid as fixed-offset time zone identifiers.

Functions:
    is_fixed_offset_identifier: Check for a minute-precision offset string.
    parse_utc_offset_fields: Match an offset string into its parts.
    parse_utc_offset: Parse an offset string into nanoseconds.
    parse_utc_offset_unchecked: Parse an offset string already validated.

Examples:
    >>> parse_utc_offset("+05:30")
    19800000000000
    >>> parse_utc_offset("-00:00")
    0
    >>> is_fixed_offset_identifier("+05:30:15")
    False
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from epochal._internal.constants import NANOS_PER_SECOND
from epochal.errors import InvariantError, ParseError

_HOUR = r"([01]\d|2[0-3])"
_MINUTE_SECOND = r"([0-5]\d)"
_FRACTION = r"(?:[.,](\d{1,9}))"

# ±HH[:MM[:SS[.fraction]]]
_EXTENDED_PATTERN = re.compile(
    rf"([+-]){_HOUR}(?::{_MINUTE_SECOND}(?::{_MINUTE_SECOND}{_FRACTION}?)?)?",
    re.ASCII,
)

# ±HH[MM[SS[.fraction]]]
_BASIC_PATTERN = re.compile(
    rf"([+-]){_HOUR}(?:{_MINUTE_SECOND}(?:{_MINUTE_SECOND}{_FRACTION}?)?)?",
    re.ASCII,
)


@dataclass(frozen=True)
class UTCOffsetFields:
    """The matched parts of a UTC offset string.

    Attributes:
        sign: ``"+"`` or ``"-"``.
        hours: Two hour digits.
        minutes: Two minute digits, or None.
        seconds: Two second digits, or None.
        fraction: 1-9 fractional-second digits without the separator, or None.
    """

    sign: str
    hours: str
    minutes: str | None = None
    seconds: str | None = None
    fraction: str | None = None

    @property
    def has_sub_minute_precision(self) -> bool:
        return self.seconds is not None


def parse_utc_offset_fields(s: str, *, sub_minute: bool = True) -> UTCOffsetFields | None:
    """Match a UTC offset string into its parts.

    Args:
        s: The string to match.
        sub_minute: Whether seconds and fractional seconds are allowed.

    Returns:
        The matched parts, or None if ``s`` is not an offset string.

    Examples:
        >>> parse_utc_offset_fields("+0530")
        UTCOffsetFields(sign='+', hours='05', minutes='30', seconds=None, fraction=None)
        >>> parse_utc_offset_fields("+05:30:15", sub_minute=False) is None
        True
    """
    if not isinstance(s, str):
        return None

    match = _EXTENDED_PATTERN.fullmatch(s) or _BASIC_PATTERN.fullmatch(s)
    if match is None:
        return None

    fields = UTCOffsetFields(*match.groups())
    if fields.has_sub_minute_precision and not sub_minute:
        return None
    return fields


def is_fixed_offset_identifier(s: str) -> bool:
    """Return True if ``s`` is a minute-precision UTC offset string.

    Examples:
        >>> is_fixed_offset_identifier("+05:30")
        True
        >>> is_fixed_offset_identifier("America/New_York")
        False
    """
    return parse_utc_offset_fields(s, sub_minute=False) is not None


def _is_well_formed(fields: UTCOffsetFields) -> bool:
    """Check that fields are what ``parse_utc_offset_fields`` could produce."""
    if fields.seconds is not None and fields.minutes is None:
        return False
    if fields.fraction is not None and fields.seconds is None:
        return False

    text = f"{fields.sign}{fields.hours}"
    for separator, part in ((":", fields.minutes), (":", fields.seconds), (".", fields.fraction)):
        if part is not None:
            text += f"{separator}{part}"
    return _EXTENDED_PATTERN.fullmatch(text) is not None


def _offset_nanoseconds(fields: UTCOffsetFields) -> int:
    if not _is_well_formed(fields):
        raise InvariantError(f"offset fields do not form a UTC offset: {fields!r}")

    sign = -1 if fields.sign == "-" else 1
    hours = int(fields.hours)
    minutes = int(fields.minutes) if fields.minutes is not None else 0
    seconds = int(fields.seconds) if fields.seconds is not None else 0

    if fields.fraction is None:
        nanoseconds = 0
    else:
        # Right-pad to nanoseconds, then drop anything finer
        nanoseconds = int((fields.fraction + "000000000")[:9])

    return sign * (((hours * 60 + minutes) * 60 + seconds) * NANOS_PER_SECOND + nanoseconds)


def parse_utc_offset(value: str | UTCOffsetFields) -> int:
    """Parse a UTC offset into signed nanoseconds.

    Args:
        value: An offset string, or parts already matched by
            ``parse_utc_offset_fields``.

    Returns:
        The offset in nanoseconds; positive offsets are east of UTC.

    Raises:
        ParseError: If a string does not match the offset grammar. The
            string is available as ``ParseError.input``.
        InvariantError: If ``UTCOffsetFields`` were built by hand with
            parts outside the grammar (for example hour ``"99"``).

    Examples:
        >>> parse_utc_offset("+05:30:15.5")
        19815500000000
        >>> parse_utc_offset("-08")
        -28800000000000
        >>> parse_utc_offset("+5:30")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ParseError: Invalid UTC offset string: '+5:30'
    """
    if isinstance(value, UTCOffsetFields):
        return _offset_nanoseconds(value)

    fields = parse_utc_offset_fields(value)
    if fields is None:
        raise ParseError(
            f"Invalid UTC offset string: {value!r}. "
            "Expected ±HH[:MM[:SS[.fraction]]] or ±HH[MM[SS[.fraction]]]",
            input=value,
        )
    return _offset_nanoseconds(fields)


def parse_utc_offset_unchecked(s: str) -> int:
    """Parse a UTC offset string the caller has already validated.

    Raises:
        InvariantError: If ``s`` is not an offset string after all.
    """
    fields = parse_utc_offset_fields(s)
    if fields is None:
        raise InvariantError(f"expected a validated UTC offset string, got {s!r}")
    return _offset_nanoseconds(fields)


__all__ = [
    "UTCOffsetFields",
    "parse_utc_offset_fields",
    "is_fixed_offset_identifier",
    "parse_utc_offset",
    "parse_utc_offset_unchecked",
]
