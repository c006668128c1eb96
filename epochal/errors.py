"""Epochal exception hierarchy.

All Epochal-specific exceptions inherit from EpochalError.

Numeric operations on time values never raise: a non-finite input yields
NaN or 0, and an out-of-range value yields NaN or saturates. The
exceptions below cover the remaining failure modes.
"""

from __future__ import annotations


class EpochalError(Exception):
    """Base exception for all Epochal errors."""

    pass


class ValidationError(EpochalError):
    """Invalid input values.

    Raised when a caller passes a value outside the range an API
    accepts.

    Examples:
        - Microsecond remainder outside 0-999
        - Rendering an invalid (NaN) time value as a string
    """

    pass


class ParseError(EpochalError, ValueError):
    """Failed to parse string representation.

    Raised when a UTC offset string does not match the offset grammar.
    The offending string is available as ``input``.

    Examples:
        - "+5:30" (hour must be two digits)
        - "+05:30:15." (fraction separator without digits)
        - "+24:00" (hour out of range)
    """

    def __init__(self, message: str, input: str | None = None) -> None:
        super().__init__(message)
        self.input = input


class TimezoneError(EpochalError):
    """Invalid or unknown timezone.

    Raised when the time zone database has no rules for a named zone.
    """

    pass


class InvariantError(EpochalError, AssertionError):
    """An internal precondition was broken.

    This is never a user error: it signals that a caller skipped a
    validation step it was required to perform (for example handing an
    unvalidated string to ``parse_utc_offset_unchecked``), or that a
    computation reached a state its inputs make impossible.
    """

    pass


__all__ = [
    "EpochalError",
    "ValidationError",
    "ParseError",
    "TimezoneError",
    "InvariantError",
]
