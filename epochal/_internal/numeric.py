"""Numeric coercion helpers for time values.

Time values are IEEE 754 doubles. These helpers keep Python's float
semantics where ``math`` would otherwise raise (``math.floor`` of an
infinity raises OverflowError and returns an ``int`` for finite input).

This module is not part of the public API.
"""

from __future__ import annotations

import math


def is_finite(*values: float) -> bool:
    """Return True if every value is a finite number."""
    return all(math.isfinite(value) for value in values)


def to_integer_or_infinity(value: float) -> float:
    """Truncate toward zero, mapping NaN to 0 and keeping infinities.

    Negative zero and values in (-1, 0) become +0.

    Examples:
        >>> to_integer_or_infinity(-2.7)
        -2.0
        >>> to_integer_or_infinity(float("nan"))
        0.0
    """
    if math.isnan(value):
        return 0.0
    if math.isinf(value):
        return value
    truncated = math.trunc(value)
    if truncated == 0:
        return 0.0
    return float(truncated)


def floor(value: float) -> float:
    """Floor a float, passing NaN and infinities through unchanged."""
    if not math.isfinite(value):
        return value
    return float(math.floor(value))


def modulo(value: float, divisor: float) -> float:
    """Mathematical modulo: the result has the sign of ``divisor``.

    Examples:
        >>> modulo(-1.0, 7.0)
        6.0
    """
    return value % divisor


__all__ = [
    "is_finite",
    "to_integer_or_infinity",
    "floor",
    "modulo",
]
