"""Internal utilities for Epochal.

This module contains private implementation details:
    - Constants and magic numbers
    - Numeric coercion helpers (truncation, floor, modulo)
    - Custom decorators (@memoize)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from epochal._internal.decorators import memoize
from epochal._internal.numeric import (
    floor,
    is_finite,
    modulo,
    to_integer_or_infinity,
)

__all__: list[str] = [
    "memoize",
    "floor",
    "is_finite",
    "modulo",
    "to_integer_or_infinity",
]
