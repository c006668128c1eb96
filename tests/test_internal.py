"""Tests for internal numeric helpers and decorators."""

from __future__ import annotations

import math


class TestToIntegerOrInfinity:
    """Tests for to_integer_or_infinity()."""

    def test_truncates(self) -> None:
        """Finite values truncate toward zero."""
        from epochal._internal import to_integer_or_infinity

        assert to_integer_or_infinity(2.7) == 2.0
        assert to_integer_or_infinity(-2.7) == -2.0

    def test_special_values(self) -> None:
        """NaN becomes 0, infinities are kept, -0 becomes +0."""
        from epochal._internal import to_integer_or_infinity

        assert to_integer_or_infinity(math.nan) == 0.0
        assert to_integer_or_infinity(-math.inf) == -math.inf
        assert math.copysign(1.0, to_integer_or_infinity(-0.5)) == 1.0


class TestFloorAndModulo:
    """Tests for floor() and modulo()."""

    def test_floor_keeps_floats(self) -> None:
        """floor() returns floats and passes non-finite values through."""
        from epochal._internal import floor

        assert floor(-0.5) == -1.0
        assert isinstance(floor(1.5), float)
        assert floor(math.inf) == math.inf
        assert math.isnan(floor(math.nan))

    def test_modulo_sign_follows_divisor(self) -> None:
        """The result has the sign of the divisor."""
        from epochal._internal import modulo

        assert modulo(-1.0, 86_400_000.0) == 86_399_999.0
        assert modulo(15.0, 12.0) == 3.0


class TestMemoize:
    """Tests for the @memoize decorator."""

    def test_computes_once(self) -> None:
        """Repeated calls return the cached value."""
        from epochal._internal import memoize

        calls = []

        @memoize
        def load(name: str) -> str:
            calls.append(name)
            return name.upper()

        assert load("utc") == "UTC"
        assert load("utc") == "UTC"
        assert calls == ["utc"]

    def test_cache_clear(self) -> None:
        """cache_clear() forces a reload."""
        from epochal._internal import memoize

        calls = []

        @memoize
        def load() -> int:
            calls.append(1)
            return len(calls)

        assert load() == 1
        load.cache_clear()
        assert load() == 2
