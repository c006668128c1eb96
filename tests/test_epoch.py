"""Tests for the epoch-nanosecond bridge."""

from __future__ import annotations

import math

import pytest

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)


class TestGetUtcEpochNanoseconds:
    """Tests for get_utc_epoch_nanoseconds()."""

    def test_epoch_is_zero(self) -> None:
        """The epoch is 0 ns."""
        from epochal.convert import get_utc_epoch_nanoseconds
        from epochal.core.calendar import CalendarFields

        assert get_utc_epoch_nanoseconds(CalendarFields(1970, 0, 1)) == 0

    def test_sub_millisecond_remainders(self) -> None:
        """Microsecond and nanosecond remainders are added exactly."""
        from epochal.convert import get_utc_epoch_nanoseconds
        from epochal.core.calendar import CalendarFields

        epoch = CalendarFields(1970, 0, 1)
        assert get_utc_epoch_nanoseconds(epoch, microsecond=500) == 500_000
        assert get_utc_epoch_nanoseconds(epoch, nanosecond=1) == 1
        assert get_utc_epoch_nanoseconds(epoch, microsecond=999, nanosecond=999) == 999_999

    def test_exact_far_from_epoch(self) -> None:
        """Nanoseconds stay exact where a float would round them."""
        from epochal.convert import get_utc_epoch_nanoseconds
        from epochal.core.calendar import CalendarFields

        fields = CalendarFields(275760, 8, 13)
        result = get_utc_epoch_nanoseconds(fields, nanosecond=1)
        assert result == 8_640_000_000_000_000_000_001

    def test_before_epoch(self) -> None:
        """Readings before the epoch are negative."""
        from epochal.convert import get_utc_epoch_nanoseconds
        from epochal.core.calendar import CalendarFields

        fields = CalendarFields(1969, 11, 31, 23, 59, 59, 999)
        assert get_utc_epoch_nanoseconds(fields, microsecond=1) == -999_000

    @pytest.mark.parametrize("kwargs", [{"microsecond": 1000}, {"nanosecond": -1}])
    def test_remainder_out_of_range(self, kwargs: dict) -> None:
        """Remainders outside 0-999 are rejected."""
        from epochal.convert import get_utc_epoch_nanoseconds
        from epochal.core.calendar import CalendarFields
        from epochal.errors import ValidationError

        with pytest.raises(ValidationError):
            get_utc_epoch_nanoseconds(CalendarFields(1970, 0, 1), **kwargs)

    def test_unrepresentable_fields(self) -> None:
        """Fields that make_date cannot represent break the precondition."""
        from epochal.convert import get_utc_epoch_nanoseconds
        from epochal.core.calendar import CalendarFields
        from epochal.errors import InvariantError

        with pytest.raises(InvariantError):
            get_utc_epoch_nanoseconds(CalendarFields(2**31, 0, 1))


class TestClipToInt64:
    """Tests for clip_bigint_to_int64() and clip_double_to_int64()."""

    def test_bigint_saturates(self) -> None:
        """Integers beyond 64 bits saturate to the nearest bound."""
        from epochal.convert import clip_bigint_to_int64

        assert clip_bigint_to_int64(2**70) == INT64_MAX
        assert clip_bigint_to_int64(-(2**70)) == INT64_MIN
        assert clip_bigint_to_int64(INT64_MAX) == INT64_MAX
        assert clip_bigint_to_int64(-5) == -5

    def test_double_saturates(self) -> None:
        """Floats beyond 64 bits, including infinities, saturate."""
        from epochal.convert import clip_double_to_int64

        assert clip_double_to_int64(1e300) == INT64_MAX
        assert clip_double_to_int64(-math.inf) == INT64_MIN
        assert clip_double_to_int64(math.inf) == INT64_MAX

    def test_double_truncates(self) -> None:
        """Floats in range truncate toward zero."""
        from epochal.convert import clip_double_to_int64

        assert clip_double_to_int64(2.9) == 2
        assert clip_double_to_int64(-2.9) == -2

    def test_double_nan(self) -> None:
        """NaN has no 64-bit value."""
        from epochal.convert import clip_double_to_int64
        from epochal.errors import InvariantError

        with pytest.raises(InvariantError):
            clip_double_to_int64(math.nan)


class TestEpochMillisecondsFromNanoseconds:
    """Tests for epoch_milliseconds_from_nanoseconds()."""

    def test_floors(self) -> None:
        """Nanoseconds floor to the containing millisecond."""
        from epochal.convert import epoch_milliseconds_from_nanoseconds

        assert epoch_milliseconds_from_nanoseconds(0) == 0.0
        assert epoch_milliseconds_from_nanoseconds(999_999) == 0.0
        assert epoch_milliseconds_from_nanoseconds(-1) == -1.0
