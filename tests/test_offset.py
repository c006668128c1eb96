"""Tests for UTC offset string parsing.

These tests verify the offset grammar in its extended and basic forms,
fractional seconds, and the checked and unchecked parse entry points.
"""

from __future__ import annotations

import pytest

HOUR = 3_600 * 10**9
MINUTE = 60 * 10**9
SECOND = 10**9


class TestParseUtcOffset:
    """Tests for parse_utc_offset()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("+05:30", 5 * HOUR + 30 * MINUTE),
            ("+0530", 5 * HOUR + 30 * MINUTE),
            ("-08", -8 * HOUR),
            ("-00:00", 0),
            ("+00", 0),
            ("+23:59", 23 * HOUR + 59 * MINUTE),
            ("-23:59:59", -(23 * HOUR + 59 * MINUTE + 59 * SECOND)),
            ("+053015", 5 * HOUR + 30 * MINUTE + 15 * SECOND),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        """Valid offsets parse to signed nanoseconds."""
        from epochal.format import parse_utc_offset

        assert parse_utc_offset(text) == expected

    def test_fraction(self) -> None:
        """A fractional second is right-padded to nanoseconds."""
        from epochal.format import parse_utc_offset

        assert parse_utc_offset("+05:30:15.5") == 5 * HOUR + 30 * MINUTE + 15 * SECOND + 500_000_000
        assert parse_utc_offset("-00:00:00,000000001") == -1
        assert parse_utc_offset("+000000.123456789") == 123_456_789

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "05:30",
            "+5:30",
            "+24:00",
            "+05:60",
            "+05:30:60",
            "+05:3",
            "+05:30:15.",
            "+05:30:15.1234567890",
            "+05:3015",
            "+0530:15",
            "+05:30\n",
            " +05:30",
            "−" + "05:30",
            "+０５",
            "Z",
        ],
    )
    def test_invalid(self, text: str) -> None:
        """Malformed offsets raise ParseError carrying the input."""
        from epochal.errors import ParseError
        from epochal.format import parse_utc_offset

        with pytest.raises(ParseError) as exc_info:
            parse_utc_offset(text)
        assert exc_info.value.input == text

    def test_parse_error_is_value_error(self) -> None:
        """ParseError can be caught as ValueError."""
        from epochal.format import parse_utc_offset

        with pytest.raises(ValueError):
            parse_utc_offset("+99")

    def test_from_matched_fields(self) -> None:
        """Already matched fields parse without rematching."""
        from epochal.format import UTCOffsetFields, parse_utc_offset

        fields = UTCOffsetFields("-", "01", "30")
        assert parse_utc_offset(fields) == -(HOUR + 30 * MINUTE)

    @pytest.mark.parametrize(
        "fields",
        [
            ("+", "99", "99"),
            ("+", "05", "60"),
            ("+", "5"),
            ("*", "05"),
            ("+", "05", None, "15"),
            ("+", "05", "30", None, "5"),
            ("+", "05", "30", "15", "1234567890"),
        ],
    )
    def test_malformed_fields_break_precondition(self, fields: tuple) -> None:
        """Hand-built fields outside the grammar are rejected."""
        from epochal.errors import InvariantError
        from epochal.format import UTCOffsetFields, parse_utc_offset

        with pytest.raises(InvariantError):
            parse_utc_offset(UTCOffsetFields(*fields))


class TestParseUtcOffsetUnchecked:
    """Tests for parse_utc_offset_unchecked()."""

    def test_valid(self) -> None:
        """A valid string parses like parse_utc_offset()."""
        from epochal.format import parse_utc_offset, parse_utc_offset_unchecked

        assert parse_utc_offset_unchecked("+05:30") == parse_utc_offset("+05:30")

    def test_invalid_is_invariant_error(self) -> None:
        """An invalid string breaks the caller's precondition."""
        from epochal.errors import InvariantError
        from epochal.format import parse_utc_offset_unchecked

        with pytest.raises(InvariantError):
            parse_utc_offset_unchecked("America/New_York")


class TestIsFixedOffsetIdentifier:
    """Tests for is_fixed_offset_identifier()."""

    @pytest.mark.parametrize("text", ["+05:30", "-0800", "+00", "-00:00"])
    def test_minute_precision(self, text: str) -> None:
        """Minute-precision offsets are fixed-offset identifiers."""
        from epochal.format import is_fixed_offset_identifier

        assert is_fixed_offset_identifier(text) is True

    @pytest.mark.parametrize(
        "text", ["+05:30:15", "+05:30:15.5", "+053015", "UTC", "America/New_York", "+24:00", ""]
    )
    def test_not_fixed_offset(self, text: str) -> None:
        """Sub-minute offsets, zone names and malformed text are rejected."""
        from epochal.format import is_fixed_offset_identifier

        assert is_fixed_offset_identifier(text) is False


class TestParseUtcOffsetFields:
    """Tests for parse_utc_offset_fields()."""

    def test_parts(self) -> None:
        """The matched parts are exposed as strings."""
        from epochal.format import parse_utc_offset_fields

        fields = parse_utc_offset_fields("-12:45:30,25")
        assert fields is not None
        assert (fields.sign, fields.hours, fields.minutes, fields.seconds, fields.fraction) == (
            "-",
            "12",
            "45",
            "30",
            "25",
        )
        assert fields.has_sub_minute_precision is True

    def test_non_string(self) -> None:
        """Non-string input does not match."""
        from epochal.format import parse_utc_offset_fields

        assert parse_utc_offset_fields(None) is None  # type: ignore[arg-type]
