"""Unit tests for clock-time arithmetic."""

from __future__ import annotations

from datetime import time

import pytest

from timr_cli.exceptions import InvalidTimeFormatError
from timr_cli.utils.exit_codes import ERROR_INVALID_ARGS
from timr_cli.utils.time_math import (
    Duration,
    canonical_clock_time,
    describe_minutes,
    describe_signed_minutes,
    duration_between,
    format_clock_time,
    format_minutes,
    minutes_since_midnight,
    parse_clock_time,
)


class TestParseClockTime:
    """Tests for parse_clock_time()."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("0000", time(0, 0)),
            ("0930", time(9, 30)),
            ("1200", time(12, 0)),
            ("2359", time(23, 59)),
        ],
    )
    def test_valid_values(self, value, expected):
        assert parse_clock_time(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["", "930", "09300", "09:30", "2400", "1260", "ab12", "９３０", "-100", " 930"],
    )
    def test_invalid_values_raise(self, value):
        with pytest.raises(InvalidTimeFormatError):
            parse_clock_time(value)

    def test_time_instance_drops_seconds(self):
        assert parse_clock_time(time(8, 15, 42, 1000)) == time(8, 15)

    def test_error_is_value_error_with_exit_code(self):
        with pytest.raises(ValueError) as exc_info:
            parse_clock_time("9am")
        assert exc_info.value.exit_code == ERROR_INVALID_ARGS
        assert "9am" in str(exc_info.value)


class TestFormatting:
    def test_format_clock_time_pads(self):
        assert format_clock_time(time(7, 5)) == "0705"

    def test_canonical_clock_time_roundtrip(self):
        assert canonical_clock_time("0705") == "0705"
        assert canonical_clock_time(time(21, 0)) == "2100"

    def test_minutes_since_midnight(self):
        assert minutes_since_midnight("0000") == 0
        assert minutes_since_midnight("0130") == 90
        assert minutes_since_midnight("2359") == 1439

    @pytest.mark.parametrize(
        "minutes, expected",
        [(0, "0000"), (5, "0005"), (300, "0500"), (720, "1200"), (-1320, "2200")],
    )
    def test_format_minutes_uses_absolute_value(self, minutes, expected):
        assert format_minutes(minutes) == expected

    def test_describe_minutes(self):
        assert describe_minutes(293) == "4 hours, 53 minutes"
        assert describe_minutes(-61) == "1 hours, 1 minutes"

    def test_describe_signed_minutes(self):
        assert describe_signed_minutes(293) == "4 hours, 53 minutes"
        assert describe_signed_minutes(0) == "0 hours, 0 minutes"
        assert describe_signed_minutes(-1320) == "-22 hours, 0 minutes"


class TestDurationBetween:
    """Tests for duration_between()."""

    def test_morning_span(self):
        assert duration_between("0700", "1200") == Duration("0500", 300)

    def test_twelve_hours(self):
        result = duration_between("0700", "1900")
        assert result.formatted == "1200"
        assert result.minutes == 720

    def test_same_time_is_zero(self):
        assert duration_between("1015", "1015") == Duration("0000", 0)

    def test_minute_borrow(self):
        assert duration_between("0950", "1010") == Duration("0020", 20)

    def test_crossing_midnight_is_negative(self):
        """Times are treated as the same day, so the result goes negative."""
        result = duration_between("2300", "0100")
        assert result.formatted == "2200"
        assert result.minutes == -1320

    def test_accepts_time_objects(self):
        assert duration_between(time(8, 0), time(8, 45)).minutes == 45

    def test_invalid_end_raises(self):
        with pytest.raises(InvalidTimeFormatError):
            duration_between("0800", "8:45")
