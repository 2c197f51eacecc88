"""Tests for clock parsing and formatting."""

import pytest

from nightrelcalc.domain.clock import (
    check_finite_hours,
    format_clock,
    format_duration,
    hours_to_minutes,
    parse_clock,
    parse_decimal_hours,
    split_day,
)
from nightrelcalc.errors import ValidationError, ValidationErrorType


class TestParseClock:
    """Tests for parse_clock."""

    def test_parses_hours_and_minutes(self):
        assert parse_clock("18:30") == 1110
        assert parse_clock("00:00") == 0
        assert parse_clock("23:59") == 1439

    def test_single_digit_parts(self):
        """Unpadded parts are accepted."""
        assert parse_clock("9:05") == 545

    def test_surrounding_whitespace_ignored(self):
        assert parse_clock("  09:00 ") == 540

    @pytest.mark.parametrize("value", ["24:00", "12:60", "-1:00", "12", "12:30:00", "ab:cd", ""])
    def test_invalid_values_rejected(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_clock(value)
        assert exc_info.value.error_type == ValidationErrorType.INVALID_TIME_FORMAT
        assert "expected HH:MM" in str(exc_info.value)

    @pytest.mark.parametrize(
        "value", ["1_8:30", "09: 30", "+9:00", "9 :00", "123:00", "09:5_", "\u06618:30"]
    )
    def test_only_one_or_two_ascii_digits_per_part(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_clock(value)
        assert exc_info.value.error_type == ValidationErrorType.INVALID_TIME_FORMAT

    def test_round_trip_over_whole_day(self):
        """Every minute of the day survives format then parse."""
        for minute in range(0, 1440):
            assert parse_clock(format_clock(minute)) == minute


class TestDecimalHours:
    """Tests for parse_decimal_hours and hours_to_minutes."""

    def test_dot_and_comma_separators(self):
        assert parse_decimal_hours("3.5") == 3.5
        assert parse_decimal_hours("3,5") == 3.5
        assert parse_decimal_hours(" 4 ") == 4.0

    @pytest.mark.parametrize("value", ["", "four", "1.2.3", "nan", "inf", "-Infinity", "1e308"])
    def test_invalid_numbers_rejected(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_decimal_hours(value, field="length")
        assert exc_info.value.error_type == ValidationErrorType.INVALID_NUMBER
        assert exc_info.value.field == "length"

    def test_whole_and_fractional_hours(self):
        assert hours_to_minutes(4) == 240
        assert hours_to_minutes(3.5) == 210
        assert hours_to_minutes(2.25) == 135
        assert hours_to_minutes(0) == 0

    def test_rounds_half_away_from_zero(self):
        """0.375h is exactly 22.5 minutes and rounds up, not to even."""
        assert hours_to_minutes(0.375) == 23
        assert hours_to_minutes(-0.375) == -23

    def test_check_finite_hours(self):
        assert check_finite_hours(4.5) == 4.5
        for value in (float("nan"), float("inf"), 1e308):
            with pytest.raises(ValidationError) as exc_info:
                check_finite_hours(value, field="min rest")
            assert exc_info.value.error_type == ValidationErrorType.INVALID_NUMBER
            assert exc_info.value.field == "min rest"


class TestFormatting:
    """Tests for format_clock and format_duration."""

    def test_same_day_has_no_suffix(self):
        assert format_clock(1110) == "18:30"
        assert format_clock(0) == "00:00"

    def test_next_day_suffix(self):
        assert format_clock(1500) == "01:00 (+1d)"
        assert format_clock(3420) == "09:00 (+2d)"

    def test_previous_day_suffix(self):
        """Negative minutes use floored division and a minus sign."""
        assert format_clock(-270) == "19:30 (-1d)"
        assert format_clock(-1440) == "00:00 (-1d)"
        assert format_clock(-1441) == "23:59 (-2d)"

    def test_split_day_remainder_is_non_negative(self):
        assert split_day(-1) == (-1, 1439)
        assert split_day(1440) == (1, 0)

    def test_format_duration(self):
        assert format_duration(240) == "4h00m"
        assert format_duration(510) == "8h30m"
        assert format_duration(5) == "0h05m"
        assert format_duration(0) == "0h00m"

    def test_format_duration_drops_sign(self):
        assert format_duration(-90) == "1h30m"
