"""Tests for input validation."""

import pytest

from nightrelcalc.errors import ValidationError, ValidationErrorType
from nightrelcalc.validation.validator import ParameterValidator


class TestParameterValidator:
    """Tests for ParameterValidator."""

    @pytest.fixture
    def validator(self):
        return ParameterValidator()

    def test_defaults_normalize(self, validator):
        params = validator.validate("18:30", 4)
        assert params.release_start == 1110
        assert params.release_minutes == 240
        assert params.release_end == 1350
        assert params.normal_start == 540
        assert params.normal_end == 1050
        assert params.normal_day_minutes == 510
        assert params.full_day_minutes == 510
        assert params.min_rest_minutes == 660
        assert params.max_overtime_minutes == 240
        assert params.combine_minutes is None

    def test_string_hours_accept_comma(self, validator):
        params = validator.validate("18:30", "3,5", min_rest_hours="10,5")
        assert params.release_minutes == 210
        assert params.min_rest_minutes == 630

    def test_full_day_override(self, validator):
        params = validator.validate("18:30", 4, full_day_hours=7.5)
        assert params.full_day_override_minutes == 450
        assert params.full_day_minutes == 450

    def test_non_positive_full_day_derives_from_normal_day(self, validator):
        params = validator.validate("18:30", 4, full_day_hours=-2)
        assert params.full_day_minutes == 510

    def test_combine_parsed(self, validator):
        params = validator.validate("20:00", 5, combine_hours="2")
        assert params.combine_minutes == 120
        assert params.combine_hours == 2.0

    def test_empty_combine_is_unset(self, validator):
        params = validator.validate("20:00", 5, combine_hours="  ")
        assert params.combine_minutes is None

    def test_zero_combine_is_set(self, validator):
        params = validator.validate("20:00", 5, combine_hours=0)
        assert params.combine_minutes == 0

    def test_invalid_release_start(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate("25:00", 4)
        assert exc_info.value.error_type == ValidationErrorType.INVALID_TIME_FORMAT
        assert exc_info.value.field == "release start"

    def test_invalid_number(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate("18:30", "four")
        assert exc_info.value.error_type == ValidationErrorType.INVALID_NUMBER

    @pytest.mark.parametrize("length", [0, -1, 0.001])
    def test_non_positive_length(self, validator, length):
        """Lengths that round to zero minutes are rejected too."""
        with pytest.raises(ValidationError) as exc_info:
            validator.validate("18:30", length)
        assert exc_info.value.error_type == ValidationErrorType.NON_POSITIVE_LENGTH
        assert str(exc_info.value) == "length must be > 0"

    def test_reversed_normal_day(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate("18:30", 4, normal_start="17:00", normal_end="09:00")
        assert exc_info.value.error_type == ValidationErrorType.INVALID_NORMAL_DAY

    def test_empty_normal_day(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate("18:30", 4, normal_start="09:00", normal_end="09:00")
        assert exc_info.value.error_type == ValidationErrorType.INVALID_NORMAL_DAY

    def test_invalid_normal_start_names_flag(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate("18:30", 4, normal_start="9am")
        assert str(exc_info.value).startswith("invalid --normal-start:")
        assert exc_info.value.field == "normal start"

    def test_non_positive_min_rest(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate("18:30", 4, min_rest_hours=0)
        assert exc_info.value.error_type == ValidationErrorType.NON_POSITIVE_LENGTH
        assert exc_info.value.field == "min rest"

    def test_negative_overtime_cap(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate("18:30", 4, max_overtime_hours=-1)
        assert exc_info.value.error_type == ValidationErrorType.NEGATIVE_OVERTIME_CAP

    def test_zero_overtime_cap_allowed(self, validator):
        params = validator.validate("18:30", 4, max_overtime_hours=0)
        assert params.max_overtime_minutes == 0

    def test_negative_combine(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate("18:30", 4, combine_hours=-1)
        assert exc_info.value.error_type == ValidationErrorType.NEGATIVE_COMBINE

    def test_blank_length_is_invalid_number(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate("18:30", "")
        assert exc_info.value.error_type == ValidationErrorType.INVALID_NUMBER
        assert exc_info.value.field == "release length"

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), 1e308, "1e308"])
    def test_non_finite_hours_are_invalid_numbers(self, validator, value):
        """Values that cannot become a whole minute count are rejected, not raised raw."""
        for kwargs in (
            {"release_length_hours": value},
            {"release_length_hours": 4, "min_rest_hours": value},
            {"release_length_hours": 4, "max_overtime_hours": value},
            {"release_length_hours": 4, "combine_hours": value},
            {"release_length_hours": 4, "full_day_hours": value},
        ):
            with pytest.raises(ValidationError) as exc_info:
                validator.validate("18:30", **kwargs)
            assert exc_info.value.error_type == ValidationErrorType.INVALID_NUMBER

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_blank_full_day_derives_from_normal_day(self, validator, value):
        params = validator.validate("18:30", 4, full_day_hours=value)
        assert params.full_day_override_minutes == 0
        assert params.full_day_minutes == 510

    def test_first_failure_wins(self, validator):
        """Release start is checked before the normal day."""
        with pytest.raises(ValidationError) as exc_info:
            validator.validate("bad", 4, normal_start="17:00", normal_end="09:00")
        assert exc_info.value.error_type == ValidationErrorType.INVALID_TIME_FORMAT
