"""Validation of calculator inputs.

This module is the single place where raw caller input (clock strings and
decimal hours) is checked and normalized into ``ScenarioParameters``. The
first failing check raises; no scenario arithmetic runs on invalid input.
"""

from typing import Optional, Union

from nightrelcalc.domain.clock import (
    check_finite_hours,
    hours_to_minutes,
    parse_clock,
    parse_decimal_hours,
)
from nightrelcalc.domain.models import ScenarioParameters
from nightrelcalc.errors import ValidationError, ValidationErrorType

HoursInput = Union[str, float, int]


class ParameterValidator:
    """Normalizes raw calculator input into ``ScenarioParameters``.

    Hour values may be given as numbers or as decimal strings (``"3,5"``
    is accepted). Checks run in a fixed order: release start, release
    length, normal start, normal end, normal-day ordering, min rest,
    max overtime, combine.

    Example:
        >>> params = ParameterValidator().validate("18:30", 4)
        >>> params.release_end
        1350
    """

    def validate(
        self,
        release_start: str,
        release_length_hours: HoursInput,
        combine_hours: Optional[HoursInput] = None,
        full_day_hours: HoursInput = 0,
        normal_start: str = "09:00",
        normal_end: str = "17:30",
        min_rest_hours: HoursInput = 11,
        max_overtime_hours: HoursInput = 4,
    ) -> ScenarioParameters:
        """Validate inputs and build parameters.

        Args:
            release_start: Release start as ``HH:MM``.
            release_length_hours: Release length in hours (> 0).
            combine_hours: Release hours to count inside the full day, or
                None / empty string when unset.
            full_day_hours: Full day override in hours; 0 or less, None or
                an empty string derives the full day from the normal day.
            normal_start: Normal work start as ``HH:MM``.
            normal_end: Normal work end as ``HH:MM``, after normal_start.
            min_rest_hours: Minimum rest after the release (> 0).
            max_overtime_hours: Overtime cap in hours (>= 0).

        Raises:
            ValidationError: On the first invalid input.
        """
        release_start_min = parse_clock(release_start, field="release start")

        release_hours = self._hours(release_length_hours, "release length")
        release_min = hours_to_minutes(release_hours)
        if release_min <= 0:
            raise ValidationError(
                ValidationErrorType.NON_POSITIVE_LENGTH,
                "length must be > 0",
                field="release length",
            )

        normal_start_min = self._normal_clock(normal_start, "normal-start")
        normal_end_min = self._normal_clock(normal_end, "normal-end")
        if normal_end_min - normal_start_min <= 0:
            raise ValidationError(
                ValidationErrorType.INVALID_NORMAL_DAY,
                "normal day must be within same day and end after start "
                "(e.g. 09:00 -> 17:30)",
                field="normal end",
            )

        min_rest_min = hours_to_minutes(self._hours(min_rest_hours, "min rest"))
        if min_rest_min <= 0:
            raise ValidationError(
                ValidationErrorType.NON_POSITIVE_LENGTH,
                "min rest must be > 0",
                field="min rest",
            )

        max_overtime_min = hours_to_minutes(
            self._hours(max_overtime_hours, "max overtime")
        )
        if max_overtime_min < 0:
            raise ValidationError(
                ValidationErrorType.NEGATIVE_OVERTIME_CAP,
                "max overtime must be >= 0",
                field="max overtime",
            )

        combine_h: Optional[float] = None
        combine_min: Optional[int] = None
        if combine_hours is not None and str(combine_hours).strip() != "":
            combine_h = self._hours(combine_hours, "combine")
            if combine_h < 0:
                raise ValidationError(
                    ValidationErrorType.NEGATIVE_COMBINE,
                    "combine must be >= 0 (hours) or empty",
                    field="combine",
                )
            combine_min = hours_to_minutes(combine_h)

        override_min = 0
        if full_day_hours is not None and str(full_day_hours).strip() != "":
            full_h = self._hours(full_day_hours, "full day")
            if full_h > 0:
                override_min = hours_to_minutes(full_h)

        return ScenarioParameters(
            release_start=release_start_min,
            release_minutes=release_min,
            release_hours=release_hours,
            combine_minutes=combine_min,
            combine_hours=combine_h,
            full_day_override_minutes=override_min,
            normal_start=normal_start_min,
            normal_end=normal_end_min,
            min_rest_minutes=min_rest_min,
            max_overtime_minutes=max_overtime_min,
        )

    @staticmethod
    def _normal_clock(value: str, flag: str) -> int:
        try:
            return parse_clock(value, field=flag.replace("-", " "))
        except ValidationError as exc:
            raise ValidationError(
                exc.error_type,
                f"invalid --{flag}: {exc.message}",
                field=exc.field,
            ) from None

    @staticmethod
    def _hours(value: HoursInput, field: str) -> float:
        if isinstance(value, str):
            return parse_decimal_hours(value, field=field)
        return check_finite_hours(float(value), field=field)
