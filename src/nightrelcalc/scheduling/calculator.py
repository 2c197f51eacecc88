"""Scenario calculator for night releases.

Given a release window, the normal workday and the legal limits, this module
derives the schedule alternatives for the release day and the adjusted start
of the following day. It is a pure computation: equal inputs always give
equal results and nothing is shared between calls.
"""

from typing import Optional

from nightrelcalc.domain.models import (
    CalcResult,
    Scenario,
    ScenarioKind,
    ScenarioParameters,
    TimeWindow,
)
from nightrelcalc.domain.policies import (
    MinimumRestPolicy,
    OvertimeCapPolicy,
    OvertimePolicy,
    RestPolicy,
)
from nightrelcalc.validation.validator import HoursInput, ParameterValidator

TITLE_RELEASE_INCLUDED = "Full day (release included) - No Overtime"
TITLE_RELEASE_OVERTIME = "Full day + release (Overtime)"


class ScenarioCalculator:
    """Builds the scheduling scenarios for one set of parameters.

    Rest and overtime policies are derived from the parameters on each call
    so that a calculator instance carries no per-calculation state.

    Example:
        >>> calculator = ScenarioCalculator()
        >>> params = ParameterValidator().validate("18:30", 4)
        >>> result = calculator.calculate(params)
        >>> [s.kind.value for s in result.scenarios]
        ['release_included', 'release_overtime']
    """

    def calculate(self, params: ScenarioParameters) -> CalcResult:
        """Compute all scenarios for validated parameters."""
        rest_policy = MinimumRestPolicy(min_rest=params.min_rest_minutes)
        overtime_policy = OvertimeCapPolicy(max_overtime=params.max_overtime_minutes)

        next_day = self.next_day_window(params, rest_policy)

        scenarios = [
            self._release_included(params, overtime_policy, next_day),
            self._release_overtime(params, overtime_policy, next_day),
        ]
        if params.combine_minutes is not None:
            scenarios.append(self._combined(params, overtime_policy, next_day))

        return CalcResult(parameters=params, scenarios=tuple(scenarios))

    @staticmethod
    def next_day_window(params: ScenarioParameters, rest_policy: RestPolicy) -> TimeWindow:
        """Next day's work window: normal day length from the earliest legal start."""
        start = rest_policy.next_day_start(params.release_end, params.normal_start)
        return TimeWindow(start, start + params.normal_day_minutes)

    def _release_included(
        self,
        params: ScenarioParameters,
        overtime_policy: OvertimePolicy,
        next_day: TimeWindow,
    ) -> Scenario:
        """Absorb as much of the release as fits into the full day."""
        full_day = params.full_day_minutes
        release = params.release_minutes

        required = overtime_policy.required_included(release)
        included = min(full_day, max(required, min(release, full_day)))
        overtime = max(release - included, 0)

        return self._build(
            params,
            ScenarioKind.RELEASE_INCLUDED,
            TITLE_RELEASE_INCLUDED,
            included=included,
            overtime=overtime,
            next_day=next_day,
        )

    def _release_overtime(
        self,
        params: ScenarioParameters,
        overtime_policy: OvertimePolicy,
        next_day: TimeWindow,
    ) -> Scenario:
        """Full day ending at release start, release worked as overtime.

        When the release is longer than the cap, the work window moves later
        so that only the capped amount follows the end of regular work.
        """
        full_day = params.full_day_minutes
        overtime = params.release_minutes
        work_end = params.release_start

        if overtime_policy.exceeds_cap(overtime):
            overtime = overtime_policy.max_overtime_minutes()
            work_end = params.release_end - overtime

        work_hours = TimeWindow(work_end - full_day, work_end)
        return Scenario(
            kind=ScenarioKind.RELEASE_OVERTIME,
            title=TITLE_RELEASE_OVERTIME,
            work_hours=work_hours,
            release_window=params.release_window,
            total_work=TimeWindow(work_hours.start, params.release_end),
            included_minutes=0,
            overtime_minutes=overtime,
            next_day_hours=next_day,
        )

    def _combined(
        self,
        params: ScenarioParameters,
        overtime_policy: OvertimePolicy,
        next_day: TimeWindow,
    ) -> Scenario:
        """Count a chosen part of the release as regular time."""
        full_day = params.full_day_minutes
        release = params.release_minutes

        included = _clamp(params.combine_minutes, 0, min(release, full_day))
        if overtime_policy.exceeds_cap(release - included):
            included = _clamp(overtime_policy.required_included(release), 0, full_day)

        title = (
            f"Full day + {params.combine_hours:.2f}h + "
            f"{params.release_hours - params.combine_hours:.2f}h"
        )
        return self._build(
            params,
            ScenarioKind.COMBINED,
            title,
            included=included,
            overtime=release - included,
            next_day=next_day,
        )

    @staticmethod
    def _build(
        params: ScenarioParameters,
        kind: ScenarioKind,
        title: str,
        included: int,
        overtime: int,
        next_day: TimeWindow,
    ) -> Scenario:
        """Build a scenario whose regular time straddles the release start."""
        pre_release = params.full_day_minutes - included
        work_start = params.release_start - pre_release
        return Scenario(
            kind=kind,
            title=title,
            work_hours=TimeWindow(work_start, params.release_start + included),
            release_window=params.release_window,
            total_work=TimeWindow(work_start, params.release_end),
            included_minutes=included,
            overtime_minutes=overtime,
            next_day_hours=next_day,
        )


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def compute(
    release_start: str,
    release_length_hours: HoursInput,
    combine_hours: Optional[HoursInput] = None,
    full_day_hours: HoursInput = 0,
    normal_start: str = "09:00",
    normal_end: str = "17:30",
    min_rest_hours: HoursInput = 11,
    max_overtime_hours: HoursInput = 4,
) -> CalcResult:
    """Validate raw input and compute all scenarios.

    Args:
        release_start: Release start as ``HH:MM``.
        release_length_hours: Release length in hours.
        combine_hours: Release hours to count inside the full day; None
            skips the combined scenario.
        full_day_hours: Full day override in hours (0 = normal day length).
        normal_start: Normal work start as ``HH:MM``.
        normal_end: Normal work end as ``HH:MM``.
        min_rest_hours: Minimum rest after the release.
        max_overtime_hours: Overtime cap.

    Returns:
        CalcResult with two scenarios, or three when combine_hours is set.

    Raises:
        ValidationError: If any input is invalid. No partial result is built.
    """
    params = ParameterValidator().validate(
        release_start,
        release_length_hours,
        combine_hours=combine_hours,
        full_day_hours=full_day_hours,
        normal_start=normal_start,
        normal_end=normal_end,
        min_rest_hours=min_rest_hours,
        max_overtime_hours=max_overtime_hours,
    )
    return ScenarioCalculator().calculate(params)
