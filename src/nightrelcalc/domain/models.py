"""Domain models for the night release calculator.

All time values are integer minutes. Clock values are minutes from midnight
of the reference day (the day the release starts); absolute minutes may be
negative or exceed a day and are rendered with a day offset.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from nightrelcalc.domain.clock import format_clock, format_duration


class ScenarioKind(Enum):
    """The scheduling alternatives produced for one release."""

    RELEASE_INCLUDED = "release_included"  # Release absorbed into full day
    RELEASE_OVERTIME = "release_overtime"  # Full day, then release as overtime
    COMBINED = "combined"  # User-chosen split


@dataclass(frozen=True)
class TimeWindow:
    """A start/end pair of absolute minutes.

    Attributes:
        start: First minute of the window.
        end: Minute the window ends (exclusive).
    """

    start: int
    end: int

    @property
    def duration_minutes(self) -> int:
        """Length of the window in minutes."""
        return self.end - self.start

    def __str__(self) -> str:
        return f"{format_clock(self.start)} -> {format_clock(self.end)}"


@dataclass(frozen=True)
class ScenarioParameters:
    """Normalized calculator input.

    Attributes:
        release_start: Release start, minute of the reference day.
        release_minutes: Release length in minutes (> 0).
        release_hours: Release length as given, in hours.
        combine_minutes: Release minutes to count inside the full day,
            or None when no split was requested.
        combine_hours: Combine value as given, in hours.
        full_day_override_minutes: Explicit full day length; 0 derives it
            from the normal day.
        normal_start: Normal work start, minute of day.
        normal_end: Normal work end, minute of day (after normal_start).
        min_rest_minutes: Minimum rest after the release (> 0).
        max_overtime_minutes: Overtime cap (>= 0).
    """

    release_start: int
    release_minutes: int
    release_hours: float
    combine_minutes: Optional[int]
    combine_hours: Optional[float]
    full_day_override_minutes: int
    normal_start: int
    normal_end: int
    min_rest_minutes: int
    max_overtime_minutes: int

    @property
    def normal_day_minutes(self) -> int:
        return self.normal_end - self.normal_start

    @property
    def full_day_minutes(self) -> int:
        """Full day budget: the override if set, else the normal day length."""
        if self.full_day_override_minutes > 0:
            return self.full_day_override_minutes
        return self.normal_day_minutes

    @property
    def release_end(self) -> int:
        """Absolute release end; past 1439 when the release crosses midnight."""
        return self.release_start + self.release_minutes

    @property
    def release_window(self) -> TimeWindow:
        return TimeWindow(self.release_start, self.release_end)


@dataclass(frozen=True)
class Scenario:
    """One computed schedule alternative.

    Attributes:
        kind: Which alternative this is.
        title: Display title.
        work_hours: Regular work window.
        release_window: The release itself.
        total_work: Work start through release end.
        included_minutes: Release minutes counted toward the full day.
        overtime_minutes: Release minutes counted as overtime.
        next_day_hours: Adjusted work window for the following day.
    """

    kind: ScenarioKind
    title: str
    work_hours: TimeWindow
    release_window: TimeWindow
    total_work: TimeWindow
    included_minutes: int
    overtime_minutes: int
    next_day_hours: TimeWindow

    @property
    def included(self) -> str:
        return format_duration(self.included_minutes)

    @property
    def overtime(self) -> str:
        return format_duration(self.overtime_minutes)


@dataclass(frozen=True)
class CalcResult:
    """Result of one calculation: echoed inputs plus 2 or 3 scenarios."""

    parameters: ScenarioParameters
    scenarios: tuple[Scenario, ...]

    @property
    def release_window(self) -> TimeWindow:
        return self.parameters.release_window

    @property
    def normal_window(self) -> TimeWindow:
        return TimeWindow(self.parameters.normal_start, self.parameters.normal_end)

    @property
    def full_day_minutes(self) -> int:
        return self.parameters.full_day_minutes

    def summary(self) -> dict[str, str]:
        """Formatted header values, keyed by label name."""
        params = self.parameters
        return {
            "release_start": format_clock(params.release_start),
            "release_end": format_clock(params.release_end),
            "release_length": format_duration(params.release_minutes),
            "normal_start": format_clock(params.normal_start),
            "normal_end": format_clock(params.normal_end),
            "normal_length": format_duration(params.normal_day_minutes),
            "full_day": format_duration(params.full_day_minutes),
            "min_rest": format_duration(params.min_rest_minutes),
            "max_overtime": format_duration(params.max_overtime_minutes),
        }
