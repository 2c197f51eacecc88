"""Policy definitions for rest and overtime rules.

Policies hold the legal limits that shape each scenario and are kept
separate from the calculator so they can be tested on their own.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from nightrelcalc.domain.clock import MINUTES_PER_DAY, split_day


class RestPolicy(ABC):
    """Abstract base class for rest-after-release policies."""

    @abstractmethod
    def min_rest_minutes(self) -> int:
        """Minimum rest between release end and the next shift."""
        pass

    @abstractmethod
    def next_day_start(self, release_end: int, normal_start: int) -> int:
        """Get the absolute start of the next shift.

        Args:
            release_end: Absolute minute the release ends.
            normal_start: Normal work start, minute of day.

        Returns:
            Absolute minute the next shift may start.
        """
        pass


class OvertimePolicy(ABC):
    """Abstract base class for overtime cap policies."""

    @abstractmethod
    def max_overtime_minutes(self) -> int:
        """Maximum overtime minutes allowed."""
        pass

    @abstractmethod
    def required_included(self, release_minutes: int) -> int:
        """Minimum release minutes that must be counted as regular time."""
        pass

    @abstractmethod
    def exceeds_cap(self, overtime_minutes: int) -> bool:
        """Check if an overtime amount breaks the cap."""
        pass


@dataclass
class MinimumRestPolicy(RestPolicy):
    """Rest policy based on a minimum rest period.

    The next shift starts at the later of:
    - release end plus the minimum rest
    - the normal start of the calendar day after the release ends
    """

    min_rest: int = 660  # 11 hours

    def min_rest_minutes(self) -> int:
        return self.min_rest

    def next_day_start(self, release_end: int, normal_start: int) -> int:
        earliest_by_rest = release_end + self.min_rest
        release_end_day, _ = split_day(release_end)
        next_calendar_day_start = (release_end_day + 1) * MINUTES_PER_DAY + normal_start
        return max(earliest_by_rest, next_calendar_day_start)


@dataclass
class OvertimeCapPolicy(OvertimePolicy):
    """Overtime policy with a fixed legal cap.

    Default cap: 4 hours (240 minutes).
    """

    max_overtime: int = 240  # 4 hours

    def max_overtime_minutes(self) -> int:
        return self.max_overtime

    def required_included(self, release_minutes: int) -> int:
        return max(0, release_minutes - self.max_overtime)

    def exceeds_cap(self, overtime_minutes: int) -> bool:
        return overtime_minutes > self.max_overtime
