"""Domain models, clock helpers and legal-limit policies."""

from nightrelcalc.domain.clock import (
    MINUTES_PER_DAY,
    check_finite_hours,
    format_clock,
    format_duration,
    hours_to_minutes,
    parse_clock,
    parse_decimal_hours,
)
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

__all__ = [
    # Clock
    "MINUTES_PER_DAY",
    "check_finite_hours",
    "format_clock",
    "format_duration",
    "hours_to_minutes",
    "parse_clock",
    "parse_decimal_hours",
    # Models
    "CalcResult",
    "Scenario",
    "ScenarioKind",
    "ScenarioParameters",
    "TimeWindow",
    # Policies
    "MinimumRestPolicy",
    "OvertimeCapPolicy",
    "OvertimePolicy",
    "RestPolicy",
]
