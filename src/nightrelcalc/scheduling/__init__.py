"""Scenario calculation engine."""

from nightrelcalc.scheduling.calculator import ScenarioCalculator, compute

__all__ = [
    "ScenarioCalculator",
    "compute",
]
