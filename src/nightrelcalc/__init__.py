"""nightrelcalc - shift scenarios around a night release."""

__version__ = "0.1.11"

from nightrelcalc.errors import ValidationError, ValidationErrorType  # noqa: E402
from nightrelcalc.scheduling.calculator import ScenarioCalculator, compute  # noqa: E402

__all__ = [
    "ScenarioCalculator",
    "ValidationError",
    "ValidationErrorType",
    "__version__",
    "compute",
]
