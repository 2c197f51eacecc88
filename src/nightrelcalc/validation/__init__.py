"""Validation module for calculator inputs."""

from nightrelcalc.errors import ValidationError, ValidationErrorType
from nightrelcalc.validation.validator import ParameterValidator

__all__ = [
    "ParameterValidator",
    "ValidationError",
    "ValidationErrorType",
]
