"""Error taxonomy for calculator input validation."""

from enum import Enum
from typing import Optional


class ValidationErrorType(Enum):
    """Types of validation errors."""

    INVALID_TIME_FORMAT = "invalid_time_format"
    INVALID_NUMBER = "invalid_number"
    NON_POSITIVE_LENGTH = "non_positive_length"
    NEGATIVE_OVERTIME_CAP = "negative_overtime_cap"
    INVALID_NORMAL_DAY = "invalid_normal_day"
    NEGATIVE_COMBINE = "negative_combine"


class ValidationError(ValueError):
    """A single validation failure.

    ``str(error)`` is the human-readable message; callers show it verbatim.

    Attributes:
        error_type: Category of the failure.
        message: Description naming the offending field.
        field: Name of the offending input, if known.
    """

    def __init__(
        self,
        error_type: ValidationErrorType,
        message: str,
        field: Optional[str] = None,
    ):
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.field = field

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ValidationError([{self.error_type.value}] {self.message})"
