"""Clock arithmetic for the scenario calculator.

All times are integer minutes. A clock value (``HH:MM``) is the minute of
the reference day in [0, 1439]; an absolute minute may fall before or after
the reference day and is rendered with a day-offset suffix.
"""

import math

from nightrelcalc.errors import ValidationError, ValidationErrorType

MINUTES_PER_DAY = 1440


def parse_clock(value: str, field: str = "time") -> int:
    """Parse an ``HH:MM`` string into minutes from midnight.

    Raises:
        ValidationError: If the string is not two numeric parts or a
            component is out of range.
    """
    text = value.strip()
    parts = text.split(":")
    error = ValidationError(
        ValidationErrorType.INVALID_TIME_FORMAT,
        f"invalid time {value!r}, expected HH:MM",
        field=field,
    )
    if len(parts) != 2:
        raise error
    for part in parts:
        if not (1 <= len(part) <= 2 and part.isascii() and part.isdigit()):
            raise error

    hours = int(parts[0])
    minutes = int(parts[1])
    if not 0 <= hours <= 23 or not 0 <= minutes <= 59:
        raise error
    return hours * 60 + minutes


def parse_decimal_hours(value: str, field: str = "hours") -> float:
    """Parse decimal hours, accepting ``,`` as the fractional separator.

    Raises:
        ValidationError: If the text is not a number, or the value is
            not finite once converted to minutes.
    """
    text = value.strip().replace(",", ".")
    try:
        hours = float(text)
    except ValueError:
        raise ValidationError(
            ValidationErrorType.INVALID_NUMBER,
            f"invalid number {value!r} for {field}",
            field=field,
        ) from None
    return check_finite_hours(hours, field, shown=value)


def check_finite_hours(hours: float, field: str = "hours", shown=None) -> float:
    """Reject NaN, infinities and values whose minute count overflows."""
    if not math.isfinite(hours) or not math.isfinite(hours * 60.0):
        shown = hours if shown is None else shown
        raise ValidationError(
            ValidationErrorType.INVALID_NUMBER,
            f"invalid number {shown!r} for {field}",
            field=field,
        )
    return hours


def hours_to_minutes(hours: float) -> int:
    """Convert hours to minutes, rounding half away from zero."""
    minutes = math.floor(abs(hours) * 60.0 + 0.5)
    return int(math.copysign(minutes, hours)) if minutes else 0


def split_day(minutes: int) -> tuple[int, int]:
    """Split an absolute minute into (day_offset, minute_of_day).

    Uses floored division so the minute of day is always in [0, 1440).
    """
    return divmod(minutes, MINUTES_PER_DAY)


def format_clock(minutes: int) -> str:
    """Render an absolute minute as ``HH:MM`` plus ``(+Nd)``/``(-Nd)``."""
    days, minute_of_day = split_day(minutes)
    hours, mins = divmod(minute_of_day, 60)
    clock = f"{hours:02d}:{mins:02d}"
    if days == 0:
        return clock
    return f"{clock} ({days:+d}d)"


def format_duration(minutes: int) -> str:
    """Render a duration as ``{h}h{mm}m``. The sign is dropped."""
    hours, mins = divmod(abs(minutes), 60)
    return f"{hours}h{mins:02d}m"
