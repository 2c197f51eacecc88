"""Default values for the command-line and web surfaces."""

from dataclasses import dataclass, field

from nightrelcalc import __version__


@dataclass(frozen=True)
class CalculatorDefaults:
    """Defaults for the normal day and legal limits."""

    normal_start: str = "09:00"
    normal_end: str = "17:30"
    min_rest_hours: float = 11.0
    max_overtime_hours: float = 4.0


@dataclass(frozen=True)
class WebDefaults:
    """Form defaults; the shareable URL only carries values that differ."""

    start: str = "18:30"
    length: str = "4"
    normal_start: str = "09:00"
    normal_end: str = "17:30"
    min_rest: str = "11"
    max_overtime: str = "4"


@dataclass(frozen=True)
class AppConfig:
    version: str = __version__
    calculator: CalculatorDefaults = field(default_factory=CalculatorDefaults)
    web: WebDefaults = field(default_factory=WebDefaults)

    # Environment variable read as the default for --port
    port_env_var: str = "NIGHTRELCALC_PORT"


DEFAULT_CONFIG = AppConfig()
