"""
Named thresholds for the circadian and environmental engines.

Every tunable constant lives in one of these frozen records. Each public
operation takes a ``config=`` keyword defaulting to the DEFAULT_* instance,
so regional policies (e.g. a gentler max daily adjustment) can be applied
per call without global state.
"""

from dataclasses import dataclass

from .errors import InvalidInput


def _require_increasing(name: str, *values: float) -> None:
    if any(low >= high for low, high in zip(values, values[1:])):
        raise InvalidInput(name, values, "must be strictly increasing")


# ---------------------------------------------------------------------------
# Circadian
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class JetLagConfig:
    """Sleep-shift cap, severity breakpoints, and light window bands."""

    # Max bedtime/wake shift per day in hours (1.5h rule)
    max_daily_adjustment: float = 1.5

    # Severity upper bounds on |difference_hours|, inclusive
    minimal_max_hours: float = 2.0
    mild_max_hours: float = 4.0
    moderate_max_hours: float = 8.0

    # Fixed clock-time light bands ("HH:MM-HH:MM")
    eastward_morning_light: str = "06:00-08:00"
    eastward_evening_avoidance: str = "20:00-22:00"
    westward_morning_light: str = "08:00-10:00"
    westward_evening_avoidance: str = "18:00-20:00"
    light_duration_minutes: int = 30

    def __post_init__(self):
        if not self.max_daily_adjustment > 0:
            raise InvalidInput(
                "max_daily_adjustment", self.max_daily_adjustment, "must be positive"
            )
        _require_increasing(
            "severity thresholds",
            self.minimal_max_hours,
            self.mild_max_hours,
            self.moderate_max_hours,
        )


# ---------------------------------------------------------------------------
# Heat
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HeatConfig:
    """Heat index tiers (Fahrenheit) and extreme heat warning cut-offs (Celsius)."""

    # Below this the Rothfusz regression is not applied
    rothfusz_min_f: float = 80.0

    # Danger tier upper bounds in °F, inclusive
    safe_max_f: float = 80.0
    caution_max_f: float = 90.0
    extreme_caution_max_f: float = 105.0
    danger_max_f: float = 130.0

    # Extreme heat warning (temperature or heat index, °C)
    warning_active_c: float = 35.0
    warning_high_c: float = 40.0
    warning_extreme_c: float = 45.0

    # UV + heat combined score breakpoints
    uv_heat_severe: int = 7
    uv_heat_high: int = 5
    uv_heat_moderate: int = 3

    def __post_init__(self):
        _require_increasing(
            "danger tiers",
            self.safe_max_f,
            self.caution_max_f,
            self.extreme_caution_max_f,
            self.danger_max_f,
        )
        _require_increasing(
            "warning thresholds",
            self.warning_active_c,
            self.warning_high_c,
            self.warning_extreme_c,
        )
        _require_increasing(
            "uv_heat breakpoints",
            self.uv_heat_moderate,
            self.uv_heat_high,
            self.uv_heat_severe,
        )


# ---------------------------------------------------------------------------
# Outdoor activity
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ActivityRiskConfig:
    """Combined activity risk breakpoints on the summed factor score."""

    severe_min_score: int = 10
    high_min_score: int = 7
    moderate_min_score: int = 4

    # Score used when no AQI reading is available
    missing_aqi_score: int = 1

    def __post_init__(self):
        _require_increasing(
            "risk breakpoints",
            self.moderate_min_score,
            self.high_min_score,
            self.severe_min_score,
        )
        if self.missing_aqi_score < 0:
            raise InvalidInput("missing_aqi_score", self.missing_aqi_score, "must not be negative")


# ---------------------------------------------------------------------------
# Hydration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HydrationConfig:
    """Intake model coefficients and dehydration risk breakpoints."""

    ml_per_kg: float = 35.0

    temperature_threshold_c: float = 25.0
    ml_per_degree: float = 150.0
    extreme_heat_c: float = 35.0
    extreme_heat_ml: float = 500.0

    altitude_threshold_m: float = 2000.0
    altitude_step_m: float = 500.0
    ml_per_altitude_step: float = 100.0

    high_humidity_pct: float = 70.0
    high_humidity_ml: float = 200.0
    low_humidity_pct: float = 30.0
    low_humidity_ml: float = 300.0

    waking_hours: int = 16

    # Dehydration risk breakpoints on the point score
    severe_min_score: int = 8
    high_min_score: int = 6
    moderate_min_score: int = 4

    def __post_init__(self):
        _require_increasing(
            "risk breakpoints",
            self.moderate_min_score,
            self.high_min_score,
            self.severe_min_score,
        )
        if not self.altitude_step_m > 0:
            raise InvalidInput("altitude_step_m", self.altitude_step_m, "must be positive")
        if not self.waking_hours > 0:
            raise InvalidInput("waking_hours", self.waking_hours, "must be positive")


DEFAULT_JET_LAG_CONFIG = JetLagConfig()
DEFAULT_HEAT_CONFIG = HeatConfig()
DEFAULT_ACTIVITY_RISK_CONFIG = ActivityRiskConfig()
DEFAULT_HYDRATION_CONFIG = HydrationConfig()
