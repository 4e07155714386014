"""
Heat index and extreme heat warnings.

Scientific basis: Rothfusz LP (1990). The heat index "equation".
NWS Southern Region Technical Attachment SR 90-23.

The regression is defined in Fahrenheit, so the danger tiers are also
Fahrenheit thresholds even though inputs and the headline value are °C:

- <= 80°F   safe
- <= 90°F   caution
- <= 105°F  extreme caution
- <= 130°F  danger
- >  130°F  extreme danger
"""

from datetime import datetime

from ..config import DEFAULT_HEAT_CONFIG, HeatConfig
from ..numeric import (
    require_choice,
    require_finite,
    require_range,
    round_half_away_from_zero,
)
from ..types import (
    TIMES_OF_DAY,
    EnvironmentalReading,
    ExtremeHeatWarning,
    HeatDangerLevel,
    HeatIndexData,
    HeatWarningSeverity,
    TimeOfDay,
)
from .uv_heat import calculate_uv_heat_combination

# Rothfusz regression coefficients (°F, % RH)
C1 = -42.379
C2 = 2.04901523
C3 = 10.14333127
C4 = -0.22475541
C5 = -0.00683783
C6 = -0.05481717
C7 = 0.00122874
C8 = 0.00085282
C9 = -0.00000199

DANGER_WARNINGS: dict[HeatDangerLevel, tuple[str, ...]] = {
    "safe": (),
    "caution": ("Prolonged exposure may cause fatigue",),
    "extreme_caution": ("Heat exhaustion and heat cramps possible",),
    "danger": ("Heat exhaustion and heat stroke likely",),
    "extreme_danger": ("Heat stroke imminent",),
}

DANGER_RECOMMENDATIONS: dict[HeatDangerLevel, tuple[str, ...]] = {
    "safe": ("Normal outdoor activities are safe",),
    "caution": ("Take breaks in shade", "Stay hydrated"),
    "extreme_caution": (
        "Limit outdoor activities",
        "Frequent water breaks",
        "Seek air conditioning",
    ),
    "danger": (
        "Avoid outdoor activities",
        "Stay in air conditioning",
        "Emergency preparedness",
    ),
    "extreme_danger": (
        "Avoid all outdoor exposure",
        "Seek immediate shelter",
        "Monitor for heat stroke symptoms",
    ),
}

PEAK_EXPOSURE_TIMES = ("midday", "afternoon")


def celsius_to_fahrenheit(temperature_c: float) -> float:
    return temperature_c * 9 / 5 + 32


def fahrenheit_to_celsius(temperature_f: float) -> float:
    return (temperature_f - 32) * 5 / 9


def rothfusz_heat_index_f(temperature_f: float, humidity_pct: float) -> float:
    """Rothfusz regression in °F; only meaningful at or above 80°F."""
    t = temperature_f
    rh = humidity_pct
    return (
        C1
        + C2 * t
        + C3 * rh
        + C4 * t * rh
        + C5 * t * t
        + C6 * rh * rh
        + C7 * t * t * rh
        + C8 * t * rh * rh
        + C9 * t * t * rh * rh
    )


def classify_heat_danger(
    heat_index_f: float, config: HeatConfig = DEFAULT_HEAT_CONFIG
) -> HeatDangerLevel:
    require_finite("heat_index_f", heat_index_f)
    if heat_index_f <= config.safe_max_f:
        return "safe"
    elif heat_index_f <= config.caution_max_f:
        return "caution"
    elif heat_index_f <= config.extreme_caution_max_f:
        return "extreme_caution"
    elif heat_index_f <= config.danger_max_f:
        return "danger"
    return "extreme_danger"


def calculate_heat_index(
    temperature_c: float,
    humidity_pct: float,
    config: HeatConfig = DEFAULT_HEAT_CONFIG,
) -> HeatIndexData:
    """
    Calculate perceived heat from temperature and relative humidity.

    Below 80°F the heat index is the air temperature itself; at or above it
    the Rothfusz regression applies. Both headline values are rounded to
    whole degrees.

    Args:
        temperature_c: Air temperature in °C
        humidity_pct: Relative humidity, 0-100
        config: Regression cut-off and danger tier thresholds

    Returns:
        HeatIndexData with danger tier text
    """
    require_finite("temperature_c", temperature_c)
    require_range("humidity_pct", humidity_pct, 0, 100)

    temperature_f = celsius_to_fahrenheit(temperature_c)
    if temperature_f < config.rothfusz_min_f:
        heat_index_f = temperature_f
    else:
        heat_index_f = rothfusz_heat_index_f(temperature_f, humidity_pct)

    danger_level = classify_heat_danger(heat_index_f, config)

    return HeatIndexData(
        heat_index_c=round_half_away_from_zero(fahrenheit_to_celsius(heat_index_f)),
        heat_index_f=round_half_away_from_zero(heat_index_f),
        danger_level=danger_level,
        warnings=DANGER_WARNINGS[danger_level],
        recommendations=DANGER_RECOMMENDATIONS[danger_level],
    )


def get_time_of_day(moment: datetime | None = None) -> TimeOfDay:
    """
    Bucket a local clock time into a period of the day.

    06-10 morning, 10-14 midday, 14-18 afternoon, otherwise evening.
    """
    hour = (moment or datetime.now()).hour

    if 6 <= hour < 10:
        return "morning"
    if 10 <= hour < 14:
        return "midday"
    if 14 <= hour < 18:
        return "afternoon"
    return "evening"


def generate_extreme_heat_warning(
    reading: EnvironmentalReading,
    time_of_day: TimeOfDay = "midday",
    config: HeatConfig = DEFAULT_HEAT_CONFIG,
) -> ExtremeHeatWarning:
    """
    Build the extreme heat warning for a reading.

    The warning is active when either the air temperature or the heat index
    reaches 35°C; severity escalates at 40°C (high) and 45°C (extreme).

    Args:
        reading: Environmental reading (temperature, humidity, UV)
        time_of_day: Period of day; midday and afternoon add peak-exposure text
        config: Heat thresholds

    Returns:
        ExtremeHeatWarning combining heat index, UV/heat, and time-of-day text
    """
    require_choice("time_of_day", time_of_day, TIMES_OF_DAY)

    heat_index = calculate_heat_index(reading.temperature_c, reading.humidity_pct, config)
    temperature = reading.temperature_c
    peak = max(temperature, heat_index.heat_index_c)

    is_active = peak >= config.warning_active_c

    severity: HeatWarningSeverity
    if peak >= config.warning_extreme_c:
        severity = "extreme"
    elif peak >= config.warning_high_c:
        severity = "high"
    else:
        severity = "moderate"

    uv_heat = calculate_uv_heat_combination(
        reading.uv_index, temperature, heat_index.heat_index_c, config
    )

    time_warnings: tuple[str, ...] = ()
    time_recommendations: tuple[str, ...] = ()
    if time_of_day in PEAK_EXPOSURE_TIMES:
        time_warnings = ("Peak heat and UV exposure period",)
        time_recommendations = ("Avoid outdoor activities between 10 AM - 4 PM",)

    return ExtremeHeatWarning(
        is_active=is_active,
        severity=severity,
        temperature_c=temperature,
        heat_index_c=heat_index.heat_index_c,
        uv_index=reading.uv_index,
        combined_risk=uv_heat.combined_risk,
        warnings=heat_index.warnings + uv_heat.warnings + time_warnings,
        recommendations=heat_index.recommendations
        + uv_heat.recommendations
        + time_recommendations,
        time_of_day=time_of_day,
    )
