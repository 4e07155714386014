"""
Hydration requirements and dehydration risk.

Daily intake starts from 35 ml per kg of body weight and adds independent
adjustments for heat, altitude, humidity, and activity. Dehydration risk is
a separate point score that drives how often to drink.
"""

import math

from ..config import DEFAULT_HYDRATION_CONFIG, HydrationConfig
from ..numeric import (
    require_choice,
    require_finite,
    require_non_negative,
    round_half_away_from_zero,
)
from ..types import (
    ACTIVITY_LEVELS,
    RISK_LEVELS,
    ActivityLevel,
    EnvironmentalReading,
    HydrationAdjustments,
    HydrationRecommendation,
    RiskLevel,
)

ACTIVITY_ADJUSTMENT_ML: dict[ActivityLevel, float] = {
    "sedentary": 0,
    "light": 250,
    "moderate": 500,
    "intense": 1000,
}

ACTIVITY_RISK_POINTS: dict[ActivityLevel, int] = {
    "sedentary": 0,
    "light": 1,
    "moderate": 2,
    "intense": 3,
}

# Minutes between drink reminders
REMINDER_INTERVALS: dict[RiskLevel, int] = {
    "severe": 15,
    "high": 20,
    "moderate": 30,
}
LOW_RISK_HOT_INTERVAL = 45
LOW_RISK_INTERVAL = 60
LOW_RISK_HOT_THRESHOLD_C = 30

STRONG_WIND_MS = 15


def calculate_adjustments(
    reading: EnvironmentalReading,
    altitude_m: float,
    activity_level: ActivityLevel,
    config: HydrationConfig = DEFAULT_HYDRATION_CONFIG,
) -> HydrationAdjustments:
    """Per-factor intake additions in millilitres."""
    temperature = reading.temperature_c

    temperature_ml = 0.0
    if temperature > config.temperature_threshold_c:
        temperature_ml = (temperature - config.temperature_threshold_c) * config.ml_per_degree
    if temperature > config.extreme_heat_c:
        temperature_ml += config.extreme_heat_ml

    altitude_ml = 0.0
    if altitude_m > config.altitude_threshold_m:
        steps = math.floor((altitude_m - config.altitude_threshold_m) / config.altitude_step_m)
        altitude_ml = steps * config.ml_per_altitude_step

    # High humidity slows sweat evaporation; low humidity increases respiratory loss
    humidity_ml = 0.0
    if reading.humidity_pct > config.high_humidity_pct:
        humidity_ml = config.high_humidity_ml
    elif reading.humidity_pct < config.low_humidity_pct:
        humidity_ml = config.low_humidity_ml

    return HydrationAdjustments(
        temperature_ml=temperature_ml,
        altitude_ml=altitude_ml,
        humidity_ml=humidity_ml,
        activity_ml=ACTIVITY_ADJUSTMENT_ML[activity_level],
    )


def assess_dehydration_risk(
    reading: EnvironmentalReading,
    altitude_m: float,
    activity_level: ActivityLevel,
    config: HydrationConfig = DEFAULT_HYDRATION_CONFIG,
) -> RiskLevel:
    """
    Score dehydration risk from environment and activity.

    Points: temperature (>40: 4, >35: 3, >30: 2, >25: 1), humidity
    (<20: 3, <30: 2, >80: 1), altitude (>4000: 3, >3000: 2, >2000: 1),
    activity (intense 3, moderate 2, light 1), wind above 15 m/s (1).
    """
    require_non_negative("altitude_m", altitude_m)
    require_choice("activity_level", activity_level, ACTIVITY_LEVELS)

    score = 0

    temperature = reading.temperature_c
    if temperature > 40:
        score += 4
    elif temperature > 35:
        score += 3
    elif temperature > 30:
        score += 2
    elif temperature > 25:
        score += 1

    if reading.humidity_pct < 20:
        score += 3
    elif reading.humidity_pct < 30:
        score += 2
    elif reading.humidity_pct > 80:
        score += 1

    if altitude_m > 4000:
        score += 3
    elif altitude_m > 3000:
        score += 2
    elif altitude_m > 2000:
        score += 1

    score += ACTIVITY_RISK_POINTS[activity_level]

    if reading.wind_speed_ms > STRONG_WIND_MS:
        score += 1

    if score >= config.severe_min_score:
        return "severe"
    if score >= config.high_min_score:
        return "high"
    if score >= config.moderate_min_score:
        return "moderate"
    return "low"


def calculate_reminder_interval(dehydration_risk: RiskLevel, temperature_c: float) -> int:
    """Minutes between drink reminders for a risk tier."""
    require_finite("temperature_c", temperature_c)
    require_choice("dehydration_risk", dehydration_risk, RISK_LEVELS)
    if dehydration_risk in REMINDER_INTERVALS:
        return REMINDER_INTERVALS[dehydration_risk]
    if temperature_c > LOW_RISK_HOT_THRESHOLD_C:
        return LOW_RISK_HOT_INTERVAL
    return LOW_RISK_INTERVAL


def generate_hydration_guidance(
    reading: EnvironmentalReading,
    altitude_m: float,
    dehydration_risk: RiskLevel,
    daily_intake_liters: float,
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """
    Build hydration warnings and recommendations.

    Returns:
        (warnings, recommendations)
    """
    warnings: list[str] = []
    recommendations: list[str] = []

    if dehydration_risk == "severe":
        warnings.append("CRITICAL: Extreme dehydration risk")
        warnings.append("Heat exhaustion and heat stroke danger")
        recommendations.append("Drink water every 15 minutes")
        recommendations.append("Seek air-conditioned shelter immediately")
        recommendations.append("Monitor for dehydration symptoms")
    elif dehydration_risk == "high":
        warnings.append("HIGH RISK: Rapid dehydration possible")
        recommendations.append("Drink water every 20-30 minutes")
        recommendations.append("Avoid prolonged sun exposure")
        recommendations.append("Take frequent breaks in shade")
    elif dehydration_risk == "moderate":
        warnings.append("Increased dehydration risk")
        recommendations.append("Drink water every 30-45 minutes")
        recommendations.append("Monitor urine color for hydration status")
    else:
        recommendations.append("Maintain regular water intake")
        recommendations.append("Drink when thirsty")

    if reading.temperature_c > 35:
        warnings.append("Extreme heat detected")
        recommendations.append("Pre-hydrate before going outside")
        recommendations.append("Choose electrolyte drinks for extended exposure")
    elif reading.temperature_c > 30:
        recommendations.append("Increase water intake in hot weather")
        recommendations.append("Avoid alcohol and caffeine")

    if altitude_m > 3000:
        warnings.append("High altitude increases fluid loss")
        recommendations.append("Increase water intake by 1.5-2 liters daily")
        recommendations.append("Monitor for altitude sickness symptoms")
    elif altitude_m > 2000:
        recommendations.append("Moderate altitude requires extra hydration")
        recommendations.append("Drink water regularly throughout the day")

    if reading.humidity_pct < 30:
        recommendations.append("Dry air increases water loss through breathing")
        recommendations.append("Use a humidifier indoors if possible")
    elif reading.humidity_pct > 80:
        recommendations.append("High humidity reduces cooling efficiency")
        recommendations.append("Take extra breaks to cool down")

    recommendations.append(f"Target: {daily_intake_liters:.1f} liters daily")
    recommendations.append("Monitor urine color: pale yellow indicates good hydration")
    recommendations.append("Signs of dehydration: thirst, dry mouth, fatigue, dizziness")

    return tuple(warnings), tuple(recommendations)


def calculate_hydration_recommendation(
    reading: EnvironmentalReading,
    altitude_m: float = 0,
    activity_level: ActivityLevel = "light",
    body_weight_kg: float = 70,
    config: HydrationConfig = DEFAULT_HYDRATION_CONFIG,
) -> HydrationRecommendation:
    """
    Calculate personalized daily and hourly water intake.

    Args:
        reading: Temperature, humidity, and wind
        altitude_m: Altitude in metres (>= 0)
        activity_level: sedentary, light, moderate, or intense
        body_weight_kg: Body weight in kg (>= 0)
        config: Intake coefficients and risk breakpoints

    Returns:
        HydrationRecommendation

    Raises:
        InvalidInput: Negative weight or altitude, unknown activity level
    """
    require_non_negative("body_weight_kg", body_weight_kg)
    require_non_negative("altitude_m", altitude_m)
    require_choice("activity_level", activity_level, ACTIVITY_LEVELS)

    base_liters = body_weight_kg * config.ml_per_kg / 1000
    adjustments = calculate_adjustments(reading, altitude_m, activity_level, config)
    daily_intake_liters = round(base_liters + adjustments.total_ml / 1000, 3)

    hourly_intake_ml = round_half_away_from_zero(
        daily_intake_liters * 1000 / config.waking_hours
    )

    dehydration_risk = assess_dehydration_risk(reading, altitude_m, activity_level, config)
    warnings, recommendations = generate_hydration_guidance(
        reading, altitude_m, dehydration_risk, daily_intake_liters
    )

    return HydrationRecommendation(
        daily_intake_liters=daily_intake_liters,
        hourly_intake_ml=hourly_intake_ml,
        adjustments=adjustments,
        dehydration_risk=dehydration_risk,
        reminder_interval_minutes=calculate_reminder_interval(
            dehydration_risk, reading.temperature_c
        ),
        warnings=warnings,
        recommendations=recommendations,
    )


def generate_water_source_recommendations(dehydration_risk: RiskLevel) -> tuple[str, ...]:
    """Where to find water, more urgent at higher risk."""
    require_choice("dehydration_risk", dehydration_risk, RISK_LEVELS)
    recommendations = [
        "Look for water fountains in parks and public spaces",
        "Many restaurants will provide free water",
        "Carry a reusable water bottle",
    ]

    if dehydration_risk in ("high", "severe"):
        recommendations.insert(0, "Find water sources IMMEDIATELY")
        recommendations.append("Consider purchasing bottled water")
        recommendations.append("Ask locals about nearest water sources")

    if dehydration_risk in ("moderate", "high"):
        recommendations.append("Download offline maps with water fountain locations")
        recommendations.append("Hotels and visitor centers usually have water access")

    return tuple(recommendations)
