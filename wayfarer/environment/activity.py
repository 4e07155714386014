"""
Outdoor activity safety.

Three independently scored factors are summed into one decision:

- Weather: temperature, humidity, wind, UV, and visibility bands
- Air quality: 0-500 AQI bands (see air_quality)
- Heat warning: extreme 5, high 3, moderate 2, none 0

Total >= 10 severe, >= 7 high, >= 4 moderate, else low. Severe and high
mean avoid, moderate means caution, low means safe.
"""

from ..config import DEFAULT_ACTIVITY_RISK_CONFIG, ActivityRiskConfig
from ..numeric import require_choice
from ..types import (
    ACTIVITY_TYPES,
    ActivityType,
    EnvironmentalReading,
    ExtremeHeatWarning,
    FactorScore,
    OutdoorSafety,
    RiskAssessment,
    RiskLevel,
)
from .air_quality import (
    MODERATE_AQI_MAX,
    UNHEALTHY_AQI_MAX,
    UNHEALTHY_SENSITIVE_AQI_MAX,
    assess_air_quality,
)

HEAT_WARNING_SCORES = {
    "extreme": 5,
    "high": 3,
    "moderate": 2,
}

HEAT_WARNING_DESCRIPTIONS = {
    "extreme": "Extreme heat warning - dangerous conditions",
    "high": "High heat warning - exercise caution",
    "moderate": "Moderate heat warning - take precautions",
}

SAFETY_RECOMMENDATIONS: dict[OutdoorSafety, tuple[str, ...]] = {
    "safe": (
        "Outdoor activities are generally safe",
        "Stay hydrated and apply sunscreen",
    ),
    "caution": (
        "Exercise caution during outdoor activities",
        "Take frequent breaks and stay hydrated",
        "Monitor your body for signs of distress",
    ),
    "avoid": (
        "Avoid prolonged outdoor activities",
        "Consider indoor alternatives",
        "If outdoors is necessary, limit exposure time",
    ),
}

RISK_WARNINGS: dict[RiskLevel, str] = {
    "severe": "DANGER: Severe health risk for outdoor activities",
    "high": "HIGH RISK: Outdoor exercise not recommended",
    "moderate": "CAUTION: Monitor your health during outdoor activities",
}


def assess_weather(reading: EnvironmentalReading) -> FactorScore:
    """Score weather conditions; each band adds points and a factor label."""
    score = 0
    factors: list[str] = []

    temperature = reading.temperature_c
    if temperature > 40:
        score += 4
        factors.append("extreme heat")
    elif temperature > 35:
        score += 3
        factors.append("very hot")
    elif temperature > 30:
        score += 2
        factors.append("hot weather")
    elif temperature < 0:
        score += 2
        factors.append("freezing conditions")

    if reading.humidity_pct > 85:
        score += 2
        factors.append("very high humidity")
    elif reading.humidity_pct < 20:
        score += 1
        factors.append("very dry air")

    if reading.wind_speed_ms > 20:
        score += 2
        factors.append("strong winds")
    elif reading.wind_speed_ms > 15:
        score += 1
        factors.append("moderate winds")

    if reading.uv_index >= 11:
        score += 3
        factors.append("extreme UV")
    elif reading.uv_index >= 8:
        score += 2
        factors.append("very high UV")
    elif reading.uv_index >= 6:
        score += 1
        factors.append("high UV")

    if reading.visibility_m < 1000:
        score += 3
        factors.append("poor visibility")
    elif reading.visibility_m < 5000:
        score += 1
        factors.append("reduced visibility")

    if factors:
        description = f"Weather concerns: {', '.join(factors)}"
    else:
        description = "Weather conditions are favorable"
    return FactorScore(score=score, description=description)


def assess_heat_warning(heat_warning: ExtremeHeatWarning | None) -> FactorScore:
    if heat_warning is None or not heat_warning.is_active:
        return FactorScore(score=0, description="No heat warnings")
    return FactorScore(
        score=HEAT_WARNING_SCORES[heat_warning.severity],
        description=HEAT_WARNING_DESCRIPTIONS[heat_warning.severity],
    )


def classify_combined_risk(
    total_score: int, config: ActivityRiskConfig = DEFAULT_ACTIVITY_RISK_CONFIG
) -> RiskLevel:
    if total_score >= config.severe_min_score:
        return "severe"
    if total_score >= config.high_min_score:
        return "high"
    if total_score >= config.moderate_min_score:
        return "moderate"
    return "low"


def determine_outdoor_safety(combined_risk: RiskLevel) -> OutdoorSafety:
    if combined_risk in ("severe", "high"):
        return "avoid"
    if combined_risk == "moderate":
        return "caution"
    return "safe"


def _active(heat_warning: ExtremeHeatWarning | None) -> bool:
    return heat_warning is not None and heat_warning.is_active


def generate_activity_recommendations(
    reading: EnvironmentalReading,
    heat_warning: ExtremeHeatWarning | None,
    combined_risk: RiskLevel,
    outdoor_safety: OutdoorSafety,
) -> tuple[str, ...]:
    """
    Assemble recommendations in a fixed order: safety tier, weather,
    air quality, active heat warning, then exercise intensity.
    """
    recommendations = list(SAFETY_RECOMMENDATIONS[outdoor_safety])

    if reading.temperature_c > 35:
        recommendations.append("Seek air-conditioned environments")
        recommendations.append("Wear lightweight, light-colored clothing")
    elif reading.temperature_c > 30:
        recommendations.append("Schedule activities for cooler parts of the day")
        recommendations.append("Wear breathable clothing and a hat")

    if reading.humidity_pct > 80:
        recommendations.append("Allow extra time for cooling down")
        recommendations.append("Be aware that sweating may be less effective")

    if reading.aqi is not None and reading.aqi > MODERATE_AQI_MAX:
        recommendations.append("Wear an N95 mask if outdoors")
        recommendations.append("Avoid strenuous outdoor exercise")
        recommendations.append("Keep windows closed and use air purifiers indoors")

    if _active(heat_warning):
        recommendations.extend(heat_warning.recommendations)

    if combined_risk == "low":
        recommendations.append("Running, cycling, and sports are appropriate")
        recommendations.append("Consider extending outdoor workout duration")
    elif combined_risk == "moderate":
        recommendations.append("Light to moderate exercise is acceptable")
        recommendations.append("Reduce intensity and duration of workouts")
    else:
        recommendations.append("Stick to gentle activities like walking")
        recommendations.append("Consider yoga or stretching indoors")

    return tuple(recommendations)


def generate_activity_warnings(
    reading: EnvironmentalReading,
    heat_warning: ExtremeHeatWarning | None,
    combined_risk: RiskLevel,
) -> tuple[str, ...]:
    warnings: list[str] = []

    if combined_risk in RISK_WARNINGS:
        warnings.append(RISK_WARNINGS[combined_risk])

    if reading.temperature_c > 40:
        warnings.append("Extreme heat - heat stroke risk")
    elif reading.temperature_c > 35:
        warnings.append("Very hot conditions - heat exhaustion possible")

    if reading.aqi is not None:
        if reading.aqi > UNHEALTHY_AQI_MAX:
            warnings.append("Very unhealthy air quality - respiratory distress possible")
        elif reading.aqi > UNHEALTHY_SENSITIVE_AQI_MAX:
            warnings.append("Unhealthy air quality - breathing difficulties may occur")

    if _active(heat_warning):
        warnings.extend(heat_warning.warnings)

    return tuple(warnings)


def determine_best_activity_times(
    reading: EnvironmentalReading, heat_warning: ExtremeHeatWarning | None
) -> tuple[str, ...]:
    """
    Suggest outdoor time windows from temperature and UV bands.

    These are fixed clock windows, not solar calculations.
    """
    if heat_warning is not None and heat_warning.severity == "extreme":
        return (
            "Early morning (before 7 AM) if absolutely necessary",
            "Late evening (after 8 PM) with caution",
        )

    temperature = reading.temperature_c
    uv_index = reading.uv_index
    best_times: list[str] = []

    if temperature > 30:
        best_times.append("Early morning (6-8 AM)")
        best_times.append("Late evening (after 7 PM)")
        if temperature < 35:
            best_times.append("Early evening (6-7 PM) with precautions")
    else:
        best_times.append("Morning (7-10 AM)")
        best_times.append("Late afternoon (4-6 PM)")
        best_times.append("Early evening (6-8 PM)")

    if uv_index >= 8:
        best_times.append("Avoid midday sun (10 AM - 4 PM)")
    elif uv_index >= 6:
        best_times.append("Limit midday exposure (11 AM - 3 PM)")

    if temperature <= 25 and uv_index < 6:
        best_times.append("Most daylight hours are suitable")

    return tuple(best_times)


def generate_activity_safety(
    reading: EnvironmentalReading,
    heat_warning: ExtremeHeatWarning | None = None,
    config: ActivityRiskConfig = DEFAULT_ACTIVITY_RISK_CONFIG,
) -> RiskAssessment:
    """
    Assess outdoor activity safety for a reading.

    Args:
        reading: Weather, UV, and 0-500 AQI values
        heat_warning: Extreme heat warning, if one has been generated
        config: Combined risk breakpoints

    Returns:
        RiskAssessment with safety tier, text, and best time windows
    """
    weather = assess_weather(reading)
    air_quality = assess_air_quality(reading.aqi, config.missing_aqi_score)
    heat = assess_heat_warning(heat_warning)

    total_score = weather.score + air_quality.score + heat.score
    combined_risk = classify_combined_risk(total_score, config)
    outdoor_safety = determine_outdoor_safety(combined_risk)

    return RiskAssessment(
        outdoor_safety=outdoor_safety,
        combined_risk=combined_risk,
        total_score=total_score,
        recommendations=generate_activity_recommendations(
            reading, heat_warning, combined_risk, outdoor_safety
        ),
        warnings=generate_activity_warnings(reading, heat_warning, combined_risk),
        best_time_windows=determine_best_activity_times(reading, heat_warning),
        weather_impact=weather.description,
        air_quality_impact=air_quality.description,
    )


ACTIVITY_ADVICE: dict[ActivityType, tuple[tuple[str, ...], tuple[str, ...]]] = {
    # activity: (when outdoor safety is "avoid", otherwise)
    "running": (
        ("Consider treadmill running indoors",),
        ("Run at a conversational pace", "Carry water for runs longer than 30 minutes"),
    ),
    "cycling": (
        ("Use indoor bike trainer or stationary bike",),
        ("Wear a helmet and protective gear", "Be extra cautious of visibility in poor air quality"),
    ),
    "hiking": (
        ("Postpone hiking plans",),
        ("Inform someone of your hiking plans", "Carry extra water and emergency supplies"),
    ),
    "sports": (
        ("Move sports activities indoors if possible",),
        ("Take frequent water breaks", "Watch teammates for signs of heat exhaustion"),
    ),
}


def get_activity_specific_recommendations(
    activity: ActivityType, assessment: RiskAssessment
) -> tuple[str, ...]:
    """Extend an assessment's recommendations with sport-specific advice."""
    require_choice("activity", activity, ACTIVITY_TYPES)
    recommendations = list(assessment.recommendations)
    avoid = assessment.outdoor_safety == "avoid"

    if activity == "walking":
        recommendations.append("Walking is generally the safest outdoor activity")
        if avoid:
            recommendations.append("Limit walks to essential trips only")
    else:
        when_avoid, otherwise = ACTIVITY_ADVICE[activity]
        recommendations.extend(when_avoid if avoid else otherwise)

    return tuple(recommendations)
