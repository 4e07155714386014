"""
Tool entry points for callers that speak plain dicts.

Provides five tools:
1. jet_lag_plan - Full circadian realignment plan for a trip
2. heat_index - Heat index and danger tier
3. extreme_heat_warning - Heat warning with UV/heat combination
4. activity_safety - Outdoor activity safety (heat warning derived from the reading)
5. hydration - Intake targets, dehydration risk, water-source advice

Readings may carry either ``aqi`` (0-500) or ``aqi_category`` (1-5); the
category is converted here, at ingestion.
"""

import logging
from dataclasses import asdict
from datetime import datetime
from typing import Any

from .circadian.plan import generate_jet_lag_plan
from .environment.activity import (
    generate_activity_safety,
    get_activity_specific_recommendations,
)
from .environment.heat_index import calculate_heat_index, generate_extreme_heat_warning
from .environment.hydration import (
    calculate_hydration_recommendation,
    generate_water_source_recommendations,
)
from .errors import InvalidInput
from .types import EnvironmentalReading

logger = logging.getLogger(__name__)

READING_FIELDS = (
    "temperature_c",
    "humidity_pct",
    "wind_speed_ms",
    "visibility_m",
    "cloud_cover_pct",
    "uv_index",
    "aqi",
)


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO 8601 string, accepting a trailing "Z" for UTC."""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError) as exc:
        raise InvalidInput("reference_datetime", value, "expected ISO 8601") from exc


def reading_from_dict(data: dict[str, Any]) -> EnvironmentalReading:
    """Build an EnvironmentalReading, converting a 1-5 AQI category if given."""
    reading = EnvironmentalReading(**{k: data[k] for k in READING_FIELDS if k in data})
    if "aqi_category" in data:
        if "aqi" in data:
            raise InvalidInput(
                "aqi_category", data["aqi_category"], "give aqi or aqi_category, not both"
            )
        reading = reading.with_aqi_category(data["aqi_category"])
    return reading


def jet_lag_plan(
    origin_timezone: str,
    destination_timezone: str,
    reference_datetime: str | None = None,
    bedtime: str = "22:00",
    wake_time: str = "07:00",
    origin_location: str = "Home",
    destination_location: str = "Destination",
) -> dict[str, Any]:
    reference = parse_iso_datetime(reference_datetime) if reference_datetime else None
    plan = generate_jet_lag_plan(
        origin_timezone,
        destination_timezone,
        reference=reference,
        bedtime=bedtime,
        wake_time=wake_time,
        origin_location=origin_location,
        destination_location=destination_location,
    )
    return asdict(plan)


def heat_index(temperature_c: float, humidity_pct: float) -> dict[str, Any]:
    return asdict(calculate_heat_index(temperature_c, humidity_pct))


def extreme_heat_warning(reading: dict[str, Any], time_of_day: str = "midday") -> dict[str, Any]:
    return asdict(generate_extreme_heat_warning(reading_from_dict(reading), time_of_day))


def activity_safety(
    reading: dict[str, Any],
    time_of_day: str = "midday",
    activity: str | None = None,
) -> dict[str, Any]:
    """
    Assess outdoor safety, deriving the heat warning from the same reading.

    When ``activity`` is given, ``activity_recommendations`` adds
    sport-specific advice.
    """
    env = reading_from_dict(reading)
    warning = generate_extreme_heat_warning(env, time_of_day)
    assessment = generate_activity_safety(env, warning)

    result = asdict(assessment)
    result["heat_warning"] = asdict(warning)
    if activity is not None:
        result["activity_recommendations"] = list(
            get_activity_specific_recommendations(activity, assessment)
        )
    return result


def hydration(
    reading: dict[str, Any],
    altitude_m: float = 0,
    activity_level: str = "light",
    body_weight_kg: float = 70,
) -> dict[str, Any]:
    recommendation = calculate_hydration_recommendation(
        reading_from_dict(reading),
        altitude_m=altitude_m,
        activity_level=activity_level,
        body_weight_kg=body_weight_kg,
    )
    result = asdict(recommendation)
    result["water_sources"] = list(
        generate_water_source_recommendations(recommendation.dehydration_risk)
    )
    return result


TOOLS = {
    "jet_lag_plan": jet_lag_plan,
    "heat_index": heat_index,
    "extreme_heat_warning": extreme_heat_warning,
    "activity_safety": activity_safety,
    "hydration": hydration,
}


def invoke_tool(tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Router function for CLI/subprocess invocation."""
    if tool_name not in TOOLS:
        logger.warning("Rejected unknown tool %r", tool_name)
        raise ValueError(f"Unknown tool: {tool_name}")
    logger.debug("Invoking tool %s", tool_name)
    return TOOLS[tool_name](**arguments)
