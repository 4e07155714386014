"""
Jet lag plan assembly.

Combines the timezone difference, severity tier, sleep shift plan, light
schedule, and destination clock into a single JetLagPlan.
"""

import logging
from datetime import datetime

from ..config import DEFAULT_JET_LAG_CONFIG, JetLagConfig
from ..types import JetLagPlan, JetLagSeverity
from .light_schedule import generate_light_exposure_schedule
from .severity import classify_jet_lag_severity
from .sleep_planner import DEFAULT_BEDTIME, DEFAULT_WAKE_TIME, SleepScheduleAdjustmentPlanner
from .timezones import calculate_timezone_difference, get_destination_time, resolve_instant

logger = logging.getLogger(__name__)

BASE_RECOMMENDATIONS = (
    "Stay hydrated during travel",
    "Avoid alcohol and excessive caffeine",
    "Set your watch to destination time when boarding",
)

# Lead time grows with severity
SEVERITY_RECOMMENDATIONS: dict[JetLagSeverity, tuple[str, ...]] = {
    "minimal": (
        "Minimal adjustment needed - maintain regular sleep schedule",
    ),
    "mild": (
        "Start adjusting sleep schedule 1-2 days before travel",
        "Use natural light exposure to help adjustment",
    ),
    "moderate": (
        "Begin sleep schedule adjustment 3-4 days before travel",
        "Consider light therapy and melatonin supplementation",
        "Plan for 4-6 days of adjustment after arrival",
    ),
    "severe": (
        "Start preparation 5-7 days before travel",
        "Consult with healthcare provider about sleep aids",
        "Consider breaking journey with stopovers if possible",
        "Plan for 7-10 days of adjustment after arrival",
        "Avoid important meetings for first few days if possible",
    ),
}


def generate_jet_lag_recommendations(severity: JetLagSeverity) -> tuple[str, ...]:
    """Base travel advice followed by the severity tier's preparation advice."""
    return BASE_RECOMMENDATIONS + SEVERITY_RECOMMENDATIONS[severity]


def generate_jet_lag_plan(
    origin_tz: str,
    dest_tz: str,
    reference: datetime | None = None,
    bedtime: str | int = DEFAULT_BEDTIME,
    wake_time: str | int = DEFAULT_WAKE_TIME,
    origin_location: str = "Home",
    destination_location: str = "Destination",
    config: JetLagConfig = DEFAULT_JET_LAG_CONFIG,
) -> JetLagPlan:
    """
    Generate a complete jet lag plan for a trip.

    Args:
        origin_tz: Origin IANA timezone
        dest_tz: Destination IANA timezone
        reference: Instant used for offsets and destination clock (defaults to now)
        bedtime: Current habitual bedtime ("HH:MM" or minutes)
        wake_time: Current habitual wake time ("HH:MM" or minutes)
        origin_location: Display label for the origin
        destination_location: Display label for the destination
        config: Daily cap, severity breakpoints, light bands

    Returns:
        JetLagPlan

    Raises:
        UnknownTimeZone: If either zone cannot be resolved
        InvalidInput: If bedtime or wake time is malformed
    """
    # Resolve "now" once so offsets and destination clock agree
    reference = resolve_instant(reference)

    difference_hours = calculate_timezone_difference(origin_tz, dest_tz, reference)
    severity = classify_jet_lag_severity(difference_hours, config)
    sleep_plan = SleepScheduleAdjustmentPlanner(
        difference_hours, bedtime=bedtime, wake_time=wake_time, config=config
    ).build()
    light_plan = generate_light_exposure_schedule(difference_hours, config)

    logger.debug(
        "Jet lag plan %s -> %s: %+dh %s, %d days",
        origin_tz,
        dest_tz,
        difference_hours,
        severity,
        sleep_plan.days_to_adjust,
    )

    return JetLagPlan(
        origin_zone=origin_tz,
        dest_zone=dest_tz,
        origin_location=origin_location,
        destination_location=destination_location,
        difference_hours=difference_hours,
        severity=severity,
        direction=sleep_plan.direction,
        days_to_adjust=sleep_plan.days_to_adjust,
        estimated_recovery_days=abs(difference_hours),
        daily_schedule=sleep_plan.daily_schedule,
        light_schedule=light_plan.days,
        sleep_strategy=sleep_plan.strategy,
        sleep_recommendations=sleep_plan.recommendations,
        light_strategy=light_plan.strategy,
        light_tips=light_plan.general_tips,
        destination_time=get_destination_time(dest_tz, reference),
        recommendations=generate_jet_lag_recommendations(severity),
    )
