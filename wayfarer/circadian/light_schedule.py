"""
Light exposure schedule for circadian realignment.

Windows are fixed clock-time bands keyed only by travel direction; they
are not derived from sunrise/sunset or from the day index.

- Eastward (advance): bright light early morning, avoid late evening light
- Westward (delay): later morning light, avoid early evening light
"""

from ..config import DEFAULT_JET_LAG_CONFIG, JetLagConfig
from ..types import LightExposureDay, LightExposureSchedule
from .sleep_planner import days_to_adjust, travel_direction

GENERAL_LIGHT_TIPS = (
    "Use bright light therapy lamp (10,000 lux) if natural sunlight unavailable",
    "Wear sunglasses during light avoidance periods",
    "Consider melatonin supplementation as directed by healthcare provider",
    "Maintain consistent meal times aligned with new schedule",
)

EASTWARD_NOTE = "Bright light exposure in early morning, avoid evening light"
WESTWARD_NOTE = "Later morning light exposure, extend evening light"


def generate_light_exposure_schedule(
    difference_hours: float, config: JetLagConfig = DEFAULT_JET_LAG_CONFIG
) -> LightExposureSchedule:
    """
    Generate one light seek/avoid entry per adjustment day.

    Args:
        difference_hours: Signed difference, positive = eastward
        config: Window bands, session duration, and daily cap

    Returns:
        LightExposureSchedule with the same day count as the sleep plan
    """
    direction = travel_direction(difference_hours)
    total_days = days_to_adjust(difference_hours, config)

    if direction == "eastward":
        morning = config.eastward_morning_light
        evening = config.eastward_evening_avoidance
        note = EASTWARD_NOTE
        strategy = "Advance circadian rhythm with early bright light"
    else:
        morning = config.westward_morning_light
        evening = config.westward_evening_avoidance
        note = WESTWARD_NOTE
        strategy = "Delay circadian rhythm with later light exposure"

    days = tuple(
        LightExposureDay(
            day_index=day_index,
            morning_light_window=morning,
            evening_avoidance_window=evening,
            duration_minutes=config.light_duration_minutes,
            note=note,
        )
        for day_index in range(1, total_days + 1)
    )

    return LightExposureSchedule(
        direction=direction,
        strategy=strategy,
        days=days,
        general_tips=GENERAL_LIGHT_TIPS,
    )
