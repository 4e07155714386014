"""
Circadian Realignment Layer.

Turns a timezone change into a day-by-day sleep and light plan.

Modules:
- time_math: Minute-of-day wraparound arithmetic
- timezones: UTC offsets and signed hour differences (pytz)
- severity: Jet lag severity tiers
- sleep_planner: Bounded daily sleep shift (1.5h/day cap)
- light_schedule: Fixed-band light seek/avoid windows
- plan: Full JetLagPlan assembly
"""

from .light_schedule import generate_light_exposure_schedule
from .plan import generate_jet_lag_plan, generate_jet_lag_recommendations
from .severity import classify_jet_lag_severity
from .sleep_planner import SleepScheduleAdjustmentPlanner, days_to_adjust, travel_direction
from .time_math import format_time, normalize_minutes, parse_time, shift_minutes
from .timezones import (
    calculate_timezone_difference,
    get_destination_time,
    get_timezone_offset_minutes,
)

__all__ = [
    "normalize_minutes",
    "parse_time",
    "format_time",
    "shift_minutes",
    "get_timezone_offset_minutes",
    "calculate_timezone_difference",
    "get_destination_time",
    "classify_jet_lag_severity",
    "SleepScheduleAdjustmentPlanner",
    "days_to_adjust",
    "travel_direction",
    "generate_light_exposure_schedule",
    "generate_jet_lag_plan",
    "generate_jet_lag_recommendations",
]
