"""
Gradual sleep schedule adjustment.

Shifts bedtime and wake time by at most ``max_daily_adjustment`` hours per
day (1.5h by default) until the full timezone difference is absorbed.

- Eastward (positive difference): advance, both times move earlier
- Westward (negative difference): delay, both times move later

Each day's clock shift is the running cumulative total, so the final
(partial) day lands exactly on the full difference instead of repeating a
smaller remainder times the day number.
"""

import math

from ..config import DEFAULT_JET_LAG_CONFIG, JetLagConfig
from ..numeric import require_finite
from ..types import SleepAdjustmentDay, SleepScheduleAdjustment, TravelDirection
from .time_math import normalize_minutes, parse_time, shift_minutes

DEFAULT_BEDTIME = "22:00"
DEFAULT_WAKE_TIME = "07:00"


def travel_direction(difference_hours: float) -> TravelDirection:
    """Eastward iff the destination is ahead of the origin."""
    return "eastward" if difference_hours > 0 else "westward"


def days_to_adjust(
    difference_hours: float, config: JetLagConfig = DEFAULT_JET_LAG_CONFIG
) -> int:
    """Days needed at the capped daily rate: ceil(|difference| / max_daily)."""
    require_finite("difference_hours", difference_hours)
    return math.ceil(abs(difference_hours) / config.max_daily_adjustment)


class SleepScheduleAdjustmentPlanner:
    """
    Plan a bounded day-by-day sleep shift for a timezone change.

    Times are minute-of-day values; inputs may be given as "HH:MM" strings
    or as minutes.
    """

    def __init__(
        self,
        difference_hours: float,
        bedtime: str | int = DEFAULT_BEDTIME,
        wake_time: str | int = DEFAULT_WAKE_TIME,
        config: JetLagConfig = DEFAULT_JET_LAG_CONFIG,
    ):
        """
        Initialize planner.

        Args:
            difference_hours: Signed difference, positive = eastward
            bedtime: Current habitual bedtime
            wake_time: Current habitual wake time
            config: Daily cap and related thresholds
        """
        self.difference_hours = require_finite("difference_hours", difference_hours)
        self.total_shift = abs(difference_hours)
        self.direction = travel_direction(difference_hours)
        self.config = config
        self._bedtime = _to_minutes(bedtime)
        self._wake_time = _to_minutes(wake_time)

    @property
    def max_daily_adjustment(self) -> float:
        return self.config.max_daily_adjustment

    @property
    def days_to_adjust(self) -> int:
        return days_to_adjust(self.difference_hours, self.config)

    def cumulative_shift_at_day(self, day_index: int) -> float:
        """Unsigned hours shifted by the end of ``day_index`` (1-based)."""
        return min(day_index * self.max_daily_adjustment, self.total_shift)

    def generate_daily_schedule(self) -> tuple[SleepAdjustmentDay, ...]:
        """
        Generate target bedtime/wake time for each adjustment day.

        Returns:
            One SleepAdjustmentDay per day, 1..days_to_adjust
        """
        # Advance = earlier clock, delay = later clock
        clock_sign = -1 if self.direction == "eastward" else 1
        advance_sign = -clock_sign

        schedule = []
        previous = 0.0
        for day_index in range(1, self.days_to_adjust + 1):
            cumulative = self.cumulative_shift_at_day(day_index)
            schedule.append(
                SleepAdjustmentDay(
                    day_index=day_index,
                    bedtime=shift_minutes(self._bedtime, clock_sign * cumulative),
                    wake_time=shift_minutes(self._wake_time, clock_sign * cumulative),
                    daily_adjustment_hours=round(cumulative - previous, 4),
                    cumulative_adjustment_hours=advance_sign * cumulative,
                )
            )
            previous = cumulative

        return tuple(schedule)

    def generate_recommendations(self) -> tuple[str, ...]:
        """Preparation advice for the sleep shift."""
        recommendations = [
            f"Start adjusting {self.days_to_adjust} days before travel",
            "Maintain consistent meal times with your new schedule",
            "Stay hydrated but avoid caffeine 6 hours before new bedtime",
            "Create a relaxing bedtime routine in your new schedule",
        ]

        if self.direction == "eastward":
            recommendations.append("Consider melatonin 30 minutes before new bedtime")
            recommendations.append("Expose yourself to bright light early in the morning")
        else:
            recommendations.append("Avoid bright light in the evening")
            recommendations.append("Stay active later in the day to delay sleep")

        return tuple(recommendations)

    def build(self) -> SleepScheduleAdjustment:
        """Assemble the complete sleep adjustment plan."""
        if self.direction == "eastward":
            strategy = "Advance bedtime gradually each day before travel"
        else:
            strategy = "Delay bedtime gradually each day before travel"

        return SleepScheduleAdjustment(
            total_difference_hours=self.difference_hours,
            direction=self.direction,
            days_to_adjust=self.days_to_adjust,
            max_daily_adjustment=self.max_daily_adjustment,
            daily_schedule=self.generate_daily_schedule(),
            strategy=strategy,
            recommendations=self.generate_recommendations(),
        )


def _to_minutes(value: str | int) -> int:
    if isinstance(value, str):
        return parse_time(value)
    return normalize_minutes(int(require_finite("time", value)))
