"""
Minute-of-day arithmetic.

All clock times are minutes since midnight normalized to [0, 1440), so
shifting a 22:00 bedtime 3 hours later lands on 01:00, not 25:00.
"""

from ..errors import InvalidInput
from ..numeric import require_finite, round_half_away_from_zero

MINUTES_PER_DAY = 24 * 60


def normalize_minutes(minutes: int) -> int:
    """Wrap minutes into [0, 1440) (handles negatives and multi-day offsets)."""
    return minutes % MINUTES_PER_DAY


def parse_time(time_str: str) -> int:
    """Parse "HH:MM" string to minutes since midnight."""
    parts = time_str.split(":") if isinstance(time_str, str) else []
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise InvalidInput("time", time_str, 'expected "HH:MM"')
    hour, minute = int(parts[0]), int(parts[1])
    if hour > 23 or minute > 59:
        raise InvalidInput("time", time_str, "hour must be 0-23 and minute 0-59")
    return hour * 60 + minute


def format_time(minutes: int) -> str:
    """Format minutes since midnight as "HH:MM" (wraps around midnight)."""
    minutes = normalize_minutes(minutes)
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def shift_minutes(base_minutes: int, hours: float) -> int:
    """
    Shift a clock time by a number of hours.

    Args:
        base_minutes: Starting time in minutes since midnight
        hours: Hours to shift (positive = later, negative = earlier)

    Returns:
        Shifted time in minutes since midnight (wraps around midnight)
    """
    require_finite("hours", hours)
    return normalize_minutes(base_minutes + round_half_away_from_zero(hours * 60))
