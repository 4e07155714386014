"""
Timezone offset and difference calculations.

Offsets are derived from the pytz database rather than a hand-kept rule
table: the instant's calendar fields are rendered in the target zone,
reinterpreted as UTC, and compared with the original instant. This picks
up DST transitions and non-hour offsets (Asia/Kolkata +5:30) for free.
"""

import logging
from datetime import datetime

import pytz

from ..errors import UnknownTimeZone
from ..numeric import round_half_away_from_zero
from ..types import DestinationTime

logger = logging.getLogger(__name__)


def _get_timezone(tz_name: str) -> pytz.BaseTzInfo:
    try:
        return pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError as exc:
        raise UnknownTimeZone(tz_name) from exc


def resolve_instant(instant: datetime | None) -> datetime:
    """Resolve the reference instant; None means now, naive means UTC."""
    if instant is None:
        return datetime.now(pytz.UTC)
    if instant.tzinfo is None:
        return pytz.UTC.localize(instant)
    return instant.astimezone(pytz.UTC)


def get_timezone_offset_minutes(tz_name: str, instant: datetime | None = None) -> int:
    """
    Get UTC offset in minutes for a timezone at a given instant.

    Args:
        tz_name: IANA timezone name (e.g., "America/New_York")
        instant: Reference instant (for DST); naive values are read as UTC,
            None means now

    Returns:
        Signed offset in minutes, positive east of UTC
        (e.g., -240 for EDT, +540 for JST, +330 for IST)

    Raises:
        UnknownTimeZone: If the zone name is not in the tz database
    """
    tz = _get_timezone(tz_name)
    reference = resolve_instant(instant).replace(microsecond=0)

    local = reference.astimezone(tz)
    fields_as_utc = datetime(
        local.year,
        local.month,
        local.day,
        local.hour,
        local.minute,
        local.second,
        tzinfo=pytz.UTC,
    )
    return int((fields_as_utc - reference).total_seconds() // 60)


def calculate_timezone_difference(
    origin_tz: str, dest_tz: str, reference: datetime | None = None
) -> int:
    """
    Calculate the signed hour difference between two timezones.

    Half-hour zones lose precision: the difference is rounded to the nearest
    whole hour (ties away from zero), so New York -> Kolkata in summer
    (+9.5h) becomes +10.

    Args:
        origin_tz: Origin IANA timezone
        dest_tz: Destination IANA timezone
        reference: Instant to evaluate offsets at (defaults to now)

    Returns:
        dest - origin in whole hours. Positive = eastward, negative = westward.
    """
    reference = resolve_instant(reference)
    origin_offset = get_timezone_offset_minutes(origin_tz, reference)
    dest_offset = get_timezone_offset_minutes(dest_tz, reference)

    difference_hours = (dest_offset - origin_offset) / 60
    rounded = round_half_away_from_zero(difference_hours)

    logger.debug(
        "Timezone difference %s (%+d min) -> %s (%+d min): %.2fh, rounded %+dh",
        origin_tz,
        origin_offset,
        dest_tz,
        dest_offset,
        difference_hours,
        rounded,
    )
    return rounded


def get_destination_time(tz_name: str, instant: datetime | None = None) -> DestinationTime:
    """Current wall clock and long-form date at the destination."""
    tz = _get_timezone(tz_name)
    local = resolve_instant(instant).astimezone(tz)
    return DestinationTime(
        time=local.strftime("%H:%M:%S"),
        date=f"{local.strftime('%A, %B')} {local.day}, {local.year}",
        timezone=tz_name,
    )
