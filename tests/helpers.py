"""
Shared helper functions for wayfarer tests.

These functions can be imported by test modules for schedule analysis and
for building fixed heat warnings.
"""

from wayfarer.types import ExtremeHeatWarning


def time_diff_hours(earlier: int, later: int) -> float:
    """
    Hours from one minute-of-day value to another, across midnight.

    Returns the signed shortest difference, e.g. 23:00 -> 01:00 is +2.
    """
    diff = later - earlier
    if diff < -12 * 60:
        diff += 24 * 60
    elif diff > 12 * 60:
        diff -= 24 * 60
    return diff / 60


def make_heat_warning(severity: str = "high", is_active: bool = True) -> ExtremeHeatWarning:
    """Build a heat warning with fixed text for activity tests."""
    return ExtremeHeatWarning(
        is_active=is_active,
        severity=severity,
        temperature_c=38.0,
        heat_index_c=40,
        uv_index=7.0,
        combined_risk="high",
        warnings=("Heat warning text",),
        recommendations=("Heat recommendation text",),
        time_of_day="midday",
    )
