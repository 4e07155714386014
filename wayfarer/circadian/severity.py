"""Jet lag severity tiers from the absolute timezone difference."""

from ..config import DEFAULT_JET_LAG_CONFIG, JetLagConfig
from ..numeric import require_finite
from ..types import JetLagSeverity


def classify_jet_lag_severity(
    difference_hours: float, config: JetLagConfig = DEFAULT_JET_LAG_CONFIG
) -> JetLagSeverity:
    """
    Classify jet lag severity from the timezone difference.

    Boundaries belong to the lower tier: exactly 2h is minimal, 2.01h is mild.

    Args:
        difference_hours: Signed hour difference (sign is ignored)
        config: Severity breakpoints

    Returns:
        "minimal" (<=2h), "mild" (<=4h), "moderate" (<=8h), or "severe"
    """
    abs_difference = abs(require_finite("difference_hours", difference_hours))

    if abs_difference <= config.minimal_max_hours:
        return "minimal"
    elif abs_difference <= config.mild_max_hours:
        return "mild"
    elif abs_difference <= config.moderate_max_hours:
        return "moderate"
    else:
        return "severe"
