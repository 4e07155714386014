"""
Combined UV and heat risk.

Additive point score: UV index and heat index (°C) each contribute 0-4
points, and the sum is banded into low / moderate / high / severe.
"""

from ..config import DEFAULT_HEAT_CONFIG, HeatConfig
from ..numeric import require_finite, require_non_negative
from ..types import RiskLevel, UVHeatCombination

TIER_ORDER: tuple[RiskLevel, ...] = ("severe", "high", "moderate", "low")

TIER_WARNINGS: dict[RiskLevel, tuple[str, ...]] = {
    "severe": ("DANGEROUS: Extreme heat and UV combination",),
    "high": ("High risk: Strong heat and UV exposure",),
}

TIER_RECOMMENDATIONS: dict[RiskLevel, tuple[str, ...]] = {
    "severe": (
        "Stay indoors with air conditioning",
        "If outdoors: wear wide-brimmed hat, sunglasses, light clothing",
        "Apply SPF 30+ sunscreen every 30 minutes",
        "Drink water every 15-20 minutes",
    ),
    "high": (
        "Limit outdoor time to early morning or evening",
        "Wear protective clothing and SPF 30+ sunscreen",
        "Seek shade frequently",
        "Drink water every 30 minutes",
    ),
    "moderate": (
        "Wear sunscreen SPF 15+ and light clothing",
        "Take breaks in shade",
        "Stay hydrated",
    ),
}


def uv_points(uv_index: float) -> int:
    """0 (<3), 1 (3-5), 2 (6-7), 3 (8-10), 4 (11+)."""
    if uv_index >= 11:
        return 4
    elif uv_index >= 8:
        return 3
    elif uv_index >= 6:
        return 2
    elif uv_index >= 3:
        return 1
    return 0


def heat_points(heat_index_c: float) -> int:
    """0 (<30), 1 (30-34), 2 (35-39), 3 (40-44), 4 (45+)."""
    if heat_index_c >= 45:
        return 4
    elif heat_index_c >= 40:
        return 3
    elif heat_index_c >= 35:
        return 2
    elif heat_index_c >= 30:
        return 1
    return 0


def calculate_uv_heat_combination(
    uv_index: float,
    temperature_c: float,
    heat_index_c: float,
    config: HeatConfig = DEFAULT_HEAT_CONFIG,
) -> UVHeatCombination:
    """
    Score the combined UV and heat exposure.

    Args:
        uv_index: UV index (0-11+)
        temperature_c: Air temperature, carried through for display
        heat_index_c: Heat index in °C (drives the heat points)
        config: Combined score breakpoints

    Returns:
        UVHeatCombination with tier-specific warnings and recommendations
    """
    require_non_negative("uv_index", uv_index)
    require_finite("temperature_c", temperature_c)
    require_finite("heat_index_c", heat_index_c)

    score = uv_points(uv_index) + heat_points(heat_index_c)

    combined_risk: RiskLevel
    if score >= config.uv_heat_severe:
        combined_risk = "severe"
    elif score >= config.uv_heat_high:
        combined_risk = "high"
    elif score >= config.uv_heat_moderate:
        combined_risk = "moderate"
    else:
        combined_risk = "low"

    # Tier text accumulates: a severe rating also carries the high and moderate blocks
    warnings: list[str] = []
    recommendations: list[str] = []
    for tier in TIER_ORDER[TIER_ORDER.index(combined_risk):]:
        warnings.extend(TIER_WARNINGS.get(tier, ()))
        recommendations.extend(TIER_RECOMMENDATIONS.get(tier, ()))

    return UVHeatCombination(
        combined_risk=combined_risk,
        score=score,
        uv_index=uv_index,
        temperature_c=temperature_c,
        heat_index_c=heat_index_c,
        warnings=tuple(warnings),
        recommendations=tuple(recommendations),
    )
