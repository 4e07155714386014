"""
Air quality risk mapping.

The canonical scale is the 0-500 EPA-style AQI. Providers that report the
1-5 qualitative category are converted at ingestion using this table:

    category  label      AQI band   converted value
    1         Good       0-50       50
    2         Fair       51-100     100
    3         Moderate   101-150    150
    4         Poor       151-200    200
    5         Very Poor  201-500    300

The converted value is the band's upper bound (300 for the open-ended top
band), so a converted category always scores in its own band.
"""

from ..errors import InvalidInput
from ..numeric import require_range
from ..types import FactorScore, RiskLevel

GOOD_AQI_MAX = 50
MODERATE_AQI_MAX = 100
UNHEALTHY_SENSITIVE_AQI_MAX = 150
UNHEALTHY_AQI_MAX = 200
AQI_SCALE_MAX = 500

# (category, label, band upper bound, value used when converting a category)
AQI_CATEGORY_TABLE: tuple[tuple[int, str, int, int], ...] = (
    (1, "Good", GOOD_AQI_MAX, 50),
    (2, "Fair", MODERATE_AQI_MAX, 100),
    (3, "Moderate", UNHEALTHY_SENSITIVE_AQI_MAX, 150),
    (4, "Poor", UNHEALTHY_AQI_MAX, 200),
    (5, "Very Poor", AQI_SCALE_MAX, 300),
)

CATEGORY_RECOMMENDATIONS = {
    1: "Air quality is satisfactory, and air pollution poses little or no risk",
    2: "Air quality is acceptable for most people, though sensitive individuals may experience minor issues",
    3: "Members of sensitive groups may experience health effects. Limit prolonged outdoor exertion",
    4: "Everyone may begin to experience health effects. Avoid prolonged outdoor exertion",
    5: "Health alert: everyone may experience serious health effects. Avoid all outdoor exertion",
}

CATEGORY_RISK_LEVELS: dict[int, RiskLevel] = {
    1: "low",
    2: "low",
    3: "moderate",
    4: "high",
    5: "severe",
}

MISSING_AQI_DESCRIPTION = "Air quality data unavailable"


def category_to_aqi(category: int) -> int:
    """Convert a 1-5 AQI category to the canonical 0-500 scale."""
    if isinstance(category, bool):
        raise InvalidInput("aqi_category", category, "must be an integer from 1 to 5")
    for table_category, _label, _upper, value in AQI_CATEGORY_TABLE:
        if category == table_category:
            return value
    raise InvalidInput("aqi_category", category, "must be an integer from 1 to 5")


def aqi_to_category(aqi: float) -> int:
    """Convert a 0-500 AQI value to its 1-5 category."""
    require_range("aqi", aqi, 0, AQI_SCALE_MAX)
    for category, _label, upper, _value in AQI_CATEGORY_TABLE:
        if aqi <= upper:
            return category
    raise AssertionError("unreachable: AQI validated to 0-500")


def get_air_quality_status(aqi: float) -> str:
    """Qualitative label ("Good" ... "Very Poor") for a 0-500 AQI."""
    return AQI_CATEGORY_TABLE[aqi_to_category(aqi) - 1][1]


def get_air_quality_recommendation(aqi: float) -> str:
    return CATEGORY_RECOMMENDATIONS[aqi_to_category(aqi)]


def map_aqi_to_risk_level(aqi: float) -> RiskLevel:
    return CATEGORY_RISK_LEVELS[aqi_to_category(aqi)]


def assess_air_quality(aqi: float | None, missing_score: int = 1) -> FactorScore:
    """
    Score air quality for outdoor activity.

    Args:
        aqi: 0-500 AQI, or None when no reading is available
        missing_score: Points assigned when the reading is missing

    Returns:
        FactorScore: 0 (<=50), 1 (<=100), 3 (<=150), 4 (<=200), 5 (>200)
    """
    if aqi is None:
        return FactorScore(score=missing_score, description=MISSING_AQI_DESCRIPTION)

    require_range("aqi", aqi, 0, AQI_SCALE_MAX)

    if aqi <= GOOD_AQI_MAX:
        return FactorScore(0, "Good air quality")
    elif aqi <= MODERATE_AQI_MAX:
        return FactorScore(
            1,
            "Moderate air quality - sensitive individuals should limit prolonged outdoor exertion",
        )
    elif aqi <= UNHEALTHY_SENSITIVE_AQI_MAX:
        return FactorScore(3, "Unhealthy for sensitive groups - limit outdoor activities")
    elif aqi <= UNHEALTHY_AQI_MAX:
        return FactorScore(4, "Unhealthy air quality - avoid outdoor activities")
    return FactorScore(5, "Very unhealthy air quality - avoid all outdoor exposure")
