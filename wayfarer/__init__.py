"""
Wayfarer Travel Health Engines

Deterministic computations behind the travel health screens:
- Circadian realignment: timezone shift -> daily sleep and light plan
- Environmental exposure: weather, UV, AQI, heat -> graded safety advice

Every function is pure and synchronous; results are frozen records.
"""

from .circadian import generate_jet_lag_plan
from .environment import (
    calculate_heat_index,
    calculate_hydration_recommendation,
    generate_activity_safety,
    generate_extreme_heat_warning,
)
from .errors import InvalidInput, UnknownTimeZone, WayfarerError
from .types import (
    EnvironmentalReading,
    ExtremeHeatWarning,
    HeatIndexData,
    HydrationRecommendation,
    JetLagPlan,
    RiskAssessment,
)

__all__ = [
    # Errors
    "WayfarerError",
    "UnknownTimeZone",
    "InvalidInput",
    # Types
    "EnvironmentalReading",
    "JetLagPlan",
    "HeatIndexData",
    "ExtremeHeatWarning",
    "RiskAssessment",
    "HydrationRecommendation",
    # Engines
    "generate_jet_lag_plan",
    "calculate_heat_index",
    "generate_extreme_heat_warning",
    "generate_activity_safety",
    "calculate_hydration_recommendation",
]
