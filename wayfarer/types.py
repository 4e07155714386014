"""
Data structures for the circadian and environmental engines.

All records are frozen and use tuples for sequences: every result is a
fresh value object owned by the caller.
"""

from dataclasses import dataclass, replace
from typing import Literal

from .numeric import require_finite, require_non_negative, require_range

# =============================================================================
# Circadian Types
# =============================================================================

JetLagSeverity = Literal["minimal", "mild", "moderate", "severe"]
TravelDirection = Literal["eastward", "westward"]


@dataclass(frozen=True)
class SleepAdjustmentDay:
    """Target bedtime and wake time for one adjustment day."""

    day_index: int  # 1-based
    bedtime: int  # Minutes since midnight, [0, 1440)
    wake_time: int  # Minutes since midnight, [0, 1440)
    daily_adjustment_hours: float  # This day's increment (unsigned)
    cumulative_adjustment_hours: float  # Positive = advance (east), negative = delay (west)

    @property
    def bedtime_display(self) -> str:
        return f"{self.bedtime // 60:02d}:{self.bedtime % 60:02d}"

    @property
    def wake_time_display(self) -> str:
        return f"{self.wake_time // 60:02d}:{self.wake_time % 60:02d}"


@dataclass(frozen=True)
class SleepScheduleAdjustment:
    """Full sleep-shift plan produced by SleepScheduleAdjustmentPlanner."""

    total_difference_hours: float
    direction: TravelDirection
    days_to_adjust: int
    max_daily_adjustment: float
    daily_schedule: tuple[SleepAdjustmentDay, ...]
    strategy: str
    recommendations: tuple[str, ...]


@dataclass(frozen=True)
class LightExposureDay:
    """Light seek/avoid bands for one adjustment day."""

    day_index: int
    morning_light_window: str  # "HH:MM-HH:MM"
    evening_avoidance_window: str  # "HH:MM-HH:MM"
    duration_minutes: int
    note: str


@dataclass(frozen=True)
class LightExposureSchedule:
    direction: TravelDirection
    strategy: str
    days: tuple[LightExposureDay, ...]
    general_tips: tuple[str, ...]


@dataclass(frozen=True)
class DestinationTime:
    """Wall clock at the destination for the reference instant."""

    time: str  # "HH:MM:SS"
    date: str  # "Monday, January 15, 2026"
    timezone: str


@dataclass(frozen=True)
class JetLagPlan:
    """Complete jet lag plan returned to the presentation layer."""

    origin_zone: str
    dest_zone: str
    origin_location: str
    destination_location: str
    difference_hours: int  # dest - origin, positive = eastward
    severity: JetLagSeverity
    direction: TravelDirection
    days_to_adjust: int
    estimated_recovery_days: int
    daily_schedule: tuple[SleepAdjustmentDay, ...]
    light_schedule: tuple[LightExposureDay, ...]
    sleep_strategy: str
    sleep_recommendations: tuple[str, ...]
    light_strategy: str
    light_tips: tuple[str, ...]
    destination_time: DestinationTime
    recommendations: tuple[str, ...]


# =============================================================================
# Environmental Types
# =============================================================================

RiskLevel = Literal["low", "moderate", "high", "severe"]
OutdoorSafety = Literal["safe", "caution", "avoid"]
HeatDangerLevel = Literal["safe", "caution", "extreme_caution", "danger", "extreme_danger"]
HeatWarningSeverity = Literal["moderate", "high", "extreme"]
TimeOfDay = Literal["morning", "midday", "afternoon", "evening"]
ActivityLevel = Literal["sedentary", "light", "moderate", "intense"]
ActivityType = Literal["running", "cycling", "hiking", "sports", "walking"]

TIMES_OF_DAY: tuple[str, ...] = ("morning", "midday", "afternoon", "evening")
ACTIVITY_LEVELS: tuple[str, ...] = ("sedentary", "light", "moderate", "intense")
ACTIVITY_TYPES: tuple[str, ...] = ("running", "cycling", "hiking", "sports", "walking")
RISK_LEVELS: tuple[str, ...] = ("low", "moderate", "high", "severe")


@dataclass(frozen=True)
class EnvironmentalReading:
    """
    Already-resolved weather, UV, and air quality values.

    AQI is on the 0-500 EPA-style scale; readings on the 1-5 category scale
    must be converted with ``with_aqi_category`` at ingestion. ``aqi=None``
    means no air quality data is available.
    """

    temperature_c: float
    humidity_pct: float
    wind_speed_ms: float = 0.0
    visibility_m: float = 10000.0
    cloud_cover_pct: float = 0.0
    uv_index: float = 5.0  # Moderate UV when unknown
    aqi: float | None = None

    def __post_init__(self):
        require_finite("temperature_c", self.temperature_c)
        require_range("humidity_pct", self.humidity_pct, 0, 100)
        require_non_negative("wind_speed_ms", self.wind_speed_ms)
        require_non_negative("visibility_m", self.visibility_m)
        require_range("cloud_cover_pct", self.cloud_cover_pct, 0, 100)
        require_non_negative("uv_index", self.uv_index)
        if self.aqi is not None:
            require_range("aqi", self.aqi, 0, 500)

    def with_aqi_category(self, category: int) -> "EnvironmentalReading":
        """Return a copy with AQI converted from the 1-5 category scale."""
        from .environment.air_quality import category_to_aqi

        return replace(self, aqi=category_to_aqi(category))


@dataclass(frozen=True)
class HeatIndexData:
    heat_index_c: int
    heat_index_f: int
    danger_level: HeatDangerLevel
    warnings: tuple[str, ...]
    recommendations: tuple[str, ...]


@dataclass(frozen=True)
class UVHeatCombination:
    combined_risk: RiskLevel
    score: int
    uv_index: float
    temperature_c: float
    heat_index_c: float
    warnings: tuple[str, ...]
    recommendations: tuple[str, ...]


@dataclass(frozen=True)
class ExtremeHeatWarning:
    is_active: bool
    severity: HeatWarningSeverity
    temperature_c: float
    heat_index_c: int
    uv_index: float
    combined_risk: RiskLevel
    warnings: tuple[str, ...]
    recommendations: tuple[str, ...]
    time_of_day: TimeOfDay


@dataclass(frozen=True)
class FactorScore:
    """Points contributed by one risk factor plus a one-line description."""

    score: int
    description: str


@dataclass(frozen=True)
class RiskAssessment:
    """Outdoor activity safety decision (a.k.a. activity safety data)."""

    outdoor_safety: OutdoorSafety
    combined_risk: RiskLevel
    total_score: int
    recommendations: tuple[str, ...]
    warnings: tuple[str, ...]
    best_time_windows: tuple[str, ...]
    weather_impact: str
    air_quality_impact: str


ActivitySafetyData = RiskAssessment


@dataclass(frozen=True)
class HydrationAdjustments:
    """Per-factor additions to the base intake, in millilitres."""

    temperature_ml: float
    altitude_ml: float
    humidity_ml: float
    activity_ml: float

    @property
    def total_ml(self) -> float:
        return self.temperature_ml + self.altitude_ml + self.humidity_ml + self.activity_ml


@dataclass(frozen=True)
class HydrationRecommendation:
    daily_intake_liters: float
    hourly_intake_ml: int
    adjustments: HydrationAdjustments
    dehydration_risk: RiskLevel
    reminder_interval_minutes: int
    warnings: tuple[str, ...]
    recommendations: tuple[str, ...]
