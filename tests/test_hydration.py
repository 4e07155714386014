"""Tests for hydration intake and dehydration risk."""

import pytest

from wayfarer.config import HydrationConfig
from wayfarer.environment.hydration import (
    assess_dehydration_risk,
    calculate_adjustments,
    calculate_hydration_recommendation,
    calculate_reminder_interval,
    generate_water_source_recommendations,
)
from wayfarer.errors import InvalidInput
from wayfarer.types import EnvironmentalReading


def reading(temperature_c: float = 20.0, humidity_pct: float = 50.0, **kwargs):
    return EnvironmentalReading(temperature_c=temperature_c, humidity_pct=humidity_pct, **kwargs)


class TestBaseline:
    """35 ml per kg with no adjustments."""

    def test_seventy_kg_sedentary(self) -> None:
        result = calculate_hydration_recommendation(reading(), activity_level="sedentary")
        assert result.daily_intake_liters == 2.45
        assert result.hourly_intake_ml == 153
        assert result.adjustments.total_ml == 0

    def test_default_activity_is_light(self) -> None:
        result = calculate_hydration_recommendation(reading())
        assert result.daily_intake_liters == 2.7
        assert "Target: 2.7 liters daily" in result.recommendations

    def test_scales_with_weight(self) -> None:
        result = calculate_hydration_recommendation(
            reading(), activity_level="sedentary", body_weight_kg=100
        )
        assert result.daily_intake_liters == 3.5

    def test_custom_ml_per_kg(self) -> None:
        result = calculate_hydration_recommendation(
            reading(), activity_level="sedentary", config=HydrationConfig(ml_per_kg=30)
        )
        assert result.daily_intake_liters == 2.1


class TestAdjustments:
    """Per-factor additions in millilitres."""

    def test_heat_above_threshold(self) -> None:
        assert calculate_adjustments(reading(30.0), 0, "sedentary").temperature_ml == 750

    def test_extreme_heat_bonus(self) -> None:
        """36°C: 11 degrees x 150 ml plus 500 ml."""
        assert calculate_adjustments(reading(36.0), 0, "sedentary").temperature_ml == 2150

    def test_altitude_steps(self) -> None:
        assert calculate_adjustments(reading(), 3000, "sedentary").altitude_ml == 200
        assert calculate_adjustments(reading(), 2400, "sedentary").altitude_ml == 0
        assert calculate_adjustments(reading(), 2000, "sedentary").altitude_ml == 0

    def test_humidity(self) -> None:
        assert calculate_adjustments(reading(humidity_pct=80.0), 0, "sedentary").humidity_ml == 200
        assert calculate_adjustments(reading(humidity_pct=20.0), 0, "sedentary").humidity_ml == 300
        assert calculate_adjustments(reading(humidity_pct=50.0), 0, "sedentary").humidity_ml == 0

    @pytest.mark.parametrize(
        "level, ml", [("sedentary", 0), ("light", 250), ("moderate", 500), ("intense", 1000)]
    )
    def test_activity(self, level: str, ml: float) -> None:
        assert calculate_adjustments(reading(), 0, level).activity_ml == ml

    def test_total_feeds_daily_intake(self) -> None:
        """70 kg at 30°C, 3000 m, intense: 2450 + 750 + 200 + 1000 ml."""
        result = calculate_hydration_recommendation(
            reading(30.0), altitude_m=3000, activity_level="intense"
        )
        assert result.daily_intake_liters == 4.4
        assert result.hourly_intake_ml == 275


class TestDehydrationRisk:
    """Points >= 8 severe, >= 6 high, >= 4 moderate."""

    def test_low(self) -> None:
        assert assess_dehydration_risk(reading(), 0, "sedentary") == "low"

    def test_moderate(self) -> None:
        """31°C (2) + 25% humidity (2)."""
        assert assess_dehydration_risk(reading(31.0, 25.0), 0, "sedentary") == "moderate"

    def test_high(self) -> None:
        """41°C (4) + 15% humidity (3)."""
        assert assess_dehydration_risk(reading(41.0, 15.0), 0, "sedentary") == "high"

    def test_severe(self) -> None:
        """41°C (4) + 15% humidity (3) + intense (3)."""
        assert assess_dehydration_risk(reading(41.0, 15.0), 0, "intense") == "severe"

    def test_altitude_and_wind(self) -> None:
        """4500 m (3) + strong wind (1)."""
        windy = reading(wind_speed_ms=16.0)
        assert assess_dehydration_risk(windy, 4500, "sedentary") == "moderate"


class TestReminderInterval:
    @pytest.mark.parametrize(
        "risk, temperature, minutes",
        [("severe", 20, 15), ("high", 20, 20), ("moderate", 20, 30), ("low", 31, 45), ("low", 30, 60)],
    )
    def test_intervals(self, risk: str, temperature: float, minutes: int) -> None:
        assert calculate_reminder_interval(risk, temperature) == minutes

    def test_rejects_nan_temperature(self) -> None:
        with pytest.raises(InvalidInput):
            calculate_reminder_interval("low", float("nan"))

    def test_recommendation_uses_interval(self) -> None:
        result = calculate_hydration_recommendation(
            reading(41.0, 15.0), activity_level="intense"
        )
        assert result.dehydration_risk == "severe"
        assert result.reminder_interval_minutes == 15
        assert result.warnings[0] == "CRITICAL: Extreme dehydration risk"


class TestValidation:
    def test_rejects_negative_weight(self) -> None:
        with pytest.raises(InvalidInput):
            calculate_hydration_recommendation(reading(), body_weight_kg=-1)

    def test_rejects_negative_altitude(self) -> None:
        with pytest.raises(InvalidInput):
            calculate_hydration_recommendation(reading(), altitude_m=-5)

    def test_rejects_unknown_activity(self) -> None:
        with pytest.raises(InvalidInput):
            calculate_hydration_recommendation(reading(), activity_level="extreme")

    def test_rejects_nan_weight(self) -> None:
        with pytest.raises(InvalidInput):
            calculate_hydration_recommendation(reading(), body_weight_kg=float("nan"))


class TestWaterSources:
    def test_low(self) -> None:
        assert len(generate_water_source_recommendations("low")) == 3

    def test_moderate(self) -> None:
        recs = generate_water_source_recommendations("moderate")
        assert len(recs) == 5
        assert recs[-1] == "Hotels and visitor centers usually have water access"

    def test_high_is_urgent(self) -> None:
        recs = generate_water_source_recommendations("high")
        assert recs[0] == "Find water sources IMMEDIATELY"
        assert len(recs) == 8

    def test_severe(self) -> None:
        recs = generate_water_source_recommendations("severe")
        assert recs[0] == "Find water sources IMMEDIATELY"
        assert len(recs) == 6
