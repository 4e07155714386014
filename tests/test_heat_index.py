"""
Tests for heat index and extreme heat warnings.

Reference values follow the NWS heat index table (Rothfusz regression).
"""

from datetime import datetime

import pytest

from wayfarer.config import HeatConfig
from wayfarer.environment.heat_index import (
    calculate_heat_index,
    celsius_to_fahrenheit,
    classify_heat_danger,
    fahrenheit_to_celsius,
    generate_extreme_heat_warning,
    get_time_of_day,
)
from wayfarer.errors import InvalidInput
from wayfarer.types import EnvironmentalReading


class TestConversions:
    def test_known_points(self) -> None:
        assert celsius_to_fahrenheit(0) == 32
        assert celsius_to_fahrenheit(100) == 212
        assert fahrenheit_to_celsius(212) == 100


class TestCalculateHeatIndex:
    """Tests for the Rothfusz regression and its cut-off."""

    def test_below_cutoff_returns_air_temperature(self) -> None:
        """26°C is 78.8°F, under 80°F: no regression applied."""
        result = calculate_heat_index(26.0, 40)
        assert result.heat_index_c == 26
        assert result.heat_index_f == 79
        assert result.danger_level == "safe"

    def test_just_above_cutoff(self) -> None:
        """26.7°C / 40% is 80.06°F; the regression gives ~79.97°F."""
        result = calculate_heat_index(26.7, 40)
        assert result.heat_index_c == 27
        assert result.heat_index_f == 80
        assert result.danger_level == "safe"
        assert result.warnings == ()

    def test_caution(self) -> None:
        """84°F / 40% reads about 83°F."""
        result = calculate_heat_index(29.0, 40)
        assert result.danger_level == "caution"
        assert result.recommendations == ("Take breaks in shade", "Stay hydrated")

    def test_extreme_caution(self) -> None:
        """~90°F / 50% reads high 90s."""
        assert calculate_heat_index(32.0, 50).danger_level == "extreme_caution"

    def test_danger(self) -> None:
        """95°F / 60% reads about 114°F."""
        result = calculate_heat_index(35.0, 60)
        assert result.danger_level == "danger"
        assert result.heat_index_f > 105
        assert result.warnings == ("Heat exhaustion and heat stroke likely",)

    def test_extreme_danger(self) -> None:
        assert calculate_heat_index(43.0, 70).danger_level == "extreme_danger"

    def test_humidity_raises_heat_index(self) -> None:
        dry = calculate_heat_index(35.0, 30)
        humid = calculate_heat_index(35.0, 70)
        assert humid.heat_index_f > dry.heat_index_f

    def test_rejects_nan_temperature(self) -> None:
        with pytest.raises(InvalidInput):
            calculate_heat_index(float("nan"), 50)

    @pytest.mark.parametrize("humidity", [-1, 101, float("inf")])
    def test_rejects_bad_humidity(self, humidity: float) -> None:
        with pytest.raises(InvalidInput):
            calculate_heat_index(30.0, humidity)


class TestClassifyHeatDanger:
    """Tier upper bounds are inclusive, in °F."""

    @pytest.mark.parametrize(
        "heat_index_f, expected",
        [
            (80, "safe"),
            (80.1, "caution"),
            (90, "caution"),
            (105, "extreme_caution"),
            (130, "danger"),
            (130.5, "extreme_danger"),
        ],
    )
    def test_boundaries(self, heat_index_f: float, expected: str) -> None:
        assert classify_heat_danger(heat_index_f) == expected


    def test_rejects_nan(self) -> None:
        with pytest.raises(InvalidInput):
            classify_heat_danger(float("nan"))


class TestTimeOfDay:
    @pytest.mark.parametrize(
        "hour, expected",
        [
            (5, "evening"),
            (6, "morning"),
            (10, "midday"),
            (13, "midday"),
            (14, "afternoon"),
            (18, "evening"),
            (23, "evening"),
        ],
    )
    def test_buckets(self, hour: int, expected: str) -> None:
        assert get_time_of_day(datetime(2026, 7, 1, hour, 0)) == expected


class TestExtremeHeatWarning:
    """Active at 35°C of temperature or heat index; high at 40, extreme at 45."""

    def test_inactive_when_mild(self) -> None:
        warning = generate_extreme_heat_warning(
            EnvironmentalReading(temperature_c=30.0, humidity_pct=30.0)
        )
        assert warning.is_active is False

    def test_temperature_alone_activates(self) -> None:
        """Dry 41°C air: heat index ~38°C, temperature drives severity."""
        warning = generate_extreme_heat_warning(
            EnvironmentalReading(temperature_c=41.0, humidity_pct=10.0)
        )
        assert warning.is_active is True
        assert warning.severity == "high"
        assert warning.heat_index_c < 41

    def test_heat_index_alone_activates(self) -> None:
        """34°C at 70% humidity feels like ~47°C."""
        warning = generate_extreme_heat_warning(
            EnvironmentalReading(temperature_c=34.0, humidity_pct=70.0)
        )
        assert warning.is_active is True
        assert warning.severity == "extreme"
        assert warning.heat_index_c >= 45

    def test_extreme(self) -> None:
        warning = generate_extreme_heat_warning(
            EnvironmentalReading(temperature_c=46.0, humidity_pct=10.0)
        )
        assert warning.severity == "extreme"

    def test_peak_time_text(self) -> None:
        reading = EnvironmentalReading(temperature_c=38.0, humidity_pct=40.0, uv_index=9.0)

        midday = generate_extreme_heat_warning(reading, "midday")
        evening = generate_extreme_heat_warning(reading, "evening")

        assert midday.warnings[-1] == "Peak heat and UV exposure period"
        assert midday.recommendations[-1] == "Avoid outdoor activities between 10 AM - 4 PM"
        assert "Peak heat and UV exposure period" not in evening.warnings
        assert evening.time_of_day == "evening"

    def test_text_starts_with_heat_index_block(self) -> None:
        reading = EnvironmentalReading(temperature_c=35.0, humidity_pct=60.0, uv_index=9.0)
        warning = generate_extreme_heat_warning(reading, "morning")
        heat_index = calculate_heat_index(35.0, 60.0)

        assert warning.warnings[: len(heat_index.warnings)] == heat_index.warnings
        assert warning.combined_risk in ("high", "severe")

    def test_custom_activation_threshold(self) -> None:
        reading = EnvironmentalReading(temperature_c=30.0, humidity_pct=30.0)
        warning = generate_extreme_heat_warning(reading, config=HeatConfig(warning_active_c=30))
        assert warning.is_active is True

    def test_rejects_unknown_time_of_day(self) -> None:
        with pytest.raises(InvalidInput):
            generate_extreme_heat_warning(
                EnvironmentalReading(temperature_c=30.0, humidity_pct=30.0), "noon"
            )
