"""Tests for the combined UV and heat score."""

import pytest

from wayfarer.environment.uv_heat import (
    TIER_RECOMMENDATIONS,
    calculate_uv_heat_combination,
    heat_points,
    uv_points,
)
from wayfarer.errors import InvalidInput


class TestPoints:
    @pytest.mark.parametrize(
        "uv_index, expected",
        [(0, 0), (2.9, 0), (3, 1), (5, 1), (6, 2), (7, 2), (8, 3), (10, 3), (11, 4), (14, 4)],
    )
    def test_uv_points(self, uv_index: float, expected: int) -> None:
        assert uv_points(uv_index) == expected

    @pytest.mark.parametrize(
        "heat_index_c, expected",
        [(20, 0), (29, 0), (30, 1), (34, 1), (35, 2), (40, 3), (44, 3), (45, 4), (50, 4)],
    )
    def test_heat_points(self, heat_index_c: float, expected: int) -> None:
        assert heat_points(heat_index_c) == expected


class TestCombination:
    """Score >= 7 severe, >= 5 high, >= 3 moderate, else low."""

    def test_low_has_no_text(self) -> None:
        result = calculate_uv_heat_combination(2, 20, 20)
        assert result.combined_risk == "low"
        assert result.score == 0
        assert result.warnings == ()
        assert result.recommendations == ()

    def test_moderate(self) -> None:
        result = calculate_uv_heat_combination(6, 30, 32)
        assert result.score == 3
        assert result.combined_risk == "moderate"
        assert result.warnings == ()
        assert result.recommendations == TIER_RECOMMENDATIONS["moderate"]

    def test_high_includes_moderate_text(self) -> None:
        result = calculate_uv_heat_combination(8, 38, 40)
        assert result.score == 6
        assert result.combined_risk == "high"
        assert result.warnings == ("High risk: Strong heat and UV exposure",)
        assert result.recommendations == (
            TIER_RECOMMENDATIONS["high"] + TIER_RECOMMENDATIONS["moderate"]
        )

    def test_severe_accumulates_all_tiers(self) -> None:
        result = calculate_uv_heat_combination(11, 46, 46)
        assert result.score == 8
        assert result.combined_risk == "severe"
        assert result.warnings[0] == "DANGEROUS: Extreme heat and UV combination"
        assert len(result.warnings) == 2
        assert len(result.recommendations) == 11

    def test_carries_inputs(self) -> None:
        result = calculate_uv_heat_combination(4, 31.5, 33)
        assert (result.uv_index, result.temperature_c, result.heat_index_c) == (4, 31.5, 33)

    def test_rejects_negative_uv(self) -> None:
        with pytest.raises(InvalidInput):
            calculate_uv_heat_combination(-1, 30, 30)
