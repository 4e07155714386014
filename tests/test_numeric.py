"""Tests for shared validation and rounding helpers."""

import pytest

from wayfarer.errors import InvalidInput
from wayfarer.numeric import require_finite, require_range, round_half_away_from_zero


class TestRoundHalfAwayFromZero:
    @pytest.mark.parametrize(
        "value, expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (-2.5, -3), (9.5, 10), (-9.5, -10), (2.4, 2), (-0.4, 0)],
    )
    def test_ties_away_from_zero(self, value: float, expected: int) -> None:
        assert round_half_away_from_zero(value) == expected

    def test_largest_float_below_half(self) -> None:
        """0.49999999999999994 + 0.5 rounds to 1.0 in float addition."""
        assert round_half_away_from_zero(0.49999999999999994) == 0
        assert round_half_away_from_zero(-0.49999999999999994) == 0

    def test_integers_unchanged(self) -> None:
        assert round_half_away_from_zero(13) == 13
        assert round_half_away_from_zero(-13.0) == -13


class TestValidation:
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), "20", None, True])
    def test_require_finite_rejects(self, value) -> None:
        with pytest.raises(InvalidInput):
            require_finite("value", value)

    def test_require_range_inclusive(self) -> None:
        assert require_range("value", 100, 0, 100) == 100
        with pytest.raises(InvalidInput):
            require_range("value", 100.1, 0, 100)
