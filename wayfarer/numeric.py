"""
Input validation and rounding helpers shared by both engines.

Validation runs before any formula is evaluated so NaN/Infinity never
reach the polynomial and threshold code.
"""

import math

from .errors import InvalidInput


def require_finite(field: str, value: float) -> float:
    """Reject NaN, Infinity, and non-numeric values."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(field, value, "must be a number")
    if not math.isfinite(value):
        raise InvalidInput(field, value, "must be finite")
    return value


def require_non_negative(field: str, value: float) -> float:
    require_finite(field, value)
    if value < 0:
        raise InvalidInput(field, value, "must not be negative")
    return value


def require_range(field: str, value: float, low: float, high: float) -> float:
    """Require low <= value <= high (inclusive)."""
    require_finite(field, value)
    if value < low or value > high:
        raise InvalidInput(field, value, f"must be between {low} and {high}")
    return value


def require_choice(field: str, value: str, choices: tuple[str, ...]) -> str:
    if value not in choices:
        raise InvalidInput(field, value, f"must be one of {', '.join(choices)}")
    return value


def round_half_away_from_zero(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Python's round() uses banker's rounding (round(2.5) == 2), which would
    make 2.5h and 3.5h differences round inconsistently.
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    rounded = whole + (1 if magnitude - whole >= 0.5 else 0)
    return rounded if value >= 0 else -rounded
