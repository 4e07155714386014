"""
Pytest fixtures for wayfarer tests.
"""

from datetime import datetime

import pytest
import pytz

from wayfarer.types import EnvironmentalReading


@pytest.fixture
def summer_reference() -> datetime:
    """Northern summer instant: New York on EDT (-4), Tokyo on JST (+9)."""
    return datetime(2026, 7, 1, 12, 0, tzinfo=pytz.UTC)


@pytest.fixture
def winter_reference() -> datetime:
    """Northern winter instant: New York on EST (-5)."""
    return datetime(2026, 1, 15, 12, 0, tzinfo=pytz.UTC)


@pytest.fixture
def mild_reading() -> EnvironmentalReading:
    """Comfortable spring day, no AQI data."""
    return EnvironmentalReading(temperature_c=20.0, humidity_pct=50.0, uv_index=2.0)


@pytest.fixture
def hot_smoggy_reading() -> EnvironmentalReading:
    """Hot afternoon with unhealthy air."""
    return EnvironmentalReading(temperature_c=33.0, humidity_pct=50.0, uv_index=5.0, aqi=180)
