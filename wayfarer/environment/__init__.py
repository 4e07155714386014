"""
Environmental Exposure Layer.

Grades weather, UV, air quality, and heat signals into safety decisions.

Modules:
- heat_index: Rothfusz heat index and extreme heat warnings
- uv_heat: Combined UV + heat score
- air_quality: 0-500 AQI scoring and 1-5 category conversion
- activity: Outdoor activity safety aggregation
- hydration: Water intake targets and dehydration risk
"""

from .activity import generate_activity_safety, get_activity_specific_recommendations
from .air_quality import (
    aqi_to_category,
    assess_air_quality,
    category_to_aqi,
    get_air_quality_status,
    map_aqi_to_risk_level,
)
from .heat_index import calculate_heat_index, generate_extreme_heat_warning, get_time_of_day
from .hydration import (
    assess_dehydration_risk,
    calculate_hydration_recommendation,
    calculate_reminder_interval,
    generate_water_source_recommendations,
)
from .uv_heat import calculate_uv_heat_combination

__all__ = [
    "calculate_heat_index",
    "generate_extreme_heat_warning",
    "get_time_of_day",
    "calculate_uv_heat_combination",
    "assess_air_quality",
    "category_to_aqi",
    "aqi_to_category",
    "get_air_quality_status",
    "map_aqi_to_risk_level",
    "generate_activity_safety",
    "get_activity_specific_recommendations",
    "calculate_hydration_recommendation",
    "assess_dehydration_risk",
    "calculate_reminder_interval",
    "generate_water_source_recommendations",
]
