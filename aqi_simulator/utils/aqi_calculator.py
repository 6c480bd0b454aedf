"""
Rule-based functions for calculating AQI levels and health risk.
"""
from ..config.settings import (
    POLLUTANT_WEIGHTS,
    AQI_LEVEL_THRESHOLDS,
    AQI_LEVEL_NAMES,
    HEALTH_RISK_NAMES,
    CITY_URBAN,
)


def calculate_pollution_score(pm25: float, pm10: float, no2: float, o3: float) -> float:
    """
    Calculate the weighted pollution score from pollutant concentrations.

    Args:
        pm25: PM2.5 concentration
        pm10: PM10 concentration
        no2: NO2 concentration
        o3: O3 concentration

    Returns:
        Weighted pollution score
    """
    return (
        POLLUTANT_WEIGHTS["pm25"] * pm25
        + POLLUTANT_WEIGHTS["pm10"] * pm10
        + POLLUTANT_WEIGHTS["no2"] * no2
        + POLLUTANT_WEIGHTS["o3"] * o3
    )


def get_aqi_level_from_score(score: float) -> int:
    """
    Map a pollution score to an AQI level.

    Levels are half-open ranges closed on the lower side:
    [0, 50) Good, [50, 100) Moderate, [100, 200) Unhealthy, [200, inf) Hazardous.

    Args:
        score: Weighted pollution score

    Returns:
        AQI level (0-3)
    """
    for level, upper_bound in enumerate(AQI_LEVEL_THRESHOLDS):
        if score < upper_bound:
            return level
    return len(AQI_LEVEL_THRESHOLDS)


def compute_aqi_level(pm25: float, pm10: float, no2: float, o3: float) -> int:
    """
    Compute the AQI level from pollutant concentrations.

    Args:
        pm25: PM2.5 concentration
        pm10: PM10 concentration
        no2: NO2 concentration
        o3: O3 concentration

    Returns:
        AQI level (0 Good, 1 Moderate, 2 Unhealthy, 3 Hazardous)
    """
    return get_aqi_level_from_score(calculate_pollution_score(pm25, pm10, no2, o3))


def compute_health_risk(aqi_level: int, city_type: int) -> int:
    """
    Derive the health risk level from the AQI level and the city type.

    Args:
        aqi_level: AQI level (0-3)
        city_type: 0 for rural, 1 for urban

    Returns:
        Health risk level (0 Low, 1 Medium, 2 High)
    """
    is_urban = city_type == CITY_URBAN

    if aqi_level == 0:
        return 0
    elif aqi_level == 1:
        return 1
    elif aqi_level == 2 and is_urban:
        return 2
    else:
        # Hazardous is High everywhere; the remaining Unhealthy cases are rural
        if aqi_level == 3:
            return 2
        return 2 if is_urban else 1


def get_aqi_level_name(aqi_level: int) -> str:
    """Get the human-readable name of an AQI level."""
    return AQI_LEVEL_NAMES[aqi_level]


def get_health_risk_name(health_risk: int) -> str:
    """Get the human-readable name of a health risk level."""
    return HEALTH_RISK_NAMES[health_risk]
