"""
Environmental sensor sample model
"""
import json
import logging
from typing import Dict, Any, Tuple

from pydantic import ValidationError

from .schemas import SampleInput
from ..config.settings import FEATURE_COLUMNS, DEMO_SAMPLE, DEMO_KEYWORD
from ..utils.aqi_calculator import (
    calculate_pollution_score,
    compute_aqi_level,
    compute_health_risk,
    get_aqi_level_name,
    get_health_risk_name,
)

logger = logging.getLogger(__name__)


class Sample:
    """
    A single sensor reading together with its AQI level and health risk.

    Labels are always derived from the readings when the sample is created.
    """
    def __init__(
        self,
        temperature: float,
        humidity: float,
        co2: float,
        pm25: float,
        pm10: float,
        no2: float,
        o3: float,
        wind_speed: float,
        city_type: int
    ):
        """
        Initialize a sample and compute its labels.

        Args:
            temperature: Temperature (°C)
            humidity: Relative humidity (%)
            co2: CO2 concentration (ppm)
            pm25: PM2.5 concentration (µg/m³)
            pm10: PM10 concentration (µg/m³)
            no2: NO2 concentration (µg/m³)
            o3: O3 concentration (µg/m³)
            wind_speed: Wind speed (m/s)
            city_type: 0 for rural, 1 for urban
        """
        self.temperature = float(temperature)
        self.humidity = float(humidity)
        self.co2 = float(co2)
        self.pm25 = float(pm25)
        self.pm10 = float(pm10)
        self.no2 = float(no2)
        self.o3 = float(o3)
        self.wind_speed = float(wind_speed)
        self.city_type = int(city_type)

        self.aqi_level = compute_aqi_level(self.pm25, self.pm10, self.no2, self.o3)
        self.health_risk = compute_health_risk(self.aqi_level, self.city_type)

    @property
    def score(self) -> float:
        """Weighted pollution score behind the AQI level."""
        return calculate_pollution_score(self.pm25, self.pm10, self.no2, self.o3)

    @property
    def aqi_category(self) -> str:
        return get_aqi_level_name(self.aqi_level)

    @property
    def health_risk_category(self) -> str:
        return get_health_risk_name(self.health_risk)

    def get_features(self) -> Dict[str, Any]:
        """Get the input readings keyed by column name."""
        return {column: getattr(self, column) for column in FEATURE_COLUMNS}

    def to_dict(self) -> Dict[str, Any]:
        """Get the readings and labels keyed by column name."""
        return {
            **self.get_features(),
            "aqi_level": self.aqi_level,
            "health_risk": self.health_risk,
        }

    def to_json(self) -> str:
        """Convert to JSON representation."""
        return json.dumps(self.to_dict(), sort_keys=True, indent=2)

    def __repr__(self) -> str:
        return (
            f"Sample(pm25={self.pm25:.1f}, pm10={self.pm10:.1f}, no2={self.no2:.1f}, "
            f"o3={self.o3:.1f}, city_type={self.city_type}, "
            f"aqi_level={self.aqi_level}, health_risk={self.health_risk})"
        )

    @classmethod
    def from_features(cls, features: Dict[str, Any]) -> 'Sample':
        """
        Create a sample from a mapping of readings.

        Any label values in the mapping are ignored and recomputed.

        Args:
            features: Mapping containing every feature column

        Returns:
            Labeled Sample
        """
        return cls(**{column: features[column] for column in FEATURE_COLUMNS})

    @classmethod
    def demo(cls) -> 'Sample':
        """Get the fixed demo sample."""
        return cls.from_features(DEMO_SAMPLE)


def parse_sample_line(line: str) -> Tuple[Sample, bool]:
    """
    Parse one line of interactive input into a sample.

    The line is either the demo keyword or nine whitespace-separated values:
    temperature, humidity, CO2, PM2.5, PM10, NO2, O3, wind speed, city type.
    Anything else falls back to the demo sample.

    Args:
        line: Raw input line

    Returns:
        Tuple of (sample, whether the demo sample was substituted for invalid input)
    """
    line = (line or "").strip()
    if line == DEMO_KEYWORD:
        return Sample.demo(), False

    values = line.split()
    if len(values) != len(FEATURE_COLUMNS):
        logger.warning(
            f"Invalid input: expected {len(FEATURE_COLUMNS)} values, got {len(values)}. "
            f"Running demo sample."
        )
        return Sample.demo(), True

    try:
        sample_input = SampleInput(**dict(zip(FEATURE_COLUMNS, values)))
    except ValidationError as e:
        logger.warning(f"Invalid input: {e.error_count()} invalid value(s). Running demo sample.")
        logger.debug(str(e))
        return Sample.demo(), True

    return Sample.from_features(sample_input.model_dump()), False
