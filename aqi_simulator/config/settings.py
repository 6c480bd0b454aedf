"""
Configuration settings for the AQI simulator.
"""

# Dataset settings
DEFAULT_NUM_SAMPLES = 1500
DEFAULT_TEST_SIZE = 0.2  # trailing share of the shuffled dataset held out for evaluation

# Uniform sampling ranges for every generated field (inclusive bounds)
FEATURE_RANGES = {
    "temperature": (10.0, 45.0),  # °C
    "humidity": (20.0, 90.0),     # %
    "co2": (300.0, 800.0),        # ppm
    "pm25": (5.0, 250.0),         # µg/m³
    "pm10": (10.0, 300.0),        # µg/m³
    "no2": (2.0, 200.0),          # µg/m³
    "o3": (5.0, 180.0),           # µg/m³
    "wind_speed": (0.5, 10.0),    # m/s
}

# City type flag
CITY_RURAL = 0
CITY_URBAN = 1
CITY_TYPES = (CITY_RURAL, CITY_URBAN)

# Column layout of the dataset
FEATURE_COLUMNS = [
    "temperature",
    "humidity",
    "co2",
    "pm25",
    "pm10",
    "no2",
    "o3",
    "wind_speed",
    "city_type",
]
AQI_LABEL = "aqi_level"
HEALTH_RISK_LABEL = "health_risk"
LABEL_COLUMNS = [AQI_LABEL, HEALTH_RISK_LABEL]

# Pollution score weights
POLLUTANT_WEIGHTS = {
    "pm25": 0.3,
    "pm10": 0.2,
    "no2": 0.1,
    "o3": 0.05,
}

# Lower bound of each AQI level above Good; a score equal to a bound belongs to the higher level
AQI_LEVEL_THRESHOLDS = (50.0, 100.0, 200.0)

# Label spaces
AQI_LEVELS = (0, 1, 2, 3)
HEALTH_RISK_LEVELS = (0, 1, 2)

AQI_LEVEL_NAMES = {
    0: "Good",
    1: "Moderate",
    2: "Unhealthy",
    3: "Hazardous",
}

HEALTH_RISK_NAMES = {
    0: "Low",
    1: "Medium",
    2: "High",
}

# Fallback sample for the interactive prompt
DEMO_KEYWORD = "demo"
DEMO_SAMPLE = {
    "temperature": 33.0,
    "humidity": 65.0,
    "co2": 550.0,
    "pm25": 150.0,
    "pm10": 180.0,
    "no2": 80.0,
    "o3": 60.0,
    "wind_speed": 3.5,
    "city_type": CITY_URBAN,
}

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
