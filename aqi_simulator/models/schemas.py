"""
Validation and response models for the AQI simulator.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SampleInput(BaseModel):
    """Externally supplied sensor readings for a single sample."""
    model_config = ConfigDict(allow_inf_nan=False)

    temperature: float = Field(..., description="Temperature (°C)")
    humidity: float = Field(..., description="Relative humidity (%)")
    co2: float = Field(..., description="CO2 concentration (ppm)")
    pm25: float = Field(..., ge=0, description="PM2.5 concentration (µg/m³)")
    pm10: float = Field(..., ge=0, description="PM10 concentration (µg/m³)")
    no2: float = Field(..., ge=0, description="NO2 concentration (µg/m³)")
    o3: float = Field(..., ge=0, description="O3 concentration (µg/m³)")
    wind_speed: float = Field(..., ge=0, description="Wind speed (m/s)")
    city_type: int = Field(..., ge=0, le=1, description="0 = rural, 1 = urban")


class LabelMetricsModel(BaseModel):
    """Per-label classification metrics."""
    label: int
    name: str
    precision: float
    recall: float
    f1: float
    support: int


class LabelSpaceEvaluation(BaseModel):
    """Evaluation of one label space (AQI level or health risk)."""
    target: str
    accuracy: float
    metrics: List[LabelMetricsModel]
    confusion_matrix: List[List[int]]


class EvaluationResponse(BaseModel):
    """Evaluation of the predictor on the test partition."""
    seed: Optional[int] = None
    num_samples: int
    train_size: int
    test_size: int
    results: Dict[str, LabelSpaceEvaluation]


class PredictionResponse(BaseModel):
    """Prediction for a single sample."""
    sample: SampleInput
    score: float
    aqi_level: int
    aqi_category: str
    health_risk: int
    health_risk_category: str


class SimulationResponse(BaseModel):
    """Full output of one simulator run."""
    evaluation: EvaluationResponse
    prediction: PredictionResponse
