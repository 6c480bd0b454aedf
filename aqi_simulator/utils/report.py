"""
Console report formatting.
"""
from typing import List

from ..config.settings import AQI_LABEL, HEALTH_RISK_LABEL
from ..models.schemas import EvaluationResponse, LabelSpaceEvaluation, PredictionResponse

BANNER = "Air Quality & Health Prediction (Rule-based Simulator)"

REPORT_HEADER = "Label  Precision  Recall   F1-score  Support"

INPUT_PROMPT = "\n".join([
    "Enter a custom sample to predict (or type 'demo' to run a demo sample):",
    "Format: Temperature Humidity CO2 PM2.5 PM10 NO2 O3 WindSpeed CityType(0/1)",
    "Example: 33 65 550 150 180 80 60 3.5 1",
    "Input: ",
])

CLOSING_NOTE = (
    "Done. You can adapt this program to load real CSV data, train a model,\n"
    "or export the synthetic data for downstream ML experimentation."
)

# Display names of the evaluated targets
TARGET_TITLES = {
    AQI_LABEL: "AQI_Level",
    HEALTH_RISK_LABEL: "Health_Risk",
}


def format_accuracy(evaluation: EvaluationResponse) -> str:
    """Format the overall accuracy of every target."""
    lines = ["Overall Accuracy:"]
    for target, result in evaluation.results.items():
        lines.append(f"  {TARGET_TITLES.get(target, target)} Accuracy: {result.accuracy:.3f}")
    return "\n".join(lines)


def format_classification_report(result: LabelSpaceEvaluation) -> str:
    """
    Format the per-label metrics of one target as fixed-width columns.

    Args:
        result: Evaluation of one label space

    Returns:
        Report text, one row per label
    """
    lines = [
        f"{TARGET_TITLES.get(result.target, result.target)} Classification Report:",
        REPORT_HEADER,
    ]
    for m in result.metrics:
        lines.append(
            f"{m.label:>5}  {m.precision:>9.3f}  {m.recall:>6.3f}  {m.f1:>8.3f}  {m.support:>7}"
        )
    return "\n".join(lines)


def format_evaluation_report(evaluation: EvaluationResponse) -> str:
    """Format accuracies followed by the classification report of every target."""
    sections: List[str] = [format_accuracy(evaluation)]
    for result in evaluation.results.values():
        sections.append(format_classification_report(result))
    return "\n\n".join(sections) + "\n"


def format_prediction(prediction: PredictionResponse) -> str:
    """Format the prediction for a single sample."""
    return "\n".join([
        "Prediction for the sample:",
        f"  AQI Score -> Level {prediction.aqi_level} ({prediction.aqi_category})",
        f"  Health Risk -> {prediction.health_risk} ({prediction.health_risk_category})",
    ])
