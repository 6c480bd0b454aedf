"""
Main AQI simulator application class.
"""
import logging
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .dataset import generate_dataset, split_train_test
from .rule_predictor import RulePredictor, predicted_column
from .sample import Sample
from .schemas import (
    EvaluationResponse,
    LabelMetricsModel,
    LabelSpaceEvaluation,
    PredictionResponse,
    SampleInput,
)
from ..config.settings import (
    DEFAULT_NUM_SAMPLES,
    DEFAULT_TEST_SIZE,
    AQI_LABEL,
    HEALTH_RISK_LABEL,
    AQI_LEVELS,
    HEALTH_RISK_LEVELS,
    AQI_LEVEL_NAMES,
    HEALTH_RISK_NAMES,
)
from ..utils.metrics import accuracy_score, classification_report, confusion_matrix

logger = logging.getLogger(__name__)

# Label space and label names for every evaluated target
LABEL_SPACES = {
    AQI_LABEL: (AQI_LEVELS, AQI_LEVEL_NAMES),
    HEALTH_RISK_LABEL: (HEALTH_RISK_LEVELS, HEALTH_RISK_NAMES),
}


def evaluate_label_space(
    target: str,
    y_true: Sequence[int],
    y_pred: Sequence[int],
    labels: Sequence[int],
    label_names: Dict[int, str]
) -> LabelSpaceEvaluation:
    """
    Evaluate predictions for one label space.

    Args:
        target: Name of the target label
        y_true: Ground-truth labels
        y_pred: Predicted labels
        labels: Label space
        label_names: Human-readable name per label

    Returns:
        Accuracy, per-label metrics and confusion matrix
    """
    accuracy = accuracy_score(y_true, y_pred)
    report = classification_report(y_true, y_pred, labels)
    matrix = confusion_matrix(y_true, y_pred, labels)

    logger.info(f"{target} accuracy: {accuracy:.3f}")
    logger.debug(f"{target} confusion matrix: {matrix}")

    return LabelSpaceEvaluation(
        target=target,
        accuracy=accuracy,
        metrics=[
            LabelMetricsModel(name=label_names[label], **metrics.to_dict())
            for label, metrics in report.items()
        ],
        confusion_matrix=matrix,
    )


class AQISimulator:
    """
    Generates a labeled synthetic dataset, evaluates a predictor on its test
    partition and classifies individual samples.
    """
    def __init__(
        self,
        seed: Optional[int] = None,
        num_samples: int = DEFAULT_NUM_SAMPLES,
        test_size: float = DEFAULT_TEST_SIZE,
        predictor: Optional[Any] = None
    ):
        """
        Initialize the simulator.

        Args:
            seed: Seed for the random generator (None for fresh entropy)
            num_samples: Number of samples to generate
            test_size: Proportion of data for testing
            predictor: Object with a predict(DataFrame) method (defaults to the rule predictor)
        """
        self.seed = seed
        self.num_samples = num_samples
        self.test_size = test_size
        self.rng = np.random.default_rng(seed)
        self.predictor = predictor if predictor is not None else RulePredictor()

        self.dataset = pd.DataFrame()
        # Reserved for training a model; nothing reads it yet
        self.train_df = pd.DataFrame()
        self.test_df = pd.DataFrame()
        self.is_split = False

    def generate_dataset(self) -> pd.DataFrame:
        """Generate and store the labeled dataset."""
        logger.info(f"Generating {self.num_samples} samples (seed={self.seed})")
        self.dataset = generate_dataset(self.rng, self.num_samples)
        return self.dataset

    def split_train_test(self) -> Tuple[pd.DataFrame, pd.DataFrame]:
        """Shuffle and split the stored dataset into train and test partitions."""
        if self.dataset.empty:
            self.generate_dataset()
        self.train_df, self.test_df = split_train_test(self.dataset, self.rng, self.test_size)
        self.is_split = True
        return self.train_df, self.test_df

    def evaluate(self) -> EvaluationResponse:
        """
        Evaluate the predictor against the ground truth of the test partition.

        Returns:
            Evaluation for both label spaces
        """
        if not self.is_split:
            self.split_train_test()

        predictions = self.predictor.predict(self.test_df)

        results = {}
        for target, (labels, label_names) in LABEL_SPACES.items():
            y_true = self.test_df[target].tolist()
            y_pred = predictions[predicted_column(target)].tolist()
            results[target] = evaluate_label_space(target, y_true, y_pred, labels, label_names)

        return EvaluationResponse(
            seed=self.seed,
            num_samples=len(self.dataset),
            train_size=len(self.train_df),
            test_size=len(self.test_df),
            results=results,
        )

    def run(self) -> EvaluationResponse:
        """Generate, split and evaluate in one pass."""
        self.generate_dataset()
        self.split_train_test()
        return self.evaluate()

    @staticmethod
    def classify(sample: Sample) -> PredictionResponse:
        """
        Classify a single sample with the labeling rules.

        Args:
            sample: Sample to classify

        Returns:
            Prediction with levels and their names
        """
        return PredictionResponse(
            sample=SampleInput(**sample.get_features()),
            score=sample.score,
            aqi_level=sample.aqi_level,
            aqi_category=sample.aqi_category,
            health_risk=sample.health_risk,
            health_risk_category=sample.health_risk_category,
        )
