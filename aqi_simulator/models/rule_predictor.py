"""
Rule-based predictor for AQI level and health risk.
"""
import logging

import pandas as pd

from .dataset import label_dataset
from ..config.settings import FEATURE_COLUMNS, LABEL_COLUMNS

logger = logging.getLogger(__name__)


def predicted_column(target_label: str) -> str:
    """Get the name of the prediction column for a target label."""
    return f"{target_label}_predicted"


class RulePredictor:
    """
    Predicts both labels by reapplying the labeling rules to the readings.

    Because the rules also produce the ground truth, predictions always match
    the stored labels. A trained model can take its place as long as it
    offers the same predict() method.
    """
    def __init__(self):
        self.target_labels = list(LABEL_COLUMNS)

    def predict(self, data: pd.DataFrame) -> pd.DataFrame:
        """
        Predict both labels for every row.

        Only the feature columns are read; any label columns already present are ignored.

        Args:
            data: DataFrame with features

        Returns:
            DataFrame with one prediction column per target label, indexed like data
        """
        columns = [predicted_column(target) for target in self.target_labels]

        if data.empty:
            logger.warning("No data provided for prediction")
            return pd.DataFrame(columns=columns)

        missing_features = [f for f in FEATURE_COLUMNS if f not in data.columns]
        if missing_features:
            raise ValueError(f"Missing features in input data: {missing_features}")

        labeled = label_dataset(data[FEATURE_COLUMNS])
        results = pd.DataFrame(
            {predicted_column(target): labeled[target] for target in self.target_labels},
            index=data.index,
        )

        logger.info(f"Prediction result shape: {results.shape}")
        return results
