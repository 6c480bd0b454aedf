"""
Synthetic labeled dataset generation and splitting.
"""
import logging
from typing import Tuple

import numpy as np
import pandas as pd

from ..config.settings import (
    FEATURE_RANGES,
    CITY_TYPES,
    FEATURE_COLUMNS,
    AQI_LABEL,
    HEALTH_RISK_LABEL,
    DEFAULT_NUM_SAMPLES,
    DEFAULT_TEST_SIZE,
)
from ..utils.aqi_calculator import compute_aqi_level, compute_health_risk

logger = logging.getLogger(__name__)


def label_dataset(df: pd.DataFrame) -> pd.DataFrame:
    """
    Compute the AQI level and health risk labels for every row.

    Args:
        df: DataFrame containing the pollutant and city type columns

    Returns:
        Copy of the DataFrame with both label columns set
    """
    labeled_df = df.copy()
    labeled_df[AQI_LABEL] = [
        compute_aqi_level(pm25, pm10, no2, o3)
        for pm25, pm10, no2, o3 in zip(
            labeled_df["pm25"], labeled_df["pm10"], labeled_df["no2"], labeled_df["o3"]
        )
    ]
    labeled_df[HEALTH_RISK_LABEL] = [
        compute_health_risk(aqi_level, city_type)
        for aqi_level, city_type in zip(labeled_df[AQI_LABEL], labeled_df["city_type"])
    ]
    return labeled_df


def generate_dataset(rng: np.random.Generator, num_samples: int = DEFAULT_NUM_SAMPLES) -> pd.DataFrame:
    """
    Generate a labeled synthetic sensor dataset.

    Every reading is drawn independently from its uniform range in
    FEATURE_RANGES; the city type is drawn uniformly from {0, 1}.

    Args:
        rng: Random generator used for every draw
        num_samples: Number of samples to generate

    Returns:
        DataFrame with one row per sample, feature columns followed by label columns
    """
    if num_samples < 1:
        raise ValueError(f"Number of samples must be positive, got {num_samples}")

    columns = {}
    for column in FEATURE_COLUMNS:
        if column == "city_type":
            columns[column] = rng.integers(min(CITY_TYPES), max(CITY_TYPES), size=num_samples, endpoint=True)
        else:
            low, high = FEATURE_RANGES[column]
            columns[column] = rng.uniform(low, high, size=num_samples)

    df = label_dataset(pd.DataFrame(columns, columns=FEATURE_COLUMNS))

    logger.info(f"Generated synthetic dataset with {len(df)} samples")
    logger.info(f"AQI level distribution: {df[AQI_LABEL].value_counts().sort_index().to_dict()}")
    logger.info(f"Health risk distribution: {df[HEALTH_RISK_LABEL].value_counts().sort_index().to_dict()}")

    return df


def split_train_test(
    df: pd.DataFrame,
    rng: np.random.Generator,
    test_size: float = DEFAULT_TEST_SIZE
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Shuffle the dataset and split it by position into train and test sets.

    The leading share goes to training and the trailing test_size share to testing.

    Args:
        df: Labeled dataset
        rng: Random generator used for the permutation
        test_size: Proportion of data for testing

    Returns:
        Tuple of (train_df, test_df)
    """
    if not 0.0 < test_size < 1.0:
        raise ValueError(f"Test size must be between 0 and 1, got {test_size}")

    # Shuffle the data
    shuffled_df = df.iloc[rng.permutation(len(df))].reset_index(drop=True)

    # Split into training and test
    train_test_split_idx = int(len(shuffled_df) * (1 - test_size))
    train_df = shuffled_df.iloc[:train_test_split_idx]
    test_df = shuffled_df.iloc[train_test_split_idx:]

    logger.info(f"Training set shape: {train_df.shape}")
    logger.info(f"Test set shape: {test_df.shape}")

    return train_df, test_df
