"""
Tests for dataset generation, splitting and the rule predictor.
"""
import sys
import unittest
from pathlib import Path

import numpy as np
import pandas as pd

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from aqi_simulator.config.settings import (
    FEATURE_RANGES,
    FEATURE_COLUMNS,
    LABEL_COLUMNS,
    AQI_LABEL,
    HEALTH_RISK_LABEL,
)
from aqi_simulator.models.dataset import generate_dataset, label_dataset, split_train_test
from aqi_simulator.models.rule_predictor import RulePredictor, predicted_column
from aqi_simulator.utils.aqi_calculator import compute_aqi_level, compute_health_risk


class TestGenerateDataset(unittest.TestCase):
    """Tests for synthetic dataset generation."""

    def setUp(self):
        self.df = generate_dataset(np.random.default_rng(42), 1500)

    def test_shape_and_columns(self):
        """Test the default dataset layout."""
        self.assertEqual(len(self.df), 1500)
        self.assertEqual(list(self.df.columns), FEATURE_COLUMNS + LABEL_COLUMNS)

    def test_feature_ranges(self):
        """Test every reading is within its range."""
        for column, (low, high) in FEATURE_RANGES.items():
            with self.subTest(column=column):
                self.assertGreaterEqual(self.df[column].min(), low)
                self.assertLessEqual(self.df[column].max(), high)
        self.assertEqual(set(self.df["city_type"].unique()), {0, 1})

    def test_labels_follow_rules(self):
        """Test every stored label matches the rule functions."""
        for row in self.df.itertuples(index=False):
            aqi_level = compute_aqi_level(row.pm25, row.pm10, row.no2, row.o3)
            self.assertEqual(row.aqi_level, aqi_level)
            self.assertEqual(row.health_risk, compute_health_risk(aqi_level, row.city_type))
        self.assertTrue(self.df[AQI_LABEL].isin([0, 1, 2, 3]).all())
        self.assertTrue(self.df[HEALTH_RISK_LABEL].isin([0, 1, 2]).all())

    def test_same_seed_same_dataset(self):
        """Test generation is deterministic per seed."""
        pd.testing.assert_frame_equal(generate_dataset(np.random.default_rng(42), 1500), self.df)
        other = generate_dataset(np.random.default_rng(43), 1500)
        self.assertFalse(other.equals(self.df))

    def test_invalid_size(self):
        """Test that an empty dataset cannot be requested."""
        with self.assertRaises(ValueError):
            generate_dataset(np.random.default_rng(0), 0)

    def test_label_dataset_overwrites_labels(self):
        """Test labeling ignores existing label values."""
        corrupted = self.df.head(20).copy()
        corrupted[AQI_LABEL] = 0
        corrupted[HEALTH_RISK_LABEL] = 0
        relabeled = label_dataset(corrupted)
        pd.testing.assert_frame_equal(relabeled, self.df.head(20))
        self.assertTrue((corrupted[AQI_LABEL] == 0).all())


class TestSplitTrainTest(unittest.TestCase):
    """Tests for the train/test split."""

    def setUp(self):
        self.rng = np.random.default_rng(7)
        self.df = generate_dataset(self.rng, 1500)

    def test_split_sizes(self):
        """Test the leading 80% is train and the trailing 20% is test."""
        train_df, test_df = split_train_test(self.df, self.rng)
        self.assertEqual(len(train_df), 1200)
        self.assertEqual(len(test_df), 300)

    def test_split_is_a_partition(self):
        """Test every sample ends up in exactly one partition."""
        train_df, test_df = split_train_test(self.df, self.rng)
        rows = lambda df: sorted(map(tuple, df.to_numpy().tolist()))
        self.assertEqual(rows(pd.concat([train_df, test_df])), rows(self.df))

    def test_split_is_shuffled(self):
        """Test the split permutes the rows."""
        train_df, _ = split_train_test(self.df, self.rng)
        self.assertFalse(train_df["pm25"].reset_index(drop=True).equals(self.df["pm25"].head(1200)))

    def test_split_truncates_train_size(self):
        """Test the train size is truncated rather than rounded."""
        for num_samples, train_size in ((1, 0), (2, 1), (7, 5)):
            with self.subTest(num_samples=num_samples):
                df = generate_dataset(self.rng, num_samples)
                train_df, test_df = split_train_test(df, self.rng)
                self.assertEqual(len(train_df), train_size)
                self.assertEqual(len(test_df), num_samples - train_size)

    def test_custom_test_size(self):
        """Test a different test size."""
        train_df, test_df = split_train_test(self.df, self.rng, test_size=0.25)
        self.assertEqual(len(train_df), 1125)
        self.assertEqual(len(test_df), 375)

    def test_invalid_test_size(self):
        """Test test sizes outside (0, 1) are rejected."""
        for test_size in (0.0, 1.0, -0.2, 1.5):
            with self.subTest(test_size=test_size):
                with self.assertRaises(ValueError):
                    split_train_test(self.df, self.rng, test_size=test_size)


class TestRulePredictor(unittest.TestCase):
    """Tests for the rule-based predictor."""

    def setUp(self):
        self.df = generate_dataset(np.random.default_rng(3), 200)
        self.predictor = RulePredictor()

    def test_predictions_match_labels(self):
        """Test predictions always equal the stored labels."""
        predictions = self.predictor.predict(self.df)
        self.assertEqual(
            list(predictions.columns),
            [predicted_column(AQI_LABEL), predicted_column(HEALTH_RISK_LABEL)],
        )
        self.assertTrue(predictions.index.equals(self.df.index))
        self.assertEqual(predictions[predicted_column(AQI_LABEL)].tolist(), self.df[AQI_LABEL].tolist())
        self.assertEqual(
            predictions[predicted_column(HEALTH_RISK_LABEL)].tolist(),
            self.df[HEALTH_RISK_LABEL].tolist(),
        )

    def test_predict_ignores_stored_labels(self):
        """Test predictions only depend on the readings."""
        features_only = self.df[FEATURE_COLUMNS]
        corrupted = self.df.assign(aqi_level=3, health_risk=0)
        pd.testing.assert_frame_equal(
            self.predictor.predict(features_only),
            self.predictor.predict(corrupted),
        )

    def test_empty_data(self):
        """Test prediction on empty data."""
        with self.assertLogs("aqi_simulator.models.rule_predictor", level="WARNING"):
            predictions = self.predictor.predict(pd.DataFrame())
        self.assertTrue(predictions.empty)

    def test_missing_features(self):
        """Test missing feature columns are rejected."""
        with self.assertRaises(ValueError):
            self.predictor.predict(self.df.drop(columns=["pm10"]))


if __name__ == "__main__":
    unittest.main()
