"""
Classification metrics for comparing true and predicted label sequences.
"""
import logging
from typing import Any, Dict, List, Sequence

import numpy as np

logger = logging.getLogger(__name__)


class LabelMetrics:
    """
    Precision, recall, F1 and support of a single label.
    """
    def __init__(self, label: int, precision: float, recall: float, f1: float, support: int):
        self.label = label
        self.precision = precision
        self.recall = recall
        self.f1 = f1
        self.support = support

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            "label": self.label,
            "precision": self.precision,
            "recall": self.recall,
            "f1": self.f1,
            "support": self.support,
        }

    def __repr__(self) -> str:
        return (
            f"LabelMetrics(label={self.label}, precision={self.precision:.3f}, "
            f"recall={self.recall:.3f}, f1={self.f1:.3f}, support={self.support})"
        )


def _as_label_arrays(y_true: Sequence[int], y_pred: Sequence[int]):
    y_true = np.asarray(y_true, dtype=int)
    y_pred = np.asarray(y_pred, dtype=int)
    if y_true.shape != y_pred.shape:
        raise ValueError(
            f"Label sequences differ in length: y_true {y_true.shape}, y_pred {y_pred.shape}"
        )
    return y_true, y_pred


def _safe_divide(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


def compute_metrics_for_label(
    y_true: Sequence[int],
    y_pred: Sequence[int],
    label: int
) -> LabelMetrics:
    """
    Compute precision, recall, F1 and support for one label.

    Zero denominators yield 0.0 instead of an error, so a label that is
    neither present nor predicted scores 0 across the board.

    Args:
        y_true: Ground-truth labels
        y_pred: Predicted labels, same length as y_true
        label: Label value of interest

    Returns:
        LabelMetrics for the label
    """
    y_true, y_pred = _as_label_arrays(y_true, y_pred)

    is_true = y_true == label
    is_pred = y_pred == label

    tp = int(np.sum(is_true & is_pred))
    fp = int(np.sum(~is_true & is_pred))
    fn = int(np.sum(is_true & ~is_pred))
    support = int(np.sum(is_true))

    precision = _safe_divide(tp, tp + fp)
    recall = _safe_divide(tp, tp + fn)
    f1 = _safe_divide(2.0 * precision * recall, precision + recall)

    return LabelMetrics(label, precision, recall, f1, support)


def accuracy_score(y_true: Sequence[int], y_pred: Sequence[int]) -> float:
    """
    Fraction of positions where the predicted label equals the true label.

    An empty pair of sequences has an accuracy of 0.0.
    """
    y_true, y_pred = _as_label_arrays(y_true, y_pred)
    if y_true.size == 0:
        logger.warning("Accuracy requested for empty label sequences, returning 0.0")
        return 0.0
    return float(np.mean(y_true == y_pred))


def classification_report(
    y_true: Sequence[int],
    y_pred: Sequence[int],
    labels: Sequence[int]
) -> Dict[int, LabelMetrics]:
    """
    Compute per-label metrics for every label of a label space.

    Args:
        y_true: Ground-truth labels
        y_pred: Predicted labels
        labels: Label space, in reporting order

    Returns:
        Dictionary of LabelMetrics keyed by label
    """
    report = {}
    for label in labels:
        metrics = compute_metrics_for_label(y_true, y_pred, label)
        logger.debug(f"Label {label}: {metrics}")
        report[label] = metrics
    return report


def confusion_matrix(
    y_true: Sequence[int],
    y_pred: Sequence[int],
    labels: Sequence[int]
) -> List[List[int]]:
    """
    Build a confusion matrix with true labels as rows and predicted labels as columns.

    Pairs involving a value outside the label space are not counted.

    Args:
        y_true: Ground-truth labels
        y_pred: Predicted labels
        labels: Label space, in row/column order

    Returns:
        Nested list of counts
    """
    y_true, y_pred = _as_label_arrays(y_true, y_pred)
    return [
        [int(np.sum((y_true == true_label) & (y_pred == pred_label))) for pred_label in labels]
        for true_label in labels
    ]
