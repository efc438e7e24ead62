"""
Confmetrics - binary classification metrics from a confusion matrix.

This package computes accuracy, sensitivity, specificity, precision and
F-score from true/false positive/negative counts, and reports them.
"""

__version__ = "0.1.0"

from confmetrics.core.errors import (
    MetricsError,
    EmptyInputError,
    InvalidInputError,
    UndefinedRatioWarning,
)
from confmetrics.core.types import ConfusionCounts, MetricsResult
from confmetrics.metrics.calculator import MetricsCalculator, compute_metrics

__all__ = [
    "MetricsError",
    "EmptyInputError",
    "InvalidInputError",
    "UndefinedRatioWarning",
    "ConfusionCounts",
    "MetricsResult",
    "MetricsCalculator",
    "compute_metrics",
]
