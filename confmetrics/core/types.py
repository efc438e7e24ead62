"""
Core data types for confusion-matrix metrics.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

import numpy as np


# Exported metric names, in reporting order
ACCURACY = "accuracy"
SENSITIVITY = "sensitivity"
SPECIFICITY = "specificity"
PRECISION = "precision"
F_SCORE = "fScore"

METRIC_KEYS = (ACCURACY, SENSITIVITY, SPECIFICITY, PRECISION, F_SCORE)


@dataclass(frozen=True)
class ConfusionCounts:
    """
    The four cells of a binary confusion matrix.

    Counts are plain numbers (int or float). They are expected to be
    non-negative; see MetricsCalculator for validation.
    """

    tp: float
    tn: float
    fp: float
    fn: float

    @property
    def total(self) -> float:
        return self.tp + self.tn + self.fp + self.fn

    @property
    def actual_positives(self) -> float:
        return self.tp + self.fn

    @property
    def actual_negatives(self) -> float:
        return self.tn + self.fp

    @property
    def predicted_positives(self) -> float:
        return self.tp + self.fp

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    @property
    def has_negative(self) -> bool:
        return any(v < 0 for v in (self.tp, self.tn, self.fp, self.fn))

    def as_array(self) -> np.ndarray:
        """Return the matrix as [[tp, fp], [fn, tn]]."""
        return np.asarray([[self.tp, self.fp], [self.fn, self.tn]])


@dataclass(frozen=True)
class MetricsResult:
    """
    Metrics derived from one confusion matrix.

    Precision and F-score are always finite: an undefined ratio is
    replaced with 0 and its key is listed in `warnings`. Sensitivity and
    specificity are left as NaN when their denominator is zero.
    """

    accuracy: float
    sensitivity: float
    specificity: float
    precision: float
    f_score: float
    warnings: Tuple[str, ...] = ()

    @property
    def recall(self) -> float:
        return self.sensitivity

    @property
    def is_well_defined(self) -> bool:
        return not any(math.isnan(v) for v in self.values())

    def values(self) -> Tuple[float, ...]:
        return (
            self.accuracy,
            self.sensitivity,
            self.specificity,
            self.precision,
            self.f_score,
        )

    def to_dict(self) -> Dict[str, float]:
        return dict(zip(METRIC_KEYS, self.values()))

    def __getitem__(self, key: str) -> float:
        return self.to_dict()[key]

    def __iter__(self) -> Iterator[str]:
        return iter(METRIC_KEYS)

    def __len__(self) -> int:
        return len(METRIC_KEYS)
