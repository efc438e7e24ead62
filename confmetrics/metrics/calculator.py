"""
Classification metrics calculator.
Computes accuracy, sensitivity, specificity, precision and F-score
from the four cells of a binary confusion matrix.
"""

import logging
import warnings
from typing import Dict, Mapping, Optional, Sequence, Union

import numpy as np

from confmetrics.core.config import CalculatorConfig
from confmetrics.core.errors import (
    EmptyInputError,
    InvalidInputError,
    MetricsError,
    UndefinedRatioWarning,
)
from confmetrics.core.types import (
    ConfusionCounts,
    MetricsResult,
    PRECISION,
    F_SCORE,
)

logger = logging.getLogger(__name__)

CountsLike = Union[ConfusionCounts, Sequence[float]]


def _ratio(numerator, denominator) -> np.float64:
    """Divide as IEEE floats: x/0 gives inf and 0/0 gives nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.float64(numerator) / np.float64(denominator)


def _is_undefined(value) -> bool:
    return not np.isfinite(value)


def _report_undefined(message: str) -> None:
    logger.warning(message)
    # Point at the caller of compute()/compute_counts()
    warnings.warn(message, UndefinedRatioWarning, stacklevel=3)


class MetricsCalculator:
    """
    Calculates binary classification metrics.

    Supports:
    - Accuracy
    - Sensitivity (Recall)
    - Specificity
    - Precision
    - F-score (harmonic mean of precision and sensitivity)

    Precision and F-score fall back to 0 when undefined, with an
    UndefinedRatioWarning. Sensitivity and specificity are returned as NaN
    when there are no actual positives or no actual negatives respectively.
    """

    def __init__(
        self,
        validate_counts: Optional[bool] = None,
        config: Optional[CalculatorConfig] = None,
    ):
        """
        Initialize calculator.

        Args:
            validate_counts: Reject negative counts (overrides config)
            config: Settings (defaults to CalculatorConfig.from_env())
        """
        self.config = config or CalculatorConfig.from_env()
        if validate_counts is None:
            validate_counts = self.config.validate_counts
        self.validate_counts = validate_counts

    def compute(self, tp: float, tn: float, fp: float, fn: float) -> MetricsResult:
        """
        Calculate all metrics for one confusion matrix.

        Args:
            tp: True positives
            tn: True negatives
            fp: False positives
            fn: False negatives

        Returns:
            MetricsResult with the five metrics

        Raises:
            InvalidInputError: A count is negative and validation is on
            EmptyInputError: All counts are zero
        """
        return self.compute_counts(ConfusionCounts(tp=tp, tn=tn, fp=fp, fn=fn))

    def compute_counts(self, counts: ConfusionCounts) -> MetricsResult:
        """Calculate all metrics for a ConfusionCounts."""
        if self.validate_counts and counts.has_negative:
            raise InvalidInputError(f"Confusion matrix counts must be non-negative: {counts}")

        n = counts.total
        if n == 0:
            logger.error("Total number of elements (N) cannot be zero.")
            raise EmptyInputError()

        undefined = []

        accuracy = _ratio(counts.tp + counts.tn, n)
        sensitivity = _ratio(counts.tp, counts.actual_positives)
        specificity = _ratio(counts.tn, counts.actual_negatives)

        precision = _ratio(counts.tp, counts.predicted_positives)
        if _is_undefined(precision):
            _report_undefined("Division by zero computing precision. Returning 0 for precision.")
            precision = np.float64(0.0)
            undefined.append(PRECISION)

        # Also undefined when sensitivity is NaN
        f_score = _ratio(2 * precision * sensitivity, precision + sensitivity)
        if _is_undefined(f_score):
            _report_undefined("F-score undefined. Returning 0 for F-score.")
            f_score = np.float64(0.0)
            undefined.append(F_SCORE)

        return MetricsResult(
            accuracy=float(accuracy),
            sensitivity=float(sensitivity),
            specificity=float(specificity),
            precision=float(precision),
            f_score=float(f_score),
            warnings=tuple(undefined),
        )

    def compute_many(self, named_counts: Mapping[str, CountsLike]) -> Dict[str, MetricsResult]:
        """
        Calculate metrics for several named confusion matrices.

        Matrices that raise MetricsError (empty, or negative with validation
        on) are logged and left out.

        Args:
            named_counts: Dict of name to ConfusionCounts or (tp, tn, fp, fn)

        Returns:
            Dict of name to MetricsResult
        """
        results = {}

        for name, counts in named_counts.items():
            if not isinstance(counts, ConfusionCounts):
                counts = ConfusionCounts(*counts)
            try:
                results[name] = self.compute_counts(counts)
            except MetricsError as e:
                logger.error(f"Skipping {name}: {e}")

        return results


def compute_metrics(tp: float, tn: float, fp: float, fn: float) -> MetricsResult:
    """Calculate metrics with a calculator built from the current environment."""
    return MetricsCalculator().compute(tp, tn, fp, fn)
