"""
Reporting utilities for classification metrics.
Generates formatted output and summaries.
"""

import math
import logging
from typing import Dict, Optional

import pandas as pd

from confmetrics.core.config import CalculatorConfig
from confmetrics.core.types import ConfusionCounts, MetricsResult, METRIC_KEYS

logger = logging.getLogger(__name__)

METRIC_LABELS = {
    "accuracy": "Accuracy",
    "sensitivity": "Sensitivity (Recall)",
    "specificity": "Specificity",
    "precision": "Precision",
    "fScore": "F-Score",
}


class Reporter:
    """
    Generates formatted reports from metrics results.

    Supports:
    - Console output
    - Comparison across several confusion matrices
    - Dict and DataFrame export
    """

    def __init__(self, decimals: Optional[int] = None):
        """
        Initialize reporter.

        Args:
            decimals: Decimal places to print (defaults to config value)
        """
        if decimals is None:
            decimals = CalculatorConfig.from_env().decimals
        self.decimals = decimals

    def format_value(self, value: float) -> str:
        if not math.isfinite(value):
            return "undefined"
        return f"{value:.{self.decimals}f}"

    def print_summary(
        self,
        result: MetricsResult,
        counts: Optional[ConfusionCounts] = None,
        title: str = "EVALUATION METRICS",
    ) -> None:
        """
        Print a formatted summary of one result.

        Args:
            result: MetricsResult to summarize
            counts: Confusion matrix the result came from (optional)
            title: Header line
        """
        print("\n" + "=" * 40)
        print(title)
        print("=" * 40)

        if counts is not None:
            print(f"TP: {counts.tp}  TN: {counts.tn}  FP: {counts.fp}  FN: {counts.fn}")
            print("-" * 40)

        for key in METRIC_KEYS:
            print(f"{METRIC_LABELS[key]}: {self.format_value(result[key])}")

        if result.warnings:
            print("-" * 40)
            for key in result.warnings:
                print(f"  ⚠ {METRIC_LABELS[key]} undefined, reported as 0")

        print("=" * 40 + "\n")

    def compare(self, results: Dict[str, MetricsResult]) -> None:
        """
        Print comparison across several named results.

        Args:
            results: Dict mapping name to MetricsResult
        """
        width = 16 + 13 * len(METRIC_KEYS)

        print("\n" + "=" * width)
        print("METRICS COMPARISON")
        print("=" * width)

        header = f"{'Name':<16}" + "".join(f"{key:>13}" for key in METRIC_KEYS)
        print(header)
        print("-" * width)

        for name, result in results.items():
            row = f"{name:<16}" + "".join(
                f"{self.format_value(result[key]):>13}" for key in METRIC_KEYS
            )
            print(row)

        print("=" * width + "\n")

    def generate_report_dict(
        self,
        result: MetricsResult,
        counts: Optional[ConfusionCounts] = None,
    ) -> Dict:
        """
        Generate a dictionary report suitable for JSON serialization.

        Undefined (NaN or infinite) metrics are reported as None.

        Args:
            result: MetricsResult
            counts: Confusion matrix the result came from (optional)

        Returns:
            Dict with all report data
        """
        report = {
            "metrics": {
                key: (value if math.isfinite(value) else None)
                for key, value in result.to_dict().items()
            },
            "warnings": list(result.warnings),
        }
        if counts is not None:
            report["counts"] = {
                "tp": counts.tp,
                "tn": counts.tn,
                "fp": counts.fp,
                "fn": counts.fn,
            }
        return report

    def to_frame(self, results: Dict[str, MetricsResult]) -> pd.DataFrame:
        """
        Build a DataFrame with one row per named result.

        Args:
            results: Dict mapping name to MetricsResult

        Returns:
            DataFrame indexed by name with one column per metric
        """
        frame = pd.DataFrame.from_dict(
            {name: result.to_dict() for name, result in results.items()},
            orient="index",
            columns=list(METRIC_KEYS),
        )
        frame.index.name = "name"
        return frame
