"""Metrics and reporting components."""

from .calculator import MetricsCalculator, compute_metrics
from .reporter import Reporter

__all__ = ["MetricsCalculator", "compute_metrics", "Reporter"]
