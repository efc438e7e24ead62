"""Core components: types, errors, and configuration."""

from .types import (
    ConfusionCounts,
    MetricsResult,
    METRIC_KEYS,
)
from .errors import (
    MetricsError,
    EmptyInputError,
    InvalidInputError,
    UndefinedRatioWarning,
)
from .config import CalculatorConfig

__all__ = [
    "ConfusionCounts",
    "MetricsResult",
    "METRIC_KEYS",
    "MetricsError",
    "EmptyInputError",
    "InvalidInputError",
    "UndefinedRatioWarning",
    "CalculatorConfig",
]
