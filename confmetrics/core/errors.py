"""Error and warning types raised while computing metrics."""


class MetricsError(ValueError):
    """Base class for failures that prevent a result from being produced."""


class EmptyInputError(MetricsError):
    """All four counts sum to zero, so no metric can be derived."""

    def __init__(self, message: str = "Total number of elements (N) cannot be zero."):
        super().__init__(message)


class InvalidInputError(MetricsError):
    """A count is negative."""


class UndefinedRatioWarning(UserWarning):
    """A ratio had a zero denominator and was reported as 0."""
