"""Analytics domain exceptions."""

from typing import Optional


class AnalyticsError(Exception):
    """Base exception for analytics domain."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ValidationError(AnalyticsError):
    """Raised when validation fails."""

    pass


class StatisticalError(AnalyticsError):
    """Base exception for statistical analysis errors."""

    pass


class EmptySampleError(StatisticalError):
    """Raised when a statistic is requested over an empty sample."""

    pass


class UndefinedDeviationError(StatisticalError):
    """Raised when deviation is requested relative to a zero mean."""

    pass


class NumericOverflowError(StatisticalError):
    """Raised when a statistic exceeds the floating point range."""

    pass


class AggregationError(AnalyticsError):
    """Base exception for data aggregation errors."""

    pass


class InvalidPeriodError(AggregationError):
    """Raised when an unknown analytics period is requested."""

    pass


class InvalidDateFormatError(AggregationError):
    """Raised when a group date cannot be parsed."""

    pass


class TagNotFoundError(AnalyticsError):
    """Raised when a tag does not exist for the user."""

    pass
