"""Analytics domain entities."""

from .analytics_task import AnalyticsTag, AnalyticsTask

__all__ = [
    "AnalyticsTask",
    "AnalyticsTag",
]
