"""Analytics domain services."""

from .period_filter import PeriodFilter, filter_by_period
from .task_grouper import DateBucket, TaskGrouper
from .trimmed_statistics import TrimmedStatistics

__all__ = [
    "TrimmedStatistics",
    "TaskGrouper",
    "DateBucket",
    "PeriodFilter",
    "filter_by_period",
]
