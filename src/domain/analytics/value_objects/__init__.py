"""Analytics domain value objects."""

from .analytics_period import AnalyticsPeriod
from .dataset_size import DatasetSize
from .statistics_outcome import StatisticsOutcome, StatisticsStatus, round_half_up
from .tasks_info import TagAnalytics, TaskGroup, TasksInfo, TasksInfoByGroups

__all__ = [
    "AnalyticsPeriod",
    "DatasetSize",
    "StatisticsOutcome",
    "StatisticsStatus",
    "round_half_up",
    "TasksInfo",
    "TasksInfoByGroups",
    "TaskGroup",
    "TagAnalytics",
]
