"""Task and tag analytics service."""

import logging
from datetime import datetime
from typing import Callable, List, Optional, Union

from ....domain.analytics.entities.analytics_task import AnalyticsTag
from ....domain.analytics.exceptions import TagNotFoundError
from ....domain.analytics.repositories.tag_repository import TagRepository
from ....domain.analytics.repositories.task_repository import TaskRepository
from ....domain.analytics.services.period_filter import PeriodFilter
from ....domain.analytics.services.task_grouper import TaskGrouper
from ....domain.analytics.value_objects.analytics_period import AnalyticsPeriod
from ....domain.analytics.value_objects.tasks_info import TagAnalytics, TaskGroup
from ....infrastructure.monitoring.structured_logging import EventType

logger = logging.getLogger(__name__)

PeriodInput = Union[AnalyticsPeriod, str, None]


class AnalyticsService:
    """Service building day-grouped task analytics, overall and per tag."""

    def __init__(
        self,
        task_repository: TaskRepository,
        tag_repository: TagRepository,
        grouper: Optional[TaskGrouper] = None,
        period_filter: Optional[PeriodFilter] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.task_repository = task_repository
        self.tag_repository = tag_repository
        self.grouper = grouper or TaskGrouper()
        self.period_filter = period_filter or PeriodFilter(day_format=self.grouper.day_format)
        self._clock = clock or datetime.now
        self._logger = logger.getChild(self.__class__.__name__)

    async def get_tasks_analytics(
        self, user_id: str, period: PeriodInput = None
    ) -> List[TaskGroup]:
        """Get a user's tasks grouped by creation day."""
        period = AnalyticsPeriod.parse(period)
        self._logger.info(
            f"Building task analytics for user {user_id} (period={period})",
            extra={"event_type": EventType.BUSINESS, "user_id": user_id},
        )

        tasks = await self.task_repository.get_all(user_id)
        groups = self.grouper.get_grouped_tasks_info(tasks)

        return self._filter_groups_by_period(groups, period)

    async def get_tags_analytics(
        self, user_id: str, period: PeriodInput = None
    ) -> List[TagAnalytics]:
        """Get day-grouped task analytics for every tag of a user."""
        period = AnalyticsPeriod.parse(period)
        self._logger.info(
            f"Building tag analytics for user {user_id} (period={period})",
            extra={"event_type": EventType.BUSINESS, "user_id": user_id},
        )

        tags = await self.tag_repository.get_all(user_id)

        return [self._build_tag_analytics(tag, period) for tag in tags]

    async def get_tag_analytics(
        self, user_id: str, tag_id: str, period: PeriodInput = None
    ) -> List[TagAnalytics]:
        """Get day-grouped task analytics of a single tag."""
        period = AnalyticsPeriod.parse(period)

        tag = await self.tag_repository.get_by_id(user_id, tag_id)
        if tag is None:
            self._logger.warning(
                f"Tag not found: {tag_id}",
                extra={"event_type": EventType.BUSINESS, "user_id": user_id},
            )
            raise TagNotFoundError(
                f"Tag {tag_id} not found", context={"user_id": user_id, "tag_id": tag_id}
            )

        return [self._build_tag_analytics(tag, period)]

    def _build_tag_analytics(
        self, tag: AnalyticsTag, period: Optional[AnalyticsPeriod]
    ) -> TagAnalytics:
        groups = self.grouper.get_grouped_tasks_info(tag.tasks)

        return TagAnalytics(
            id=tag.id,
            title=tag.title,
            color=tag.color,
            tasks=self._filter_groups_by_period(groups, period),
        )

    def _filter_groups_by_period(
        self, groups: List[TaskGroup], period: Optional[AnalyticsPeriod]
    ) -> List[TaskGroup]:
        if period is None:
            return groups

        filtered = list(self.period_filter.filter(groups, period, self._clock()))
        self._logger.debug(f"Period {period} kept {len(filtered)} of {len(groups)} day groups")

        return filtered
