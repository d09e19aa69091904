"""Task repository interface for the analytics domain."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.analytics_task import AnalyticsTask


class TaskRepository(ABC):
    """Read-only port supplying a user's tasks to analytics."""

    @abstractmethod
    async def get_all(self, user_id: str) -> List[AnalyticsTask]:
        """Get all tasks of a user."""
        pass
