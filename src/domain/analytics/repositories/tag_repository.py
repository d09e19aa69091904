"""Tag repository interface for the analytics domain."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.analytics_task import AnalyticsTag


class TagRepository(ABC):
    """Read-only port supplying a user's tags, each with its tasks."""

    @abstractmethod
    async def get_all(self, user_id: str) -> List[AnalyticsTag]:
        """Get all tags of a user."""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str, tag_id: str) -> Optional[AnalyticsTag]:
        """Find a user's tag by ID."""
        pass
