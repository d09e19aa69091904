"""Task and tag records consumed by analytics."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..exceptions import ValidationError


@dataclass(frozen=True)
class AnalyticsTask:
    """The slice of a task that day grouping needs."""

    id: str
    created_at: datetime
    is_completed: bool = False
    execution_time: Optional[float] = None

    def __post_init__(self):
        """Validate task record."""
        if not isinstance(self.created_at, datetime):
            raise ValidationError(f"Task {self.id} has no creation timestamp")

        if self.execution_time is not None and not isinstance(self.execution_time, (int, float)):
            raise ValidationError(
                f"Execution time must be a number, got {self.execution_time!r}",
                context={"task_id": self.id},
            )

        if self.execution_time is not None and self.execution_time < 0:
            raise ValidationError(
                f"Execution time must be non-negative, got {self.execution_time}",
                context={"task_id": self.id},
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalyticsTask":
        """Create task record from dictionary."""
        created_at = data["created_at"]
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at.replace("Z", "+00:00"))

        execution_time = data.get("execution_time")
        if execution_time is not None:
            try:
                execution_time = float(execution_time)
            except (TypeError, ValueError):
                raise ValidationError(
                    f"Invalid execution time: {execution_time!r}",
                    context={"task_id": str(data["id"])},
                )

        return cls(
            id=str(data["id"]),
            created_at=created_at,
            is_completed=bool(data.get("is_completed", False)),
            execution_time=execution_time,
        )


@dataclass(frozen=True)
class AnalyticsTag:
    """A tag together with the tasks it labels."""

    id: str
    title: str
    color: str
    tasks: List[AnalyticsTask] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalyticsTag":
        """Create tag record from dictionary."""
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            color=data.get("color", ""),
            tasks=[AnalyticsTask.from_dict(task) for task in data.get("tasks", [])],
        )
