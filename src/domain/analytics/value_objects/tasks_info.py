"""Task summary value objects produced by day grouping."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..exceptions import ValidationError


@dataclass(frozen=True)
class TasksInfo:
    """Count and total execution time of a set of tasks."""

    count: int = 0
    execution_time: float = 0

    def __post_init__(self):
        """Validate tasks info."""
        if self.count < 0:
            raise ValidationError(f"Task count must be non-negative, got {self.count}")

    def __add__(self, other: "TasksInfo") -> "TasksInfo":
        if not isinstance(other, TasksInfo):
            return NotImplemented
        return TasksInfo(
            count=self.count + other.count,
            execution_time=self.execution_time + other.execution_time,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"count": self.count, "execution_time": self.execution_time}


@dataclass(frozen=True)
class TasksInfoByGroups:
    """Task summaries split into completed, todo and all."""

    completed: TasksInfo
    todo: TasksInfo
    all: TasksInfo

    @classmethod
    def from_partitions(cls, completed: TasksInfo, todo: TasksInfo) -> "TasksInfoByGroups":
        """Build summaries whose `all` part is the sum of both partitions."""
        return cls(completed=completed, todo=todo, all=completed + todo)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "completed": self.completed.to_dict(),
            "todo": self.todo.to_dict(),
            "all": self.all.to_dict(),
        }


@dataclass(frozen=True)
class TaskGroup:
    """Summary of all tasks created on one calendar day."""

    date: str
    tasks: TasksInfoByGroups

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "tasks": self.tasks.to_dict()}


@dataclass(frozen=True)
class TagAnalytics:
    """Day-grouped task summaries of a single tag."""

    id: str
    title: str
    color: str
    tasks: List[TaskGroup] = field(default_factory=list)

    def with_tasks(self, tasks: List[TaskGroup]) -> "TagAnalytics":
        """Return a copy carrying a different list of groups."""
        return TagAnalytics(id=self.id, title=self.title, color=self.color, tasks=list(tasks))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "color": self.color,
            "tasks": [group.to_dict() for group in self.tasks],
        }
