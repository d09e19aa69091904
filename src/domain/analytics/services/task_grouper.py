"""Day grouping of task records for analytics."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import tzinfo
from functools import cmp_to_key
from typing import Any, Dict, Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar

from ..exceptions import ValidationError
from ..value_objects.tasks_info import TaskGroup, TasksInfo, TasksInfoByGroups
from .calendar_days import DEFAULT_DAY_FORMAT, compare_days, format_day
from .field_access import FieldAccessor, read_field, to_number

R = TypeVar("R")


@dataclass(frozen=True)
class DateBucket(Generic[R]):
    """Records created on the same calendar day, in input order."""

    date: str
    records: Tuple[R, ...]

    def __len__(self) -> int:
        return len(self.records)


class TaskGrouper:
    """Domain service grouping task-like records by their creation day.

    Any record type works as long as it exposes a creation timestamp, a
    completion flag and an optional execution time, either as attributes or
    as mapping keys. The field names can be overridden per instance.
    """

    def __init__(
        self,
        day_format: str = DEFAULT_DAY_FORMAT,
        tz: Optional[tzinfo] = None,
        created_at_field: FieldAccessor = "created_at",
        completed_field: FieldAccessor = "is_completed",
        execution_time_field: FieldAccessor = "execution_time",
    ):
        self._day_format = day_format
        self._tz = tz
        self._created_at_field = created_at_field
        self._completed_field = completed_field
        self._execution_time_field = execution_time_field

    @property
    def day_format(self) -> str:
        return self._day_format

    def format_day(self, record: Any) -> str:
        """Get the day key of a record."""
        created_at = read_field(record, self._created_at_field)
        if created_at is None:
            raise ValidationError(
                "Record has no creation timestamp", context={"record": repr(record)}
            )

        return format_day(created_at, self._day_format, self._tz)

    def group_by_date(self, records: Iterable[R]) -> List[DateBucket[R]]:
        """Bucket records by creation day, sorted chronologically."""
        buckets: Dict[str, List[R]] = defaultdict(list)

        for record in records:
            buckets[self.format_day(record)].append(record)

        day_order = cmp_to_key(lambda first, second: compare_days(first, second, self._day_format))

        return [
            DateBucket(date=day, records=tuple(buckets[day]))
            for day in sorted(buckets, key=day_order)
        ]

    def summarize_group(self, records: Sequence[Any]) -> TasksInfoByGroups:
        """Summarize completed, todo and all tasks of one bucket."""
        completed = [record for record in records if read_field(record, self._completed_field)]
        todo = [record for record in records if not read_field(record, self._completed_field)]

        return TasksInfoByGroups.from_partitions(
            completed=self._get_tasks_info(completed),
            todo=self._get_tasks_info(todo),
        )

    def get_grouped_tasks_info(self, records: Iterable[Any]) -> List[TaskGroup]:
        """Group records by day and summarize every day."""
        return [
            TaskGroup(date=bucket.date, tasks=self.summarize_group(bucket.records))
            for bucket in self.group_by_date(records)
        ]

    def get_total_execution_time(self, records: Iterable[Any]) -> float:
        """Sum execution times, treating missing values as zero."""
        return sum(
            to_number(read_field(record, self._execution_time_field) or 0) for record in records
        )

    def _get_tasks_info(self, records: Sequence[Any]) -> TasksInfo:
        return TasksInfo(count=len(records), execution_time=self.get_total_execution_time(records))
