"""Test analytics value objects and records."""

from datetime import datetime, timezone

import pytest

from src.domain.analytics.entities.analytics_task import AnalyticsTag, AnalyticsTask
from src.domain.analytics.exceptions import InvalidPeriodError, ValidationError
from src.domain.analytics.value_objects.analytics_period import AnalyticsPeriod
from src.domain.analytics.value_objects.statistics_outcome import (
    StatisticsOutcome,
    StatisticsStatus,
    round_half_up,
)
from src.domain.analytics.value_objects.tasks_info import TagAnalytics, TasksInfo, TasksInfoByGroups


class TestAnalyticsPeriod:
    """Test AnalyticsPeriod parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("week", AnalyticsPeriod.WEEK),
            (" Month ", AnalyticsPeriod.MONTH),
            ("YEAR", AnalyticsPeriod.YEAR),
            ("all", AnalyticsPeriod.ALL),
            (AnalyticsPeriod.WEEK, AnalyticsPeriod.WEEK),
            (None, None),
            ("", None),
        ],
    )
    def test_parse(self, value, expected):
        """Test parsing user input."""
        assert AnalyticsPeriod.parse(value) == expected

    def test_parse_unknown(self):
        """Test unknown periods are rejected."""
        with pytest.raises(InvalidPeriodError):
            AnalyticsPeriod.parse("decade")

    def test_only_all_is_unbounded(self):
        """Test only the all period keeps everything."""
        assert [period for period in AnalyticsPeriod if period.is_unbounded()] == [
            AnalyticsPeriod.ALL
        ]


class TestTasksInfo:
    """Test task summary value objects."""

    def test_addition(self):
        """Test summaries add component-wise."""
        total = TasksInfo(count=2, execution_time=1.5) + TasksInfo(count=3, execution_time=2)

        assert total == TasksInfo(count=5, execution_time=3.5)

    def test_negative_count(self):
        """Test negative counts are rejected."""
        with pytest.raises(ValidationError):
            TasksInfo(count=-1)

    def test_from_partitions(self):
        """Test the all partition is derived from completed and todo."""
        summary = TasksInfoByGroups.from_partitions(
            completed=TasksInfo(count=1, execution_time=10),
            todo=TasksInfo(count=4, execution_time=0),
        )

        assert summary.all == TasksInfo(count=5, execution_time=10)
        assert list(summary.to_dict()) == ["completed", "todo", "all"]

    def test_tag_analytics_with_tasks(self):
        """Test replacing groups keeps tag identity."""
        tag = TagAnalytics(id="t1", title="Work", color="#ff0000")

        updated = tag.with_tasks([])

        assert updated == tag
        assert updated.to_dict() == {"id": "t1", "title": "Work", "color": "#ff0000", "tasks": []}


class TestStatisticsOutcome:
    """Test statistics outcome variants."""

    def test_ok_requires_numbers(self):
        """Test a successful outcome must carry mean and deviation."""
        with pytest.raises(ValidationError):
            StatisticsOutcome(StatisticsStatus.OK, mean=1.0)

    def test_empty_sample(self):
        """Test empty sample outcomes carry no numbers."""
        outcome = StatisticsOutcome.empty_sample()

        assert not outcome.is_ok()
        assert outcome.to_dict() == {
            "status": "empty_sample",
            "mean": None,
            "deviation_percent": None,
            "sample_size": 0,
        }

    def test_zero_mean(self):
        """Test zero mean outcomes keep the mean but no deviation."""
        outcome = StatisticsOutcome.zero_mean(3)

        assert outcome.status == StatisticsStatus.ZERO_MEAN
        assert outcome.mean == 0.0
        assert outcome.deviation_percent is None

    def test_round(self):
        """Test rounding is half-up to the requested places."""
        outcome = StatisticsOutcome.ok(33.333333, 12.345, 9).round(2)

        assert outcome.mean == 33.33
        assert outcome.deviation_percent == 12.35
        assert outcome.sample_size == 9

    @pytest.mark.parametrize(
        "value,places,expected",
        [(2.675, 2, 2.68), (1.005, 2, 1.01), (-0.125, 2, -0.13), (7, 0, 7)],
    )
    def test_round_half_up(self, value, places, expected):
        """Test half-up rounding of decimal representations."""
        assert round_half_up(value, places) == expected


class TestAnalyticsRecords:
    """Test task and tag records."""

    def test_task_from_dict(self):
        """Test ISO timestamps with Z suffix are parsed as UTC."""
        task = AnalyticsTask.from_dict(
            {"id": 7, "created_at": "2023-03-15T10:00:00Z", "is_completed": True}
        )

        assert task.id == "7"
        assert task.created_at == datetime(2023, 3, 15, 10, tzinfo=timezone.utc)
        assert task.is_completed is True
        assert task.execution_time is None

    def test_task_requires_timestamp(self):
        """Test tasks without a datetime are rejected."""
        with pytest.raises(ValidationError):
            AnalyticsTask(id="1", created_at="2023-03-15")

    def test_task_rejects_negative_execution_time(self):
        """Test negative execution time is rejected."""
        with pytest.raises(ValidationError):
            AnalyticsTask(id="1", created_at=datetime(2023, 3, 15), execution_time=-5)

    def test_tag_from_dict(self):
        """Test tags load their nested tasks."""
        tag = AnalyticsTag.from_dict(
            {
                "id": "tag-1",
                "title": "Home",
                "color": "#00ff00",
                "tasks": [{"id": "1", "created_at": "2023-03-15T08:00:00"}],
            }
        )

        assert tag.title == "Home"
        assert len(tag.tasks) == 1
        assert tag.tasks[0].created_at == datetime(2023, 3, 15, 8)


class TestNumericEdgeCases:
    """Test outcomes and records with unusual numbers."""

    def test_round_half_up_large_value(self):
        """Test rounding works beyond the default decimal precision."""
        assert round_half_up(1.5e300, 2) == 1.5e300

    def test_overflow_outcome(self):
        """Test overflow outcomes carry no numbers."""
        outcome = StatisticsOutcome.overflow(2).round(2)

        assert outcome.status == StatisticsStatus.OVERFLOW
        assert outcome.to_dict()["mean"] is None
        assert outcome.sample_size == 2

    def test_ok_rejects_infinite_numbers(self):
        """Test a successful outcome cannot hold infinity."""
        with pytest.raises(ValidationError):
            StatisticsOutcome.ok(float("inf"), 10.0, 3)

    def test_task_from_dict_converts_execution_time(self):
        """Test numeric strings are accepted as execution time."""
        task = AnalyticsTask.from_dict(
            {"id": "1", "created_at": "2023-03-15T08:00:00", "execution_time": "12.5"}
        )

        assert task.execution_time == 12.5

    @pytest.mark.parametrize("execution_time", ["soon", [5]])
    def test_task_from_dict_invalid_execution_time(self, execution_time):
        """Test non-numeric execution times are rejected."""
        with pytest.raises(ValidationError):
            AnalyticsTask.from_dict(
                {"id": "1", "created_at": "2023-03-15T08:00:00", "execution_time": execution_time}
            )

    def test_task_rejects_string_execution_time(self):
        """Test records built directly must carry a numeric execution time."""
        with pytest.raises(ValidationError):
            AnalyticsTask(id="1", created_at=datetime(2023, 3, 15), execution_time="5")
