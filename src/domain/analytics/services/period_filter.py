"""Period filter for day-grouped analytics."""

from datetime import date, datetime
from typing import Sequence, TypeVar, Union

from ..exceptions import ValidationError
from ..value_objects.analytics_period import AnalyticsPeriod
from .calendar_days import DEFAULT_DAY_FORMAT, SUNDAY, parse_day, start_of_week
from .field_access import read_field

G = TypeVar("G")


class PeriodFilter:
    """Domain service restricting day groups to the current week, month or year.

    Periods follow calendar boundaries rather than rolling windows: `week`
    keeps groups in the same calendar week as the reference moment, `month`
    the same calendar month, `year` the same calendar year.
    """

    def __init__(self, week_starts_on: int = SUNDAY, day_format: str = DEFAULT_DAY_FORMAT):
        if not 0 <= week_starts_on <= 6:
            raise ValidationError(f"Week start must be a weekday 0-6, got {week_starts_on}")

        self._week_starts_on = week_starts_on
        self._day_format = day_format

    @property
    def week_starts_on(self) -> int:
        return self._week_starts_on

    def filter(
        self,
        groups: Sequence[G],
        period: Union[AnalyticsPeriod, str, None],
        now: Union[datetime, date],
    ) -> Sequence[G]:
        """Keep groups whose day falls in the same period as `now`.

        Without a period, or for `all`, the input is returned as is.
        """
        period = AnalyticsPeriod.parse(period)
        if period is None or period.is_unbounded():
            return groups

        reference_day = now.date() if isinstance(now, datetime) else now

        return [
            group
            for group in groups
            if self.is_same_period(self._group_day(group), reference_day, period)
        ]

    def is_same_period(self, day: date, reference_day: date, period: AnalyticsPeriod) -> bool:
        """Check if two days share the given calendar period."""
        if period == AnalyticsPeriod.WEEK:
            return start_of_week(day, self._week_starts_on) == start_of_week(
                reference_day, self._week_starts_on
            )
        elif period == AnalyticsPeriod.MONTH:
            return (day.year, day.month) == (reference_day.year, reference_day.month)
        elif period == AnalyticsPeriod.YEAR:
            return day.year == reference_day.year
        else:
            return True

    def _group_day(self, group) -> date:
        return parse_day(read_field(group, "date"), self._day_format)


def filter_by_period(
    groups: Sequence[G],
    period: Union[AnalyticsPeriod, str, None],
    now: Union[datetime, date],
    week_starts_on: int = SUNDAY,
) -> Sequence[G]:
    """Filter day groups by period with a default-configured filter."""
    return PeriodFilter(week_starts_on=week_starts_on).filter(groups, period, now)
