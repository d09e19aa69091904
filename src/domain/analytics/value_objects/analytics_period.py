"""Analytics period value object."""

from enum import Enum
from typing import Optional, Union

from ..exceptions import InvalidPeriodError


class AnalyticsPeriod(Enum):
    """Calendar period an analytics result can be restricted to."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"

    @classmethod
    def parse(cls, value: Union["AnalyticsPeriod", str, None]) -> Optional["AnalyticsPeriod"]:
        """Parse a period from user input; None means no period was requested."""
        if value is None or isinstance(value, cls):
            return value

        normalized = str(value).strip().lower()
        if not normalized:
            return None

        try:
            return cls(normalized)
        except ValueError:
            raise InvalidPeriodError(
                f"Unknown analytics period: {value!r}",
                context={"allowed": [period.value for period in cls]},
            )

    def is_unbounded(self) -> bool:
        """Check if the period keeps every group."""
        return self == AnalyticsPeriod.ALL

    def __str__(self) -> str:
        """String representation of period."""
        return self.value
