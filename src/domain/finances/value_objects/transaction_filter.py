"""Transaction filter value objects."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ...analytics.services.calendar_days import month_bounds
from ..exceptions import ValidationError
from .transaction_type import TransactionType


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of creation instants."""

    start: datetime
    end: datetime

    def __post_init__(self):
        """Validate date range."""
        if self.start > self.end:
            raise ValidationError(f"Range start ({self.start}) must be <= end ({self.end})")

    @classmethod
    def for_month(cls, moment: datetime) -> "DateRange":
        """Range covering the calendar month of `moment`."""
        start, end = month_bounds(moment)
        return cls(start=start, end=end)

    def contains(self, moment: datetime) -> bool:
        """Check if range contains an instant.

        Naive datetimes are taken as system local time when compared with an
        aware range, and vice versa.
        """
        if moment.tzinfo is None and self.start.tzinfo is not None:
            moment = moment.astimezone()
        elif moment.tzinfo is not None and self.start.tzinfo is None:
            moment = moment.astimezone().replace(tzinfo=None)

        return self.start <= moment <= self.end

    def to_dict(self) -> Dict[str, str]:
        return {"start_date": self.start.isoformat(), "end_date": self.end.isoformat()}


@dataclass(frozen=True)
class TransactionFilter:
    """Criteria selecting a user's transactions."""

    user_id: str
    type: Optional[TransactionType] = None
    category_id: Optional[str] = None
    period: Optional[DateRange] = None

    def __post_init__(self):
        """Validate filter."""
        if not self.user_id:
            raise ValidationError("Transaction filter requires a user ID")

    @classmethod
    def all_time_same_type(
        cls, user_id: str, transaction_type: TransactionType
    ) -> "TransactionFilter":
        return cls(user_id=user_id, type=transaction_type)

    @classmethod
    def all_time_same_category(cls, user_id: str, category_id: str) -> "TransactionFilter":
        return cls(user_id=user_id, category_id=category_id)

    @classmethod
    def monthly_same_type(
        cls, user_id: str, transaction_type: TransactionType, now: datetime
    ) -> "TransactionFilter":
        return cls(user_id=user_id, type=transaction_type, period=DateRange.for_month(now))

    @classmethod
    def monthly_same_category(
        cls, user_id: str, category_id: str, now: datetime
    ) -> "TransactionFilter":
        return cls(user_id=user_id, category_id=category_id, period=DateRange.for_month(now))

    def matches(self, transaction: Any) -> bool:
        """Check if a transaction satisfies every criterion that is set."""
        if self.type is not None and transaction.type != self.type:
            return False

        if self.category_id is not None and transaction.category_id != self.category_id:
            return False

        if self.period is not None and not self.period.contains(transaction.created_at):
            return False

        return True
