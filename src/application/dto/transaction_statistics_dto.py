"""Data Transfer Objects for transaction statistics."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ...domain.analytics.value_objects.statistics_outcome import StatisticsOutcome
from ...domain.finances.entities.finance_transaction import FinanceTransaction


@dataclass
class ComparisonStatisticsDTO:
    """Statistics of a transaction against same-type and same-category peers."""

    same_type: StatisticsOutcome
    same_category: Optional[StatisticsOutcome] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "same_type": self.same_type.to_dict(),
            "same_category": self.same_category.to_dict() if self.same_category else None,
        }


@dataclass
class AverageValuesDTO:
    """All-time and current-month comparisons."""

    all_time: ComparisonStatisticsDTO
    month: ComparisonStatisticsDTO

    def to_dict(self) -> Dict[str, Any]:
        return {"all_time": self.all_time.to_dict(), "month": self.month.to_dict()}


@dataclass
class TransactionStatisticsDTO:
    """A transaction together with its expected-value comparisons."""

    transaction: FinanceTransaction
    average_values: AverageValuesDTO

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "transaction": self.transaction.to_dict(),
            "average_values": self.average_values.to_dict(),
        }
