"""Data Transfer Objects for application layer."""

from .transaction_statistics_dto import (
    AverageValuesDTO,
    ComparisonStatisticsDTO,
    TransactionStatisticsDTO,
)

__all__ = [
    "ComparisonStatisticsDTO",
    "AverageValuesDTO",
    "TransactionStatisticsDTO",
]
