"""Finances application services."""

from .transaction_statistics_service import TransactionStatisticsService

__all__ = [
    "TransactionStatisticsService",
]
