"""Finances domain value objects."""

from .transaction_filter import DateRange, TransactionFilter
from .transaction_type import TransactionType

__all__ = [
    "DateRange",
    "TransactionFilter",
    "TransactionType",
]
