"""Finances domain entities."""

from .finance_transaction import FinanceCategoryRef, FinanceTransaction

__all__ = [
    "FinanceCategoryRef",
    "FinanceTransaction",
]
