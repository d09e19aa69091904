"""Finances domain exceptions."""

from typing import Optional


class FinancesError(Exception):
    """Base exception for finances domain."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ValidationError(FinancesError):
    """Raised when validation fails."""

    pass


class TransactionNotFoundError(FinancesError):
    """Raised when a transaction does not exist for the user."""

    pass
