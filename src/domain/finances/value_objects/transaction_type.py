"""Transaction type value object."""

from enum import Enum


class TransactionType(Enum):
    """Direction of a finance transaction."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"

    def __str__(self) -> str:
        """String representation of transaction type."""
        return self.value
