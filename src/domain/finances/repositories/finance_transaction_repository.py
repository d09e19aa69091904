"""Finance transaction repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.finance_transaction import FinanceTransaction
from ..value_objects.transaction_filter import TransactionFilter


class FinanceTransactionRepository(ABC):
    """Read-only port supplying finance transactions."""

    @abstractmethod
    async def get_all(self, filters: TransactionFilter) -> List[FinanceTransaction]:
        """Get all transactions matching the filter."""
        pass

    @abstractmethod
    async def get_by_id(
        self, transaction_id: str, filters: TransactionFilter
    ) -> Optional[FinanceTransaction]:
        """Find a transaction by ID within the filter's scope."""
        pass
