"""Transaction mean and deviation service."""

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ....domain.analytics.exceptions import (
    EmptySampleError,
    NumericOverflowError,
    UndefinedDeviationError,
)
from ....domain.analytics.services.trimmed_statistics import TrimmedStatistics
from ....domain.analytics.value_objects.statistics_outcome import StatisticsOutcome
from ....domain.finances.entities.finance_transaction import FinanceTransaction
from ....domain.finances.exceptions import TransactionNotFoundError
from ....domain.finances.repositories.finance_transaction_repository import (
    FinanceTransactionRepository,
)
from ....domain.finances.value_objects.transaction_filter import TransactionFilter
from ....infrastructure.monitoring.structured_logging import EventType
from ...dto.transaction_statistics_dto import (
    AverageValuesDTO,
    ComparisonStatisticsDTO,
    TransactionStatisticsDTO,
)

logger = logging.getLogger(__name__)


class TransactionStatisticsService:
    """Service comparing a transaction with the user's similar transactions.

    Similar means the same type or the same category, either over all time or
    within the current calendar month. Each comparison reports the trimmed
    mean of the peers and how far the transaction deviates from it.
    """

    def __init__(
        self,
        transaction_repository: FinanceTransactionRepository,
        clock: Optional[Callable[[], datetime]] = None,
        decimal_places: int = 2,
    ):
        self.transaction_repository = transaction_repository
        self._clock = clock or datetime.now
        self._decimal_places = decimal_places
        self._logger = logger.getChild(self.__class__.__name__)

    async def get_one_with_mean_and_deviation(
        self, user_id: str, transaction_id: str
    ) -> TransactionStatisticsDTO:
        """Get a transaction with its all-time and monthly comparisons."""
        transaction = await self._get_transaction_or_raise(user_id, transaction_id)
        now = self._clock()
        category_id = transaction.category_id

        all_time_same_type = await self._get_statistics_by_filters(
            TransactionFilter.all_time_same_type(user_id, transaction.type), transaction.value
        )
        monthly_same_type = await self._get_statistics_by_filters(
            TransactionFilter.monthly_same_type(user_id, transaction.type, now), transaction.value
        )

        all_time_same_category = None
        monthly_same_category = None
        if category_id is not None:
            all_time_same_category = await self._get_statistics_by_filters(
                TransactionFilter.all_time_same_category(user_id, category_id), transaction.value
            )
            monthly_same_category = await self._get_statistics_by_filters(
                TransactionFilter.monthly_same_category(user_id, category_id, now),
                transaction.value,
            )

        self._logger.info(
            f"Computed statistics for transaction {transaction_id}",
            extra={"event_type": EventType.BUSINESS, "user_id": user_id},
        )

        return TransactionStatisticsDTO(
            transaction=transaction,
            average_values=AverageValuesDTO(
                all_time=ComparisonStatisticsDTO(
                    same_type=all_time_same_type, same_category=all_time_same_category
                ),
                month=ComparisonStatisticsDTO(
                    same_type=monthly_same_type, same_category=monthly_same_category
                ),
            ),
        )

    def calculate_statistics(
        self, transactions: Sequence[FinanceTransaction], value: float
    ) -> StatisticsOutcome:
        """Trimmed mean of the transactions and the deviation of `value` from it."""
        statistics = TrimmedStatistics(transactions, "value")

        try:
            mean = statistics.get_mean()
            deviation_percent = statistics.get_deviation_percent(value)
        except EmptySampleError:
            self._logger.warning("No transactions to compare against")
            return StatisticsOutcome.empty_sample()
        except UndefinedDeviationError:
            self._logger.warning(
                f"Mean of {statistics.sample_size} transactions is zero, deviation undefined"
            )
            return StatisticsOutcome.zero_mean(statistics.sample_size)
        except NumericOverflowError:
            self._logger.warning(
                f"Statistics of {statistics.sample_size} transactions exceed the float range"
            )
            return StatisticsOutcome.overflow(statistics.sample_size)

        outcome = StatisticsOutcome.ok(mean, deviation_percent, statistics.sample_size)

        return outcome.round(self._decimal_places)

    async def _get_statistics_by_filters(
        self, filters: TransactionFilter, value: float
    ) -> StatisticsOutcome:
        transactions = await self.transaction_repository.get_all(filters)

        return self.calculate_statistics(transactions, value)

    async def _get_transaction_or_raise(
        self, user_id: str, transaction_id: str
    ) -> FinanceTransaction:
        transaction = await self.transaction_repository.get_by_id(
            transaction_id, TransactionFilter(user_id=user_id)
        )

        if transaction is None:
            self._logger.warning(
                f"Transaction not found: {transaction_id}",
                extra={"event_type": EventType.BUSINESS, "user_id": user_id},
            )
            raise TransactionNotFoundError(
                f"Transaction {transaction_id} not found",
                context={"user_id": user_id, "transaction_id": transaction_id},
            )

        return transaction
