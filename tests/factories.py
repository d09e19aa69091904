"""Test data factories for generating test objects."""

from datetime import datetime
from uuid import uuid4

import factory

from src.domain.analytics.entities.analytics_task import AnalyticsTag, AnalyticsTask
from src.domain.finances.entities.finance_transaction import (
    FinanceCategoryRef,
    FinanceTransaction,
)
from src.domain.finances.value_objects.transaction_type import TransactionType


# Base Factory with common utilities
class BaseFactory(factory.Factory):
    """Base factory with common utilities."""

    @classmethod
    def _make_uuid(cls) -> str:
        """Generate a UUID string."""
        return str(uuid4())


# Analytics Factories
class AnalyticsTaskFactory(BaseFactory):
    """Factory for AnalyticsTask records."""

    class Meta:
        model = AnalyticsTask

    id = factory.LazyFunction(BaseFactory._make_uuid)
    created_at = datetime(2023, 3, 15, 9, 30)
    is_completed = factory.Faker("pybool")
    execution_time = factory.Faker("random_int", min=0, max=7200)

    class Params:
        completed = factory.Trait(is_completed=True)
        todo = factory.Trait(is_completed=False)


class AnalyticsTagFactory(BaseFactory):
    """Factory for AnalyticsTag records."""

    class Meta:
        model = AnalyticsTag

    id = factory.LazyFunction(BaseFactory._make_uuid)
    title = factory.Faker("word")
    color = factory.Faker("hex_color")
    tasks = factory.LazyFunction(list)


# Finance Factories
class FinanceCategoryRefFactory(BaseFactory):
    """Factory for FinanceCategoryRef value objects."""

    class Meta:
        model = FinanceCategoryRef

    id = factory.LazyFunction(BaseFactory._make_uuid)
    title = factory.Faker("word")


class FinanceTransactionFactory(BaseFactory):
    """Factory for FinanceTransaction records."""

    class Meta:
        model = FinanceTransaction

    id = factory.LazyFunction(BaseFactory._make_uuid)
    value = factory.Faker("pyfloat", left_digits=3, right_digits=2, positive=True)
    type = TransactionType.EXPENSE
    created_at = datetime(2023, 3, 10, 18, 0)
    label = factory.Faker("sentence", nb_words=3)
    finances_category = factory.SubFactory(FinanceCategoryRefFactory)

    class Params:
        income = factory.Trait(type=TransactionType.INCOME)
        uncategorized = factory.Trait(finances_category=None)
