"""Test transaction filters and records."""

from datetime import datetime, timezone

import pytest

from src.domain.finances.entities.finance_transaction import FinanceTransaction
from src.domain.finances.exceptions import ValidationError
from src.domain.finances.value_objects.transaction_filter import DateRange, TransactionFilter
from src.domain.finances.value_objects.transaction_type import TransactionType
from tests.factories import FinanceCategoryRefFactory, FinanceTransactionFactory


class TestDateRange:
    """Test DateRange value object."""

    def test_start_after_end(self):
        """Test inverted ranges are rejected."""
        with pytest.raises(ValidationError):
            DateRange(start=datetime(2023, 3, 2), end=datetime(2023, 3, 1))

    def test_for_month(self):
        """Test monthly range covers first to last day."""
        date_range = DateRange.for_month(datetime(2023, 3, 15, 12))

        assert date_range.contains(datetime(2023, 3, 1))
        assert date_range.contains(datetime(2023, 3, 31, 23, 59, 59))
        assert not date_range.contains(datetime(2023, 4, 1))
        assert not date_range.contains(datetime(2023, 2, 28, 23, 59, 59))

    def test_contains_aware_moment_in_aware_range(self):
        """Test aware ranges compare aware moments directly."""
        date_range = DateRange.for_month(datetime(2023, 3, 15, tzinfo=timezone.utc))

        assert date_range.contains(datetime(2023, 3, 31, 12, tzinfo=timezone.utc))
        assert not date_range.contains(datetime(2023, 4, 1, 0, 0, 1, tzinfo=timezone.utc))

    def test_contains_mixed_awareness(self):
        """Test naive and aware datetimes can be compared."""
        naive_range = DateRange.for_month(datetime(2023, 3, 15))
        aware_range = DateRange.for_month(datetime(2023, 3, 15, tzinfo=timezone.utc))

        assert naive_range.contains(datetime(2023, 3, 15, 12, tzinfo=timezone.utc))
        assert aware_range.contains(datetime(2023, 3, 15, 12))


class TestTransactionFilter:
    """Test TransactionFilter matching."""

    def setup_method(self):
        """Set up transactions."""
        self.groceries = FinanceCategoryRefFactory(id="groceries")
        self.expense = FinanceTransactionFactory(
            finances_category=self.groceries, created_at=datetime(2023, 3, 10)
        )
        self.old_expense = FinanceTransactionFactory(
            finances_category=self.groceries, created_at=datetime(2023, 1, 10)
        )
        self.income = FinanceTransactionFactory(income=True, created_at=datetime(2023, 3, 11))

    def test_requires_user(self):
        """Test filters are always scoped to a user."""
        with pytest.raises(ValidationError):
            TransactionFilter(user_id="")

    def test_user_only_matches_everything(self):
        """Test a filter without criteria matches any transaction."""
        filters = TransactionFilter(user_id="u1")

        assert all(filters.matches(t) for t in (self.expense, self.old_expense, self.income))

    def test_all_time_same_type(self):
        """Test type filter ignores dates."""
        filters = TransactionFilter.all_time_same_type("u1", TransactionType.EXPENSE)

        assert filters.matches(self.expense)
        assert filters.matches(self.old_expense)
        assert not filters.matches(self.income)

    def test_all_time_same_category(self):
        """Test category filter."""
        filters = TransactionFilter.all_time_same_category("u1", "groceries")

        assert filters.matches(self.old_expense)
        assert not filters.matches(self.income)

    def test_monthly_same_type(self):
        """Test monthly type filter drops older transactions."""
        filters = TransactionFilter.monthly_same_type(
            "u1", TransactionType.EXPENSE, datetime(2023, 3, 20)
        )

        assert filters.matches(self.expense)
        assert not filters.matches(self.old_expense)

    def test_monthly_same_category(self):
        """Test monthly category filter."""
        filters = TransactionFilter.monthly_same_category("u1", "groceries", datetime(2023, 1, 31))

        assert filters.matches(self.old_expense)
        assert not filters.matches(self.expense)


class TestFinanceTransaction:
    """Test FinanceTransaction record."""

    def test_from_dict(self):
        """Test loading a transaction from a dictionary."""
        transaction = FinanceTransaction.from_dict(
            {
                "id": 3,
                "value": "42.5",
                "type": "expense",
                "created_at": "2023-03-10T18:00:00Z",
                "finances_category": {"id": 9, "title": "Food"},
            }
        )

        assert transaction.id == "3"
        assert transaction.value == 42.5
        assert transaction.type == TransactionType.EXPENSE
        assert transaction.category_id == "9"
        assert transaction.created_at.tzinfo == timezone.utc

    def test_from_dict_unknown_type(self):
        """Test unknown transaction types are rejected."""
        with pytest.raises(ValidationError):
            FinanceTransaction.from_dict(
                {"id": 1, "value": 1, "type": "transfer", "created_at": "2023-03-10T00:00:00"}
            )

    def test_uncategorized(self):
        """Test transactions without category have no category id."""
        transaction = FinanceTransactionFactory(uncategorized=True)

        assert transaction.category_id is None
        assert transaction.to_dict()["finances_category"] is None
