"""File-backed record sources feeding the CLI commands."""

import json
from pathlib import Path
from typing import Any, List, Optional

import yaml

from ....domain.analytics.entities.analytics_task import AnalyticsTag, AnalyticsTask
from ....domain.analytics.repositories.tag_repository import TagRepository
from ....domain.analytics.repositories.task_repository import TaskRepository
from ....domain.finances.entities.finance_transaction import FinanceTransaction
from ....domain.finances.repositories.finance_transaction_repository import (
    FinanceTransactionRepository,
)
from ....domain.finances.value_objects.transaction_filter import TransactionFilter

# Records loaded from files all belong to the user running the CLI
CLI_USER_ID = "cli"


def load_records(file_path: str) -> List[Any]:
    """Load a list of records from a JSON or YAML file.

    Args:
        file_path: Path to the records file

    Returns:
        List of record dictionaries

    Raises:
        ValueError: If the file format is unknown or the content is not a list
    """
    path = Path(file_path)
    suffix = path.suffix.lower()

    with open(path, "r", encoding="utf-8") as f:
        if suffix == ".json":
            data = json.load(f)
        elif suffix in (".yml", ".yaml"):
            data = yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported records file format: {suffix or path.name}")

    if not isinstance(data, list):
        raise ValueError(f"Records file must contain a list, got {type(data).__name__}")

    return data


class FileTaskRepository(TaskRepository):
    """Task source over records loaded from a file; every task belongs to the caller."""

    def __init__(self, tasks: List[AnalyticsTask]):
        self._tasks = list(tasks)

    @classmethod
    def from_file(cls, file_path: str) -> "FileTaskRepository":
        return cls([AnalyticsTask.from_dict(item) for item in load_records(file_path)])

    async def get_all(self, user_id: str) -> List[AnalyticsTask]:
        return list(self._tasks)


class FileTagRepository(TagRepository):
    """Tag source over records loaded from a file."""

    def __init__(self, tags: List[AnalyticsTag]):
        self._tags = list(tags)

    @classmethod
    def from_file(cls, file_path: str) -> "FileTagRepository":
        return cls([AnalyticsTag.from_dict(item) for item in load_records(file_path)])

    async def get_all(self, user_id: str) -> List[AnalyticsTag]:
        return list(self._tags)

    async def get_by_id(self, user_id: str, tag_id: str) -> Optional[AnalyticsTag]:
        return next((tag for tag in self._tags if tag.id == tag_id), None)


class FileTransactionRepository(FinanceTransactionRepository):
    """Transaction source over records loaded from a file."""

    def __init__(self, transactions: List[FinanceTransaction]):
        self._transactions = list(transactions)

    @classmethod
    def from_file(cls, file_path: str) -> "FileTransactionRepository":
        return cls([FinanceTransaction.from_dict(item) for item in load_records(file_path)])

    async def get_all(self, filters: TransactionFilter) -> List[FinanceTransaction]:
        return [transaction for transaction in self._transactions if filters.matches(transaction)]

    async def get_by_id(
        self, transaction_id: str, filters: TransactionFilter
    ) -> Optional[FinanceTransaction]:
        return next(
            (
                transaction
                for transaction in self._transactions
                if transaction.id == transaction_id and filters.matches(transaction)
            ),
            None,
        )
