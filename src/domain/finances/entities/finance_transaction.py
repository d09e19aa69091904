"""Finance transaction entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..exceptions import ValidationError
from ..value_objects.transaction_type import TransactionType


@dataclass(frozen=True)
class FinanceCategoryRef:
    """Category reference carried by a transaction."""

    id: str
    title: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "title": self.title}


@dataclass(frozen=True)
class FinanceTransaction:
    """A single income or expense of a user."""

    id: str
    value: float
    type: TransactionType
    created_at: datetime
    label: Optional[str] = None
    finances_category: Optional[FinanceCategoryRef] = None

    def __post_init__(self):
        """Validate transaction."""
        if not isinstance(self.type, TransactionType):
            raise ValidationError(f"Unknown transaction type: {self.type!r}")

    @property
    def category_id(self) -> Optional[str]:
        return self.finances_category.id if self.finances_category else None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FinanceTransaction":
        """Create transaction from dictionary."""
        created_at = data["created_at"]
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at.replace("Z", "+00:00"))

        category = data.get("finances_category")
        try:
            transaction_type = TransactionType(str(data["type"]).upper())
        except ValueError:
            raise ValidationError(f"Unknown transaction type: {data['type']!r}")

        return cls(
            id=str(data["id"]),
            value=float(data["value"]),
            type=transaction_type,
            created_at=created_at,
            label=data.get("label"),
            finances_category=(
                FinanceCategoryRef(id=str(category["id"]), title=category.get("title", ""))
                if category
                else None
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "value": self.value,
            "type": self.type.value,
            "label": self.label,
            "created_at": self.created_at.isoformat(),
            "finances_category": (
                self.finances_category.to_dict() if self.finances_category else None
            ),
        }
