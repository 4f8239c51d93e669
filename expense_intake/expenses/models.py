import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Expense:
    """A household expense as stored in the expenses table."""

    description: str
    amount: Decimal
    category: str
    subcategory: str | None
    household_id: str
    expense_datetime: datetime = field(default_factory=_utcnow)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def validate(self) -> list[str]:
        """Return a list of domain rule violations, empty when valid."""
        errors: list[str] = []
        if not self.description:
            errors.append("Description is required")
        if self.amount <= 0:
            errors.append("Amount must be greater than 0")
        if not self.category:
            errors.append("Category is required")
        if not self.subcategory:
            errors.append("Subcategory is required")
        if not self.household_id:
            errors.append("Household is required")
        return errors

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation used in upload responses."""
        return {
            "id": self.id,
            "description": self.description,
            "amount": str(self.amount),
            "category": self.category,
            "subcategory": self.subcategory,
            "household_id": self.household_id,
            "expense_datetime": self.expense_datetime.isoformat(),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Expense":
        return cls(
            id=str(row["id"]),
            description=row["description"],
            amount=Decimal(str(row["amount"])),
            category=row["category"],
            subcategory=row["subcategory"],
            household_id=str(row["household_id"]),
            expense_datetime=row["expense_datetime"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
