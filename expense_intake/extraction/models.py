from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from expense_intake.expenses.models import Expense


@dataclass(frozen=True)
class ToolCall:
    """A function invocation returned by the model."""

    name: str
    arguments: str  # raw JSON text as produced by the model


@dataclass(frozen=True)
class ExtractionDraft:
    """Structured expense read from a model response, not yet validated."""

    date: datetime
    amount: Decimal
    category: str
    subcategory: str | None = None
    notes: str | None = None

    def to_expense(self, household_id: str, default_description: str) -> Expense:
        """Build the domain expense; notes become the description."""
        return Expense(
            description=self.notes or default_description,
            amount=self.amount,
            category=self.category,
            subcategory=self.subcategory,
            household_id=household_id,
            expense_datetime=self.date,
        )
