import json
from collections.abc import Callable
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from expense_intake.expenses.models import Expense
from expense_intake.extraction.models import ExtractionDraft, ToolCall
from expense_intake.processor.models import UploadContext

MAINTENANCE_ARGUMENTS: dict[str, object] = {
    "date": "2024-07-21",
    "amount": 100.00,
    "category": "Casa",
    "subcategory": "Mantenimiento",
    "notes": "Monthly maintenance fee",
}


@pytest.fixture()
def log_expense_call() -> ToolCall:
    """A well-formed log_expense call for the maintenance fee example."""
    return ToolCall(name="log_expense", arguments=json.dumps(MAINTENANCE_ARGUMENTS))


@pytest.fixture()
def maintenance_draft() -> ExtractionDraft:
    return ExtractionDraft(
        date=datetime(2024, 7, 21, tzinfo=timezone.utc),
        amount=Decimal("100.00"),
        category="Casa",
        subcategory="Mantenimiento",
        notes="Monthly maintenance fee",
    )


@pytest.fixture()
def upload_context() -> UploadContext:
    return UploadContext(household_id="household-1", user_id="user-1")


@pytest.fixture()
def make_expense() -> Callable[..., Expense]:
    def _make(**overrides: object) -> Expense:
        values: dict[str, object] = {
            "description": "Monthly maintenance fee",
            "amount": Decimal("100.00"),
            "category": "Casa",
            "subcategory": "Mantenimiento",
            "household_id": "household-1",
            "expense_datetime": datetime(2024, 7, 21, tzinfo=timezone.utc),
        }
        values.update(overrides)
        return Expense(**values)  # type: ignore[arg-type]

    return _make
