from datetime import datetime, timezone
from decimal import Decimal

from expense_intake.expenses.models import Expense
from expense_intake.extraction.models import ExtractionDraft


class TestValidate:
    def test_valid_expense_has_no_errors(self, make_expense) -> None:
        assert make_expense().validate() == []

    def test_collects_every_violation(self, make_expense) -> None:
        expense = make_expense(
            description="", amount=Decimal("0"), category="", subcategory=None, household_id=""
        )
        assert expense.validate() == [
            "Description is required",
            "Amount must be greater than 0",
            "Category is required",
            "Subcategory is required",
            "Household is required",
        ]

    def test_negative_amount_is_invalid(self, make_expense) -> None:
        assert make_expense(amount=Decimal("-1")).validate() == ["Amount must be greater than 0"]


class TestToDict:
    def test_serializes_amount_and_dates(self, make_expense) -> None:
        expense = make_expense(amount=Decimal("12.35"))
        data = expense.to_dict()

        assert data["amount"] == "12.35"
        assert data["expense_datetime"] == "2024-07-21T00:00:00+00:00"
        assert data["id"] == expense.id
        assert data["subcategory"] == "Mantenimiento"


class TestFromRow:
    def test_builds_expense(self) -> None:
        ts = datetime(2024, 7, 21, tzinfo=timezone.utc)
        expense = Expense.from_row(
            {
                "id": "3f1c",
                "description": "Bread",
                "amount": Decimal("2.50"),
                "category": "Food",
                "subcategory": "Bakery",
                "household_id": 7,
                "expense_datetime": ts,
                "created_at": ts,
                "updated_at": ts,
            }
        )
        assert expense.id == "3f1c"
        assert expense.amount == Decimal("2.50")
        assert expense.household_id == "7"


class TestDraftToExpense:
    def test_notes_become_description(self, maintenance_draft: ExtractionDraft) -> None:
        expense = maintenance_draft.to_expense("household-1", "Expense from receipt")

        assert expense.description == "Monthly maintenance fee"
        assert expense.amount == Decimal("100.00")
        assert expense.category == "Casa"
        assert expense.subcategory == "Mantenimiento"
        assert expense.household_id == "household-1"
        assert expense.expense_datetime == maintenance_draft.date

    def test_default_description_without_notes(self) -> None:
        draft = ExtractionDraft(
            date=datetime(2024, 7, 21, tzinfo=timezone.utc),
            amount=Decimal("5"),
            category="Food",
        )
        assert draft.to_expense("h", "Expense from voice note").description == "Expense from voice note"
