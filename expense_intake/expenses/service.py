import psycopg

from expense_intake.database.repositories.expense_repository import ExpenseRepository
from expense_intake.expenses.exceptions import ExpensePersistenceError, ExpenseValidationError
from expense_intake.expenses.models import Expense
from expense_intake.expenses.notifications import HouseholdNotifier
from expense_intake.logging.logger import Log


class ExpenseService:
    """Validates, stores and announces new expenses."""

    def __init__(
        self,
        expense_repo: ExpenseRepository,
        notifier: HouseholdNotifier,
    ) -> None:
        self._expense_repo = expense_repo
        self._notifier = notifier

    def create_expense(self, expense: Expense, acting_user_id: str) -> Expense:
        """Persist a new expense and notify the rest of the household.

        Raises:
            ExpenseValidationError: if the expense breaks a domain rule.
            ExpensePersistenceError: if the insert fails.
        """
        errors = expense.validate()
        if errors:
            raise ExpenseValidationError(f"Invalid expense: {', '.join(errors)}")

        try:
            stored = self._expense_repo.insert(expense)
        except psycopg.Error as exc:
            Log.error(f"Failed to insert expense {expense.id}: {exc}")
            raise ExpensePersistenceError("Error creating expense") from exc

        Log.info(
            f"Expense {stored.id} created in household {stored.household_id} "
            f"by user {acting_user_id}"
        )
        self._notifier.notify_expense_created(stored, acting_user_id)
        return stored
