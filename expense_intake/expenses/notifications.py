import psycopg

from expense_intake.database.repositories.household_repository import HouseholdRepository
from expense_intake.expenses.models import Expense
from expense_intake.logging.logger import Log


class HouseholdNotifier:
    """Tells household members that a new expense was logged.

    Delivery is log-only until a push provider is configured.
    """

    def __init__(self, household_repo: HouseholdRepository) -> None:
        self._household_repo = household_repo

    def notify_expense_created(self, expense: Expense, acting_user_id: str) -> list[str]:
        """Notify every active member except the acting user.

        Returns the user ids that were notified. Lookup failures are logged
        and yield an empty list; the expense is already stored at this point.
        """
        try:
            member_ids = self._household_repo.get_active_member_ids(expense.household_id)
        except psycopg.Error as exc:
            Log.error(
                f"Could not load members of household {expense.household_id} "
                f"for expense {expense.id}: {exc}"
            )
            return []

        recipients = [uid for uid in member_ids if uid != acting_user_id]
        message = (
            f"New expense: {expense.amount} in {expense.category}"
            f" ({expense.description})"
        )
        for user_id in recipients:
            self._send_push(user_id, message)
        return recipients

    def _send_push(self, user_id: str, message: str) -> None:
        Log.info(f"Push notification to user {user_id}: {message}")
