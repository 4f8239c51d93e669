from psycopg.rows import dict_row

from expense_intake.database.connection import get_connection
from expense_intake.expenses.models import Expense


class ExpenseRepository:
    """Database operations for the expenses table."""

    def insert(self, expense: Expense) -> Expense:
        """Insert a new expense and return the stored row."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    INSERT INTO expenses (
                        id, description, amount, category, subcategory,
                        household_id, expense_datetime, created_at, updated_at
                    )
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                    RETURNING id, description, amount, category, subcategory,
                              household_id, expense_datetime, created_at, updated_at
                    """,
                    (
                        expense.id,
                        expense.description,
                        expense.amount,
                        expense.category,
                        expense.subcategory,
                        expense.household_id,
                        expense.expense_datetime,
                        expense.created_at,
                        expense.updated_at,
                    ),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError(f"Insert of expense {expense.id} returned no row")
        return Expense.from_row(row)
