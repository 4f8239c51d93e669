from expense_intake.errors import ExpenseIntakeError


class ExpenseError(ExpenseIntakeError):
    """Base exception for expense domain and persistence errors."""


class ExpenseValidationError(ExpenseError):
    """Raised when an expense fails domain validation."""

    status_code = 400


class ExpensePersistenceError(ExpenseError):
    """Raised when an expense cannot be written to the database."""


class CategoryHierarchyError(ExpenseError):
    """Raised when the household category taxonomy cannot be loaded."""
