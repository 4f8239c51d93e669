from expense_intake.expenses.category_hierarchy import CategoryHierarchyService
from expense_intake.expenses.models import Expense
from expense_intake.expenses.service import ExpenseService
from expense_intake.extraction.models import ExtractionDraft
from expense_intake.processor.exceptions import MissingUploadContextError
from expense_intake.processor.models import UploadContext


class DraftRecorder:
    """Household-facing steps shared by every file processor."""

    def __init__(
        self,
        category_service: CategoryHierarchyService,
        expense_service: ExpenseService,
    ) -> None:
        self._category_service = category_service
        self._expense_service = expense_service

    @staticmethod
    def require_context(context: UploadContext) -> None:
        if not context.household_id or not context.user_id:
            raise MissingUploadContextError("Missing household or user information")

    def taxonomy_for(self, context: UploadContext) -> str:
        return self._category_service.get_categories_and_subcategories(context.household_id)

    def record(
        self,
        draft: ExtractionDraft | None,
        context: UploadContext,
        default_description: str,
    ) -> Expense | None:
        """Persist the draft as an expense; None passes through untouched."""
        if draft is None:
            return None
        expense = draft.to_expense(context.household_id, default_description)
        return self._expense_service.create_expense(expense, context.user_id)
