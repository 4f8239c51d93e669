from abc import ABC, abstractmethod

from expense_intake.expenses.models import Expense
from expense_intake.processor.models import UploadContext, UploadedFile


class BaseFileProcessor(ABC):
    """Contract for all per-media-type upload processors."""

    @abstractmethod
    def can_process(self, media_type: str) -> bool:
        """Whether this processor handles the declared media type."""

    @abstractmethod
    def process(self, upload: UploadedFile, context: UploadContext) -> Expense | None:
        """Extract and persist an expense from an uploaded file.

        Returns:
            The persisted Expense, or None when the file was processed but
            held no identifiable expense.

        Raises:
            ExpenseIntakeError: on any failure; temp files are cleaned up first.
        """
