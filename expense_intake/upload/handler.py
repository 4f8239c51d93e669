from dataclasses import dataclass, field
from typing import Any

from expense_intake.errors import ExpenseIntakeError
from expense_intake.logging.logger import Log
from expense_intake.processor.exceptions import NoFileUploadedError
from expense_intake.processor.factory import FileProcessorFactory
from expense_intake.processor.models import UploadContext, UploadedFile

NOTHING_TO_LOG_DETAILS = (
    "The file was processed successfully, but no valid expense could be identified."
)


@dataclass(frozen=True)
class UploadResponse:
    """Transport-neutral outcome of one upload."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)


class ExpenseUploadHandler:
    """Runs one upload through the pipeline and maps the outcome to a status.

    200: expense logged. 422: processed, nothing to log. Pipeline errors use
    their own status (400 client input, 500 processing, 502/503 provider).
    """

    def __init__(self, processor_factory: FileProcessorFactory) -> None:
        self._processor_factory = processor_factory

    def handle(self, upload: UploadedFile | None, context: UploadContext) -> UploadResponse:
        try:
            if upload is None:
                raise NoFileUploadedError("No file uploaded")
            Log.info(
                f"Processing upload '{upload.original_name}' ({upload.media_type}) "
                f"for household {context.household_id}"
            )
            processor = self._processor_factory.get_processor(upload.media_type)
            expense = processor.process(upload, context)
        except ExpenseIntakeError as exc:
            Log.warning(f"Upload rejected with {exc.status_code}: {exc}")
            return UploadResponse(status_code=exc.status_code, body={"message": str(exc)})
        except Exception as exc:
            Log.exception(
                f"Unexpected error while processing upload: {exc!r}",
                household_id=context.household_id,
            )
            return UploadResponse(status_code=500, body={"message": "Internal server error"})

        if expense is None:
            return UploadResponse(
                status_code=422,
                body={"message": "No expense logged.", "details": NOTHING_TO_LOG_DETAILS},
            )
        return UploadResponse(
            status_code=200,
            body={"message": "Expense logged successfully.", "expense": expense.to_dict()},
        )
