import base64
from collections.abc import Callable
from datetime import datetime, timezone

from expense_intake.expenses.models import Expense
from expense_intake.extraction.client import AIExtractionClient
from expense_intake.logging.logger import Log
from expense_intake.processor.base import BaseFileProcessor
from expense_intake.processor.draft_recorder import DraftRecorder
from expense_intake.processor.exceptions import FileDataUnavailableError, ImageReadError
from expense_intake.processor.models import UploadContext, UploadedFile


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ImageProcessor(BaseFileProcessor):
    """Receipt photo pipeline: encode -> analyze. Creates no temp files."""

    DEFAULT_DESCRIPTION = "Expense from receipt"

    def __init__(
        self,
        extraction_client: AIExtractionClient,
        recorder: DraftRecorder,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._extraction_client = extraction_client
        self._recorder = recorder
        self._clock = clock

    def can_process(self, media_type: str) -> bool:
        return media_type.lower().startswith("image/")

    def process(self, upload: UploadedFile, context: UploadContext) -> Expense | None:
        step = "context"
        try:
            self._recorder.require_context(context)

            step = "encode"
            encoded_image = self._encode(upload)

            step = "analyze"
            draft = self._extraction_client.extract_from_image(
                encoded_image,
                self._recorder.taxonomy_for(context),
                self._clock(),
                media_type=upload.media_type,
            )

            step = "persist"
            return self._recorder.record(draft, context, self.DEFAULT_DESCRIPTION)
        except Exception as exc:
            Log.error(
                f"Error processing image file ({upload.media_type}) for household "
                f"{context.household_id} at step '{step}': {exc}",
                media_type=upload.media_type,
                household_id=context.household_id,
                step=step,
            )
            raise

    @staticmethod
    def _encode(upload: UploadedFile) -> str:
        if upload.buffer is not None:
            data = upload.buffer
        elif upload.path is not None:
            try:
                data = upload.path.read_bytes()
            except OSError as exc:
                raise ImageReadError("Error processing image file") from exc
        else:
            raise FileDataUnavailableError("No file data available")
        return base64.b64encode(data).decode("ascii")
