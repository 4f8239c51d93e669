from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from expense_intake.audio.converter import AudioConverter
from expense_intake.expenses.models import Expense
from expense_intake.extraction.client import AIExtractionClient
from expense_intake.logging.logger import Log
from expense_intake.processor.base import BaseFileProcessor
from expense_intake.processor.draft_recorder import DraftRecorder
from expense_intake.processor.exceptions import FileDataUnavailableError
from expense_intake.processor.models import TempFileHandle, UploadContext, UploadedFile
from expense_intake.processor.temp_files import TempFileHandler


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AudioProcessor(BaseFileProcessor):
    """Voice note pipeline: resolve -> verify -> convert -> transcribe -> analyze.

    Every scratch file the pipeline creates is deleted on every exit path.
    A disk-backed upload belongs to the upload layer and is never deleted;
    its WAV conversion is.
    """

    DEFAULT_DESCRIPTION = "Expense from voice note"

    def __init__(
        self,
        extraction_client: AIExtractionClient,
        temp_file_handler: TempFileHandler,
        audio_converter: AudioConverter,
        recorder: DraftRecorder,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._extraction_client = extraction_client
        self._temp_file_handler = temp_file_handler
        self._audio_converter = audio_converter
        self._recorder = recorder
        self._clock = clock

    def can_process(self, media_type: str) -> bool:
        return media_type.lower().startswith("audio/")

    def process(self, upload: UploadedFile, context: UploadContext) -> Expense | None:
        handles: list[TempFileHandle] = []
        step = "context"
        try:
            self._recorder.require_context(context)

            step = "resolve_path"
            source_path = self._resolve_path(upload, handles)

            step = "verify"
            self._audio_converter.verify_audio(source_path)

            step = "convert"
            wav_path = self._audio_converter.convert_to_wav(source_path)
            handles.append(TempFileHandle(path=wav_path, owned=True))

            step = "transcribe"
            transcript = self._extraction_client.transcribe(wav_path)

            step = "analyze"
            draft = self._extraction_client.extract_from_text(
                transcript,
                self._recorder.taxonomy_for(context),
                self._clock(),
            )

            step = "persist"
            return self._recorder.record(draft, context, self.DEFAULT_DESCRIPTION)
        except Exception as exc:
            Log.error(
                f"Error processing audio file ({upload.media_type}) for household "
                f"{context.household_id} at step '{step}': {exc}",
                media_type=upload.media_type,
                household_id=context.household_id,
                step=step,
            )
            raise
        finally:
            self._cleanup(handles)

    def _resolve_path(self, upload: UploadedFile, handles: list[TempFileHandle]) -> Path:
        if upload.path is not None:
            handles.append(TempFileHandle(path=upload.path, owned=False))
            return upload.path
        if upload.buffer is not None:
            temp_path = self._temp_file_handler.create_temp_file(
                upload.buffer, upload.original_name
            )
            handles.append(TempFileHandle(path=temp_path, owned=True))
            return temp_path
        raise FileDataUnavailableError("No file data available")

    def _cleanup(self, handles: list[TempFileHandle]) -> None:
        owned = [handle.path for handle in handles if handle.owned]
        if owned:
            self._temp_file_handler.delete_temp_files(owned)
