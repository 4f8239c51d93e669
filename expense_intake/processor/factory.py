from collections.abc import Sequence
from pathlib import Path

from expense_intake.audio.converter import AudioConverter
from expense_intake.config.settings import Settings
from expense_intake.database.repositories.category_repository import CategoryRepository
from expense_intake.database.repositories.expense_repository import ExpenseRepository
from expense_intake.database.repositories.household_repository import HouseholdRepository
from expense_intake.expenses.category_hierarchy import CategoryHierarchyService
from expense_intake.expenses.notifications import HouseholdNotifier
from expense_intake.expenses.service import ExpenseService
from expense_intake.extraction import ExtractionClientFactory
from expense_intake.processor.audio_processor import AudioProcessor
from expense_intake.processor.base import BaseFileProcessor
from expense_intake.processor.draft_recorder import DraftRecorder
from expense_intake.processor.exceptions import UnsupportedFileTypeError
from expense_intake.processor.image_processor import ImageProcessor
from expense_intake.processor.temp_files import TempFileHandler


class FileProcessorFactory:
    """Selects the processor for an upload by its declared media type."""

    def __init__(self, processors: Sequence[BaseFileProcessor]) -> None:
        self._processors = list(processors)

    def get_processor(self, media_type: str) -> BaseFileProcessor:
        """Return the first registered processor that accepts ``media_type``.

        Raises:
            UnsupportedFileTypeError: if no processor accepts it.
        """
        for processor in self._processors:
            if processor.can_process(media_type):
                return processor
        raise UnsupportedFileTypeError(f"Unsupported file type: {media_type}")

    @classmethod
    def create(cls, settings: Settings) -> "FileProcessorFactory":
        """Wire image and audio processors with their collaborators."""
        extraction_client = ExtractionClientFactory.create(settings)
        recorder = DraftRecorder(
            category_service=CategoryHierarchyService(CategoryRepository()),
            expense_service=ExpenseService(
                expense_repo=ExpenseRepository(),
                notifier=HouseholdNotifier(HouseholdRepository()),
            ),
        )
        audio_converter = AudioConverter(
            ffmpeg_binary=settings.ffmpeg_binary,
            ffprobe_binary=settings.ffprobe_binary,
            timeout_seconds=settings.audio_process_timeout_seconds,
        )
        return cls(
            [
                ImageProcessor(extraction_client=extraction_client, recorder=recorder),
                AudioProcessor(
                    extraction_client=extraction_client,
                    temp_file_handler=TempFileHandler(Path(settings.temp_dir)),
                    audio_converter=audio_converter,
                    recorder=recorder,
                ),
            ]
        )
