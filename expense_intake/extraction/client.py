"""AI-powered expense extraction from receipt images and voice notes."""

import time
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any, TypeVar

from expense_intake.extraction.call_queue import SerializedCallQueue, default_call_queue
from expense_intake.extraction.client_base import BaseAIProviderClient
from expense_intake.extraction.exceptions import (
    InvalidOrEmptyAudioFileError,
    ProviderUnavailableError,
)
from expense_intake.extraction.models import ExtractionDraft, ToolCall
from expense_intake.extraction.parser import extract_draft
from expense_intake.extraction.prompt_loader import load_prompt_template, load_tool_schema
from expense_intake.extraction.retry import linear_backoff, with_retry
from expense_intake.logging.logger import Log

T = TypeVar("T")


def is_transport_error(exc: Exception) -> bool:
    """Only provider connectivity failures are worth another attempt."""
    return isinstance(exc, ProviderUnavailableError)


class AIExtractionClient:
    """Extracts expense drafts through an AI provider.

    Every provider call is serialized through one call queue and retried on
    transport errors only.
    """

    def __init__(
        self,
        *,
        client: BaseAIProviderClient,
        model: str,
        transcription_model: str,
        temperature: float = 1.0,
        max_tokens: int = 256,
        retry_attempts: int = 3,
        retry_base_delay_seconds: float = 0.5,
        call_queue: SerializedCallQueue | None = None,
        prompt_template_path: Path | None = None,
        tool_schema_path: Path | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._client = client
        self._model = model
        self._transcription_model = transcription_model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._retry_attempts = retry_attempts
        self._retry_delay = linear_backoff(retry_base_delay_seconds)
        self._queue = call_queue if call_queue is not None else default_call_queue()
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._tools = [load_tool_schema(tool_schema_path)]
        self._sleep = sleep

    def extract_from_image(
        self,
        encoded_image: str,
        taxonomy_text: str,
        as_of: datetime,
        media_type: str = "image/jpeg",
    ) -> ExtractionDraft | None:
        """Extract an expense from a base64-encoded receipt image."""
        prompt = self._build_prompt(
            subject="receipt details",
            source="image",
            taxonomy_text=taxonomy_text,
            as_of=as_of,
        )
        content = [
            {"type": "text", "text": prompt},
            {
                "type": "image_url",
                "image_url": {"url": f"data:{media_type};base64,{encoded_image}"},
            },
        ]
        return self._complete(content)

    def extract_from_text(
        self,
        text: str,
        taxonomy_text: str,
        as_of: datetime,
    ) -> ExtractionDraft | None:
        """Extract an expense from a voice note transcript."""
        prompt = self._build_prompt(
            subject=f"transcription details: {text}",
            source="transcription",
            taxonomy_text=taxonomy_text,
            as_of=as_of,
        )
        return self._complete([{"type": "text", "text": prompt}])

    def transcribe(self, wav_path: Path) -> str:
        """Transcribe an audio file.

        Raises:
            InvalidOrEmptyAudioFileError: if the file is missing or empty;
                checked before any provider call.
        """
        if not wav_path.is_file() or wav_path.stat().st_size == 0:
            raise InvalidOrEmptyAudioFileError(f"Invalid or empty audio file: {wav_path}")

        transcript = self._call(
            lambda: self._client.transcribe(
                model=self._transcription_model,
                audio_path=wav_path,
            )
        )
        Log.info(f"Transcribed {wav_path.name}: {len(transcript)} chars")
        return transcript

    def _build_prompt(
        self,
        *,
        subject: str,
        source: str,
        taxonomy_text: str,
        as_of: datetime,
    ) -> str:
        return self._prompt_template.format(
            subject=subject,
            source=source,
            taxonomy=taxonomy_text,
            current_date=as_of.isoformat(),
        )

    def _complete(self, content: list[dict[str, Any]]) -> ExtractionDraft | None:
        Log.debug(f"Extraction prompt:\n{content[0]['text']}")
        tool_calls: list[ToolCall] = self._call(
            lambda: self._client.create_tool_completion(
                model=self._model,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
                content=content,
                tools=self._tools,
            )
        )
        Log.debug(f"AI tool calls: {tool_calls}")

        draft = extract_draft(tool_calls)
        if draft is None:
            Log.info("Model did not call log_expense; nothing to log")
        else:
            Log.info(f"Extracted draft: {draft.amount} in {draft.category}")
        return draft

    def _call(self, fn: Callable[[], T]) -> T:
        return self._queue.run(
            lambda: with_retry(
                fn,
                attempts=self._retry_attempts,
                delay=self._retry_delay,
                is_retryable=is_transport_error,
                sleep=self._sleep,
            )
        )
