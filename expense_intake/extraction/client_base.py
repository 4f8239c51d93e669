from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from expense_intake.extraction.models import ToolCall


class BaseAIProviderClient(ABC):
    """Contract for provider-specific AI clients."""

    @abstractmethod
    def create_tool_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        content: list[dict[str, Any]],
        tools: list[dict[str, Any]],
    ) -> list[ToolCall]:
        """Send one user message and return the tool calls the model made.

        An empty list means the model answered without calling a tool.
        """

    @abstractmethod
    def transcribe(self, *, model: str, audio_path: Path) -> str:
        """Return the transcript of an audio file."""
