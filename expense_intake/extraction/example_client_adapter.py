"""Example AI client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAIProviderClient and register the provider in ExtractionClientFactory.
"""

import json
from pathlib import Path
from typing import Any, ClassVar

from expense_intake.extraction.client_base import BaseAIProviderClient
from expense_intake.extraction.models import ToolCall
from expense_intake.extraction.parser import LOG_EXPENSE_TOOL


class ExampleClientAdapter(BaseAIProviderClient):
    """Example adapter that always logs the same expense.

    No network calls. Useful for local development and as a template
    for building real provider adapters.
    """

    DEFAULT_ARGUMENTS: ClassVar[dict[str, object]] = {
        "date": "2024-07-21",
        "amount": 100.00,
        "category": "Casa",
        "subcategory": "Mantenimiento",
        "notes": "Monthly maintenance fee",
    }
    DEFAULT_TRANSCRIPT: ClassVar[str] = (
        "I paid one hundred euros for the monthly maintenance fee."
    )

    def create_tool_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        content: list[dict[str, Any]],
        tools: list[dict[str, Any]],
    ) -> list[ToolCall]:
        _ = model, temperature, max_tokens, content, tools
        return [ToolCall(name=LOG_EXPENSE_TOOL, arguments=json.dumps(self.DEFAULT_ARGUMENTS))]

    def transcribe(self, *, model: str, audio_path: Path) -> str:
        _ = model, audio_path
        return self.DEFAULT_TRANSCRIPT
