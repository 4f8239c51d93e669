from pathlib import Path
from typing import Any

import httpx
import openai

from expense_intake.extraction.client_base import BaseAIProviderClient
from expense_intake.extraction.exceptions import (
    ProviderRequestError,
    ProviderUnavailableError,
)
from expense_intake.extraction.models import ToolCall
from expense_intake.logging.logger import Log


class OpenAIClientAdapter(BaseAIProviderClient):
    """AI client adapter built on the OpenAI-compatible chat and audio APIs."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        # Retries are owned by AIExtractionClient, not the SDK.
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
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
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                top_p=1,
                messages=[{"role": "user", "content": content}],
                tools=tools,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ProviderUnavailableError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ProviderRequestError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            Log.info("AI returned no choices; nothing to log")
            return []
        tool_calls = response.choices[0].message.tool_calls or []
        return [
            ToolCall(name=call.function.name, arguments=call.function.arguments or "")
            for call in tool_calls
            if call.type == "function"
        ]

    def transcribe(self, *, model: str, audio_path: Path) -> str:
        try:
            with audio_path.open("rb") as audio_file:
                transcription = self._client.audio.transcriptions.create(
                    model=model,
                    file=audio_file,
                )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ProviderUnavailableError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ProviderRequestError(f"AI provider API error: {exc}") from exc
        return transcription.text
