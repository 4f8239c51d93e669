from typing import ClassVar

from expense_intake.config.settings import Settings
from expense_intake.extraction.client import AIExtractionClient
from expense_intake.extraction.client_base import BaseAIProviderClient
from expense_intake.extraction.example_client_adapter import ExampleClientAdapter
from expense_intake.extraction.openai_client_adapter import OpenAIClientAdapter


class ExtractionClientFactory:
    """Creates the configured AI extraction client."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }
    # provider -> Settings field holding its API key
    API_KEY_FIELDS: ClassVar[dict[str, str]] = {
        "openai": "openai_api_key",
        "openai_compatible": "openai_compatible_api_key",
        "openrouter": "openrouter_api_key",
        "groq": "groq_api_key",
        "together": "together_api_key",
        "ollama": "ollama_api_key",
    }

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", *sorted(cls.API_KEY_FIELDS)]

    @classmethod
    def create(cls, settings: Settings) -> AIExtractionClient:
        """Create an extraction client from application settings."""
        return AIExtractionClient(
            client=cls.create_provider_client(settings),
            model=settings.extraction_model_name,
            transcription_model=settings.transcription_model_name,
            temperature=settings.extraction_temperature,
            max_tokens=settings.extraction_max_tokens,
            retry_attempts=settings.ai_retry_attempts,
            retry_base_delay_seconds=settings.ai_retry_base_delay_seconds,
        )

    @classmethod
    def create_provider_client(cls, settings: Settings) -> BaseAIProviderClient:
        """Build the provider adapter named by ``settings.extraction_provider``.

        Raises:
            ValueError: for an unknown provider, or openai_compatible without
                a base URL.
        """
        provider = settings.extraction_provider.strip().lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider not in cls.API_KEY_FIELDS:
            raise ValueError(
                f"Unknown extraction provider '{provider}'. "
                f"Choose from: {cls.supported_providers()}"
            )
        return OpenAIClientAdapter(
            api_key=getattr(settings, cls.API_KEY_FIELDS[provider]) or "",
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=cls._base_url_for(provider, settings),
        )

    @classmethod
    def _base_url_for(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "openai_compatible_base_url is required for "
                    "extraction_provider=openai_compatible"
                )
            return url
        return cls.OPENAI_COMPATIBLE_BASE_URLS[provider]
