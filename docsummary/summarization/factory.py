from typing import ClassVar

from docsummary.config.settings import Settings
from docsummary.summarization.base import BaseSummarizer
from docsummary.summarization.bedrock_client_adapter import BedrockClientAdapter
from docsummary.summarization.client_base import BaseGenerationClient
from docsummary.summarization.example_client_adapter import ExampleClientAdapter
from docsummary.summarization.openai_client_adapter import OpenAIClientAdapter
from docsummary.summarization.summarizer import Summarizer


class SummarizerFactory:
    """Creates the configured AI summarizer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    DEFAULT_MODELS: ClassVar[dict[str, str]] = {
        "bedrock": "amazon.titan-text-express-v1",
        "openai": "gpt-4o-mini",
        "example": "example",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseSummarizer:
        """Create a configured summarizer from application settings."""
        provider = settings.summarization_provider.lower()
        client = cls._create_client(provider, settings)
        return Summarizer(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.summarization_temperature,
            max_tokens=settings.summarization_max_tokens,
            min_score=settings.min_summary_score,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["bedrock", "example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def _create_client(cls, provider: str, settings: Settings) -> BaseGenerationClient:
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "bedrock":
            return BedrockClientAdapter(
                region=settings.summarization_region or None,
                timeout_seconds=settings.summarization_timeout_seconds,
            )
        return OpenAIClientAdapter(
            api_key=settings.summarization_api_key,
            timeout_seconds=settings.summarization_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return settings.summarization_base_url.strip() or None
        if provider == "openai_compatible":
            url = settings.summarization_base_url.strip()
            if not url:
                raise ValueError(
                    "summarization_base_url is required for "
                    "summarization_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.summarization_base_url.strip() or default_base_url
        raise ValueError(
            f"Unknown summarization provider '{provider}'. "
            f"Choose from: {cls.supported_providers()}"
        )

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        model = settings.summarization_model_name.strip() or cls.DEFAULT_MODELS.get(provider, "")
        if not model:
            raise ValueError(f"summarization_model_name is required for provider '{provider}'")
        return model
