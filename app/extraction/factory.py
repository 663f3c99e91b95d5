from typing import ClassVar

from app.config.settings import Settings
from app.extraction.base import BaseFieldExtractor
from app.extraction.client_base import BaseExtractionClient
from app.extraction.example_client_adapter import ExampleClientAdapter
from app.extraction.extractor import FieldExtractor
from app.extraction.openai_client_adapter import OpenAIClientAdapter
from app.logging.logger import Log


class FieldExtractorFactory:
    """Creates the configured field extractor, or None when none is available."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }
    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama"})

    @classmethod
    def create(cls, settings: Settings) -> BaseFieldExtractor | None:
        """Build the extractor for ``settings.extraction_provider``.

        Returns None for provider ``none`` and for hosted providers without an
        API key, so the pipeline runs on the pattern fallback alone.

        Raises:
            ValueError: for an unknown provider or an incomplete configuration.
        """
        provider = settings.extraction_provider.lower()
        if provider == "none":
            return None
        if provider == "example":
            return cls._build(ExampleClientAdapter(), "example", settings)

        base_url = cls._resolve_base_url(provider, settings)
        api_key = settings.extraction_api_key.strip()
        if not api_key:
            if provider not in cls.KEYLESS_PROVIDERS:
                Log.warning(
                    f"No API key for extraction provider '{provider}', "
                    "structured extraction disabled"
                )
                return None
            api_key = provider

        client = OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=settings.extraction_timeout_seconds,
            base_url=base_url,
        )
        return cls._build(client, settings.extraction_model_name, settings)

    @classmethod
    def _build(
        cls,
        client: BaseExtractionClient,
        model: str,
        settings: Settings,
    ) -> FieldExtractor:
        return FieldExtractor(
            client=client,
            model=model,
            temperature=0.0,
            max_text_chars=settings.extraction_max_text_chars,
            default_confidence=settings.extraction_default_confidence,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = settings.extraction_base_url.strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "extraction_base_url is required for "
                    "extraction_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "none",
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown extraction provider '{provider}'. Choose from: {supported}"
        )
