from pathlib import Path
from typing import ClassVar

from resume_review.analysis.analyzer import Analyzer
from resume_review.analysis.example_client_adapter import ExampleClientAdapter
from resume_review.analysis.openai_client_adapter import OpenAIClientAdapter
from resume_review.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured analyzer and its provider client."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(
        cls,
        settings: Settings,
        prompt_template_path: Path | None = None,
    ) -> Analyzer:
        """Create an analyzer from application settings."""
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return Analyzer(
                client=ExampleClientAdapter(),
                model="example",
                prompt_template_path=prompt_template_path,
            )
        client = OpenAIClientAdapter(
            api_key=settings.analysis_api_key,
            timeout_seconds=settings.analysis_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return Analyzer(
            client=client,
            model=settings.analysis_model_name,
            temperature=settings.analysis_temperature,
            prompt_template_path=prompt_template_path,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = (settings.analysis_base_url or "").strip()
        if override:
            return override
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            raise ValueError(
                "analysis_base_url is required for analysis_provider=openai_compatible"
            )
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {supported}"
        )
