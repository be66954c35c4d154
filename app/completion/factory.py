from typing import ClassVar

from app.completion.dispatcher import CompletionDispatcher
from app.completion.example_client_adapter import ExampleClientAdapter
from app.completion.openai_client_adapter import OpenAIClientAdapter
from app.config.settings import Settings


class CompletionDispatcherFactory:
    """Creates the completion dispatcher for the configured provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> CompletionDispatcher:
        """Create a configured dispatcher from application settings."""
        provider = settings.completion_provider.lower()
        if provider == "example":
            return CompletionDispatcher(
                client=ExampleClientAdapter(),
                model="example",
                system_prompt=settings.system_prompt,
            )
        client = OpenAIClientAdapter(
            api_key=settings.openai_api_key,
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return CompletionDispatcher(
            client=client,
            model=settings.openai_model_name,
            system_prompt=settings.system_prompt,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "openai_compatible_base_url is required for "
                    "completion_provider=openai_compatible"
                )
            return url
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
            f"Unknown completion provider '{provider}'. Choose from: {supported}"
        )
