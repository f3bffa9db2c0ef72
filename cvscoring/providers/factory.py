from typing import ClassVar

from cvscoring.config.settings import Settings
from cvscoring.logging.logger import Log
from cvscoring.providers.base import BaseChatProvider
from cvscoring.providers.chain import ProviderChain
from cvscoring.providers.example_provider import ExampleChatProvider
from cvscoring.providers.ollama_provider import OllamaChatProvider
from cvscoring.providers.openai_provider import OpenAIChatProvider


def parse_provider_order(raw: str) -> list[str]:
    """Split a comma-separated provider list, lower-cased, without duplicates."""
    names: list[str] = []
    for part in (raw or "").split(","):
        name = part.strip().lower()
        if name and name not in names:
            names.append(name)
    return names


class ProviderChainFactory:
    """Creates the provider chain in the configured priority order.

    Providers without credentials (or without a host for Ollama) are skipped.
    """

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> ProviderChain:
        providers: list[BaseChatProvider] = []
        for name in parse_provider_order(settings.ai_provider_order):
            provider = cls.create_provider(name, settings)
            if provider is None:
                Log.info(f"AI provider '{name}' is not configured, skipping")
                continue
            providers.append(provider)
        Log.info(f"AI provider chain: {[p.name for p in providers]}")
        return ProviderChain(providers, system_prompt=settings.ai_system_prompt)

    @classmethod
    def create_provider(cls, name: str, settings: Settings) -> BaseChatProvider | None:
        if name == "example":
            return ExampleChatProvider()
        if name == "ollama":
            host = (settings.ai_ollama_host or "").strip()
            if not host:
                return None
            return OllamaChatProvider(
                host=host,
                model=settings.ai_ollama_model_name,
                timeout_seconds=settings.ai_ollama_timeout_seconds,
                temperature=settings.ai_temperature,
            )

        base_url = cls._resolve_base_url(name, settings)
        api_key = cls._resolve_api_key(name, settings)
        if not api_key and name != "openai_compatible":
            return None
        return OpenAIChatProvider(
            name=name,
            api_key=api_key or "not-needed",
            model=cls._resolve_model_name(name, settings),
            timeout_seconds=cls._resolve_timeout_seconds(name, settings),
            base_url=base_url,
            temperature=settings.ai_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.ai_openai_compatible_base_url or "").strip()
            if not url:
                raise ValueError(
                    "ai_openai_compatible_base_url is required for "
                    "the openai_compatible provider"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "ollama",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown AI provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.ai_openai_api_key,
            "openai_compatible": settings.ai_openai_compatible_api_key,
            "openrouter": settings.ai_openrouter_api_key,
            "groq": settings.ai_groq_api_key,
            "together": settings.ai_together_api_key,
            "deepseek": settings.ai_deepseek_api_key,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.ai_openai_model_name,
            "openai_compatible": settings.ai_openai_compatible_model_name,
            "openrouter": settings.ai_openrouter_model_name,
            "groq": settings.ai_groq_model_name,
            "together": settings.ai_together_model_name,
            "deepseek": settings.ai_deepseek_model_name,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        key_map = {
            "openai": settings.ai_openai_timeout_seconds,
            "openai_compatible": settings.ai_openai_compatible_timeout_seconds,
            "openrouter": settings.ai_openrouter_timeout_seconds,
            "groq": settings.ai_groq_timeout_seconds,
            "together": settings.ai_together_timeout_seconds,
            "deepseek": settings.ai_deepseek_timeout_seconds,
        }
        return key_map.get(provider, 30) or 30
