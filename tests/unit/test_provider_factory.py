from unittest.mock import patch

import pytest

from cvscoring.config.settings import Settings
from cvscoring.providers.example_provider import ExampleChatProvider
from cvscoring.providers.factory import ProviderChainFactory, parse_provider_order
from cvscoring.providers.ollama_provider import OllamaChatProvider
from cvscoring.providers.openai_provider import OpenAIChatProvider


class TestParseProviderOrder:
    def test_splits_and_normalises(self) -> None:
        assert parse_provider_order(" OpenAI, groq ,,ollama") == ["openai", "groq", "ollama"]

    def test_removes_duplicates(self) -> None:
        assert parse_provider_order("groq,groq") == ["groq"]

    def test_empty(self) -> None:
        assert parse_provider_order("") == []


class TestProviderChainFactory:
    def test_unconfigured_providers_are_skipped(self) -> None:
        settings = Settings(ai_provider_order="openai,groq,ollama", ai_openai_api_key="")
        chain = ProviderChainFactory.create(settings)
        assert chain.provider_names == []

    def test_keeps_configured_order(self) -> None:
        settings = Settings(
            ai_provider_order="ollama,groq,openai",
            ai_openai_api_key="sk-1",
            ai_groq_api_key="gsk-1",
            ai_ollama_host="http://ollama:11434",
        )
        with patch("cvscoring.providers.openai_provider.openai.OpenAI"):
            chain = ProviderChainFactory.create(settings)
        assert chain.provider_names == ["ollama", "groq", "openai"]

    def test_example_provider(self) -> None:
        provider = ProviderChainFactory.create_provider("example", Settings())
        assert isinstance(provider, ExampleChatProvider)

    def test_ollama_provider(self) -> None:
        settings = Settings(ai_ollama_host="http://ollama:11434")
        provider = ProviderChainFactory.create_provider("ollama", settings)
        assert isinstance(provider, OllamaChatProvider)

    def test_groq_uses_default_base_url(self) -> None:
        settings = Settings(ai_groq_api_key="gsk-1")
        with patch("cvscoring.providers.openai_provider.openai.OpenAI") as mock_cls:
            provider = ProviderChainFactory.create_provider("groq", settings)
        assert isinstance(provider, OpenAIChatProvider)
        assert provider.name == "groq"
        assert mock_cls.call_args.kwargs["base_url"] == "https://api.groq.com/openai/v1"

    def test_openai_compatible_without_key(self) -> None:
        settings = Settings(
            ai_openai_compatible_base_url="http://localhost:8080/v1",
            ai_openai_compatible_model_name="local",
        )
        with patch("cvscoring.providers.openai_provider.openai.OpenAI") as mock_cls:
            provider = ProviderChainFactory.create_provider("openai_compatible", settings)
        assert provider is not None
        assert mock_cls.call_args.kwargs["api_key"] == "not-needed"

    def test_openai_compatible_requires_base_url(self) -> None:
        with pytest.raises(ValueError, match="ai_openai_compatible_base_url"):
            ProviderChainFactory.create_provider("openai_compatible", Settings())

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown AI provider 'gradio'"):
            ProviderChainFactory.create_provider("gradio", Settings())
