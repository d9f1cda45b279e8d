from __future__ import annotations

import pytest

from portfolio_studio.services.llm_providers import (
    GeminiProvider,
    LLMError,
    LLMProvider,
    OpenAIProvider,
)
from portfolio_studio.services.llm_service import LLMService


class MockProvider(LLMProvider):
    """Mock provider for testing LLMService."""

    def __init__(self) -> None:
        self.last_prompt: str | None = None
        self.last_config: dict | None = None
        self.response = "Mock LLM response"

    def send_prompt(self, prompt: str, config: dict) -> str:
        self.last_prompt = prompt
        self.last_config = config
        return self.response


def test_llm_service_initialization_with_custom_provider() -> None:
    """Test service initialization with a custom provider."""
    mock_provider = MockProvider()
    service = LLMService(provider=mock_provider)

    assert service.provider is mock_provider


def test_llm_service_default_gemini_provider(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that Gemini is used as default provider when none specified."""
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.delenv("LLM_PROVIDER", raising=False)

    class _FakeClient:
        def __init__(self, api_key: str) -> None:
            pass

    import google.genai as _genai

    monkeypatch.setattr(_genai, "Client", _FakeClient, raising=True)

    service = LLMService()
    assert isinstance(service.provider, GeminiProvider)


def test_llm_service_openai_provider(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    monkeypatch.setenv("LLM_PROVIDER", "OpenAI")

    class _FakeClient:
        def __init__(self, api_key: str) -> None:
            pass

    import openai

    monkeypatch.setattr(openai, "OpenAI", _FakeClient, raising=True)

    service = LLMService()
    assert isinstance(service.provider, OpenAIProvider)


def test_llm_service_unknown_provider_fails_on_first_use(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Test that an unknown provider name surfaces when the provider is needed."""
    monkeypatch.setenv("LLM_PROVIDER", "unknown_provider")

    service = LLMService()
    with pytest.raises(LLMError, match="Unknown LLM provider: unknown_provider"):
        service.complete("Hello")


def test_llm_service_complete_passes_prompt_verbatim() -> None:
    mock_provider = MockProvider()
    service = LLMService(provider=mock_provider)

    result = service.complete("Write a bio", temperature=0.75)

    assert result == "Mock LLM response"
    assert mock_provider.last_prompt == "Write a bio"
    assert mock_provider.last_config == {"temperature": 0.75}


def test_llm_service_complete_with_all_parameters() -> None:
    mock_provider = MockProvider()
    service = LLMService(provider=mock_provider)

    service.complete("Prompt", temperature=0.2, max_tokens=50, seed=7)

    assert mock_provider.last_config == {"temperature": 0.2, "max_tokens": 50, "seed": 7}


def test_llm_service_propagates_provider_errors() -> None:
    class _FailingProvider(MockProvider):
        def send_prompt(self, prompt: str, config: dict) -> str:
            raise LLMError("boom")

    service = LLMService(provider=_FailingProvider())

    with pytest.raises(LLMError, match="boom"):
        service.complete("Prompt")
