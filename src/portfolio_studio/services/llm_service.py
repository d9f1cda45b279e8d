"""LLM service with multi-provider support (Gemini, OpenAI)."""

from __future__ import annotations

import os

from portfolio_studio.services.llm_providers import (
    GeminiProvider,
    LLMError,
    LLMProvider,
    OpenAIProvider,
)

_PROVIDERS: dict[str, type[LLMProvider]] = {
    "gemini": GeminiProvider,
    "openai": OpenAIProvider,
}


def get_default_llm_provider_from_env() -> LLMProvider:
    """Instantiate the provider named by ``LLM_PROVIDER`` (default: gemini).

    Raises:
        LLMError: If the provider is unknown or cannot be configured.
    """
    provider_name = os.environ.get("LLM_PROVIDER", "gemini").lower()
    provider_cls = _PROVIDERS.get(provider_name)
    if provider_cls is None:
        raise LLMError(f"Unknown LLM provider: {provider_name}")
    return provider_cls()


class LLMService:
    def __init__(self, provider: LLMProvider | None = None) -> None:
        """Initialize LLM service with a specific provider.

        When no provider is given, the default one is created on first use so
        that a missing API key surfaces as an ``LLMError`` at call time.
        """
        self._provider = provider

    @property
    def provider(self) -> LLMProvider:
        if self._provider is None:
            self._provider = get_default_llm_provider_from_env()
        return self._provider

    def complete(
        self,
        prompt: str,
        temperature: float | None = 0.7,
        max_tokens: int | None = None,
        seed: int | None = None,
    ) -> str:
        """Send ``prompt`` verbatim and return the response text."""
        config = self.provider.generate_llm_config(temperature, max_tokens, seed)
        return self.provider.send_prompt(prompt, config)
