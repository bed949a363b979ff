"""
LLM provider abstraction layer.
"""

from .base import LLMProvider, LLMResponse
from .openai import OpenAIProvider

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "OpenAIProvider",
    "get_provider_from_env",
]


def get_provider_from_env(
    openai_key: str | None = None,
    default_model: str | None = None,
) -> LLMProvider | None:
    """
    Create a provider from the configured API key.

    Returns:
        Configured LLMProvider or None if no key is available
    """
    if not openai_key:
        return None
    return OpenAIProvider(api_key=openai_key, default_model=default_model or "davinci-002")
