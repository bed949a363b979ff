"""
OpenAI provider implementation.

Uses the legacy text completions endpoint (prompt in, text out).
"""

import logging

from openai import OpenAI

from .base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """
    OpenAI completions provider.
    """

    def __init__(
        self,
        api_key: str,
        default_model: str = "davinci-002",
    ):
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            default_model: Default completions model
        """
        self.client = OpenAI(api_key=api_key)
        self._default_model = default_model

    @property
    def name(self) -> str:
        return "openai"

    def complete(
        self,
        prompt: str,
        model: str | None = None,
        max_tokens: int = 100,
        temperature: float = 0.7,
        stop: list[str] | None = None,
    ) -> LLMResponse:
        resolved_model = model or self._default_model

        response = self.client.completions.create(
            model=resolved_model,
            prompt=prompt,
            max_tokens=max_tokens,
            n=1,
            stop=stop,
            temperature=temperature,
        )
        logger.debug(f"OpenAI response: {response.model_dump_json(indent=2)}")

        choice = response.choices[0]
        usage = response.usage

        return LLMResponse(
            text=choice.text or "",
            model=resolved_model,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            metadata={
                "finish_reason": choice.finish_reason,
                "provider": "openai",
            }
        )
