"""
Base LLM provider interface.

Defines the abstract interface that provider implementations must follow.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class LLMResponse:
    """Standardized response from an LLM provider."""
    text: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0
    metadata: dict = field(default_factory=dict)


class LLMProvider(ABC):
    """
    Abstract base class for LLM providers.

    Implementations wrap a vendor SDK and return LLMResponse objects so the
    ranker stays independent of any one vendor.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the provider name (e.g., 'openai')."""
        pass

    @abstractmethod
    def complete(
        self,
        prompt: str,
        model: str | None = None,
        max_tokens: int = 100,
        temperature: float = 0.7,
        stop: list[str] | None = None,
    ) -> LLMResponse:
        """
        Generate a single, non-streaming completion.

        Args:
            prompt: The full prompt text
            model: Specific model to use (defaults to provider's default)
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature
            stop: Optional stop sequences

        Returns:
            LLMResponse with the generated text and metadata
        """
        pass

    async def complete_async(
        self,
        prompt: str,
        model: str | None = None,
        max_tokens: int = 100,
        temperature: float = 0.7,
        stop: list[str] | None = None,
    ) -> LLMResponse:
        """
        Async version of complete.

        Default implementation wraps sync call in executor.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None,
            lambda: self.complete(
                prompt=prompt,
                model=model,
                max_tokens=max_tokens,
                temperature=temperature,
                stop=stop,
            )
        )
