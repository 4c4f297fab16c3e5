"""Abstract interface for LLM service operations."""

from abc import ABC, abstractmethod


class LLMService(ABC):
    """Abstract base class for generative-text backends."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """
        Sends a single-turn prompt and returns the generated text.

        Args:
            prompt: The user prompt.

        Returns:
            The generated response text.

        Raises:
            LLMServiceError: If the LLM call fails.
        """
