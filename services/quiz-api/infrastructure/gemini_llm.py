"""Gemini LLM service implementation."""

from google import genai
from voice_quiz_common.logging import setup_logging

from exceptions import LLMServiceError

from .interfaces import LLMService

logger = setup_logging()


class GeminiLLMService(LLMService):
    """LLM service implementation using Google Gemini."""

    def __init__(self, client: genai.Client, model_name: str, max_output_tokens: int):
        self._client = client
        self._model_name = model_name
        self._max_output_tokens = max_output_tokens

    async def generate(self, prompt: str) -> str:
        """
        Sends a single-turn prompt to Gemini and returns the response text.

        Args:
            prompt: The user prompt.

        Returns:
            The generated text.

        Raises:
            LLMServiceError: If the Gemini API call fails or returns no text.
        """
        logger.info(
            "Sending request to Gemini",
            extra={"model": self._model_name, "prompt": prompt},
        )
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model_name,
                contents=prompt,
                config={"max_output_tokens": self._max_output_tokens},
            )
        except Exception as e:
            logger.exception("Gemini API call failed", extra={"model": self._model_name})
            raise LLMServiceError(f"Gemini generation failed: {e}", cause=e) from e

        if not response.text:
            logger.error("Gemini returned empty response", extra={"model": self._model_name})
            raise LLMServiceError("Gemini returned empty response")

        logger.info("Received response from Gemini", extra={"response": response.text})
        return response.text
