"""Infrastructure interface exports."""

from .llm_service import LLMService
from .transcription_service import TranscriptionService

__all__ = ["LLMService", "TranscriptionService"]
