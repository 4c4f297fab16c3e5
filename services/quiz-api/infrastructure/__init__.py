"""Infrastructure layer exports."""

from .assemblyai_streaming import AssemblyAIStreamingTranscriber
from .gemini_llm import GeminiLLMService
from .local_storage import LocalUploadStorage

__all__ = ["AssemblyAIStreamingTranscriber", "GeminiLLMService", "LocalUploadStorage"]
