"""Abstract interface for streaming transcription services."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from domain.models import AudioChunk, TranscriptEvent


class TranscriptionService(ABC):
    """Abstract base class for streaming speech-to-text backends."""

    @abstractmethod
    def stream(
        self, audio: AsyncIterator[AudioChunk], file_name: str
    ) -> AsyncIterator[TranscriptEvent]:
        """
        Streams audio to the service and yields transcript events as they arrive.

        Args:
            audio: Finite sequence of audio chunks, consumed exactly once.
            file_name: Name of the source file, used for logging and errors.

        Returns:
            Async iterator of transcript events in arrival order.

        Raises:
            TranscriptionError: If the streaming session fails.
        """
