"""Handler layer exports."""

from .audio_transcription_handler import AudioTranscriptionHandler

__all__ = ["AudioTranscriptionHandler"]
