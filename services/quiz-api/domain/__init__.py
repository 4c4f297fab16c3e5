"""Domain layer exports."""

from .audio_stream import read_audio_chunks
from .audio_validator import AudioValidator
from .conversation import QUESTION_ERROR_MESSAGE, QUESTION_PROMPT
from .models import (
    AudioChunk,
    AudioFormat,
    ConversationState,
    ConversationTurn,
    TranscriptAlternative,
    TranscriptEvent,
    TranscriptResult,
)
from .transcript_builder import TranscriptBuilder
from .wav_header import parse_wav_header

__all__ = [
    "AudioChunk",
    "AudioFormat",
    "AudioValidator",
    "ConversationState",
    "ConversationTurn",
    "QUESTION_ERROR_MESSAGE",
    "QUESTION_PROMPT",
    "TranscriptAlternative",
    "TranscriptBuilder",
    "TranscriptEvent",
    "TranscriptResult",
    "parse_wav_header",
    "read_audio_chunks",
]
