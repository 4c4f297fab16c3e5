"""Domain models for the quiz-api service."""

from enum import Enum

from pydantic import BaseModel

PCM_FORMAT_TAG = 1


class AudioFormat(BaseModel, frozen=True):
    """Format fields read from the `fmt ` chunk of a WAV container."""

    sample_rate: int
    bits_per_sample: int
    audio_format: int
    num_channels: int


class AudioChunk(BaseModel, frozen=True):
    """One read chunk of the uploaded audio, as sent to the transcription service."""

    audio_chunk: bytes


class TranscriptAlternative(BaseModel, frozen=True):
    """A candidate transcription of an audio segment."""

    transcript: str


class TranscriptResult(BaseModel, frozen=True):
    """A partial (provisional) or final result for an audio segment."""

    is_partial: bool
    alternatives: list[TranscriptAlternative] = []


class TranscriptEvent(BaseModel, frozen=True):
    """A single event from the streaming transcription service."""

    results: list[TranscriptResult] = []


class ConversationTurn(BaseModel, frozen=True):
    """A prompt sent to the LLM and the text it generated."""

    prompt: str
    response: str


class ConversationState(str, Enum):
    """Observable state of a real-time conversation connection."""

    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"
