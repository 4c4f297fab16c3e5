"""Response models for the quiz-api HTTP endpoints."""

from pydantic import BaseModel


class TranscriptionResponse(BaseModel):
    """Response returned after a successful transcription."""

    transcription: str
