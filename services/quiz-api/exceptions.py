"""Custom exceptions for the quiz-api service."""


class InvalidAudioFormatError(Exception):
    """Raised when an uploaded file is not 16-bit PCM WAV audio at 16000 Hz."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        super().__init__(
            f"Invalid audio file {file_path}. Please ensure it's a 16-bit PCM WAV "
            "file with 16000 Hz sample rate."
        )


class WavHeaderError(Exception):
    """Raised when a byte buffer does not hold a parseable RIFF/WAVE header."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Unreadable WAV header: {reason}")


class TranscriptionError(Exception):
    """Raised when the streaming transcription service fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Failed to transcribe audio file '{file_name}'{detail}")


class LLMServiceError(Exception):
    """Raised when the LLM service call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)
