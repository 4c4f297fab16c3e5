"""Handler for transcribing uploaded audio files."""

import asyncio
import os
from contextlib import aclosing

from voice_quiz_common import setup_logging

from domain import AudioValidator, TranscriptBuilder, read_audio_chunks
from domain.audio_stream import DEFAULT_CHUNK_SIZE
from exceptions import InvalidAudioFormatError
from infrastructure.interfaces import TranscriptionService

logger = setup_logging()


class AudioTranscriptionHandler:
    """Orchestrates validation, streaming and folding of one uploaded audio file."""

    def __init__(
        self,
        validator: AudioValidator,
        transcription_service: TranscriptionService,
        transcript_builder: TranscriptBuilder,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self._validator = validator
        self._transcription_service = transcription_service
        self._transcript_builder = transcript_builder
        self._chunk_size = chunk_size

    async def transcribe(self, path: str | os.PathLike) -> str:
        """
        Transcribes a fully written audio file.

        Args:
            path: Location of the stored upload.

        Returns:
            The final transcription text.

        Raises:
            InvalidAudioFormatError: If the file is not 16-bit PCM at 16000 Hz.
                The transcription service is not contacted in that case.
            TranscriptionError: If the streaming session fails.
        """
        file_path = os.fspath(path)
        logger.info("Starting audio transcription", extra={"file_path": file_path})

        is_valid = await asyncio.to_thread(self._validator.validate, file_path)
        if not is_valid:
            raise InvalidAudioFormatError(file_path)

        async with aclosing(read_audio_chunks(file_path, self._chunk_size)) as chunks:
            events = self._transcription_service.stream(
                chunks, os.path.basename(file_path)
            )
            transcription = await self._transcript_builder.build(events)

        logger.info(
            "Transcription completed",
            extra={"file_path": file_path, "transcription": transcription},
        )
        return transcription
