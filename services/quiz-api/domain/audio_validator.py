"""Audio format validation for uploaded files."""

import os

from voice_quiz_common.logging import setup_logging

from exceptions import WavHeaderError

from .models import PCM_FORMAT_TAG, AudioFormat
from .wav_header import parse_wav_header

logger = setup_logging()

REQUIRED_SAMPLE_RATE = 16000
REQUIRED_BITS_PER_SAMPLE = 16


class AudioValidator:
    """Checks that an uploaded file is 16-bit PCM audio at 16000 Hz."""

    def validate(self, path: str | os.PathLike) -> bool:
        """
        Validates the audio file at the given path.

        Files without a recognizable WAV header are accepted as raw PCM.
        Every failure is logged and reported as False.

        Args:
            path: Location of the stored upload.

        Returns:
            True if the file may be sent for transcription.
        """
        file_path = os.fspath(path)
        logger.info("Verifying audio file", extra={"file_path": file_path})

        try:
            size = os.stat(file_path).st_size
            if size == 0:
                raise ValueError("Audio file is empty")
            logger.info("Audio file stats", extra={"file_path": file_path, "size": size})

            with open(file_path, "rb") as f:
                data = f.read()
            logger.info(
                "Audio file read",
                extra={
                    "file_path": file_path,
                    "buffer_length": len(data),
                    "header_hex": data[:16].hex(),
                },
            )

            try:
                audio_format = parse_wav_header(data)
            except WavHeaderError as e:
                logger.warning(
                    "No WAV container found, treating file as raw PCM",
                    extra={"file_path": file_path, "reason": e.reason},
                )
                return self._accept_raw_pcm(data)

            logger.info("WAV file details", extra=audio_format.model_dump())
            self._check_format(audio_format)

        except Exception as e:
            logger.error(
                "Error verifying audio file",
                extra={"file_path": file_path, "error": str(e)},
            )
            return False

        logger.info("Audio file verified successfully", extra={"file_path": file_path})
        return True

    def _accept_raw_pcm(self, data: bytes) -> bool:
        """Raw PCM carries no header to check; any non-empty buffer passes."""
        return len(data) > 0

    def _check_format(self, audio_format: AudioFormat) -> None:
        """Raises ValueError naming the first field that does not match."""
        if audio_format.sample_rate != REQUIRED_SAMPLE_RATE:
            raise ValueError(
                f"Invalid sample rate: {audio_format.sample_rate}. "
                f"Expected: {REQUIRED_SAMPLE_RATE} Hz"
            )
        if audio_format.bits_per_sample != REQUIRED_BITS_PER_SAMPLE:
            raise ValueError(
                f"Invalid bits per sample: {audio_format.bits_per_sample}. "
                f"Expected: {REQUIRED_BITS_PER_SAMPLE} bits"
            )
        if audio_format.audio_format != PCM_FORMAT_TAG:
            raise ValueError("Audio is not in PCM format")
