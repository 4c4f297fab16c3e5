"""Audio upload and transcription endpoint."""

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import PlainTextResponse
from voice_quiz_common import StorageDeleteError, setup_logging
from voice_quiz_common.infrastructure import UploadStorage

from dependencies import get_transcription_handler, get_upload_storage
from handlers import AudioTranscriptionHandler
from response_models import TranscriptionResponse

logger = setup_logging()

router = APIRouter(tags=["transcription"])

StorageDep = Annotated[UploadStorage, Depends(get_upload_storage)]
HandlerDep = Annotated[AudioTranscriptionHandler, Depends(get_transcription_handler)]

_UPLOAD_READ_SIZE = 64 * 1024


async def _iter_upload(file: UploadFile) -> AsyncIterator[bytes]:
    while True:
        chunk = await file.read(_UPLOAD_READ_SIZE)
        if not chunk:
            break
        yield chunk


@router.post("/upload-audio", response_model=TranscriptionResponse)
async def upload_audio(
    storage: StorageDep,
    handler: HandlerDep,
    audio: Annotated[UploadFile | str | None, File()] = None,
):
    """
    Transcribes an uploaded 16-bit PCM WAV file recorded at 16000 Hz.

    The stored upload is removed before the response is returned, whatever
    the outcome.
    """
    # a plain form field under the file name carries no upload
    if audio is None or isinstance(audio, str):
        return PlainTextResponse("No file uploaded.", status_code=400)

    path: Path | None = None
    try:
        path = await storage.save(audio.filename or "", _iter_upload(audio))
        logger.info(
            "Audio file received",
            extra={"file_name": audio.filename, "path": str(path)},
        )
        transcription = await handler.transcribe(path)
        return TranscriptionResponse(transcription=transcription)
    except Exception as e:
        logger.exception(
            "Error transcribing audio",
            extra={"file_name": audio.filename, "path": str(path) if path else None},
        )
        return PlainTextResponse(f"Error transcribing audio: {e}", status_code=500)
    finally:
        if path is not None:
            try:
                storage.delete(path)
            except StorageDeleteError as e:
                logger.warning(
                    "Error deleting audio file",
                    extra={"path": str(path), "error": str(e.cause)},
                )
