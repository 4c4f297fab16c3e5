"""Chunked audio reading for streaming transcription."""

import os
from collections.abc import AsyncIterator

import aiofiles

from .models import AudioChunk

DEFAULT_CHUNK_SIZE = 16 * 1024


async def read_audio_chunks(
    path: str | os.PathLike, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> AsyncIterator[AudioChunk]:
    """
    Yields the file at `path` as consecutive AudioChunk events.

    Each read of at most `chunk_size` bytes produces exactly one event, in file
    order. The sequence ends with the file.
    """
    async with aiofiles.open(path, "rb") as f:
        while True:
            chunk = await f.read(chunk_size)
            if not chunk:
                break
            yield AudioChunk(audio_chunk=chunk)
