"""Audio and event builders shared by quiz-api tests."""

import struct
import wave
from collections.abc import AsyncIterator, Iterable
from pathlib import Path

from domain import TranscriptAlternative, TranscriptEvent, TranscriptResult
from infrastructure.interfaces import TranscriptionService


def write_wav(
    path: Path,
    sample_rate: int = 16000,
    sample_width: int = 2,
    channels: int = 1,
    frames: int = 1600,
) -> Path:
    """Writes a silent PCM WAV file with the stdlib wave module."""
    with wave.open(str(path), "wb") as wf:
        wf.setnchannels(channels)
        wf.setsampwidth(sample_width)
        wf.setframerate(sample_rate)
        wf.writeframes(b"\x00" * frames * sample_width * channels)
    return path


def build_wav_bytes(
    audio_format: int = 1,
    channels: int = 1,
    sample_rate: int = 16000,
    bits_per_sample: int = 16,
    data: bytes = b"\x00\x00" * 160,
    leading_chunks: bytes = b"",
    container: bytes = b"RIFF",
) -> bytes:
    """
    Builds a WAV container by hand, for format tags and containers the wave
    module cannot write. RIFX is written big-endian; RF64 gets a ds64 chunk.
    """
    order = ">" if container == b"RIFX" else "<"
    block_align = channels * bits_per_sample // 8
    fmt_body = struct.pack(
        order + "HHIIHH",
        audio_format,
        channels,
        sample_rate,
        sample_rate * block_align,
        block_align,
        bits_per_sample,
    )
    if container == b"RF64":
        # riff size, data size, sample count, empty table
        ds64_body = struct.pack("<QQQI", 0, len(data), 0, 0)
        leading_chunks = (
            b"ds64" + struct.pack("<I", len(ds64_body)) + ds64_body + leading_chunks
        )
    body = (
        b"WAVE"
        + leading_chunks
        + b"fmt "
        + struct.pack(order + "I", len(fmt_body))
        + fmt_body
        + b"data"
        + struct.pack(order + "I", len(data))
        + data
    )
    riff_size = 0xFFFFFFFF if container == b"RF64" else len(body)
    return container + struct.pack(order + "I", riff_size) + body


def transcript_event(*results: tuple[bool, list[str]]) -> TranscriptEvent:
    """Builds an event from (is_partial, [alternative texts]) pairs."""
    return TranscriptEvent(
        results=[
            TranscriptResult(
                is_partial=is_partial,
                alternatives=[TranscriptAlternative(transcript=t) for t in texts],
            )
            for is_partial, texts in results
        ]
    )


async def aiter_items(items: Iterable) -> AsyncIterator:
    for item in items:
        yield item


class ScriptedTranscriptionService(TranscriptionService):
    """Records streamed chunks and replays a fixed list of transcript events."""

    def __init__(self, events=(), error: Exception | None = None):
        self._events = list(events)
        self._error = error
        self.calls = 0
        self.file_names: list[str] = []
        self.chunks: list[bytes] = []

    async def stream(self, audio, file_name):
        self.calls += 1
        self.file_names.append(file_name)
        async for chunk in audio:
            self.chunks.append(chunk.audio_chunk)
        if self._error is not None:
            raise self._error
        for event in self._events:
            yield event
