"""RIFF/WAVE header parsing."""

import struct

from exceptions import WavHeaderError

from .models import AudioFormat

# container id -> struct byte order; RIFX is the big-endian RIFF variant
_BYTE_ORDERS = {b"RIFF": "<", b"RF64": "<", b"RIFX": ">"}

_RIFF_HEADER_SIZE = 12


def _formats(byte_order: str) -> tuple[struct.Struct, struct.Struct]:
    # chunk header, then audio_format, num_channels, sample_rate, byte_rate,
    # block_align, bits_per_sample
    return struct.Struct(byte_order + "4sI"), struct.Struct(byte_order + "HHIIHH")


def parse_wav_header(data: bytes) -> AudioFormat:
    """
    Reads the format fields of a WAV file held in memory.

    Accepts RIFF and RF64 (little-endian) and RIFX (big-endian) containers.
    Walks the chunk list until the `fmt ` chunk is found. The data chunk is
    not inspected.

    Args:
        data: The complete file contents.

    Returns:
        AudioFormat describing the encoding declared by the container.

    Raises:
        WavHeaderError: If the buffer is not a WAVE container or has no
            complete `fmt ` chunk.
    """
    if len(data) < _RIFF_HEADER_SIZE:
        raise WavHeaderError("buffer shorter than RIFF header")

    byte_order = _BYTE_ORDERS.get(data[:4])
    if byte_order is None or data[8:12] != b"WAVE":
        raise WavHeaderError("missing RIFF/WAVE signature")

    chunk_header, fmt_body = _formats(byte_order)

    offset = _RIFF_HEADER_SIZE
    while offset + chunk_header.size <= len(data):
        chunk_id, chunk_size = chunk_header.unpack_from(data, offset)
        body_offset = offset + chunk_header.size

        if chunk_id == b"fmt ":
            if chunk_size < fmt_body.size or body_offset + fmt_body.size > len(data):
                raise WavHeaderError("truncated fmt chunk")
            audio_format, num_channels, sample_rate, _, _, bits_per_sample = (
                fmt_body.unpack_from(data, body_offset)
            )
            return AudioFormat(
                sample_rate=sample_rate,
                bits_per_sample=bits_per_sample,
                audio_format=audio_format,
                num_channels=num_channels,
            )

        # chunks are word aligned
        offset = body_offset + chunk_size + (chunk_size & 1)

    raise WavHeaderError("no fmt chunk")
