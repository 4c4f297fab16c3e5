"""AssemblyAI Universal-Streaming implementation of the TranscriptionService interface."""

import asyncio
from collections.abc import AsyncIterator, Callable

from assemblyai.streaming.v3 import (
    StreamingClient,
    StreamingError,
    StreamingEvents,
    StreamingParameters,
    TerminationEvent,
    TurnEvent,
)
from voice_quiz_common.logging import setup_logging

from domain.models import (
    AudioChunk,
    TranscriptAlternative,
    TranscriptEvent,
    TranscriptResult,
)
from exceptions import TranscriptionError

from .interfaces import TranscriptionService

logger = setup_logging()

_TERMINATED = object()
_AUDIO_SENT = object()


class AssemblyAIStreamingTranscriber(TranscriptionService):
    """Streams audio chunks to AssemblyAI and yields turn results as transcript events."""

    def __init__(
        self,
        client_factory: Callable[[], StreamingClient],
        parameters: StreamingParameters,
    ):
        self._client_factory = client_factory
        self._parameters = parameters
        self._format_turns = bool(parameters.format_turns)

    async def stream(
        self, audio: AsyncIterator[AudioChunk], file_name: str
    ) -> AsyncIterator[TranscriptEvent]:
        """
        Runs one streaming session for the given audio.

        The SDK client delivers events on its own reader thread; they are
        handed to the event loop through a queue so arrival order is kept.
        Audio is pushed from a separate task while events are consumed.
        """
        loop = asyncio.get_running_loop()
        queue: asyncio.Queue = asyncio.Queue()

        def publish(item: object) -> None:
            loop.call_soon_threadsafe(queue.put_nowait, item)

        def on_turn(_client: StreamingClient, event: TurnEvent) -> None:
            logger.debug(
                "Turn event received",
                extra={
                    "file_name": file_name,
                    "turn_order": getattr(event, "turn_order", None),
                    "end_of_turn": event.end_of_turn,
                },
            )
            publish(self._to_transcript_event(event))

        def on_error(_client: StreamingClient, error: StreamingError) -> None:
            logger.error(
                "Streaming transcription error",
                extra={"file_name": file_name, "error": str(error)},
            )
            publish(TranscriptionError(file_name, error))

        def on_termination(_client: StreamingClient, event: TerminationEvent) -> None:
            logger.info(
                "Streaming session terminated",
                extra={
                    "file_name": file_name,
                    "audio_duration_seconds": getattr(
                        event, "audio_duration_seconds", None
                    ),
                },
            )
            publish(_TERMINATED)

        client = self._client_factory()
        client.on(StreamingEvents.Turn, on_turn)
        client.on(StreamingEvents.Error, on_error)
        client.on(StreamingEvents.Termination, on_termination)

        try:
            await asyncio.to_thread(client.connect, self._parameters)
        except Exception as e:
            logger.exception(
                "AssemblyAI streaming connection failed",
                extra={"file_name": file_name},
            )
            raise TranscriptionError(file_name, e) from e

        logger.info("Streaming session opened", extra={"file_name": file_name})
        sender = asyncio.create_task(self._send_audio(client, audio, queue))

        try:
            while True:
                item = await queue.get()
                if item is _TERMINATED:
                    break
                if item is _AUDIO_SENT:
                    # disconnect returned without the server confirming the end
                    await sender
                    logger.error(
                        "Streaming session closed without termination",
                        extra={"file_name": file_name},
                    )
                    raise TranscriptionError(
                        file_name,
                        ConnectionError("session closed before termination"),
                    )
                if isinstance(item, TranscriptionError):
                    raise item
                yield item
            await sender
        finally:
            if not sender.done():
                sender.cancel()
                await asyncio.gather(sender, return_exceptions=True)

    async def _send_audio(
        self,
        client: StreamingClient,
        audio: AsyncIterator[AudioChunk],
        queue: asyncio.Queue,
    ) -> None:
        """Pushes every chunk, then terminates the session once audio runs out."""
        chunk_count = 0
        try:
            async for chunk in audio:
                client.stream(chunk.audio_chunk)
                chunk_count += 1
        finally:
            logger.info("Audio stream finished", extra={"chunk_count": chunk_count})
            await asyncio.to_thread(client.disconnect, True)
            queue.put_nowait(_AUDIO_SENT)

    def _to_transcript_event(self, event: TurnEvent) -> TranscriptEvent:
        """
        Maps a turn to a single-result transcript event.

        A turn is final once AssemblyAI reports end of turn; with formatting
        enabled only the formatted copy of that turn counts as final.
        """
        is_final = bool(event.end_of_turn) and (
            bool(event.turn_is_formatted) or not self._format_turns
        )
        return TranscriptEvent(
            results=[
                TranscriptResult(
                    is_partial=not is_final,
                    alternatives=[TranscriptAlternative(transcript=event.transcript)],
                )
            ]
        )
