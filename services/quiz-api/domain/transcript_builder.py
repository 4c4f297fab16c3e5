"""Core business logic for transcript building."""

from collections.abc import AsyncIterable

from .models import TranscriptEvent


class TranscriptBuilder:
    """Folds a stream of transcript events into the final transcription."""

    async def build(self, events: AsyncIterable[TranscriptEvent]) -> str:
        """
        Builds the final transcription from a streaming event sequence.

        Only results whose `is_partial` flag is False contribute. Their
        alternatives are appended in arrival order, each followed by a single
        space, and the result is trimmed.

        Args:
            events: Transcript events as delivered by the transcription service.

        Returns:
            The accumulated transcription text.
        """
        transcription = ""
        async for event in events:
            transcription += self._final_text(event)
        return transcription.strip()

    def _final_text(self, event: TranscriptEvent) -> str:
        """Concatenates the alternatives of every final result in one event."""
        if not event.results:
            return ""

        text = ""
        for result in event.results:
            if result.is_partial:
                continue
            for alternative in result.alternatives:
                text += alternative.transcript + " "
        return text
