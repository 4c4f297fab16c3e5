"""Socket.IO conversation channel."""

from collections.abc import Callable

import socketio
from voice_quiz_common import setup_logging

from domain import (
    QUESTION_ERROR_MESSAGE,
    QUESTION_PROMPT,
    ConversationState,
    ConversationTurn,
)
from infrastructure.interfaces import LLMService

logger = setup_logging()


class ConversationGateway:
    """
    Relays a generated question to each client that starts a conversation.

    Every `startConversation` event results in exactly one outbound event to
    that client: `question` with the generated text, or `error` with a fixed
    message. The answer/feedback loop is not part of the channel.
    """

    def __init__(
        self,
        sio: socketio.AsyncServer,
        llm_provider: Callable[[], LLMService],
        prompt: str = QUESTION_PROMPT,
    ):
        self._sio = sio
        self._llm_provider = llm_provider
        self._prompt = prompt
        self._states: dict[str, ConversationState] = {}

    def register(self) -> None:
        """Attaches the event handlers to the Socket.IO server."""
        self._sio.on("connect", self.on_connect)
        self._sio.on("startConversation", self.on_start_conversation)
        self._sio.on("disconnect", self.on_disconnect)

    def state(self, sid: str) -> ConversationState | None:
        return self._states.get(sid)

    async def on_connect(self, sid: str, environ: dict, auth: dict | None = None) -> None:
        logger.info("A user connected", extra={"sid": sid})
        self._states[sid] = ConversationState.IDLE

    async def on_start_conversation(self, sid: str, *_args) -> None:
        self._states[sid] = ConversationState.AWAITING_RESPONSE
        logger.info("Conversation started", extra={"sid": sid})

        try:
            question = await self._llm_provider().generate(self._prompt)
        except Exception:
            logger.exception("Error generating question", extra={"sid": sid})
            await self._sio.emit("error", QUESTION_ERROR_MESSAGE, to=sid)
            return

        await self._sio.emit("question", question, to=sid)
        turn = ConversationTurn(prompt=self._prompt, response=question)
        logger.info("Question sent", extra={"sid": sid, **turn.model_dump()})

    async def on_disconnect(self, sid: str, reason: str | None = None) -> None:
        logger.info("User disconnected", extra={"sid": sid, "reason": reason})
        self._states.pop(sid, None)
