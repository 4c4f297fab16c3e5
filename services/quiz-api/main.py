"""FastAPI and Socket.IO application entry point."""

import asyncio
from contextlib import asynccontextmanager

import socketio
import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from voice_quiz_common import setup_logging

from dependencies import get_config, get_llm_service
from gateway import ConversationGateway
from routes import upload_router

patch_all()

logger = setup_logging()

_config = get_config()


def _log_unhandled_exception(loop: asyncio.AbstractEventLoop, context: dict) -> None:
    """Logs exceptions nobody awaited; the server keeps running."""
    logger.error(
        "Unhandled exception in event loop",
        extra={
            "context_message": context.get("message"),
            "error": repr(context.get("exception")),
        },
    )


@asynccontextmanager
async def lifespan(_app: FastAPI):
    asyncio.get_running_loop().set_exception_handler(_log_unhandled_exception)
    logger.info("Server running", extra={"port": _config.server.port})
    yield


api = FastAPI(title="Voice Quiz API", lifespan=lifespan)
api.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
api.include_router(upload_router)

sio = socketio.AsyncServer(
    async_mode="asgi",
    cors_allowed_origins=_config.server.socket_cors_origins,
)
ConversationGateway(sio, get_llm_service).register()

app = socketio.ASGIApp(sio, other_asgi_app=api)


def main():
    """Starts the HTTP and Socket.IO server."""
    uvicorn.run(app, host=_config.server.host, port=_config.server.port, log_config=None)


if __name__ == "__main__":
    main()
