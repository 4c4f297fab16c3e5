"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI streaming transcription configuration."""

    api_key: str
    api_host: str = "streaming.assemblyai.com"
    sample_rate: int = 16000
    encoding: str = "pcm_s16le"
    format_turns: bool = True
    speech_model: str = "universal_streaming_english"
    terminate_timeout_seconds: float = 60.0
    max_connection_retries: int = 0


class GeminiConfig(BaseModel, frozen=True):
    """Gemini LLM configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash-lite"
    max_output_tokens: int = 1024


class UploadConfig(BaseModel, frozen=True):
    """Local upload storage configuration."""

    directory: Path = Path("uploads")
    read_chunk_size: int = 16 * 1024


class ServerConfig(BaseModel, frozen=True):
    """HTTP and Socket.IO server configuration."""

    host: str = "0.0.0.0"
    port: int = 5000
    socket_cors_origins: list[str] = ["http://localhost:3000"]


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    assemblyai: AssemblyAIConfig
    gemini: GeminiConfig
    upload: UploadConfig
    server: ServerConfig


def _split_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def load_config() -> AppConfig:
    """Loads configuration from environment variables (and a local .env file)."""
    load_dotenv()
    return AppConfig(
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            api_host=os.getenv("ASSEMBLYAI_API_HOST", "streaming.assemblyai.com"),
            speech_model=os.getenv(
                "ASSEMBLYAI_SPEECH_MODEL", "universal_streaming_english"
            ),
            terminate_timeout_seconds=float(
                os.getenv("ASSEMBLYAI_TERMINATE_TIMEOUT", "60")
            ),
            max_connection_retries=int(os.getenv("ASSEMBLYAI_MAX_RETRIES", "0")),
        ),
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL_NAME", "gemini-2.5-flash-lite"),
            max_output_tokens=int(os.getenv("GEMINI_MAX_OUTPUT_TOKENS", "1024")),
        ),
        upload=UploadConfig(
            directory=Path(os.getenv("UPLOAD_DIR", "uploads")),
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5000")),
            socket_cors_origins=_split_origins(
                os.getenv("SOCKET_CORS_ORIGINS", "http://localhost:3000")
            ),
        ),
    )
