"""Dependency injection configuration for the quiz-api service."""

from functools import lru_cache

from assemblyai.streaming.v3 import (
    Encoding,
    SpeechModel,
    StreamingClient,
    StreamingClientOptions,
    StreamingParameters,
)
from google import genai
from voice_quiz_common.infrastructure import UploadStorage

from config import AppConfig, AssemblyAIConfig, load_config
from domain import AudioValidator, TranscriptBuilder
from handlers import AudioTranscriptionHandler
from infrastructure import (
    AssemblyAIStreamingTranscriber,
    GeminiLLMService,
    LocalUploadStorage,
)
from infrastructure.interfaces import LLMService, TranscriptionService


@lru_cache
def get_config() -> AppConfig:
    """Returns the process-wide configuration."""
    return load_config()


@lru_cache
def get_llm_service() -> LLMService:
    """Returns the configured LLM service."""
    config = get_config().gemini
    client = genai.Client(api_key=config.api_key)
    return GeminiLLMService(client, config.model_name, config.max_output_tokens)


def build_streaming_options(config: AssemblyAIConfig) -> StreamingClientOptions:
    """Client options: a failed handshake is reported once instead of retried."""
    return StreamingClientOptions(
        api_key=config.api_key,
        api_host=config.api_host,
        max_connection_retries=config.max_connection_retries,
        terminate_timeout=config.terminate_timeout_seconds,
    )


def build_streaming_parameters(config: AssemblyAIConfig) -> StreamingParameters:
    """Session parameters for 16 kHz 16-bit PCM in US English."""
    return StreamingParameters(
        sample_rate=config.sample_rate,
        encoding=Encoding(config.encoding),
        format_turns=config.format_turns,
        speech_model=SpeechModel[config.speech_model],
    )


@lru_cache
def get_transcription_service() -> TranscriptionService:
    """Returns the configured streaming transcription service."""
    config = get_config().assemblyai
    options = build_streaming_options(config)
    # streaming clients are single-use, one per session
    return AssemblyAIStreamingTranscriber(
        lambda: StreamingClient(options), build_streaming_parameters(config)
    )


@lru_cache
def get_upload_storage() -> UploadStorage:
    """Returns the configured upload storage."""
    return LocalUploadStorage(get_config().upload.directory)


@lru_cache
def get_transcription_handler() -> AudioTranscriptionHandler:
    """Returns the configured audio transcription handler."""
    return AudioTranscriptionHandler(
        AudioValidator(),
        get_transcription_service(),
        TranscriptBuilder(),
        get_config().upload.read_chunk_size,
    )
