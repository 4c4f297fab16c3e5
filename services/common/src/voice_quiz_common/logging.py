import logging
import os
import sys

from pythonjsonlogger import jsonlogger

_SERVER_LOGGERS = ["uvicorn", "uvicorn.access", "uvicorn.error", "socketio", "engineio"]


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configures structured JSON logging for the service.

    Every record is rendered by a JSON formatter carrying the timestamp, level,
    logger name, message and the ddtrace trace_id/span_id fields. The root
    logger and the server loggers (Uvicorn, Socket.IO, Engine.IO) share one
    stdout handler so the HTTP and real-time channels log in the same shape.

    Args:
        level: Log level name. Falls back to the LOG_LEVEL environment
            variable, then INFO.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level_name)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(logger_name)
        server_logger.setLevel(level_name)
        server_logger.handlers = []
        server_logger.addHandler(stream_handler)
        server_logger.propagate = False

    return root_logger
