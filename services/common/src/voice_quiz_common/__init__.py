from voice_quiz_common.exceptions import StorageDeleteError, StorageUploadError
from voice_quiz_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "StorageDeleteError",
    "StorageUploadError",
]
