"""Exceptions shared by the voice-quiz services."""


class StorageUploadError(Exception):
    """Raised when an uploaded file cannot be written to storage."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to store uploaded file '{file_name}'")


class StorageDeleteError(Exception):
    """Raised when a stored file cannot be removed."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to delete stored file '{file_name}'")
