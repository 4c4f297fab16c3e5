"""Abstract interface for upload storage operations."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from pathlib import Path


class UploadStorage(ABC):
    """Abstract base class for request-scoped upload storage backends."""

    @abstractmethod
    async def save(self, original_name: str, chunks: AsyncIterator[bytes]) -> Path:
        """
        Writes an uploaded file to storage.

        The returned path refers to a fully written and closed file.

        Args:
            original_name: The client-side file name; only its extension is kept.
            chunks: The upload body as a sequence of byte chunks.

        Returns:
            The path of the stored file.

        Raises:
            StorageUploadError: If the upload cannot be written.
        """

    @abstractmethod
    def delete(self, path: Path) -> None:
        """
        Removes a stored file.

        Args:
            path: The path returned by save().

        Raises:
            StorageDeleteError: If the file cannot be removed.
        """
