"""Local filesystem implementation of the UploadStorage interface."""

import os
import time
from collections.abc import AsyncIterator
from pathlib import Path

import aiofiles
from voice_quiz_common import StorageDeleteError, StorageUploadError, setup_logging
from voice_quiz_common.infrastructure import UploadStorage

logger = setup_logging()


class LocalUploadStorage(UploadStorage):
    """Stores uploads as `<epoch-millis><extension>` files in a local directory."""

    def __init__(self, directory: Path):
        self._directory = directory

    async def save(self, original_name: str, chunks: AsyncIterator[bytes]) -> Path:
        self._directory.mkdir(parents=True, exist_ok=True)
        extension = os.path.splitext(original_name)[1]

        stamp = time.time_ns() // 1_000_000
        while True:
            path = self._directory / f"{stamp}{extension}"
            try:
                f = await aiofiles.open(path, "xb")
            except FileExistsError:
                stamp += 1
                continue
            except OSError as e:
                logger.exception("Upload file creation failed", extra={"path": str(path)})
                raise StorageUploadError(original_name, e) from e
            break

        size = 0
        try:
            try:
                async for chunk in chunks:
                    await f.write(chunk)
                    size += len(chunk)
            finally:
                # the file must be closed before the path is handed out
                await f.close()
        except Exception as e:
            logger.exception("Upload write failed", extra={"path": str(path)})
            path.unlink(missing_ok=True)
            raise StorageUploadError(original_name, e) from e

        logger.info(
            "Upload stored",
            extra={"original_name": original_name, "path": str(path), "size": size},
        )
        return path

    def delete(self, path: Path) -> None:
        try:
            os.remove(path)
            logger.info("Upload deleted", extra={"path": str(path)})
        except OSError as e:
            logger.exception("Upload deletion failed", extra={"path": str(path)})
            raise StorageDeleteError(str(path), e) from e
