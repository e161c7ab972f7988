"""Blob storage for uploaded recordings: local disk or MinIO"""

import asyncio
import logging
import os
import time
import uuid
from abc import ABC, abstractmethod
from io import BytesIO
from typing import Callable, TypeVar

from minio import Minio
from minio.error import S3Error

from ...core.config import settings
from ...domain.exceptions import UpstreamError
from ...domain.value_objects.audio_file import StorageRef, file_extension

logger = logging.getLogger(__name__)

T = TypeVar("T")


def generate_storage_key(filename: str) -> str:
    """``{millis}-{uuid8}{ext}``; the original name never becomes part of the key."""
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}{file_extension(filename)}"


class BaseStorageService(ABC):
    """Backend calls run in the default executor under a timeout."""

    def __init__(self, timeout: float = None):
        self.timeout = timeout if timeout is not None else settings.STORAGE_TIMEOUT_SECONDS

    async def _call(self, action: str, fn: Callable[[], T]) -> T:
        loop = asyncio.get_event_loop()
        try:
            return await asyncio.wait_for(loop.run_in_executor(None, fn), self.timeout)
        except asyncio.TimeoutError:
            raise UpstreamError(f"Storage {action} timed out")
        except (OSError, S3Error) as e:
            raise UpstreamError(f"Storage {action} failed: {e}")

    async def store(self, data: bytes, filename: str, content_type: str) -> StorageRef:
        """Persist bytes under a fresh key"""
        key = generate_storage_key(filename)
        await self._call("upload", lambda: self._put(key, data, content_type))
        return StorageRef(key=key, url=self.public_url(key))

    async def delete(self, ref: StorageRef) -> None:
        """Remove the blob; a missing blob is not an error"""
        await self._call("delete", lambda: self._remove(ref.key))

    @abstractmethod
    def public_url(self, key: str) -> str:
        pass

    @abstractmethod
    def _put(self, key: str, data: bytes, content_type: str) -> None:
        pass

    @abstractmethod
    def _remove(self, key: str) -> None:
        pass


class LocalStorageService(BaseStorageService):
    """Files under ``UPLOAD_DIR``, served by the app at ``/uploads``"""

    def __init__(self, upload_dir: str = None, base_url: str = None, timeout: float = None):
        super().__init__(timeout)
        self.upload_dir = upload_dir or settings.UPLOAD_DIR
        self.base_url = (base_url if base_url is not None else settings.BACKEND_URL).rstrip("/")
        os.makedirs(self.upload_dir, exist_ok=True)

    def _path(self, key: str) -> str:
        return os.path.join(self.upload_dir, os.path.basename(key))

    def public_url(self, key: str) -> str:
        return f"{self.base_url}/uploads/{key}"

    def _put(self, key: str, data: bytes, content_type: str) -> None:
        with open(self._path(key), "wb") as f:
            f.write(data)

    def _remove(self, key: str) -> None:
        try:
            os.remove(self._path(key))
        except FileNotFoundError:
            logger.info(f"Blob {key} already gone")


class MinioStorageService(BaseStorageService):

    def __init__(self, timeout: float = None):
        super().__init__(timeout)
        self.client = Minio(
            endpoint=settings.MINIO_ENDPOINT,
            access_key=settings.MINIO_ACCESS_KEY,
            secret_key=settings.MINIO_SECRET_KEY,
            secure=settings.MINIO_SECURE
        )
        self.bucket = settings.MINIO_BUCKET_NAME
        self._ensure_bucket_exists()

    def _ensure_bucket_exists(self):
        """Ensure bucket exists"""
        try:
            if not self.client.bucket_exists(self.bucket):
                self.client.make_bucket(self.bucket)
        except S3Error as e:
            logger.warning(f"Could not verify bucket {self.bucket}: {e}")

    def public_url(self, key: str) -> str:
        protocol = "https" if settings.MINIO_SECURE else "http"
        return f"{protocol}://{settings.MINIO_ENDPOINT}/{self.bucket}/{key}"

    def _put(self, key: str, data: bytes, content_type: str) -> None:
        self.client.put_object(
            bucket_name=self.bucket,
            object_name=key,
            data=BytesIO(data),
            length=len(data),
            content_type=content_type or "application/octet-stream"
        )

    def _remove(self, key: str) -> None:
        self.client.remove_object(self.bucket, key)


def create_storage_service() -> BaseStorageService:
    """Build the backend named by ``STORAGE_BACKEND``"""
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "minio":
        return MinioStorageService()
    if backend == "local":
        return LocalStorageService()
    raise ValueError(f"Unknown storage backend: {settings.STORAGE_BACKEND}")
