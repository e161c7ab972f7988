"""Audio file value objects"""

import os
from dataclasses import dataclass
from typing import Iterable, Optional


# Declared types that an allowed extension never overrides
REFUSED_MIME_PREFIXES = ("text/",)


@dataclass(frozen=True)
class StorageRef:
    """Opaque reference to a blob: storage key plus public URL when the backend has one."""
    key: str
    url: Optional[str] = None

    def __post_init__(self):
        if not self.key:
            raise ValueError("Storage key cannot be empty")


@dataclass(frozen=True)
class AudioFile:
    """File metadata carried by submissions and copied onto recordings."""
    storage_key: str
    original_name: str
    size: int
    mime_type: str
    url: Optional[str] = None

    def __post_init__(self):
        if self.size < 0:
            raise ValueError("File size cannot be negative")

    @property
    def ref(self) -> StorageRef:
        return StorageRef(key=self.storage_key, url=self.url)


def file_extension(filename: Optional[str]) -> str:
    return os.path.splitext(filename or "")[1].lower()


def is_allowed_audio(
    filename: Optional[str],
    content_type: Optional[str],
    allowed_mime_types: Iterable[str],
    allowed_extensions: Iterable[str],
) -> bool:
    """Check an upload against the audio allow-list.

    Upload clients report MIME types inconsistently, so an allowed extension is
    accepted whatever type was declared. A ``text/*`` upload such as
    ``text/plain`` is refused whatever its name.
    """
    mime = (content_type or "").split(";")[0].strip().lower()
    if mime in {m.lower() for m in allowed_mime_types}:
        return True

    if file_extension(filename) not in {e.lower() for e in allowed_extensions}:
        return False

    return not mime.startswith(REFUSED_MIME_PREFIXES)
