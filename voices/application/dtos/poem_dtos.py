"""Poem and recording DTOs for the read API"""

from datetime import datetime
from typing import List, Optional

from .base import CamelModel
from ...domain.entities.poem import Poem
from ...domain.entities.recording import Recording


class PoemDto(CamelModel):
    id: int
    title: str
    slug: str
    year: Optional[int] = None
    external_link: Optional[str] = None
    context: Optional[str] = None

    @classmethod
    def from_entity(cls, poem: Poem) -> 'PoemDto':
        return cls(
            id=poem.id.value,
            title=poem.title,
            slug=poem.slug,
            year=poem.year,
            external_link=poem.external_link,
            context=poem.context,
        )


class RecordingDto(CamelModel):
    """Public view of a recording; never carries the submitter's email"""
    id: int
    poem_id: int
    submission_id: int
    reader_name: str
    location: Optional[str] = None
    background: Optional[str] = None
    interpretation_note: Optional[str] = None
    anonymous: bool = False
    file_name: str
    file_url: Optional[str] = None
    mime_type: str
    file_size: int
    approved_at: datetime

    @classmethod
    def from_entity(cls, recording: Recording) -> 'RecordingDto':
        return cls(
            id=recording.id.value,
            poem_id=recording.poem_id.value,
            submission_id=recording.submission_id.value,
            reader_name=recording.reader_name,
            location=recording.location,
            background=recording.background,
            interpretation_note=recording.interpretation_note,
            anonymous=recording.anonymous,
            file_name=recording.file.storage_key,
            file_url=recording.file.url,
            mime_type=recording.file.mime_type,
            file_size=recording.file.size,
            approved_at=recording.approved_at,
        )


class AdminRecordingDto(RecordingDto):
    poem_title: str


class PoemDetailResponse(CamelModel):
    poem: PoemDto
    recordings: List[RecordingDto]

