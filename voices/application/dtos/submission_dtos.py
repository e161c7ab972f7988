"""Submission DTOs: typed intake command and moderation responses"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import EmailStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from .base import CamelModel
from ...domain.entities.submission import Submission
from ...domain.exceptions import ValidationError

TRUE_VALUES = {"true", "on", "1", "yes"}
FALSE_VALUES = {"false", "off", "0", "no", ""}


class SubmissionCommand(CamelModel):
    """Metadata of an upload, parsed once from multipart form strings"""
    reader_name: str
    email: EmailStr
    poem_slug: str
    location: Optional[str] = None
    background: Optional[str] = None
    interpretation_note: Optional[str] = None
    anonymous: bool = False

    @field_validator("reader_name", "email", "poem_slug", mode="before")
    @classmethod
    def required_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
        if value is None or value == "":
            raise ValueError("This field is required")
        return value

    @field_validator("location", "background", "interpretation_note", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("anonymous", mode="before")
    @classmethod
    def coerce_flag(cls, value: Any) -> Any:
        if value is None:
            return False
        if isinstance(value, str):
            flag = value.strip().lower()
            if flag in TRUE_VALUES:
                return True
            if flag in FALSE_VALUES:
                return False
            raise ValueError("Expected true or false")
        return value

    @classmethod
    def from_form(cls, data: Dict[str, Any]) -> 'SubmissionCommand':
        """Validate raw form fields, reporting problems as a domain ValidationError"""
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(
                "Invalid submission",
                errors=[
                    {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
                    for err in e.errors()
                ],
            )


class SubmissionCreatedResponse(CamelModel):
    message: str
    submission_id: int


class PendingSubmissionDto(CamelModel):
    """Moderator view of a submission, including contact details"""
    id: int
    poem_id: int
    poem_title: str
    reader_name: str
    email: str
    location: Optional[str] = None
    background: Optional[str] = None
    interpretation_note: Optional[str] = None
    anonymous: bool = False
    file_name: str
    original_file_name: str
    file_url: Optional[str] = None
    file_size: int
    mime_type: str
    status: str
    submitted_at: datetime
    reviewed_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, submission: Submission, poem_title: str) -> 'PendingSubmissionDto':
        return cls(
            id=submission.id.value,
            poem_id=submission.poem_id.value,
            poem_title=poem_title,
            reader_name=submission.reader_name,
            email=submission.email,
            location=submission.location,
            background=submission.background,
            interpretation_note=submission.interpretation_note,
            anonymous=submission.anonymous,
            file_name=submission.file.storage_key,
            original_file_name=submission.file.original_name,
            file_url=submission.file.url,
            file_size=submission.file.size,
            mime_type=submission.file.mime_type,
            status=submission.status.value,
            submitted_at=submission.submitted_at,
            reviewed_at=submission.reviewed_at,
        )


class ModerationResultResponse(CamelModel):
    message: str
    submission_id: int
    status: str
    recording_id: Optional[int] = None


class AdminStatsResponse(CamelModel):
    pending: int
    approved: int
    rejected: int
    total: int
