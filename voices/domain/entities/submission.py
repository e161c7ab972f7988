"""Submission entity with moderation business logic"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List

from ..value_objects.entity_ids import SubmissionId, PoemId
from ..value_objects.audio_file import AudioFile
from ..enums import SubmissionStatus
from ..exceptions import AlreadyProcessedError
from ..events.submission_events import SubmissionReceived, SubmissionApproved, SubmissionRejected


@dataclass
class Submission:
    id: Optional[SubmissionId]
    poem_id: PoemId

    # Reader identity
    reader_name: str
    email: str
    location: Optional[str] = None
    background: Optional[str] = None
    interpretation_note: Optional[str] = None
    anonymous: bool = False

    # Uploaded audio
    file: Optional[AudioFile] = None

    # Moderation
    status: SubmissionStatus = SubmissionStatus.PENDING
    approval_token: str = ""

    # Timestamps
    submitted_at: datetime = field(default_factory=datetime.utcnow)
    reviewed_at: Optional[datetime] = None

    # Domain events
    _events: List = field(default_factory=list, init=False, repr=False, compare=False)

    @classmethod
    def create(
        cls,
        poem_id: PoemId,
        reader_name: str,
        email: str,
        file: AudioFile,
        approval_token: str,
        location: Optional[str] = None,
        background: Optional[str] = None,
        interpretation_note: Optional[str] = None,
        anonymous: bool = False,
    ) -> 'Submission':
        """Factory method for a freshly uploaded reading awaiting review"""
        submission = cls(
            id=None,
            poem_id=poem_id,
            reader_name=reader_name,
            email=email,
            location=location,
            background=background,
            interpretation_note=interpretation_note,
            anonymous=anonymous,
            file=file,
            status=SubmissionStatus.PENDING,
            approval_token=approval_token,
            submitted_at=datetime.utcnow(),
        )
        submission._events.append(SubmissionReceived(poem_id=poem_id, storage_key=file.storage_key))
        return submission

    @property
    def is_pending(self) -> bool:
        return self.status == SubmissionStatus.PENDING

    def _ensure_pending(self) -> None:
        if not self.is_pending:
            raise AlreadyProcessedError(f"Submission has already been {self.status.value}")

    def approve(self, reviewed_at: Optional[datetime] = None) -> None:
        """Business logic: pending -> approved"""
        self._ensure_pending()
        self.status = SubmissionStatus.APPROVED
        self.reviewed_at = reviewed_at or datetime.utcnow()
        self._events.append(SubmissionApproved(submission_id=self.id, reviewed_at=self.reviewed_at))

    def reject(self, reviewed_at: Optional[datetime] = None) -> None:
        """Business logic: pending -> rejected"""
        self._ensure_pending()
        self.status = SubmissionStatus.REJECTED
        self.reviewed_at = reviewed_at or datetime.utcnow()
        self._events.append(SubmissionRejected(submission_id=self.id, reviewed_at=self.reviewed_at))

    def display_name(self, anonymous_name: str) -> str:
        return anonymous_name if self.anonymous else self.reader_name

    def get_events(self) -> List:
        """Get and clear domain events"""
        events = self._events.copy()
        self._events.clear()
        return events
