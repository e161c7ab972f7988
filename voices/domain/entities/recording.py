"""Recording entity - published snapshot of an approved submission"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..value_objects.entity_ids import RecordingId, PoemId, SubmissionId
from ..value_objects.audio_file import AudioFile
from .submission import Submission


@dataclass
class Recording:
    id: Optional[RecordingId]
    poem_id: PoemId
    submission_id: SubmissionId
    reader_name: str
    file: AudioFile
    location: Optional[str] = None
    background: Optional[str] = None
    interpretation_note: Optional[str] = None
    anonymous: bool = False
    approved_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def from_submission(
        cls,
        submission: Submission,
        anonymous_name: str,
        approved_at: Optional[datetime] = None,
    ) -> 'Recording':
        """Copy reader and file metadata at approval time.

        The copy is not kept in sync with the submission afterwards. Anonymous
        readers are stored under ``anonymous_name`` instead of their real name.
        """
        if submission.id is None or submission.file is None:
            raise ValueError("Only a persisted submission with a file can be published")

        return cls(
            id=None,
            poem_id=submission.poem_id,
            submission_id=submission.id,
            reader_name=submission.display_name(anonymous_name),
            file=submission.file,
            location=submission.location,
            background=submission.background,
            interpretation_note=submission.interpretation_note,
            anonymous=submission.anonymous,
            approved_at=approved_at or submission.reviewed_at or datetime.utcnow(),
        )
