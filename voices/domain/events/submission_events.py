"""Submission domain events"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..value_objects.entity_ids import SubmissionId, PoemId


@dataclass(frozen=True)
class SubmissionReceived:
    poem_id: PoemId
    storage_key: str


@dataclass(frozen=True)
class SubmissionApproved:
    submission_id: Optional[SubmissionId]
    reviewed_at: datetime


@dataclass(frozen=True)
class SubmissionRejected:
    submission_id: Optional[SubmissionId]
    reviewed_at: datetime
