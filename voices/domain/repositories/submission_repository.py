"""Submission repository interface"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, List, Dict

from ..entities.submission import Submission
from ..enums import SubmissionStatus
from ..value_objects.entity_ids import SubmissionId


class ISubmissionRepository(ABC):

    @abstractmethod
    async def list_by_status(self, status: SubmissionStatus) -> List[Submission]:
        pass

    @abstractmethod
    async def get_by_id(self, submission_id: SubmissionId) -> Optional[Submission]:
        pass

    @abstractmethod
    async def get_by_approval_token(self, token: str) -> Optional[Submission]:
        pass

    @abstractmethod
    async def add(self, submission: Submission) -> Submission:
        pass

    @abstractmethod
    async def transition_status(
        self,
        submission_id: SubmissionId,
        expected: SubmissionStatus,
        new_status: SubmissionStatus,
        reviewed_at: datetime,
    ) -> bool:
        """Compare-and-set the status; False when the row was not in ``expected``."""
        pass

    @abstractmethod
    async def count_by_status(self) -> Dict[SubmissionStatus, int]:
        pass
