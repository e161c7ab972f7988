"""Moderation use case: one state machine behind the admin API and email links"""

import logging
from typing import Optional

from ...core.config import settings
from ...domain.entities.recording import Recording
from ...domain.entities.submission import Submission
from ...domain.enums import SubmissionStatus
from ...domain.exceptions import AlreadyProcessedError, NotFoundError, UpstreamError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import SubmissionId
from ...infrastructure.external_services.email_service import EmailService
from ...infrastructure.external_services.storage_service import BaseStorageService
from ..dtos.submission_dtos import ModerationResultResponse

logger = logging.getLogger(__name__)


class ModerateSubmissionUseCase:
    """Approve or reject a pending submission.

    The entity refuses to leave a terminal state, and the repository repeats
    that guard as a conditional update so that two reviewers acting at the
    same time cannot both succeed. Whoever loses gets AlreadyProcessedError
    and causes no side effects.
    """

    def __init__(self, unit_of_work: IUnitOfWork, storage_service: BaseStorageService, email_service: EmailService):
        self.unit_of_work = unit_of_work
        self.storage_service = storage_service
        self.email_service = email_service

    async def approve(self, submission_id: SubmissionId) -> ModerationResultResponse:
        """pending -> approved, publishing a Recording in the same transaction"""
        async with self.unit_of_work:
            submission = await self._load(submission_id)
            submission.approve()
            await self._transition(submission, SubmissionStatus.APPROVED)

            recording = Recording.from_submission(
                submission,
                anonymous_name=settings.ANONYMOUS_READER_NAME,
                approved_at=submission.reviewed_at,
            )
            await self.unit_of_work.recordings.add(recording)
            poem = await self.unit_of_work.poems.get_by_id(submission.poem_id)
            await self.unit_of_work.commit()

        self._log_events(submission)
        logger.info(f"Recording {recording.id.value} published from submission {submission_id.value}")

        sent = await self.email_service.send_approval_confirmation(
            submission.email,
            submission.reader_name,
            poem.title if poem else "Unknown Poem",
        )
        if not sent:
            logger.warning(f"Approval confirmation not sent for submission {submission_id.value}")

        return ModerationResultResponse(
            message="Submission approved successfully",
            submission_id=submission_id.value,
            status=submission.status.value,
            recording_id=recording.id.value,
        )

    async def reject(self, submission_id: SubmissionId) -> ModerationResultResponse:
        """pending -> rejected; the audio is deleted once the status is committed"""
        async with self.unit_of_work:
            submission = await self._load(submission_id)
            submission.reject()
            await self._transition(submission, SubmissionStatus.REJECTED)
            await self.unit_of_work.commit()

        self._log_events(submission)

        try:
            await self.storage_service.delete(submission.file.ref)
        except UpstreamError as e:
            # The submission stays rejected; the blob is left for manual cleanup
            logger.error(f"Failed to delete audio {submission.file.storage_key} of rejected submission {submission_id.value}: {e}")

        return ModerationResultResponse(
            message="Submission rejected successfully",
            submission_id=submission_id.value,
            status=submission.status.value,
        )

    async def approve_by_token(self, token: str) -> ModerationResultResponse:
        return await self.approve(await self._resolve_token(token))

    async def reject_by_token(self, token: str) -> ModerationResultResponse:
        return await self.reject(await self._resolve_token(token))

    async def _resolve_token(self, token: str) -> SubmissionId:
        async with self.unit_of_work:
            submission: Optional[Submission] = None
            if token:
                submission = await self.unit_of_work.submissions.get_by_approval_token(token)
            if submission is None:
                raise NotFoundError("Submission not found")
            return submission.id

    async def _load(self, submission_id: SubmissionId) -> Submission:
        submission = await self.unit_of_work.submissions.get_by_id(submission_id)
        if submission is None:
            raise NotFoundError(f"Submission {submission_id.value} not found")
        return submission

    async def _transition(self, submission: Submission, new_status: SubmissionStatus) -> None:
        changed = await self.unit_of_work.submissions.transition_status(
            submission.id,
            expected=SubmissionStatus.PENDING,
            new_status=new_status,
            reviewed_at=submission.reviewed_at,
        )
        if not changed:
            raise AlreadyProcessedError("Submission has already been processed")

    def _log_events(self, submission: Submission) -> None:
        for event in submission.get_events():
            logger.info(f"Submission {submission.id.value}: {event}")
