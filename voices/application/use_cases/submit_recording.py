"""Submit Recording Use Case"""

import logging
from typing import Optional

from ...core.config import settings
from ...core.security import generate_approval_token
from ...domain.entities.submission import Submission
from ...domain.exceptions import NotFoundError, UpstreamError, ValidationError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.audio_file import AudioFile, StorageRef, is_allowed_audio
from ...infrastructure.external_services.email_service import EmailService
from ...infrastructure.external_services.storage_service import BaseStorageService
from ..dtos.submission_dtos import SubmissionCommand, SubmissionCreatedResponse

logger = logging.getLogger(__name__)

FILE_FIELD = "audioFile"
SUCCESS_MESSAGE = "Recording submitted successfully! It will be reviewed before appearing on the site."


def validate_audio_upload(data: Optional[bytes], filename: Optional[str], content_type: Optional[str]) -> None:
    """Presence, size and type checks for an uploaded recording"""
    if data is None or not filename:
        problem = "Audio file is required"
    elif len(data) == 0:
        problem = "Audio file is empty"
    elif len(data) > settings.MAX_UPLOAD_SIZE_BYTES:
        limit_mb = settings.MAX_UPLOAD_SIZE_BYTES / (1024 * 1024)
        problem = f"Audio file exceeds the {limit_mb:g}MB limit"
    elif not is_allowed_audio(
        filename,
        content_type,
        settings.ALLOWED_AUDIO_MIME_TYPES,
        settings.ALLOWED_AUDIO_EXTENSIONS,
    ):
        problem = "Only MP3, WAV and M4A audio files are allowed"
    else:
        return

    raise ValidationError(problem, errors=[{"field": FILE_FIELD, "message": problem}])


class SubmitRecordingUseCase:
    """Use case for receiving a reader's recording for moderation"""

    def __init__(self, unit_of_work: IUnitOfWork, storage_service: BaseStorageService, email_service: EmailService):
        self.unit_of_work = unit_of_work
        self.storage_service = storage_service
        self.email_service = email_service

    async def execute(self,
                      command: SubmissionCommand,
                      file_data: Optional[bytes],
                      filename: Optional[str],
                      content_type: Optional[str]) -> SubmissionCreatedResponse:
        """Store the audio, record a pending submission and notify the moderator"""
        validate_audio_upload(file_data, filename, content_type)

        async with self.unit_of_work:
            # Resolve the poem first so an unknown slug never reaches the blob store
            poem = await self.unit_of_work.poems.get_by_slug(command.poem_slug)
            if poem is None:
                raise NotFoundError(f"Poem '{command.poem_slug}' not found")

            ref = await self.storage_service.store(file_data, filename, content_type)

            try:
                submission = Submission.create(
                    poem_id=poem.id,
                    reader_name=command.reader_name,
                    email=str(command.email),
                    file=AudioFile(
                        storage_key=ref.key,
                        original_name=filename,
                        size=len(file_data),
                        mime_type=content_type or "application/octet-stream",
                        url=ref.url,
                    ),
                    approval_token=generate_approval_token(),
                    location=command.location,
                    background=command.background,
                    interpretation_note=command.interpretation_note,
                    anonymous=command.anonymous,
                )
                await self.unit_of_work.submissions.add(submission)
                await self.unit_of_work.commit()
            except Exception:
                await self._discard_blob(ref)
                raise

        for event in submission.get_events():
            logger.info(f"Submission {submission.id.value} for poem '{poem.slug}': {event}")

        sent = await self.email_service.send_submission_notification(
            submission_id=submission.id.value,
            reader_name=submission.reader_name,
            poem_title=poem.title,
            email=submission.email,
            audio_url=ref.url or self.storage_service.public_url(ref.key),
            approval_token=submission.approval_token,
            location=submission.location,
            background=submission.background,
            interpretation_note=submission.interpretation_note,
            anonymous=submission.anonymous,
        )
        if not sent:
            logger.warning(f"Moderation email not sent for submission {submission.id.value}")

        return SubmissionCreatedResponse(message=SUCCESS_MESSAGE, submission_id=submission.id.value)

    async def _discard_blob(self, ref: StorageRef) -> None:
        try:
            await self.storage_service.delete(ref)
        except UpstreamError as e:
            logger.error(f"Could not remove orphaned blob {ref.key}: {e}")
