"""Delete Recording Use Case"""

import logging

from ...domain.exceptions import NotFoundError, UpstreamError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import RecordingId
from ...infrastructure.external_services.storage_service import BaseStorageService

logger = logging.getLogger(__name__)


class DeleteRecordingUseCase:
    """Remove a published recording together with everyone's favorites of it"""

    def __init__(self, unit_of_work: IUnitOfWork, storage_service: BaseStorageService):
        self.unit_of_work = unit_of_work
        self.storage_service = storage_service

    async def execute(self, recording_id: RecordingId) -> None:
        async with self.unit_of_work:
            recording = await self.unit_of_work.recordings.get_by_id(recording_id)
            if recording is None:
                raise NotFoundError(f"Recording {recording_id.value} not found")

            removed = await self.unit_of_work.favorite_recordings.remove_all_for_target(recording_id.value)
            await self.unit_of_work.recordings.delete(recording_id)
            await self.unit_of_work.commit()

        logger.info(f"Deleted recording {recording_id.value} and {removed} favorites")

        try:
            await self.storage_service.delete(recording.file.ref)
        except UpstreamError as e:
            logger.error(f"Failed to delete audio {recording.file.storage_key} of recording {recording_id.value}: {e}")
