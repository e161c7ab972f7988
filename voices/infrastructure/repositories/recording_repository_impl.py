"""Recording repository implementation using SQLAlchemy ORM"""

from typing import Optional, List, Dict

from sqlalchemy import func

from ...domain.entities.recording import Recording
from ...domain.repositories.recording_repository import IRecordingRepository
from ...domain.value_objects.audio_file import AudioFile
from ...domain.value_objects.entity_ids import RecordingId, PoemId, SubmissionId
from ..orm.recording_model import RecordingModel
from .base import SqlAlchemyRepository


class RecordingRepositoryImpl(SqlAlchemyRepository, IRecordingRepository):
    """Repository implementation for published recordings"""

    async def list_all(self) -> List[Recording]:
        """Get all recordings, newest first"""
        return await self._run(lambda: [
            self._map_to_entity(model)
            for model in self.session.query(RecordingModel)
            .order_by(RecordingModel.approved_at.desc(), RecordingModel.id.desc())
            .all()
        ])

    async def list_by_poem(self, poem_id: PoemId) -> List[Recording]:
        """Get recordings of one poem, newest first"""
        return await self._run(lambda: [
            self._map_to_entity(model)
            for model in self.session.query(RecordingModel)
            .filter(RecordingModel.poem_id == poem_id.value)
            .order_by(RecordingModel.approved_at.desc(), RecordingModel.id.desc())
            .all()
        ])

    async def get_by_id(self, recording_id: RecordingId) -> Optional[Recording]:
        """Get recording by ID"""
        def query():
            model = self.session.query(RecordingModel).filter(RecordingModel.id == recording_id.value).first()
            return self._map_to_entity(model) if model else None
        return await self._run(query)

    async def add(self, recording: Recording) -> Recording:
        """Add a new recording and assign its generated ID"""
        model = RecordingModel(
            poem_id=recording.poem_id.value,
            submission_id=recording.submission_id.value,
            reader_name=recording.reader_name,
            location=recording.location,
            background=recording.background,
            interpretation_note=recording.interpretation_note,
            anonymous=recording.anonymous,
            file_name=recording.file.storage_key,
            original_file_name=recording.file.original_name,
            file_size=recording.file.size,
            mime_type=recording.file.mime_type,
            file_url=recording.file.url,
            approved_at=recording.approved_at,
        )

        def insert():
            self._add_and_flush(model)
            return model.id

        recording.id = RecordingId(await self._run(insert))
        return recording

    async def delete(self, recording_id: RecordingId) -> bool:
        """Delete recording"""
        def remove():
            deleted = (
                self.session.query(RecordingModel)
                .filter(RecordingModel.id == recording_id.value)
                .delete(synchronize_session=False)
            )
            return deleted > 0
        return await self._run(remove)

    async def count_by_poem(self) -> Dict[PoemId, int]:
        """Count recordings per poem"""
        def query():
            rows = (
                self.session.query(RecordingModel.poem_id, func.count(RecordingModel.id))
                .group_by(RecordingModel.poem_id)
                .all()
            )
            return {PoemId(poem_id): count for poem_id, count in rows}
        return await self._run(query)

    def _map_to_entity(self, model: RecordingModel) -> Recording:
        """Map ORM model to domain entity"""
        return Recording(
            id=RecordingId(model.id),
            poem_id=PoemId(model.poem_id),
            submission_id=SubmissionId(model.submission_id),
            reader_name=model.reader_name,
            file=AudioFile(
                storage_key=model.file_name,
                original_name=model.original_file_name,
                size=model.file_size,
                mime_type=model.mime_type,
                url=model.file_url,
            ),
            location=model.location,
            background=model.background,
            interpretation_note=model.interpretation_note,
            anonymous=bool(model.anonymous),
            approved_at=model.approved_at,
        )
