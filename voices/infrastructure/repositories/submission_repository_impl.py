"""Submission repository implementation using SQLAlchemy ORM"""

from datetime import datetime
from typing import Optional, List, Dict

from sqlalchemy import func

from ...domain.entities.submission import Submission
from ...domain.enums import SubmissionStatus
from ...domain.repositories.submission_repository import ISubmissionRepository
from ...domain.value_objects.audio_file import AudioFile
from ...domain.value_objects.entity_ids import SubmissionId, PoemId
from ..orm.submission_model import SubmissionModel
from .base import SqlAlchemyRepository


class SubmissionRepositoryImpl(SqlAlchemyRepository, ISubmissionRepository):
    """Repository implementation for the Submission aggregate"""

    async def list_by_status(self, status: SubmissionStatus) -> List[Submission]:
        """Get submissions in one moderation state, oldest first"""
        return await self._run(lambda: [
            self._map_to_entity(model)
            for model in self.session.query(SubmissionModel)
            .filter(SubmissionModel.status == status)
            .order_by(SubmissionModel.submitted_at, SubmissionModel.id)
            .all()
        ])

    async def get_by_id(self, submission_id: SubmissionId) -> Optional[Submission]:
        """Get submission by ID"""
        def query():
            model = self.session.query(SubmissionModel).filter(SubmissionModel.id == submission_id.value).first()
            return self._map_to_entity(model) if model else None
        return await self._run(query)

    async def get_by_approval_token(self, token: str) -> Optional[Submission]:
        """Get submission by the token embedded in moderation email links"""
        def query():
            model = self.session.query(SubmissionModel).filter(SubmissionModel.approval_token == token).first()
            return self._map_to_entity(model) if model else None
        return await self._run(query)

    async def add(self, submission: Submission) -> Submission:
        """Add a new submission and assign its generated ID"""
        model = self._create_model_from_entity(submission)

        def insert():
            self._add_and_flush(model)
            return model.id

        submission.id = SubmissionId(await self._run(insert))
        return submission

    async def transition_status(
        self,
        submission_id: SubmissionId,
        expected: SubmissionStatus,
        new_status: SubmissionStatus,
        reviewed_at: datetime,
    ) -> bool:
        """Conditional UPDATE ... WHERE status = expected.

        A concurrent reviewer's UPDATE on the same row waits for this
        transaction and then matches zero rows.
        """
        def update():
            updated = (
                self.session.query(SubmissionModel)
                .filter(
                    SubmissionModel.id == submission_id.value,
                    SubmissionModel.status == expected,
                )
                .update(
                    {SubmissionModel.status: new_status, SubmissionModel.reviewed_at: reviewed_at},
                    synchronize_session=False,
                )
            )
            return updated == 1
        return await self._run(update)

    async def count_by_status(self) -> Dict[SubmissionStatus, int]:
        """Count submissions per moderation state"""
        def query():
            rows = (
                self.session.query(SubmissionModel.status, func.count(SubmissionModel.id))
                .group_by(SubmissionModel.status)
                .all()
            )
            counts = {status: 0 for status in SubmissionStatus}
            for status, count in rows:
                counts[SubmissionStatus(status)] = count
            return counts
        return await self._run(query)

    def _create_model_from_entity(self, submission: Submission) -> SubmissionModel:
        """Create ORM model from domain entity"""
        return SubmissionModel(
            poem_id=submission.poem_id.value,
            reader_name=submission.reader_name,
            email=submission.email,
            location=submission.location,
            background=submission.background,
            interpretation_note=submission.interpretation_note,
            anonymous=submission.anonymous,
            file_name=submission.file.storage_key,
            original_file_name=submission.file.original_name,
            file_size=submission.file.size,
            mime_type=submission.file.mime_type,
            file_url=submission.file.url,
            status=submission.status,
            approval_token=submission.approval_token,
            submitted_at=submission.submitted_at,
            reviewed_at=submission.reviewed_at,
        )

    def _map_to_entity(self, model: SubmissionModel) -> Submission:
        """Map ORM model to domain entity"""
        return Submission(
            id=SubmissionId(model.id),
            poem_id=PoemId(model.poem_id),
            reader_name=model.reader_name,
            email=model.email,
            location=model.location,
            background=model.background,
            interpretation_note=model.interpretation_note,
            anonymous=bool(model.anonymous),
            file=AudioFile(
                storage_key=model.file_name,
                original_name=model.original_file_name,
                size=model.file_size,
                mime_type=model.mime_type,
                url=model.file_url,
            ),
            status=SubmissionStatus(model.status),
            approval_token=model.approval_token,
            submitted_at=model.submitted_at,
            reviewed_at=model.reviewed_at,
        )
