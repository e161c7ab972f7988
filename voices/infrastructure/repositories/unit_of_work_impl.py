"""Unit of Work implementation with proper async support"""

from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from ...domain.repositories.unit_of_work import IUnitOfWork
from .user_repository_impl import UserRepositoryImpl
from .poem_repository_impl import PoemRepositoryImpl
from .submission_repository_impl import SubmissionRepositoryImpl
from .recording_repository_impl import RecordingRepositoryImpl
from .favorite_repository_impl import (
    FavoriteRecordingRepositoryImpl,
    FavoritePoemRepositoryImpl,
    FavoritePoetRepositoryImpl,
)


class UnitOfWorkImpl(IUnitOfWork):

    def __init__(self, session: Session):
        self.session = session
        self.users = UserRepositoryImpl(session)
        self.poems = PoemRepositoryImpl(session)
        self.submissions = SubmissionRepositoryImpl(session)
        self.recordings = RecordingRepositoryImpl(session)
        self.favorite_recordings = FavoriteRecordingRepositoryImpl(session)
        self.favorite_poems = FavoritePoemRepositoryImpl(session)
        self.favorite_poet = FavoritePoetRepositoryImpl(session)
        self._committed = False

    async def __aenter__(self):
        self._committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            await self.rollback()
        elif not self._committed:
            await self.commit()

    async def commit(self) -> None:
        """Commit transaction"""
        try:
            await run_in_threadpool(self.session.commit)
            self._committed = True
        except Exception:
            await self.rollback()
            raise

    async def rollback(self) -> None:
        """Rollback transaction"""
        await run_in_threadpool(self.rollback_sync)

    def rollback_sync(self) -> None:
        """Synchronous rollback helper"""
        self.session.rollback()
