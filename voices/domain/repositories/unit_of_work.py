"""Unit of Work interface for transaction management"""

from abc import ABC, abstractmethod

from .user_repository import IUserRepository
from .poem_repository import IPoemRepository
from .submission_repository import ISubmissionRepository
from .recording_repository import IRecordingRepository
from .favorite_repository import IFavoriteRepository
from ..enums import FavoriteKind


class IUnitOfWork(ABC):
    """Unit of Work interface for managing transactions across repositories"""

    users: IUserRepository
    poems: IPoemRepository
    submissions: ISubmissionRepository
    recordings: IRecordingRepository
    favorite_recordings: IFavoriteRepository
    favorite_poems: IFavoriteRepository
    favorite_poet: IFavoriteRepository

    def favorites(self, kind: FavoriteKind) -> IFavoriteRepository:
        """Repository for one favorite kind"""
        return {
            FavoriteKind.RECORDING: self.favorite_recordings,
            FavoriteKind.POEM: self.favorite_poems,
            FavoriteKind.POET: self.favorite_poet,
        }[kind]

    @abstractmethod
    async def __aenter__(self):
        """Enter async context"""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context"""
        pass

    @abstractmethod
    async def commit(self):
        """Commit transaction"""
        pass

    @abstractmethod
    async def rollback(self):
        """Rollback transaction"""
        pass
