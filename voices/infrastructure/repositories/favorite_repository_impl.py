"""Favorite repository implementations, one per favorite kind"""

from typing import Optional, List

from ...domain.entities.favorite import Favorite
from ...domain.enums import FavoriteKind
from ...domain.repositories.favorite_repository import IFavoriteRepository
from ...domain.value_objects.entity_ids import UserId
from ..orm.favorite_model import FavoriteRecordingModel, FavoritePoemModel, FavoritePoetModel
from .base import SqlAlchemyRepository


class FavoriteRepositoryImpl(SqlAlchemyRepository, IFavoriteRepository):
    """Generic over a favorite table; ``target_column`` is None for the poet table"""

    model = None
    kind: FavoriteKind = None
    target_column: Optional[str] = None

    def _filter(self, user_id: UserId, target_id: Optional[int] = None):
        query = self.session.query(self.model).filter(self.model.user_id == user_id.value)
        if self.target_column is not None:
            query = query.filter(getattr(self.model, self.target_column) == target_id)
        return query

    async def list_for_user(self, user_id: UserId) -> List[Favorite]:
        """Get a user's favorites of this kind, newest first"""
        return await self._run(lambda: [
            self._map_to_entity(model)
            for model in self.session.query(self.model)
            .filter(self.model.user_id == user_id.value)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .all()
        ])

    async def exists(self, user_id: UserId, target_id: Optional[int] = None) -> bool:
        return await self._run(lambda: self._filter(user_id, target_id).first() is not None)

    async def add(self, user_id: UserId, target_id: Optional[int] = None) -> Favorite:
        values = {"user_id": user_id.value}
        if self.target_column is not None:
            values[self.target_column] = target_id
        model = self.model(**values)
        return await self._run(lambda: self._map_to_entity(self._add_and_flush(model)))

    async def remove(self, user_id: UserId, target_id: Optional[int] = None) -> bool:
        return await self._run(
            lambda: self._filter(user_id, target_id).delete(synchronize_session=False) > 0
        )

    async def remove_all_for_target(self, target_id: int) -> int:
        if self.target_column is None:
            return 0
        return await self._run(
            lambda: self.session.query(self.model)
            .filter(getattr(self.model, self.target_column) == target_id)
            .delete(synchronize_session=False)
        )

    def _map_to_entity(self, model) -> Favorite:
        """Map ORM model to domain entity"""
        return Favorite(
            id=model.id,
            kind=self.kind,
            user_id=UserId(model.user_id),
            target_id=getattr(model, self.target_column) if self.target_column else None,
            created_at=model.created_at,
        )


class FavoriteRecordingRepositoryImpl(FavoriteRepositoryImpl):
    model = FavoriteRecordingModel
    kind = FavoriteKind.RECORDING
    target_column = "recording_id"


class FavoritePoemRepositoryImpl(FavoriteRepositoryImpl):
    model = FavoritePoemModel
    kind = FavoriteKind.POEM
    target_column = "poem_id"


class FavoritePoetRepositoryImpl(FavoriteRepositoryImpl):
    model = FavoritePoetModel
    kind = FavoriteKind.POET
