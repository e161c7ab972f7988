"""Favorites use case, shared by the recording, poem and poet toggles"""

import logging
from typing import List, Optional

from ...domain.enums import FavoriteKind
from ...domain.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from ...domain.repositories.favorite_repository import IFavoriteRepository
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import PoemId, RecordingId, UserId
from ..dtos.favorite_dtos import FavoriteDto

logger = logging.getLogger(__name__)


class FavoritesUseCase:
    """List, add, remove and check favorites of one kind.

    The poet kind has no target id. Duplicates are refused by an existence
    check, so two simultaneous adds can both succeed.
    """

    def __init__(self, unit_of_work: IUnitOfWork, kind: FavoriteKind):
        self.unit_of_work = unit_of_work
        self.kind = kind

    @property
    def repository(self) -> IFavoriteRepository:
        return self.unit_of_work.favorites(self.kind)

    async def list(self, user_id: Optional[UserId]) -> List[FavoriteDto]:
        user_id = self._require_user(user_id)
        async with self.unit_of_work:
            favorites = await self.repository.list_for_user(user_id)
            return [FavoriteDto.from_entity(f) for f in favorites]

    async def add(self, user_id: Optional[UserId], target_id: Optional[int] = None) -> FavoriteDto:
        user_id = self._require_user(user_id)
        target_id = self._check_target(target_id)
        async with self.unit_of_work:
            await self._ensure_target_exists(target_id)
            if await self.repository.exists(user_id, target_id):
                raise ConflictError("Already in favorites")
            favorite = await self.repository.add(user_id, target_id)
            await self.unit_of_work.commit()

        logger.info(f"User {user_id.value} favorited {self.kind.value} {target_id or ''}".rstrip())
        return FavoriteDto.from_entity(favorite)

    async def remove(self, user_id: Optional[UserId], target_id: Optional[int] = None) -> None:
        user_id = self._require_user(user_id)
        target_id = self._check_target(target_id)
        async with self.unit_of_work:
            if not await self.repository.remove(user_id, target_id):
                raise NotFoundError("Favorite not found")
            await self.unit_of_work.commit()

    async def exists(self, user_id: Optional[UserId], target_id: Optional[int] = None) -> bool:
        user_id = self._require_user(user_id)
        target_id = self._check_target(target_id)
        async with self.unit_of_work:
            return await self.repository.exists(user_id, target_id)

    def _require_user(self, user_id: Optional[UserId]) -> UserId:
        if user_id is None:
            raise AuthenticationError("Authentication required")
        return user_id

    def _check_target(self, target_id: Optional[int]) -> Optional[int]:
        if not self.kind.has_target:
            return None
        if target_id is None:
            raise ValidationError(f"A {self.kind.value} id is required")
        return target_id

    async def _ensure_target_exists(self, target_id: Optional[int]) -> None:
        if self.kind == FavoriteKind.RECORDING:
            found = await self.unit_of_work.recordings.get_by_id(RecordingId(target_id))
        elif self.kind == FavoriteKind.POEM:
            found = await self.unit_of_work.poems.get_by_id(PoemId(target_id))
        else:
            return
        if found is None:
            raise NotFoundError(f"{self.kind.value.capitalize()} {target_id} not found")
