"""Favorite repository interface

One implementation per favorite kind. ``target_id`` is ignored by the poet
repository, where a user has at most one favorite.
"""

from abc import ABC, abstractmethod
from typing import Optional, List

from ..entities.favorite import Favorite
from ..value_objects.entity_ids import UserId


class IFavoriteRepository(ABC):

    @abstractmethod
    async def list_for_user(self, user_id: UserId) -> List[Favorite]:
        pass

    @abstractmethod
    async def exists(self, user_id: UserId, target_id: Optional[int] = None) -> bool:
        pass

    @abstractmethod
    async def add(self, user_id: UserId, target_id: Optional[int] = None) -> Favorite:
        pass

    @abstractmethod
    async def remove(self, user_id: UserId, target_id: Optional[int] = None) -> bool:
        pass

    @abstractmethod
    async def remove_all_for_target(self, target_id: int) -> int:
        """Delete every user's favorite of ``target_id``; returns the row count."""
        pass
