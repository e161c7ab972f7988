"""User repository interface"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.user import User
from ..value_objects.entity_ids import UserId


class IUserRepository(ABC):

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def upsert(self, user: User) -> User:
        """Insert the user or refresh the provider-owned profile fields"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        pass
