"""User repository implementation using SQLAlchemy ORM"""

from datetime import datetime
from typing import Optional

from ...domain.repositories.user_repository import IUserRepository
from ...domain.entities.user import User
from ...domain.value_objects.entity_ids import UserId
from ...domain.enums import UserRole
from ..orm.user_model import UserModel
from .base import SqlAlchemyRepository


class UserRepositoryImpl(SqlAlchemyRepository, IUserRepository):
    """Repository implementation for User aggregate"""

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """Get user by ID"""
        def query():
            model = self.session.query(UserModel).filter(UserModel.id == user_id.value).first()
            return self._map_to_entity(model) if model else None
        return await self._run(query)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        def query():
            model = (
                self.session.query(UserModel)
                .filter(UserModel.email == email)
                .order_by(UserModel.last_login.desc())
                .first()
            )
            return self._map_to_entity(model) if model else None
        return await self._run(query)

    async def upsert(self, user: User) -> User:
        """Create the user on first sign-in, otherwise refresh the profile.

        The stored role is never overwritten from the provider profile.
        """
        def save():
            existing = self.session.query(UserModel).filter(UserModel.id == user.id.value).first()
            if existing:
                existing.email = user.email
                existing.first_name = user.first_name
                existing.last_name = user.last_name
                existing.profile_image_url = user.profile_image_url
                existing.last_login = user.last_login
                existing.updated_at = datetime.utcnow()
                self.session.flush()
                return self._map_to_entity(existing)

            model = self._create_model_from_entity(user)
            return self._map_to_entity(self._add_and_flush(model))
        return await self._run(save)

    async def update(self, user: User) -> User:
        """Update an existing user"""
        def save():
            existing = self.session.query(UserModel).filter(UserModel.id == user.id.value).first()
            if existing:
                self._update_model_from_entity(existing, user)
                self.session.flush()
            return user
        return await self._run(save)

    def _create_model_from_entity(self, user: User) -> UserModel:
        """Create ORM model from domain entity"""
        return UserModel(
            id=user.id.value,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            profile_image_url=user.profile_image_url,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_login=user.last_login,
        )

    def _update_model_from_entity(self, model: UserModel, user: User) -> None:
        """Update ORM model from domain entity"""
        model.email = user.email
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.profile_image_url = user.profile_image_url
        model.role = user.role
        model.updated_at = user.updated_at
        model.last_login = user.last_login

    def _map_to_entity(self, model: UserModel) -> User:
        """Map ORM model to domain entity"""
        return User(
            id=UserId(model.id),
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            profile_image_url=model.profile_image_url,
            role=UserRole(model.role),
            created_at=model.created_at,
            updated_at=model.updated_at,
            last_login=model.last_login,
        )
