"""API dependencies: sessions, services and the authenticated principal"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from ..core.security import verify_token
from ..db.database import get_db
from ..domain.entities.user import User
from ..domain.exceptions import AuthenticationError, AuthorizationError
from ..domain.repositories.unit_of_work import IUnitOfWork
from ..domain.value_objects.entity_ids import UserId
from ..infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl
from ..infrastructure.external_services.storage_service import BaseStorageService, create_storage_service
from ..infrastructure.external_services.email_service import EmailService


# Missing credentials are reported through our own error envelope
security = HTTPBearer(auto_error=False)


def get_unit_of_work(db: Session = Depends(get_db)) -> IUnitOfWork:
    """Get unit of work"""
    return UnitOfWorkImpl(db)


@lru_cache()
def get_storage_service() -> BaseStorageService:
    """Get storage service"""
    return create_storage_service()


def get_email_service() -> EmailService:
    """Get email service"""
    return EmailService()


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
) -> User:
    """Get current authenticated user"""
    if credentials is None:
        raise AuthenticationError("Authentication required")

    user_id = verify_token(credentials.credentials)
    if not user_id:
        raise AuthenticationError("Invalid token")

    async with unit_of_work:
        user = await unit_of_work.users.get_by_id(UserId.from_str(user_id))

    if not user:
        raise AuthenticationError("User not found")
    return user


async def get_current_admin_user(current_user: User = Depends(get_current_user)) -> User:
    """Get current admin user"""
    if not current_user.is_admin:
        raise AuthorizationError("Admin access required")
    return current_user
