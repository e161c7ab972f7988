"""User DTOs for API layer"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from .base import CamelModel
from ...domain.entities.user import User


class GoogleOAuthDto(BaseModel):
    """DTO for Google OAuth request"""
    google_token: str


class UserDto(CamelModel):
    """DTO for user response"""
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> 'UserDto':
        return cls(
            id=user.id.value,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            profile_image_url=user.profile_image_url,
            role=user.role.value,
            created_at=user.created_at,
            last_login=user.last_login,
        )


class TokenDto(BaseModel):
    """DTO for authentication tokens"""
    access_token: str
    token_type: str = "bearer"


class UserResponse(BaseModel):
    """DTO for authentication response"""
    user: UserDto
    tokens: TokenDto
