"""Favorite DTOs"""

from datetime import datetime
from typing import Optional

from .base import CamelModel
from ...domain.entities.favorite import Favorite


class FavoriteDto(CamelModel):
    id: int
    kind: str
    user_id: str
    target_id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, favorite: Favorite) -> 'FavoriteDto':
        return cls(
            id=favorite.id,
            kind=favorite.kind.value,
            user_id=favorite.user_id.value,
            target_id=favorite.target_id,
            created_at=favorite.created_at,
        )


class FavoriteStatusResponse(CamelModel):
    favorited: bool


class MessageResponse(CamelModel):
    message: str
