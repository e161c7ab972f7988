"""Favorite entity - a user's membership marker on a recording, poem or the poet"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..value_objects.entity_ids import UserId
from ..enums import FavoriteKind


@dataclass
class Favorite:
    id: Optional[int]
    kind: FavoriteKind
    user_id: UserId
    target_id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        if self.kind.has_target and self.target_id is None:
            raise ValueError(f"A {self.kind.value} favorite needs a target id")
        if not self.kind.has_target and self.target_id is not None:
            raise ValueError("The poet favorite has no target id")
