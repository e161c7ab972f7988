"""User entity - identity owned by the external provider"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..value_objects.entity_ids import UserId
from ..enums import UserRole


@dataclass
class User:
    id: UserId
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: UserRole = UserRole.USER

    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
    last_login: Optional[datetime] = None

    def record_login(self) -> None:
        """Record user login"""
        self.last_login = datetime.utcnow()

    def promote_to_admin(self) -> None:
        self.role = UserRole.ADMIN
        self.updated_at = datetime.utcnow()

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
