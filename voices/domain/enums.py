"""
Domain Enums - Business domain enumerations
"""

from enum import Enum


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class SubmissionStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self != SubmissionStatus.PENDING


class FavoriteKind(str, Enum):
    RECORDING = "recording"
    POEM = "poem"
    POET = "poet"

    @property
    def has_target(self) -> bool:
        """The poet favorite is a per-user singleton with no target id."""
        return self != FavoriteKind.POET
