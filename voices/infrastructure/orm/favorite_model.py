"""Favorite ORM Models

No unique constraint on (user_id, target): duplicates are prevented by an
existence check in the favorites use case.
"""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from ...db.models import Base


class FavoriteRecordingModel(Base):
    __tablename__ = 'favorite_recordings'

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    recording_id = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())


class FavoritePoemModel(Base):
    __tablename__ = 'favorite_poems'

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    poem_id = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())


class FavoritePoetModel(Base):
    __tablename__ = 'favorite_poet'

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())
