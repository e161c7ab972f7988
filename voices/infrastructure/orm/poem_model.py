"""Poem ORM Model"""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from ...db.models import Base


class PoemModel(Base):
    __tablename__ = 'poems'

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    year = Column(Integer, nullable=False)
    external_link = Column(String, nullable=False)
    context = Column(Text, nullable=False)

    # Relationships
    submissions = relationship('SubmissionModel', back_populates='poem')
    recordings = relationship('RecordingModel', back_populates='poem')
