"""Recording ORM Model"""

from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base


class RecordingModel(Base):
    __tablename__ = 'recordings'

    id = Column(Integer, primary_key=True, index=True)
    poem_id = Column(Integer, ForeignKey('poems.id'), nullable=False, index=True)
    # Lookup key back to the approved submission, not an ownership pointer
    submission_id = Column(Integer, unique=True, nullable=False)

    # Reader snapshot taken at approval time
    reader_name = Column(String, nullable=False)
    location = Column(String, nullable=True)
    background = Column(Text, nullable=True)
    interpretation_note = Column(Text, nullable=True)
    anonymous = Column(Boolean, default=False, nullable=False)

    # File snapshot
    file_name = Column(String, nullable=False)
    original_file_name = Column(String, nullable=False)
    file_size = Column(Integer, nullable=False)
    mime_type = Column(String, nullable=False)
    file_url = Column(String, nullable=True)

    approved_at = Column(DateTime, server_default=func.now(), index=True)

    # Relationships
    poem = relationship('PoemModel', back_populates='recordings')
