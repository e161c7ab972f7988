"""Submission ORM Model"""

from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey, Text, Enum as SQLEnum, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base
from ...domain.enums import SubmissionStatus


class SubmissionModel(Base):
    __tablename__ = 'submissions'
    __table_args__ = (
        Index('idx_submissions_status_submitted_at', 'status', 'submitted_at'),
    )

    id = Column(Integer, primary_key=True, index=True)
    poem_id = Column(Integer, ForeignKey('poems.id'), nullable=False, index=True)

    # Reader identity
    reader_name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    location = Column(String, nullable=True)
    background = Column(Text, nullable=True)
    interpretation_note = Column(Text, nullable=True)
    anonymous = Column(Boolean, default=False, nullable=False)

    # Uploaded audio (file_name is the storage key)
    file_name = Column(String, nullable=False)
    original_file_name = Column(String, nullable=False)
    file_size = Column(Integer, nullable=False)
    mime_type = Column(String, nullable=False)
    file_url = Column(String, nullable=True)

    # Moderation
    status = Column(SQLEnum(SubmissionStatus, values_callable=lambda e: [m.value for m in e]), default=SubmissionStatus.PENDING, nullable=False)
    approval_token = Column(String, unique=True, index=True, nullable=False)

    # Timestamps
    submitted_at = Column(DateTime, server_default=func.now())
    reviewed_at = Column(DateTime, nullable=True)

    # Relationships
    poem = relationship('PoemModel', back_populates='submissions')
