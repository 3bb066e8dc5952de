from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base_class import Base

class PhotoType:
    PROGRESS = "progress"
    ISSUE = "issue"
    COMPLETION = "completion"
    BEFORE = "before"
    AFTER = "after"
    ALL = (PROGRESS, ISSUE, COMPLETION, BEFORE, AFTER)

class Photo(Base):
    __tablename__ = "photos"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=True, index=True)
    uploaded_by = Column(Integer, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True)
    photo_url = Column(String(255), nullable=False)
    description = Column(Text)
    photo_type = Column(String(20), default=PhotoType.PROGRESS, nullable=False)
    is_approved = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    project = relationship("Project", back_populates="photos")
    task = relationship("Task", back_populates="photos")
    uploader = relationship("Profile")
