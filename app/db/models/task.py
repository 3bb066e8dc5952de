from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base_class import Base

class TaskStatus:
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    APPROVED = "approved"
    REJECTED = "rejected"
    ALL = (PENDING, IN_PROGRESS, REVIEW, APPROVED, REJECTED)
    OPEN = (PENDING, IN_PROGRESS, REVIEW, REJECTED)

class Priority:
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"
    ALL = (LOW, MEDIUM, HIGH, URGENT)

class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    specifications = Column(Text)
    assigned_to = Column(Integer, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True, index=True)
    status = Column(String(20), default=TaskStatus.PENDING, nullable=False, index=True)
    priority = Column(String(20), default=Priority.MEDIUM, nullable=False)
    due_date = Column(Date, nullable=True)
    quality_score = Column(Integer, nullable=True) # 0-10
    review_notes = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    completed_at = Column(DateTime(timezone=True), nullable=True)

    project = relationship("Project", back_populates="tasks")
    worker = relationship("Profile", foreign_keys=[assigned_to])
    photos = relationship("Photo", back_populates="task", order_by="Photo.id.desc()",
                          cascade="all", passive_deletes=True)
