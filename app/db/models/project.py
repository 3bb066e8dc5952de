from sqlalchemy import Column, Integer, String, Text, Float, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base_class import Base

class ProjectStatus:
    PLANNING = "planning"
    IN_PROGRESS = "in_progress"
    PAUSED = "paused"
    COMPLETED = "completed"
    ALL = (PLANNING, IN_PROGRESS, PAUSED, COMPLETED)
    ACTIVE = (IN_PROGRESS, PLANNING)

class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    client_id = Column(Integer, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True, index=True)
    address = Column(Text, nullable=False, default="")
    description = Column(Text)
    status = Column(String(20), default=ProjectStatus.IN_PROGRESS, nullable=False)
    start_date = Column(Date, nullable=True)
    expected_end_date = Column(Date, nullable=True)
    budget = Column(Float, default=0.0)
    spent = Column(Float, default=0.0)
    # Entered by hand, never derived from tasks
    progress_percentage = Column(Integer, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    client = relationship("Profile", foreign_keys=[client_id])
    tasks = relationship("Task", back_populates="project", cascade="all, delete-orphan")
    photos = relationship("Photo", back_populates="project", cascade="all, delete-orphan")
    check_ins = relationship("CheckIn", back_populates="project", cascade="all, delete-orphan")
    issues = relationship("Issue", back_populates="project", cascade="all, delete-orphan")

    @property
    def is_over_budget(self):
        return (self.spent or 0) > (self.budget or 0)
