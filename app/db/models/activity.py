from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime

from app.db.base_class import Base

class ActivityLog(Base):
    __tablename__ = "activity_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True)
    action = Column(String(50)) # CREATE, UPDATE, DELETE, APPROVE, REJECT, RESOLVE
    entity_type = Column(String(50)) # PROJECT, USER, TASK, ISSUE
    entity_id = Column(Integer, nullable=True)
    details = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("Profile")
