from sqlalchemy import Column, Integer, String, Boolean, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base_class import Base

class Role:
    ADMIN = "admin"
    WORKER = "worker"
    CLIENT = "client"
    ALL = (ADMIN, WORKER, CLIENT)

class Account(Base):
    """Authentication account. The application-level record is the Profile with the same id."""
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    last_sign_in_at = Column(DateTime(timezone=True), nullable=True)

    profile = relationship("Profile", back_populates="account", uselist=False, cascade="all, delete-orphan")

class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), primary_key=True)
    full_name = Column(String(100), nullable=False)
    role = Column(String(20), default=Role.WORKER, nullable=False) # admin, worker, client
    phone = Column(String(30), nullable=True)
    avatar_url = Column(String(255), nullable=True)
    rating = Column(Float, default=0.0)
    total_ratings = Column(Integer, default=0)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    account = relationship("Account", back_populates="profile")

    @property
    def email(self):
        return self.account.email if self.account else None

    @property
    def is_admin(self):
        return self.role == Role.ADMIN
