"""
Sign-in, sign-up and profile resolution.

The Account holds the credentials; the Profile with the same id is the
application-level user every handler works with.
"""
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import AuthError
from app.core.security import get_password_hash, verify_password
from app.db.models.user import Account, Profile, Role

logger = logging.getLogger(__name__)

def normalize_email(email: str) -> str:
    return (email or "").strip().lower()

def sign_in(db: Session, email: str, password: str) -> Account:
    account = db.query(Account).filter(Account.email == normalize_email(email)).first()
    if not account or not verify_password(password, account.hashed_password):
        logger.info("Failed sign-in for %s", normalize_email(email))
        raise AuthError("auth.invalid_credentials")
    account.last_sign_in_at = datetime.utcnow()
    db.commit()
    logger.info("Account %s signed in", account.id)
    return account

def sign_up(
    db: Session,
    email: str,
    password: str,
    full_name: str,
    role: str = Role.WORKER,
    phone: Optional[str] = None,
) -> Profile:
    email = normalize_email(email)
    if not email or not password or not (full_name or "").strip():
        raise AuthError("users.required_fields")
    if role not in Role.ALL:
        raise AuthError("users.required_fields")
    if db.query(Account).filter(Account.email == email).first():
        raise AuthError("users.email_taken")

    account = Account(email=email, hashed_password=get_password_hash(password))
    account.profile = Profile(full_name=full_name.strip(), role=role, phone=phone or None, is_active=True)
    db.add(account)
    db.commit()
    db.refresh(account)
    logger.info("Created account %s with role %s", account.id, role)
    return account.profile

def load_profile(db: Session, account: Account) -> Optional[Profile]:
    """
    Returns the profile for an authenticated account, creating it when missing.

    A creation failure is logged and reported as ``None``; callers treat that
    as signed out.
    """
    profile = db.query(Profile).filter(Profile.id == account.id).first()
    if profile:
        return profile

    logger.warning("Profile for account %s not found, creating it", account.id)
    try:
        profile = Profile(
            id=account.id,
            full_name=account.email.split("@")[0],
            role=settings.DEFAULT_PROFILE_ROLE,
            is_active=True,
        )
        db.add(profile)
        db.commit()
        return profile
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error creating profile for account %s", account.id)
        return None

def change_password(db: Session, account: Account, password: str):
    account.hashed_password = get_password_hash(password)
