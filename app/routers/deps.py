from typing import Optional
from fastapi import Depends, HTTPException, status, Request
from sqlalchemy.orm import Session
from app.db.session import SessionLocal
from app.core.security import decode_access_token
from app.db.models.user import Account, Profile
from app.services.auth import load_profile

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def _redirect_to_login(error: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_303_SEE_OTHER,
        detail="Not authenticated",
        headers={"Location": f"/?error={error}"}
    )

def resolve_session(request: Request, db: Session):
    """
    Returns ``(profile, error)`` for the session cookie.

    ``error`` is one of the ``auth.*`` codes when there is no usable session.
    """
    token = request.cookies.get("access_token")
    if not token:
        return None, "login_required"

    payload = decode_access_token(token)
    if payload is None or payload.get("sub") is None:
        return None, "invalid_token"

    try:
        account_id = int(payload["sub"])
    except (TypeError, ValueError):
        return None, "invalid_token"

    account = db.query(Account).filter(Account.id == account_id).first()
    if account is None:
        return None, "user_not_found"

    profile = load_profile(db, account)
    if profile is None or not profile.is_active:
        return None, "user_not_found"
    return profile, None

async def get_current_user(request: Request, db: Session = Depends(get_db)) -> Profile:
    profile, error = resolve_session(request, db)
    if profile is None:
        raise _redirect_to_login(error)
    return profile

async def get_optional_user(request: Request, db: Session = Depends(get_db)) -> Optional[Profile]:
    profile, _ = resolve_session(request, db)
    return profile

def require_role(*roles: str):
    async def checker(user: Profile = Depends(get_current_user)) -> Profile:
        if user.role not in roles:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized")
        return user
    return checker
