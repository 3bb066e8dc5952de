from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from typing import Optional

from app.core.config import settings
from app.core.errors import AuthError
from app.core.i18n import LOCALE_COOKIE, STRINGS
from app.core.security import create_access_token
from app.db.models.user import Profile
from app.routers import deps
from app.services import auth as auth_service
from app.utils.toast import redirect_with_toast

router = APIRouter(tags=["auth"])

@router.post("/login")
async def login(
    email: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(deps.get_db)
):
    try:
        account = auth_service.sign_in(db, email, password)
    except AuthError:
        # One generic message whatever the reason
        return RedirectResponse(url="/?error=invalid_credentials", status_code=status.HTTP_303_SEE_OTHER)

    access_token = create_access_token(data={"sub": str(account.id)})

    response = RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        key="access_token",
        value=f"Bearer {access_token}",
        httponly=True,
        samesite="lax",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    )
    return response

@router.get("/logout")
async def logout():
    response = RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie("access_token")
    return response

@router.get("/locale/{code}")
async def set_locale(code: str, request: Request):
    back = request.headers.get("referer") or "/"
    if not back.startswith(str(request.base_url)):
        back = "/"
    response = RedirectResponse(url=back, status_code=status.HTTP_303_SEE_OTHER)
    if code in STRINGS:
        response.set_cookie(key=LOCALE_COOKIE, value=code, max_age=60 * 60 * 24 * 365)
    return response

@router.post("/profile")
async def update_own_profile(
    full_name: str = Form(""),
    phone: Optional[str] = Form(None),
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(deps.get_current_user)
):
    if not full_name.strip():
        return redirect_with_toast("/", "users.required_fields", "error")
    user.full_name = full_name.strip()
    user.phone = (phone or "").strip() or None
    db.commit()
    return redirect_with_toast("/", "profile.updated")
