from math import ceil
from typing import Optional
from fastapi import APIRouter, Depends, Form, Request, HTTPException
from sqlalchemy.orm import Session
from sqlalchemy import func

from app.core.errors import AuthError
from app.db.models.user import Profile, Role
from app.routers import deps
from app.services import auth as auth_service
from app.utils.activity import log_activity
from app.utils.toast import redirect_with_toast
from app.core.templates import templates

admin_only = deps.require_role(Role.ADMIN)

router = APIRouter(
    prefix="/users",
    tags=["users"],
    dependencies=[Depends(admin_only)]
)

@router.get("/")
async def list_users(
    request: Request,
    page: int = 1,
    limit: int = 20,
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(admin_only)
):
    page = max(page, 1)
    total_records = db.query(func.count(Profile.id)).scalar()

    users = db.query(Profile)\
        .order_by(Profile.created_at.desc(), Profile.id.desc())\
        .offset((page - 1) * limit)\
        .limit(limit)\
        .all()

    return templates.TemplateResponse(request, "users/list.html", {
        "users": users,
        "user": user,
        "page": page,
        "total_pages": max(ceil(total_records / limit), 1),
        "total_records": total_records,
        "active_tab": "users",
    })

@router.get("/new")
async def new_user_form(request: Request, user: Profile = Depends(admin_only)):
    return templates.TemplateResponse(request, "users/form.html", {
        "user": user, "edit_user": None, "roles": Role.ALL, "active_tab": "users"
    })

@router.post("/new")
async def create_user(
    email: str = Form(""),
    password: str = Form(""),
    full_name: str = Form(""),
    role: str = Form(Role.WORKER),
    phone: Optional[str] = Form(None),
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(admin_only)
):
    try:
        new_profile = auth_service.sign_up(db, email, password, full_name, role, phone)
    except AuthError as exc:
        return redirect_with_toast("/users/new", exc.message_key, "error")

    log_activity(db, user, "CREATE", "USER", new_profile.id, f"Created user {new_profile.email} ({role})")
    return redirect_with_toast("/users", "users.created")

@router.get("/{id}/edit")
async def edit_user_form(id: int, request: Request, db: Session = Depends(deps.get_db), user: Profile = Depends(admin_only)):
    edit_user = db.query(Profile).filter(Profile.id == id).first()
    if not edit_user:
        return redirect_with_toast("/users", "errors.not_found", "error")
    return templates.TemplateResponse(request, "users/form.html", {
        "user": user, "edit_user": edit_user, "roles": Role.ALL, "active_tab": "users"
    })

@router.post("/{id}/edit")
async def update_user(
    id: int,
    full_name: str = Form(""),
    role: str = Form(""),
    phone: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    is_active: bool = Form(False),
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(admin_only)
):
    edit_user = db.query(Profile).filter(Profile.id == id).first()
    if not edit_user:
        raise HTTPException(status_code=404, detail="User not found")
    if not full_name.strip() or role not in Role.ALL:
        return redirect_with_toast(f"/users/{id}/edit", "users.required_fields", "error")
    # Prevent self-lockout
    if edit_user.id == user.id and (role != Role.ADMIN or not is_active):
        return redirect_with_toast(f"/users/{id}/edit", "users.cannot_demote_self", "error")

    edit_user.full_name = full_name.strip()
    edit_user.role = role
    edit_user.phone = (phone or "").strip() or None
    edit_user.is_active = is_active
    if password and password.strip() and edit_user.account:
        auth_service.change_password(db, edit_user.account, password)
    db.commit()

    log_activity(db, user, "UPDATE", "USER", edit_user.id, f"Updated user {edit_user.full_name}")
    return redirect_with_toast("/users", "users.updated")

@router.post("/{id}/delete")
async def delete_user(
    id: int,
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(admin_only)
):
    # Prevent self-deletion
    if user.id == id:
        return redirect_with_toast("/users", "users.cannot_delete_self", "error")

    user_to_delete = db.query(Profile).filter(Profile.id == id).first()
    if not user_to_delete:
        raise HTTPException(status_code=404, detail="User not found")

    deleted_name = user_to_delete.full_name
    # The account owns the profile; removing it removes both
    db.delete(user_to_delete.account or user_to_delete)
    db.commit()

    log_activity(db, user, "DELETE", "USER", id, f"Deleted user {deleted_name}")
    return redirect_with_toast("/users", "users.deleted")
