from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.errors import AlaObraError
from app.db.changes import feed
from app.db.models.project import Project
from app.db.models.user import Profile, Role
from app.routers import deps
from app.services import notifications as notification_service

router = APIRouter(
    tags=["notifications"],
    dependencies=[Depends(deps.get_current_user)]
)

# admins are unrestricted
VISIBLE_TABLES = {
    Role.WORKER: {"tasks", "photos", "check_ins", "notifications"},
    Role.CLIENT: {"projects", "tasks", "photos"},
}

@router.get("/notifications")
async def list_notifications(db: Session = Depends(deps.get_db), user: Profile = Depends(deps.get_current_user)):
    notifications = notification_service.recent_for(db, user)
    return {
        "unread": notification_service.unread_count(db, user),
        "notifications": [
            {
                "id": n.id,
                "title": n.title,
                "message": n.message,
                "type": n.type,
                "is_read": n.is_read,
                "link": n.link,
                "created_at": n.created_at.isoformat() if n.created_at else None,
            }
            for n in notifications
        ],
    }

@router.post("/notifications/{id}/read")
async def mark_notification_read(id: int, db: Session = Depends(deps.get_db), user: Profile = Depends(deps.get_current_user)):
    try:
        notification_service.mark_read(db, user, id)
    except AlaObraError:
        raise HTTPException(status_code=404, detail="Notification not found")
    return {"id": id, "is_read": True}

@router.get("/changes")
async def list_changes(
    since: int = 0,
    tables: Optional[str] = None,
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(deps.get_current_user)
):
    """
    Committed changes after ``since``; ``tables`` is a comma separated filter.

    Workers and clients only see the tables their pages watch, and clients
    only see rows of their own projects.
    """
    wanted = {name.strip() for name in tables.split(",") if name.strip()} if tables else None
    visible = VISIBLE_TABLES.get(user.role)
    if visible is not None:
        wanted = visible if wanted is None else wanted & visible

    project_ids = None
    if user.role == Role.CLIENT:
        project_ids = [row.id for row in db.query(Project.id).filter(Project.client_id == user.id)]
    return feed.since(since, wanted, project_ids)
