from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.models.user import Profile, Role
from app.routers import deps
from app.services import dashboard as dashboard_service
from app.services import issues as issue_service
from app.services import tasks as task_service
from app.core.templates import templates

admin_only = deps.require_role(Role.ADMIN)

router = APIRouter(
    prefix="/admin",
    tags=["dashboard"],
    dependencies=[Depends(admin_only)]
)

@router.get("/")
async def dashboard(
    request: Request,
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(admin_only)
):
    return templates.TemplateResponse(request, "admin/dashboard.html", {
        "user": user,
        "stats": dashboard_service.admin_stats(db),
        "activity": dashboard_service.worker_activity(db),
        "worker_stats": dashboard_service.worker_stats(db),
        "issues": issue_service.unresolved_issues(db),
        "review_tasks": task_service.review_queue(db),
        "performance_level": dashboard_service.performance_level,
        "poll_seconds": settings.DASHBOARD_POLL_SECONDS,
    })

@router.get("/stats")
async def dashboard_stats(db: Session = Depends(deps.get_db)):
    return dashboard_service.admin_stats(db)
