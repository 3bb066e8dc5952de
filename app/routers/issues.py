from typing import Optional
from fastapi import APIRouter, Depends, Request, HTTPException
from sqlalchemy.orm import Session

from app.core.errors import WorkflowError
from app.db.models.issue import Issue, IssueStatus
from app.db.models.user import Profile, Role
from app.routers import deps
from app.services import issues as issue_service
from app.utils.activity import log_activity
from app.utils.toast import redirect_with_toast
from app.core.templates import templates

admin_only = deps.require_role(Role.ADMIN)

router = APIRouter(
    prefix="/issues",
    tags=["issues"],
    dependencies=[Depends(admin_only)]
)

@router.get("/")
async def list_issues(
    request: Request,
    status: Optional[str] = None,
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(admin_only)
):
    return templates.TemplateResponse(request, "issues/list.html", {
        "user": user,
        "issues": issue_service.all_issues(db, status),
        "statuses": IssueStatus.ALL,
        "selected_status": status,
    })

@router.post("/{id}/resolve")
async def resolve_issue(
    id: int,
    origin: Optional[str] = None,
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(admin_only)
):
    issue = db.query(Issue).filter(Issue.id == id).first()
    if not issue:
        raise HTTPException(status_code=404, detail="Issue not found")
    back = origin if origin in ("/admin", "/issues") else "/issues"
    try:
        issue_service.resolve_issue(db, issue)
    except WorkflowError as exc:
        return redirect_with_toast(back, exc.message_key, "error")

    log_activity(db, user, "RESOLVE", "ISSUE", issue.id, issue.title)
    return redirect_with_toast(back, "issues.resolved")
