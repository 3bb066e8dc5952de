import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import WorkflowError
from app.db.models.issue import Issue, IssueStatus, Severity
from app.db.models.notification import NotificationType
from app.db.models.user import Profile, Role
from app.services.check_ins import assigned_projects
from app.services.notifications import admin_ids, notify

logger = logging.getLogger(__name__)

def validate_report(db: Session, reporter: Profile, project_id: Optional[int], title: str, severity: str):
    if not project_id or not (title or "").strip():
        raise WorkflowError("issues.required_fields")
    if severity not in Severity.ALL:
        raise WorkflowError("issues.required_fields")
    if reporter.role != Role.ADMIN and project_id not in {p.id for p in assigned_projects(db, reporter)}:
        raise WorkflowError("worker.project_not_available")

def report_issue(
    db: Session,
    reporter: Profile,
    project_id: Optional[int],
    title: str,
    description: str = None,
    severity: str = Severity.MEDIUM,
    photo_urls: Optional[List[str]] = None,
) -> Issue:
    """Opens an issue and alerts every active admin in the same commit."""
    validate_report(db, reporter, project_id, title, severity)

    issue = Issue(
        project_id=project_id,
        reported_by=reporter.id,
        title=title.strip(),
        description=(description or "").strip() or None,
        severity=severity,
        status=IssueStatus.OPEN,
        photo_urls=photo_urls or None,
    )
    db.add(issue)
    for admin_id in admin_ids(db):
        notify(db, admin_id, "issue_reported", NotificationType.ALERT, link="/issues",
               name=reporter.full_name, title=issue.title)
    db.commit()
    logger.info("Issue %s (%s) reported on project %s by %s", issue.id, severity, project_id, reporter.id)
    return issue

def resolve_issue(db: Session, issue: Issue, now: datetime = None) -> Issue:
    if issue.status == IssueStatus.RESOLVED:
        raise WorkflowError("issues.already_resolved")
    issue.status = IssueStatus.RESOLVED
    issue.resolved_at = now or datetime.utcnow()
    db.commit()
    logger.info("Issue %s resolved", issue.id)
    return issue

def unresolved_issues(db: Session, limit: Optional[int] = 5) -> List[Issue]:
    query = db.query(Issue)\
        .filter(Issue.status.in_(IssueStatus.UNRESOLVED))\
        .order_by(Issue.created_at.desc(), Issue.id.desc())
    if limit:
        query = query.limit(limit)
    return query.all()

def all_issues(db: Session, status: Optional[str] = None) -> List[Issue]:
    query = db.query(Issue)
    if status and status in IssueStatus.ALL:
        query = query.filter(Issue.status == status)
    return query.order_by(Issue.created_at.desc(), Issue.id.desc()).all()
