"""Read-only view of a client's own projects."""
from datetime import datetime, date
from typing import List, Optional

from sqlalchemy.orm import Session

from app.db.models.check_in import CheckIn
from app.db.models.photo import Photo
from app.db.models.project import Project
from app.db.models.task import Task, TaskStatus
from app.db.models.user import Profile

def days_remaining(project: Project, today: date) -> Optional[int]:
    """Days until the expected end date; negative when late, None without a date."""
    if not project.expected_end_date:
        return None
    return (project.expected_end_date - today).days

def budget_summary(project: Project) -> dict:
    budget = float(project.budget or 0)
    spent = float(project.spent or 0)
    percent = (spent / budget) * 100 if budget > 0 else 0.0
    if percent > 100:
        level = "over"
    elif percent > 80:
        level = "warning"
    else:
        level = "ok"
    return {
        "budget": budget,
        "spent": spent,
        "remaining": budget - spent,
        "percent": round(percent, 1),
        "bar_percent": min(percent, 100),
        "is_over_budget": spent > budget,
        "level": level,
    }

def project_details(db: Session, project: Project, today: date) -> dict:
    tasks = db.query(Task).filter(Task.project_id == project.id).order_by(Task.created_at.desc(), Task.id.desc()).all()
    photos = db.query(Photo)\
        .filter(Photo.project_id == project.id, Photo.is_approved == True)\
        .order_by(Photo.created_at.desc(), Photo.id.desc())\
        .all()
    active_workers = db.query(CheckIn)\
        .filter(CheckIn.project_id == project.id, CheckIn.check_out_time.is_(None))\
        .count()
    return {
        "project": project,
        "tasks": tasks,
        "photos": photos,
        "active_workers": active_workers,
        "completed_tasks": len([t for t in tasks if t.status == TaskStatus.APPROVED]),
        "total_tasks": len(tasks),
        "days_remaining": days_remaining(project, today),
        "budget": budget_summary(project),
    }

def client_projects(db: Session, client: Profile, today: date = None) -> List[dict]:
    today = today or datetime.utcnow().date()
    projects = db.query(Project)\
        .filter(Project.client_id == client.id)\
        .order_by(Project.created_at.desc(), Project.id.desc())\
        .all()
    return [project_details(db, p, today) for p in projects]

def client_project(db: Session, client: Profile, project_id: int, today: date = None) -> Optional[dict]:
    project = db.query(Project).filter(Project.id == project_id, Project.client_id == client.id).first()
    if not project:
        return None
    return project_details(db, project, today or datetime.utcnow().date())
