"""Read-only aggregates for the admin dashboard."""
from datetime import datetime, date
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.db.models.check_in import CheckIn
from app.db.models.issue import Issue, IssueStatus
from app.db.models.project import Project, ProjectStatus
from app.db.models.task import Task, TaskStatus
from app.db.models.user import Profile, Role
from app.services.check_ins import format_duration, todays_check_ins, worked_time

def admin_stats(db: Session, today: date = None) -> dict:
    today = today or datetime.utcnow().date()
    start_of_day = datetime.combine(today, datetime.min.time())

    active_projects = db.query(Project).filter(Project.status.in_(ProjectStatus.ACTIVE))
    average_progress = db.query(func.avg(Project.progress_percentage))\
        .filter(Project.status.in_(ProjectStatus.ACTIVE))\
        .scalar()

    return {
        "active_projects": active_projects.count(),
        "total_workers": db.query(Profile).filter(Profile.role == Role.WORKER, Profile.is_active == True).count(),
        "active_check_ins": db.query(CheckIn).filter(CheckIn.check_out_time.is_(None)).count(),
        "open_issues": db.query(Issue).filter(Issue.status == IssueStatus.OPEN).count(),
        "pending_tasks": db.query(Task).filter(Task.status == TaskStatus.REVIEW).count(),
        "today_completed": db.query(Task).filter(
            Task.status == TaskStatus.APPROVED,
            Task.completed_at >= start_of_day
        ).count(),
        "average_progress": round(float(average_progress or 0)),
    }

def worker_activity(db: Session, today: date = None, now: datetime = None) -> List[dict]:
    rows = []
    for check_in in todays_check_ins(db, today):
        rows.append({
            "check_in": check_in,
            "worker_name": check_in.worker.full_name if check_in.worker else "",
            "project_name": check_in.project.name if check_in.project else "",
            "worked": format_duration(worked_time(check_in, now)),
        })
    return rows

def worker_stats(db: Session) -> List[dict]:
    """Per active worker: task counts, average quality of approved tasks, last three tasks."""
    workers = db.query(Profile)\
        .filter(Profile.role == Role.WORKER, Profile.is_active == True)\
        .order_by(Profile.created_at.desc())\
        .all()

    stats = []
    for worker in workers:
        tasks = db.query(Task).filter(Task.assigned_to == worker.id).order_by(Task.created_at.desc(), Task.id.desc()).all()
        approved = [t for t in tasks if t.status == TaskStatus.APPROVED]
        scored = [t.quality_score for t in approved if t.quality_score is not None]
        stats.append({
            "worker": worker,
            "total_tasks": len(tasks),
            "approved_tasks": len(approved),
            "rejected_tasks": len([t for t in tasks if t.status == TaskStatus.REJECTED]),
            "avg_quality_score": round(sum(scored) / len(scored), 1) if scored else 0,
            "recent_tasks": tasks[:3],
        })
    # sorted() is stable, so ties keep the newest-worker-first order
    return sorted(stats, key=lambda s: s["approved_tasks"], reverse=True)

def performance_level(avg_score: float) -> str:
    if avg_score >= 8:
        return "good"
    if avg_score >= 6:
        return "fair"
    return "poor"
