"""
Worker time tracking.

A worker is either checked in (one CheckIn with no check_out_time) or not.
Checking in while a session is open is refused, so there is never more than
one active CheckIn per worker.
"""
import logging
from datetime import datetime, date, timedelta
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import WorkflowError
from app.db.models.check_in import CheckIn
from app.db.models.project import Project, ProjectStatus
from app.db.models.task import Task
from app.db.models.user import Profile

logger = logging.getLogger(__name__)

def active_check_in(db: Session, worker: Profile) -> Optional[CheckIn]:
    return db.query(CheckIn)\
        .filter(CheckIn.worker_id == worker.id, CheckIn.check_out_time.is_(None))\
        .order_by(CheckIn.check_in_time.desc())\
        .first()

def available_projects(db: Session, worker: Profile) -> List[Project]:
    """In-progress projects the worker has at least one task on."""
    return db.query(Project)\
        .join(Task, Task.project_id == Project.id)\
        .filter(Task.assigned_to == worker.id, Project.status == ProjectStatus.IN_PROGRESS)\
        .distinct()\
        .order_by(Project.name)\
        .all()

def assigned_projects(db: Session, worker: Profile) -> List[Project]:
    """Every project the worker has a task on, whatever its status."""
    return db.query(Project)\
        .join(Task, Task.project_id == Project.id)\
        .filter(Task.assigned_to == worker.id)\
        .distinct()\
        .order_by(Project.name)\
        .all()

def start_check_in(db: Session, worker: Profile, project_id: int, now: datetime = None) -> CheckIn:
    if active_check_in(db, worker):
        raise WorkflowError("worker.already_checked_in")
    if project_id not in {p.id for p in available_projects(db, worker)}:
        raise WorkflowError("worker.project_not_available")

    check_in = CheckIn(
        worker_id=worker.id,
        project_id=project_id,
        check_in_time=now or datetime.utcnow(),
    )
    db.add(check_in)
    db.commit()
    logger.info("Worker %s checked in at project %s", worker.id, project_id)
    return check_in

def end_check_in(db: Session, worker: Profile, notes: Optional[str] = None, now: datetime = None) -> CheckIn:
    check_in = active_check_in(db, worker)
    if not check_in:
        raise WorkflowError("worker.no_active_check_in")
    check_in.check_out_time = now or datetime.utcnow()
    check_in.notes = (notes or "").strip() or None
    db.commit()
    logger.info("Worker %s checked out of project %s", worker.id, check_in.project_id)
    return check_in

def worked_time(check_in: CheckIn, now: datetime = None) -> timedelta:
    end = check_in.check_out_time or now or datetime.utcnow()
    delta = end - check_in.check_in_time
    return delta if delta > timedelta(0) else timedelta(0)

def format_duration(delta: timedelta) -> str:
    total_minutes = int(delta.total_seconds() // 60)
    return f"{total_minutes // 60}h {total_minutes % 60}m"

def todays_check_ins(db: Session, today: date = None) -> List[CheckIn]:
    start = datetime.combine(today or datetime.utcnow().date(), datetime.min.time())
    return db.query(CheckIn)\
        .filter(CheckIn.check_in_time >= start)\
        .order_by(CheckIn.check_in_time.desc())\
        .all()
