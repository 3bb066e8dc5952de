"""
Task lifecycle.

    pending -> in_progress -> review -> approved
                                  \\-> rejected -> review (resubmission)

Workers drive the first two steps, admins review. Each step commits once,
together with the notification it produces.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import WorkflowError
from app.db.models.notification import NotificationType
from app.db.models.photo import Photo, PhotoType
from app.db.models.project import Project
from app.db.models.task import Task, TaskStatus, Priority
from app.db.models.user import Profile
from app.services.notifications import notify

logger = logging.getLogger(__name__)

MIN_QUALITY_SCORE = 0
MAX_QUALITY_SCORE = 10

def _clean(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None

def _validate(db: Session, title: str, project_id: Optional[int], status: str, priority: str):
    if not (title or "").strip() or not project_id:
        raise WorkflowError("tasks.required_fields")
    if not db.query(Project).filter(Project.id == project_id).first():
        raise WorkflowError("tasks.required_fields")
    if status not in TaskStatus.ALL or priority not in Priority.ALL:
        raise WorkflowError("tasks.invalid_transition")

def create_task(
    db: Session,
    title: str,
    project_id: int,
    description: str = None,
    specifications: str = None,
    assigned_to: Optional[int] = None,
    priority: str = Priority.MEDIUM,
    due_date=None,
) -> Task:
    _validate(db, title, project_id, TaskStatus.PENDING, priority)
    task = Task(
        title=title.strip(),
        project_id=project_id,
        description=_clean(description),
        specifications=_clean(specifications),
        assigned_to=assigned_to or None,
        status=TaskStatus.PENDING,
        priority=priority,
        due_date=due_date,
    )
    db.add(task)
    db.flush()
    if task.assigned_to:
        notify(db, task.assigned_to, "task_assigned", NotificationType.INFO, link="/worker", title=task.title)
    db.commit()
    logger.info("Created task %s on project %s", task.id, project_id)
    return task

def update_task(
    db: Session,
    task: Task,
    title: str,
    project_id: int,
    description: str = None,
    specifications: str = None,
    assigned_to: Optional[int] = None,
    status: str = None,
    priority: str = Priority.MEDIUM,
    due_date=None,
) -> Task:
    status = status or task.status
    _validate(db, title, project_id, status, priority)
    previous_assignee = task.assigned_to
    task.title = title.strip()
    task.project_id = project_id
    task.description = _clean(description)
    task.specifications = _clean(specifications)
    task.assigned_to = assigned_to or None
    task.status = status
    task.priority = priority
    task.due_date = due_date
    if task.assigned_to and task.assigned_to != previous_assignee:
        notify(db, task.assigned_to, "task_assigned", NotificationType.INFO, link="/worker", title=task.title)
    db.commit()
    return task

def delete_task(db: Session, task: Task):
    db.delete(task)
    db.commit()

def worker_tasks(db: Session, worker: Profile) -> List[Task]:
    # Tasks without a due date go last
    return db.query(Task)\
        .filter(Task.assigned_to == worker.id, Task.status.in_(TaskStatus.OPEN))\
        .order_by(Task.due_date.is_(None), Task.due_date.asc(), Task.id.asc())\
        .all()

def review_queue(db: Session, limit: Optional[int] = 5) -> List[Task]:
    query = db.query(Task)\
        .filter(Task.status == TaskStatus.REVIEW)\
        .order_by(Task.created_at.desc(), Task.id.desc())
    if limit:
        query = query.limit(limit)
    return query.all()

def _require_assignee(task: Task, worker: Profile):
    if task.assigned_to != worker.id:
        raise WorkflowError("tasks.not_assigned")

def start_task(db: Session, worker: Profile, task: Task) -> Task:
    _require_assignee(task, worker)
    if task.status != TaskStatus.PENDING:
        raise WorkflowError("tasks.invalid_transition")
    task.status = TaskStatus.IN_PROGRESS
    db.commit()
    logger.info("Worker %s started task %s", worker.id, task.id)
    return task

def ensure_can_add_photo(worker: Profile, task: Task):
    """Raises unless ``worker`` may attach photos to ``task`` right now."""
    _require_assignee(task, worker)
    if task.status in (TaskStatus.REVIEW, TaskStatus.APPROVED):
        raise WorkflowError("tasks.invalid_transition")

def add_task_photo(db: Session, worker: Profile, task: Task, photo_url: str, description: str = None) -> Photo:
    ensure_can_add_photo(worker, task)
    photo = Photo(
        project_id=task.project_id,
        task_id=task.id,
        uploaded_by=worker.id,
        photo_url=photo_url,
        description=_clean(description),
        photo_type=PhotoType.PROGRESS,
    )
    db.add(photo)
    db.commit()
    return photo

def submit_for_review(db: Session, worker: Profile, task: Task) -> Task:
    _require_assignee(task, worker)
    if task.status not in (TaskStatus.IN_PROGRESS, TaskStatus.REJECTED):
        raise WorkflowError("tasks.invalid_transition")
    photo_count = db.query(Photo).filter(Photo.task_id == task.id).count()
    if photo_count == 0:
        raise WorkflowError("tasks.photo_required")

    task.status = TaskStatus.REVIEW
    client_id = task.project.client_id if task.project else None
    if client_id:
        notify(db, client_id, "task_submitted", NotificationType.INFO, link="/client", title=task.title)
    db.commit()
    logger.info("Task %s submitted for review by worker %s", task.id, worker.id)
    return task

def parse_quality_score(value) -> int:
    try:
        score = int(value)
    except (TypeError, ValueError):
        raise WorkflowError("review.invalid_score")
    if score < MIN_QUALITY_SCORE or score > MAX_QUALITY_SCORE:
        raise WorkflowError("review.invalid_score")
    return score

def approve_task(db: Session, task: Task, quality_score, now: datetime = None) -> Task:
    if task.status != TaskStatus.REVIEW:
        raise WorkflowError("review.not_in_review")
    score = parse_quality_score(quality_score)

    task.status = TaskStatus.APPROVED
    task.quality_score = score
    task.completed_at = now or datetime.utcnow()
    for photo in task.photos:
        photo.is_approved = True

    worker = task.worker
    if worker:
        total = worker.total_ratings or 0
        worker.rating = ((worker.rating or 0.0) * total + score) / (total + 1)
        worker.total_ratings = total + 1
        notify(db, worker.id, "task_approved", NotificationType.SUCCESS, link="/worker", title=task.title, score=score)
    db.commit()
    logger.info("Task %s approved with score %s", task.id, score)
    return task

def reject_task(db: Session, task: Task, review_notes: str) -> Task:
    if task.status != TaskStatus.REVIEW:
        raise WorkflowError("review.not_in_review")
    notes = (review_notes or "").strip()
    if not notes:
        raise WorkflowError("review.notes_required")

    task.status = TaskStatus.REJECTED
    task.review_notes = notes
    if task.assigned_to:
        notify(db, task.assigned_to, "task_rejected", NotificationType.WARNING, link="/worker", title=task.title, notes=notes)
    db.commit()
    logger.info("Task %s rejected", task.id)
    return task
