from typing import Optional
from fastapi import APIRouter, Depends, Form, Request, HTTPException
from sqlalchemy.orm import Session

from app.core.errors import WorkflowError
from app.db.models.project import Project
from app.db.models.task import Task, TaskStatus, Priority
from app.db.models.user import Profile, Role
from app.routers import deps
from app.routers.projects import parse_date
from app.services import tasks as task_service
from app.utils.activity import log_activity
from app.utils.toast import redirect_with_toast
from app.core.templates import templates

admin_only = deps.require_role(Role.ADMIN)

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    dependencies=[Depends(admin_only)]
)

def get_task_or_404(db: Session, id: int) -> Task:
    task = db.query(Task).filter(Task.id == id).first()
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task

def form_context(db: Session, user: Profile, task: Optional[Task]) -> dict:
    return {
        "user": user,
        "task": task,
        "projects": db.query(Project).order_by(Project.name).all(),
        "workers": db.query(Profile).filter(Profile.role == Role.WORKER, Profile.is_active == True).order_by(Profile.full_name).all(),
        "statuses": TaskStatus.ALL,
        "priorities": Priority.ALL,
        "active_tab": "tasks",
    }

@router.get("/")
async def list_tasks(
    request: Request,
    status: Optional[str] = None,
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(admin_only)
):
    query = db.query(Task)
    if status in TaskStatus.ALL:
        query = query.filter(Task.status == status)
    tasks = query.order_by(Task.created_at.desc(), Task.id.desc()).all()
    return templates.TemplateResponse(request, "tasks/list.html", {
        "tasks": tasks,
        "user": user,
        "statuses": TaskStatus.ALL,
        "selected_status": status,
        "active_tab": "tasks",
    })

@router.get("/new")
async def new_task_form(request: Request, db: Session = Depends(deps.get_db), user: Profile = Depends(admin_only)):
    return templates.TemplateResponse(request, "tasks/form.html", form_context(db, user, None))

@router.post("/new")
async def create_task(
    title: str = Form(""),
    project_id: Optional[int] = Form(None),
    description: Optional[str] = Form(None),
    specifications: Optional[str] = Form(None),
    assigned_to: Optional[int] = Form(None),
    priority: str = Form(Priority.MEDIUM),
    due_date: Optional[str] = Form(None),
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(admin_only)
):
    try:
        task = task_service.create_task(
            db, title, project_id,
            description=description,
            specifications=specifications,
            assigned_to=assigned_to,
            priority=priority,
            due_date=parse_date(due_date),
        )
    except WorkflowError as exc:
        return redirect_with_toast("/tasks/new", exc.message_key, "error")

    log_activity(db, user, "CREATE", "TASK", task.id, f"Created task {task.title}")
    return redirect_with_toast("/tasks", "tasks.created")

@router.get("/{id}/edit")
async def edit_task_form(id: int, request: Request, db: Session = Depends(deps.get_db), user: Profile = Depends(admin_only)):
    task = get_task_or_404(db, id)
    return templates.TemplateResponse(request, "tasks/form.html", form_context(db, user, task))

@router.post("/{id}/edit")
async def update_task(
    id: int,
    title: str = Form(""),
    project_id: Optional[int] = Form(None),
    description: Optional[str] = Form(None),
    specifications: Optional[str] = Form(None),
    assigned_to: Optional[int] = Form(None),
    status: Optional[str] = Form(None),
    priority: str = Form(Priority.MEDIUM),
    due_date: Optional[str] = Form(None),
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(admin_only)
):
    task = get_task_or_404(db, id)
    try:
        task_service.update_task(
            db, task, title, project_id,
            description=description,
            specifications=specifications,
            assigned_to=assigned_to,
            status=status,
            priority=priority,
            due_date=parse_date(due_date),
        )
    except WorkflowError as exc:
        return redirect_with_toast(f"/tasks/{id}/edit", exc.message_key, "error")

    log_activity(db, user, "UPDATE", "TASK", task.id, f"Updated task {task.title}")
    return redirect_with_toast("/tasks", "tasks.updated")

@router.post("/{id}/delete")
async def delete_task(id: int, db: Session = Depends(deps.get_db), user: Profile = Depends(admin_only)):
    task = get_task_or_404(db, id)
    title = task.title
    task_service.delete_task(db, task)
    log_activity(db, user, "DELETE", "TASK", id, f"Deleted task {title}")
    return redirect_with_toast("/tasks", "tasks.deleted")

@router.get("/{id}/review")
async def review_task_form(id: int, request: Request, db: Session = Depends(deps.get_db), user: Profile = Depends(admin_only)):
    task = get_task_or_404(db, id)
    return templates.TemplateResponse(request, "tasks/review.html", {"user": user, "task": task})

@router.post("/{id}/approve")
async def approve_task(
    id: int,
    quality_score: Optional[str] = Form(None),
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(admin_only)
):
    task = get_task_or_404(db, id)
    try:
        task_service.approve_task(db, task, quality_score)
    except WorkflowError as exc:
        return redirect_with_toast(f"/tasks/{id}/review", exc.message_key, "error")

    log_activity(db, user, "APPROVE", "TASK", task.id, f"Approved with score {task.quality_score}")
    return redirect_with_toast("/admin", "review.approved")

@router.post("/{id}/reject")
async def reject_task(
    id: int,
    review_notes: str = Form(""),
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(admin_only)
):
    task = get_task_or_404(db, id)
    try:
        task_service.reject_task(db, task, review_notes)
    except WorkflowError as exc:
        # Blocked before any write, e.g. rejection without notes
        return redirect_with_toast(f"/tasks/{id}/review", exc.message_key, "warning")

    log_activity(db, user, "REJECT", "TASK", task.id, task.review_notes)
    return redirect_with_toast("/admin", "review.rejected")
