from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, HTTPException
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import AlaObraError
from app.db.models.issue import Severity
from app.db.models.task import Task
from app.db.models.user import Profile, Role
from app.routers import deps
from app.services import check_ins as check_in_service
from app.services import issues as issue_service
from app.services import tasks as task_service
from app.services.storage import LocalPhotoStorage, get_storage
from app.utils.toast import redirect_with_toast
from app.core.templates import templates

worker_only = deps.require_role(Role.WORKER)

router = APIRouter(
    prefix="/worker",
    tags=["worker"],
    dependencies=[Depends(worker_only)]
)

def get_own_task(db: Session, worker: Profile, id: int) -> Task:
    task = db.query(Task).filter(Task.id == id, Task.assigned_to == worker.id).first()
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task

@router.get("/")
async def worker_dashboard(
    request: Request,
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(worker_only)
):
    active = check_in_service.active_check_in(db, user)
    return templates.TemplateResponse(request, "worker/dashboard.html", {
        "user": user,
        "active_check_in": active,
        "elapsed": check_in_service.format_duration(check_in_service.worked_time(active)) if active else None,
        "projects": [] if active else check_in_service.available_projects(db, user),
        "tasks": task_service.worker_tasks(db, user),
        "refresh_seconds": settings.WORKING_TIME_REFRESH_SECONDS,
    })

@router.get("/elapsed")
async def elapsed(db: Session = Depends(deps.get_db), user: Profile = Depends(worker_only)):
    active = check_in_service.active_check_in(db, user)
    if not active:
        return {"active": False, "elapsed": None, "check_in_time": None}
    return {
        "active": True,
        "elapsed": check_in_service.format_duration(check_in_service.worked_time(active)),
        "check_in_time": active.check_in_time.isoformat(),
        "project_id": active.project_id,
    }

@router.post("/check-in")
async def check_in(
    project_id: Optional[int] = Form(None),
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(worker_only)
):
    try:
        check_in_service.start_check_in(db, user, project_id)
    except AlaObraError as exc:
        return redirect_with_toast("/worker", exc.message_key, "error")
    return redirect_with_toast("/worker", "worker.checked_in")

@router.post("/check-out")
async def check_out(
    notes: Optional[str] = Form(None),
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(worker_only)
):
    try:
        check_in_service.end_check_in(db, user, notes)
    except AlaObraError as exc:
        return redirect_with_toast("/worker", exc.message_key, "error")
    return redirect_with_toast("/worker", "worker.checked_out")

@router.get("/tasks/{id}")
async def task_detail(id: int, request: Request, db: Session = Depends(deps.get_db), user: Profile = Depends(worker_only)):
    task = get_own_task(db, user, id)
    return templates.TemplateResponse(request, "worker/task.html", {"user": user, "task": task})

@router.post("/tasks/{id}/start")
async def start_task(id: int, db: Session = Depends(deps.get_db), user: Profile = Depends(worker_only)):
    task = get_own_task(db, user, id)
    try:
        task_service.start_task(db, user, task)
    except AlaObraError as exc:
        return redirect_with_toast(f"/worker/tasks/{id}", exc.message_key, "error")
    return redirect_with_toast("/worker", "tasks.started")

@router.post("/tasks/{id}/submit")
async def submit_task(id: int, db: Session = Depends(deps.get_db), user: Profile = Depends(worker_only)):
    task = get_own_task(db, user, id)
    try:
        task_service.submit_for_review(db, user, task)
    except AlaObraError as exc:
        return redirect_with_toast(f"/worker/tasks/{id}", exc.message_key, "error")
    return redirect_with_toast("/worker", "tasks.submitted")

@router.post("/tasks/{id}/photos")
async def upload_task_photo(
    id: int,
    photo: Optional[UploadFile] = File(None),
    description: Optional[str] = Form(None),
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(worker_only),
    storage: LocalPhotoStorage = Depends(get_storage)
):
    task = get_own_task(db, user, id)
    url = None
    try:
        task_service.ensure_can_add_photo(user, task)
        url = storage.save(photo)
        task_service.add_task_photo(db, user, task, url, description)
    except AlaObraError as exc:
        storage.delete(url)
        return redirect_with_toast(f"/worker/tasks/{id}", exc.message_key, "error")
    return redirect_with_toast(f"/worker/tasks/{id}", "tasks.photo_added")

@router.get("/issues/new")
async def new_issue_form(
    request: Request,
    project_id: Optional[int] = None,
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(worker_only)
):
    active = check_in_service.active_check_in(db, user)
    return templates.TemplateResponse(request, "worker/issue_form.html", {
        "user": user,
        "projects": check_in_service.assigned_projects(db, user),
        "selected_project_id": project_id or (active.project_id if active else None),
        "severities": Severity.ALL,
    })

@router.post("/issues/new")
async def report_issue(
    project_id: Optional[int] = Form(None),
    title: str = Form(""),
    description: Optional[str] = Form(None),
    severity: str = Form(Severity.MEDIUM),
    photos: List[UploadFile] = File(default=None),
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(worker_only),
    storage: LocalPhotoStorage = Depends(get_storage)
):
    photo_urls = []
    try:
        issue_service.validate_report(db, user, project_id, title, severity)
        for upload in photos or []:
            if upload.filename:
                photo_urls.append(storage.save(upload))
        issue_service.report_issue(db, user, project_id, title, description, severity, photo_urls)
    except AlaObraError as exc:
        for url in photo_urls:
            storage.delete(url)
        return redirect_with_toast("/worker/issues/new", exc.message_key, "error")
    return redirect_with_toast("/worker", "issues.reported")
