from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, Form, Request, HTTPException
from sqlalchemy.orm import Session

from app.core.errors import WorkflowError
from app.db.models.project import Project, ProjectStatus
from app.db.models.user import Profile, Role
from app.routers import deps
from app.utils.activity import log_activity
from app.utils.toast import redirect_with_toast
from app.core.templates import templates

admin_only = deps.require_role(Role.ADMIN)

router = APIRouter(
    prefix="/projects",
    tags=["projects"],
    dependencies=[Depends(admin_only)]
)

def parse_date(value: Optional[str]):
    if not value:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None

def parse_project_form(
    name: str,
    address: str,
    status: str,
    budget: Optional[float],
    spent: Optional[float],
    progress_percentage: Optional[int],
) -> dict:
    if not name.strip() or not address.strip():
        raise WorkflowError("projects.required_fields")
    if status not in ProjectStatus.ALL:
        raise WorkflowError("projects.required_fields")
    progress = progress_percentage or 0
    if progress < 0 or progress > 100:
        raise WorkflowError("projects.invalid_progress")
    # spent > budget is allowed; the client portal flags it
    if (budget or 0) < 0 or (spent or 0) < 0:
        raise WorkflowError("projects.invalid_amount")
    return {
        "name": name.strip(),
        "address": address.strip(),
        "status": status,
        "budget": budget or 0.0,
        "spent": spent or 0.0,
        "progress_percentage": progress,
    }

def form_context(db: Session, user: Profile, project: Optional[Project]) -> dict:
    clients = db.query(Profile).filter(Profile.role == Role.CLIENT).order_by(Profile.full_name).all()
    return {
        "user": user,
        "project": project,
        "clients": clients,
        "statuses": ProjectStatus.ALL,
        "active_tab": "projects",
    }

@router.get("/")
async def list_projects(request: Request, db: Session = Depends(deps.get_db), user: Profile = Depends(admin_only)):
    projects = db.query(Project).order_by(Project.created_at.desc(), Project.id.desc()).all()
    return templates.TemplateResponse(request, "projects/list.html", {
        "projects": projects, "user": user, "active_tab": "projects"
    })

@router.get("/new")
async def new_project_form(request: Request, db: Session = Depends(deps.get_db), user: Profile = Depends(admin_only)):
    return templates.TemplateResponse(request, "projects/form.html", form_context(db, user, None))

@router.post("/new")
async def create_project(
    name: str = Form(""),
    address: str = Form(""),
    description: Optional[str] = Form(None),
    client_id: Optional[int] = Form(None),
    status: str = Form(ProjectStatus.IN_PROGRESS),
    budget: Optional[float] = Form(None),
    spent: Optional[float] = Form(None),
    progress_percentage: Optional[int] = Form(None),
    start_date: Optional[str] = Form(None),
    expected_end_date: Optional[str] = Form(None),
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(admin_only)
):
    try:
        fields = parse_project_form(name, address, status, budget, spent, progress_percentage)
    except WorkflowError as exc:
        return redirect_with_toast("/projects/new", exc.message_key, "error")

    project = Project(
        description=(description or "").strip() or None,
        client_id=client_id or None,
        start_date=parse_date(start_date),
        expected_end_date=parse_date(expected_end_date),
        **fields
    )
    db.add(project)
    db.commit()

    log_activity(db, user, "CREATE", "PROJECT", project.id, f"Created project {project.name}")
    return redirect_with_toast("/projects", "projects.created")

@router.get("/{id}/edit")
async def edit_project_form(id: int, request: Request, db: Session = Depends(deps.get_db), user: Profile = Depends(admin_only)):
    project = db.query(Project).filter(Project.id == id).first()
    if not project:
        return redirect_with_toast("/projects", "errors.not_found", "error")
    return templates.TemplateResponse(request, "projects/form.html", form_context(db, user, project))

@router.post("/{id}/edit")
async def update_project(
    id: int,
    name: str = Form(""),
    address: str = Form(""),
    description: Optional[str] = Form(None),
    client_id: Optional[int] = Form(None),
    status: str = Form(ProjectStatus.IN_PROGRESS),
    budget: Optional[float] = Form(None),
    spent: Optional[float] = Form(None),
    progress_percentage: Optional[int] = Form(None),
    start_date: Optional[str] = Form(None),
    expected_end_date: Optional[str] = Form(None),
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(admin_only)
):
    project = db.query(Project).filter(Project.id == id).first()
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    try:
        fields = parse_project_form(name, address, status, budget, spent, progress_percentage)
    except WorkflowError as exc:
        return redirect_with_toast(f"/projects/{id}/edit", exc.message_key, "error")

    for key, value in fields.items():
        setattr(project, key, value)
    project.description = (description or "").strip() or None
    project.client_id = client_id or None
    project.start_date = parse_date(start_date)
    project.expected_end_date = parse_date(expected_end_date)
    db.commit()

    log_activity(db, user, "UPDATE", "PROJECT", project.id, f"Updated project {project.name}")
    return redirect_with_toast("/projects", "projects.updated")

@router.post("/{id}/delete")
async def delete_project(id: int, db: Session = Depends(deps.get_db), user: Profile = Depends(admin_only)):
    project = db.query(Project).filter(Project.id == id).first()
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")

    project_name = project.name
    # Tasks, photos, check-ins and issues go with it (ORM cascade)
    db.delete(project)
    db.commit()

    log_activity(db, user, "DELETE", "PROJECT", id, f"Deleted project {project_name}")
    return redirect_with_toast("/projects", "projects.deleted")
