from fastapi import APIRouter, Depends, Request, HTTPException
from sqlalchemy.orm import Session

from app.db.models.user import Profile, Role
from app.routers import deps
from app.services import portal
from app.core.templates import templates

client_only = deps.require_role(Role.CLIENT)

router = APIRouter(
    prefix="/client",
    tags=["client"],
    dependencies=[Depends(client_only)]
)

@router.get("/")
async def client_portal(
    request: Request,
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(client_only)
):
    projects = portal.client_projects(db, user)
    return templates.TemplateResponse(request, "client/portal.html", {
        "user": user,
        "projects": projects,
        # The first project is opened by default
        "selected": projects[0] if projects else None,
    })

@router.get("/projects/{id}")
async def client_project(
    id: int,
    request: Request,
    db: Session = Depends(deps.get_db),
    user: Profile = Depends(client_only)
):
    selected = portal.client_project(db, user, id)
    if selected is None:
        # Other clients' projects look the same as missing ones
        raise HTTPException(status_code=404, detail="Project not found")
    return templates.TemplateResponse(request, "client/portal.html", {
        "user": user,
        "projects": portal.client_projects(db, user),
        "selected": selected,
    })
