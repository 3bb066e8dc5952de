import logging
from pathlib import Path

from fastapi import FastAPI, Request, Depends, status
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional

from app.core.config import settings
from app.core.errors import AlaObraError, database_error_handler, workflow_error_handler
from app.core.logging import setup_logging
from app.core.templates import templates
from app.db.base import Base
from app.db.models.user import Profile, Role
from app.db.session import engine
from app.routers import auth, client, dashboard, deps, issues, notifications, projects, tasks, users, worker

setup_logging()
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

app = FastAPI(title=settings.PROJECT_NAME)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.add_exception_handler(SQLAlchemyError, database_error_handler)
app.add_exception_handler(AlaObraError, workflow_error_handler)

HOME_BY_ROLE = {
    Role.ADMIN: "/admin",
    Role.WORKER: "/worker",
    Role.CLIENT: "/client",
}

@app.get("/")
async def read_root(request: Request, error: Optional[str] = None, user: Optional[Profile] = Depends(deps.get_optional_user)):
    if user is None:
        return templates.TemplateResponse(request, "index.html", {"error": error})
    return RedirectResponse(url=HOME_BY_ROLE.get(user.role, "/logout"), status_code=status.HTTP_303_SEE_OTHER)

app.include_router(auth.router)
app.include_router(dashboard.router)
app.include_router(users.router)
app.include_router(projects.router)
app.include_router(tasks.router)
app.include_router(issues.router)
app.include_router(worker.router)
app.include_router(client.router)
app.include_router(notifications.router)

def init_db():
    Base.metadata.create_all(bind=engine)

# Create tables on startup (Simple approach)
@app.on_event("startup")
def on_startup():
    init_db()
    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    logger.info("%s started", settings.PROJECT_NAME)
