import logging

from fastapi import Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

class AlaObraError(Exception):
    """Base error carrying a message key from the locale string table."""

    def __init__(self, message_key: str, **params):
        super().__init__(message_key)
        self.message_key = message_key
        self.params = params

class AuthError(AlaObraError):
    pass

class WorkflowError(AlaObraError):
    """A refused state transition or a failed validation rule."""

class StorageError(AlaObraError):
    pass

def _back_url(request: Request) -> str:
    referer = request.headers.get("referer")
    if referer and referer.startswith(str(request.base_url)):
        return referer
    return "/"

async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    response = RedirectResponse(url=_back_url(request), status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(key="toast_message", value="errors.generic")
    response.set_cookie(key="toast_type", value="error")
    return response

async def workflow_error_handler(request: Request, exc: AlaObraError):
    logger.info("Refused %s %s: %s", request.method, request.url.path, exc.message_key)
    response = RedirectResponse(url=_back_url(request), status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(key="toast_message", value=exc.message_key)
    response.set_cookie(key="toast_type", value="error")
    return response
