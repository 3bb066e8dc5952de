import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.db.models.activity import ActivityLog
from app.db.models.user import Profile

logger = logging.getLogger(__name__)

def log_activity(
    db: Session,
    user: Profile,
    action: str,
    entity_type: str,
    entity_id: int = None,
    details: str = None
):
    """
    Records an admin action in the audit log.

    :param db: Database session
    :param user: The Profile performing the action
    :param action: String describing action (e.g. CREATE, UPDATE, DELETE, APPROVE)
    :param entity_type: String describing resource (e.g. PROJECT, USER, TASK)
    :param entity_id: ID of the resource
    :param details: Optional free text with more info
    """
    try:
        activity = ActivityLog(
            user_id=user.id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            details=details,
        )
        db.add(activity)
        db.commit()
    except SQLAlchemyError:
        # The audited change is already committed; losing the audit row must not undo it
        logger.exception("Error logging activity %s %s %s", action, entity_type, entity_id)
        db.rollback()
