from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import AlaObraError
from app.core.i18n import translate
from app.db.models.notification import Notification
from app.db.models.user import Profile, Role

def notify(db: Session, user_id: int, kind: str, type_: str, link: Optional[str] = None, **params) -> Notification:
    """
    Adds a notification to the session without committing.

    ``kind`` picks the ``notif.<kind>.title``/``.message`` pair of the string
    table; the text is stored in the default locale.
    """
    locale = settings.DEFAULT_LOCALE
    notification = Notification(
        user_id=user_id,
        title=translate(f"notif.{kind}.title", locale),
        message=translate(f"notif.{kind}.message", locale, **params),
        type=type_,
        link=link,
    )
    db.add(notification)
    return notification

def admin_ids(db: Session) -> List[int]:
    rows = db.query(Profile.id).filter(Profile.role == Role.ADMIN, Profile.is_active == True).all()
    return [row.id for row in rows]

def recent_for(db: Session, user: Profile, limit: int = 10) -> List[Notification]:
    return db.query(Notification)\
        .filter(Notification.user_id == user.id)\
        .order_by(Notification.created_at.desc(), Notification.id.desc())\
        .limit(limit)\
        .all()

def unread_count(db: Session, user: Profile) -> int:
    return db.query(Notification)\
        .filter(Notification.user_id == user.id, Notification.is_read == False)\
        .count()

def mark_read(db: Session, user: Profile, notification_id: int) -> Notification:
    notification = db.query(Notification).filter(
        Notification.id == notification_id,
        Notification.user_id == user.id
    ).first()
    if not notification:
        raise AlaObraError("errors.not_found")
    notification.is_read = True
    db.commit()
    return notification
