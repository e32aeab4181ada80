# talent96/services/notifications.py
import logging

from sqlalchemy import delete, desc, select, update
from sqlalchemy.orm import Session

from talent96.core.errors import ForbiddenError, InvalidInputError, NotFoundError
from talent96.models.notification import NOTIFICATION_TYPES, Notification
from talent96.schemas.notification import NotificationIn, NotificationOut
from talent96.services.profiles import find_recruiter

logger = logging.getLogger(__name__)


def to_payload(notification: Notification) -> dict:
    """JSON shape pushed over the realtime channel."""
    return NotificationOut.model_validate(notification).model_dump(mode="json", by_alias=True)


def create_notification(
    db: Session,
    user_id: int,
    type: str,
    title: str,
    message: str,
    job_id: int | None = None,
    metadata: dict | None = None,
    company_name: str | None = None,
    company_logo: str | None = None,
) -> Notification:
    """Adds the row to the session; the caller commits."""
    if type not in NOTIFICATION_TYPES:
        raise InvalidInputError(f"Invalid notification type: {type}")
    notification = Notification(
        user_id=user_id,
        type=type,
        title=title,
        message=message,
        job_id=job_id,
        meta_data=metadata or {},
        company_name=company_name,
        company_logo=company_logo,
    )
    db.add(notification)
    return notification


def create_for_caller(db: Session, user_id: int, data: NotificationIn) -> Notification:
    """Create a notification addressed to the caller, filling company info from their recruiter profile."""
    if not data.type or not data.title or not data.message:
        raise InvalidInputError("Missing required fields (type, title, message)")

    company_name = data.company_name or ""
    company_logo = data.company_logo or ""
    if not company_name or not company_logo:
        recruiter = find_recruiter(db, user_id)
        if recruiter is not None:
            company_name = recruiter.company_name or company_name
            company_logo = recruiter.company_logo or company_logo

    notification = create_notification(
        db,
        user_id=user_id,
        type=data.type,
        title=data.title,
        message=data.message,
        job_id=data.job_id,
        metadata=data.metadata,
        company_name=company_name,
        company_logo=company_logo,
    )
    db.commit()
    db.refresh(notification)
    return notification


def list_for_user(db: Session, user_id: int) -> list[Notification]:
    return db.execute(
        select(Notification)
        .where(Notification.user_id == user_id)
        .order_by(desc(Notification.created_at), desc(Notification.id))
    ).scalars().all()


def _owned(db: Session, notification_id: int, user_id: int) -> Notification:
    notification = db.get(Notification, notification_id)
    if notification is None:
        raise NotFoundError("Notification not found")
    if notification.user_id != user_id:
        raise ForbiddenError("Unauthorized access")
    return notification


def mark_read(db: Session, notification_id: int, user_id: int) -> Notification:
    notification = _owned(db, notification_id, user_id)
    notification.is_read = True
    db.commit()
    return notification


def mark_all_read(db: Session, user_id: int) -> int:
    result = db.execute(
        update(Notification)
        .where(Notification.user_id == user_id, Notification.is_read.is_(False))
        .values(is_read=True)
    )
    db.commit()
    return result.rowcount


def delete_one(db: Session, notification_id: int, user_id: int) -> None:
    notification = _owned(db, notification_id, user_id)
    db.delete(notification)
    db.commit()


def delete_all(db: Session, user_id: int) -> int:
    result = db.execute(delete(Notification).where(Notification.user_id == user_id))
    db.commit()
    logger.info(f"Deleted {result.rowcount} notifications for user {user_id}")
    return result.rowcount
