# talent96/api/notification_routes.py
from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.orm import Session

from talent96.auth.deps import CurrentUser, get_current_user
from talent96.core.errors import ForbiddenError
from talent96.db.session import get_db
from talent96.schemas.auth import MessageOut
from talent96.schemas.notification import NotificationIn, NotificationOut
from talent96.services import notifications
from talent96.services.realtime import NotificationHub, get_hub

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])

@router.post("", response_model=NotificationOut, status_code=201)
def create_notification(
    payload: NotificationIn,
    background_tasks: BackgroundTasks,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    hub: NotificationHub = Depends(get_hub),
):
    notification = notifications.create_for_caller(db, user.id, payload)
    background_tasks.add_task(hub.push, notification.user_id, notifications.to_payload(notification))
    return notification

# registered before /{notification_id} so "all" is not parsed as an id
@router.delete("/all")
def delete_all(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    deleted = notifications.delete_all(db, user.id)
    return {"message": "All notifications deleted", "deletedCount": deleted}

@router.get("/{user_id}", response_model=list[NotificationOut])
def list_notifications(user_id: int, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    if user_id != user.id:
        raise ForbiddenError("Unauthorized access")
    return notifications.list_for_user(db, user_id)

@router.put("/{notification_id}/read", response_model=NotificationOut)
def mark_read(notification_id: int, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return notifications.mark_read(db, notification_id, user.id)

@router.put("/{user_id}/read-all")
def mark_all_read(user_id: int, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    if user_id != user.id:
        raise ForbiddenError("Unauthorized access")
    updated = notifications.mark_all_read(db, user_id)
    return {"message": "All notifications marked as read", "updatedCount": updated}

@router.delete("/{notification_id}", response_model=MessageOut)
def delete_notification(notification_id: int, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    notifications.delete_one(db, notification_id, user.id)
    return MessageOut(message="Notification deleted")
