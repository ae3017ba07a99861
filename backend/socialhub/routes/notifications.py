from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from socialhub.core.auth import get_current_user
from socialhub.core.errors import NotFoundError
from socialhub.core.policy import authorize
from socialhub.core.responses import paginate, pagination, success
from socialhub.db.session import get_db
from socialhub.models.notification import Notification
from socialhub.models.user import User
from socialhub.schemas.common import ApiResponse
from socialhub.schemas.notification import (
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationResponse,
)

router = APIRouter()


@router.get("/", response_model=ApiResponse[NotificationListResponse])
def get_notifications(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get the current user's notifications, newest first
    """
    mine = db.query(Notification).filter(Notification.user_id == current_user.id)
    notifications, total_notifications = paginate(
        mine.order_by(Notification.created_at.desc(), Notification.id.desc()),
        page,
        limit,
    )
    unread_count = mine.filter(Notification.is_read.is_(False)).count()

    return success({
        "notifications": notifications,
        "unread_count": unread_count,
        "pagination": pagination(page, limit, total_notifications),
    })


# Declared before /{notification_id} so "read" is not parsed as an id
@router.patch("/read/all", response_model=ApiResponse[MarkAllReadResponse])
def mark_all_as_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Mark every unread notification of the current user as read
    """
    updated_count = db.query(Notification).filter(
        Notification.user_id == current_user.id,
        Notification.is_read.is_(False),
    ).update({Notification.is_read: True}, synchronize_session=False)
    db.commit()
    return success({"updated_count": updated_count})


@router.patch("/{notification_id}", response_model=ApiResponse[NotificationResponse])
def mark_as_read(
    notification_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Mark one notification as read (recipient only)
    """
    notification = db.query(Notification).filter(Notification.id == notification_id).first()
    if not notification:
        raise NotFoundError("Notification not found")

    authorize(
        current_user.id,
        notification.user_id,
        message="You are not authorized to update this notification",
    )

    notification.is_read = True
    db.commit()
    db.refresh(notification)
    return success(notification)
