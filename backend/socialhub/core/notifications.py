import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from socialhub.models.notification import Notification, NotificationType

logger = logging.getLogger(__name__)


def notify(
    db: Session,
    recipient_id: UUID,
    actor_id: UUID,
    notification_type: NotificationType,
    content: str,
) -> Optional[Notification]:
    """Stage a notification for ``recipient_id`` in the caller's unit of work.

    Nothing is written when the actor is the recipient. The caller commits, so
    the notification lands together with the write that triggered it.
    """
    if recipient_id == actor_id:
        return None

    notification = Notification(user_id=recipient_id, type=notification_type, content=content)
    db.add(notification)
    logger.debug(
        f"Queued {notification_type.value} notification",
        extra={"user_id": str(recipient_id)},
    )
    return notification
