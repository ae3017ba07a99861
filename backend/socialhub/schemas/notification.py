from typing import List
from datetime import datetime
from uuid import UUID

from socialhub.models.notification import NotificationType
from socialhub.schemas.common import CamelModel, Pagination


class NotificationResponse(CamelModel):
    id: UUID
    user_id: UUID
    type: NotificationType
    content: str
    is_read: bool
    created_at: datetime


class NotificationListResponse(CamelModel):
    notifications: List[NotificationResponse]
    unread_count: int
    pagination: Pagination


class MarkAllReadResponse(CamelModel):
    updated_count: int
