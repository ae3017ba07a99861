from pydantic import Field
from typing import List, Optional
from datetime import datetime
from uuid import UUID

from socialhub.schemas.common import CamelModel, Pagination, UserSummary


class MessageCreate(CamelModel):
    content: str = Field(..., min_length=1, max_length=2000)
    receiver_id: UUID


class MessageResponse(CamelModel):
    id: UUID
    content: str
    sender_id: UUID
    receiver_id: UUID
    is_read: bool
    created_at: datetime
    sender: Optional[UserSummary] = None
    receiver: Optional[UserSummary] = None


class LatestMessage(CamelModel):
    id: UUID
    content: str
    sender_id: UUID
    receiver_id: UUID
    is_read: bool
    created_at: datetime


class ConversationSummary(CamelModel):
    user: UserSummary
    latest_message: Optional[LatestMessage] = None
    unread_count: int = 0


class ConversationResponse(CamelModel):
    other_user: UserSummary
    messages: List[MessageResponse]
    pagination: Pagination
