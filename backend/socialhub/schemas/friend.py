from typing import List, Optional
from uuid import UUID
from datetime import datetime
from pydantic import field_validator

from socialhub.models.friend_request import FriendStatus
from socialhub.schemas.common import CamelModel, UserSummary


class FriendRequestCreate(CamelModel):
    user_id: UUID


class FriendRequestUpdate(CamelModel):
    status: FriendStatus

    @field_validator('status', mode='before')
    @classmethod
    def validate_decision(cls, v):
        if v not in (FriendStatus.ACCEPTED.value, FriendStatus.REJECTED.value):
            raise ValueError('Status must be either ACCEPTED or REJECTED')
        return v


class FriendRequestResponse(CamelModel):
    id: UUID
    sender_id: UUID
    receiver_id: UUID
    status: FriendStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    sender: Optional[UserSummary] = None
    receiver: Optional[UserSummary] = None


class FriendRequestsResponse(CamelModel):
    received: List[FriendRequestResponse]
    sent: List[FriendRequestResponse]
