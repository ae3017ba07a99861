from typing import List, Optional
from uuid import UUID
from datetime import datetime
from pydantic import Field

from socialhub.schemas.common import CamelModel, Pagination, UserSummary


class CommentCreate(CamelModel):
    content: str = Field(..., min_length=1, max_length=1000)
    post_id: UUID


class CommentUpdate(CamelModel):
    content: str = Field(..., min_length=1, max_length=1000)


class CommentResponse(CamelModel):
    id: UUID
    content: str
    post_id: UUID
    author_id: UUID
    author: UserSummary
    like_count: int = 0
    created_at: datetime
    updated_at: Optional[datetime] = None


class CommentListResponse(CamelModel):
    comments: List[CommentResponse]
    pagination: Pagination
