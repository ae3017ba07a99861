from typing import List, Optional
from uuid import UUID
from datetime import datetime
from pydantic import Field, field_validator, model_validator

from socialhub.schemas.common import CamelModel, Pagination, UserSummary, validate_url


class PostCreate(CamelModel):
    content: str = Field(..., min_length=1, max_length=5000)
    image_url: Optional[str] = None

    @field_validator('image_url')
    @classmethod
    def validate_image_url(cls, v):
        return validate_url(v)


class PostUpdate(CamelModel):
    content: Optional[str] = Field(default=None, min_length=1, max_length=5000)
    image_url: Optional[str] = None

    @field_validator('content')
    @classmethod
    def reject_null_content(cls, v):
        # Only runs for a supplied value; an omitted content stays unset
        if v is None:
            raise ValueError('Content cannot be null')
        return v

    @field_validator('image_url')
    @classmethod
    def validate_image_url(cls, v):
        return validate_url(v)

    @model_validator(mode='after')
    def require_one_field(self):
        if not self.model_fields_set:
            raise ValueError('At least one field (content or imageUrl) must be provided')
        return self


class CommentInPost(CamelModel):
    id: UUID
    content: str
    post_id: UUID
    author_id: UUID
    author: UserSummary
    like_count: int = 0
    created_at: datetime
    updated_at: Optional[datetime] = None


class PostResponse(CamelModel):
    id: UUID
    content: str
    image_url: Optional[str] = None
    author_id: UUID
    author: UserSummary
    like_count: int = 0
    comment_count: int = 0
    created_at: datetime
    updated_at: Optional[datetime] = None


class PostDetailResponse(PostResponse):
    comments: List[CommentInPost] = []


class PostListResponse(CamelModel):
    posts: List[PostResponse]
    pagination: Pagination
