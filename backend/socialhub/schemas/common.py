from typing import Generic, Optional, TypeVar
from uuid import UUID
import re

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")

URL_RE = re.compile(r'^https?://[^\s/$.?#][^\s]*$', re.IGNORECASE)


def validate_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    if not URL_RE.match(value):
        raise ValueError('Invalid URL')
    return value


class CamelModel(BaseModel):
    """Base for every API schema: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ApiResponse(CamelModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None


class Pagination(CamelModel):
    page: int
    limit: int
    total_pages: int
    total_items: int


class UserSummary(CamelModel):
    id: UUID
    first_name: str
    last_name: str
    profile_pic: Optional[str] = None
