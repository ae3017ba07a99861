from pydantic import EmailStr, Field, field_validator, model_validator
from typing import Optional
from datetime import date, datetime
from uuid import UUID
import re

from socialhub.schemas.common import CamelModel, validate_url

NAME_RE = re.compile(r"^[a-zA-Z\s\-']+$")


def validate_name(v: str) -> str:
    v = v.strip()
    if len(v) < 2:
        raise ValueError('Name must be at least 2 characters')
    if len(v) > 50:
        raise ValueError('Name cannot exceed 50 characters')
    if not NAME_RE.match(v):
        raise ValueError('Name can only contain letters, spaces, hyphens, and apostrophes')
    return v


class UserCreate(CamelModel):
    email: EmailStr
    password: str
    first_name: str
    last_name: str
    date_of_birth: Optional[date] = None

    @field_validator('password')
    @classmethod
    def validate_password(cls, v):
        if len(v) < 8:
            raise ValueError('Password must be at least 8 characters long')
        if len(v) > 100:
            raise ValueError('Password cannot exceed 100 characters')
        if not (re.search(r'[a-z]', v) and re.search(r'[A-Z]', v) and re.search(r'\d', v)):
            raise ValueError('Password must contain at least one uppercase letter, one lowercase letter, and one number')
        return v

    @field_validator('first_name', 'last_name')
    @classmethod
    def validate_names(cls, v):
        return validate_name(v)


class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserUpdate(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    profile_pic: Optional[str] = None

    @field_validator('first_name', 'last_name')
    @classmethod
    def validate_names(cls, v):
        if v is None:
            return v
        return validate_name(v)

    @field_validator('profile_pic')
    @classmethod
    def validate_profile_pic(cls, v):
        return validate_url(v)

    @model_validator(mode='after')
    def require_one_field(self):
        if not self.model_fields_set:
            raise ValueError('At least one field must be provided for update')
        return self


class UserResponse(CamelModel):
    id: UUID
    email: str
    first_name: str
    last_name: str
    date_of_birth: Optional[date] = None
    profile_pic: Optional[str] = None
    bio: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class FriendResponse(CamelModel):
    id: UUID
    first_name: str
    last_name: str
    profile_pic: Optional[str] = None
    bio: Optional[str] = None


class AuthResponse(CamelModel):
    user: UserResponse
    token: str
