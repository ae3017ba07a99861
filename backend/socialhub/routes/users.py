from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from uuid import UUID

from socialhub.core.auth import get_current_user
from socialhub.core.errors import NotFoundError
from socialhub.core.responses import success
from socialhub.db.session import get_db
from socialhub.models.user import User
from socialhub.schemas.common import ApiResponse
from socialhub.schemas.user import UserResponse, UserUpdate

router = APIRouter()

@router.get("/me", response_model=ApiResponse[UserResponse])
def get_me(current_user: User = Depends(get_current_user)):
    """
    Get the current user's profile
    """
    return success(current_user)

@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
def get_user_profile(
    user_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get user profile by ID
    """
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return success(user)

@router.patch("/me", response_model=ApiResponse[UserResponse])
def update_me(
    user_update: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Update the current user's profile
    """
    fields = user_update.model_dump(exclude_unset=True)

    # Names are required columns; an explicit null leaves them unchanged
    for name_field in ("first_name", "last_name"):
        if fields.get(name_field) is None:
            fields.pop(name_field, None)

    for field, value in fields.items():
        setattr(current_user, field, value)

    db.commit()
    db.refresh(current_user)
    return success(current_user)
