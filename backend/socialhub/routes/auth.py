import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from socialhub.core.auth import authenticate_user, create_token_for_user, get_password_hash
from socialhub.core.errors import ConflictError, UnauthorizedError
from socialhub.core.responses import success
from socialhub.db.session import get_db
from socialhub.models.user import User
from socialhub.schemas.common import ApiResponse
from socialhub.schemas.user import AuthResponse, UserCreate, UserLogin

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/register", response_model=ApiResponse[AuthResponse], status_code=status.HTTP_201_CREATED)
def register(credentials: UserCreate, db: Session = Depends(get_db)):
    """Register a new user and return an access token."""
    # Check if email already exists
    existing_user = db.query(User).filter(User.email == credentials.email).first()
    if existing_user:
        raise ConflictError("User with this email already exists")

    db_user = User(
        email=credentials.email,
        password_hash=get_password_hash(credentials.password),
        first_name=credentials.first_name,
        last_name=credentials.last_name,
        date_of_birth=credentials.date_of_birth,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)

    logger.info("User registered", extra={"user_id": str(db_user.id)})
    return success({"user": db_user, "token": create_token_for_user(db_user)})

@router.post("/login", response_model=ApiResponse[AuthResponse])
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login user and return an access token."""
    user = authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise UnauthorizedError("Invalid credentials")

    logger.info("User logged in", extra={"user_id": str(user.id)})
    return success({"user": user, "token": create_token_for_user(user)})
