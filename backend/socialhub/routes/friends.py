import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy import and_, or_
from sqlalchemy.orm import Session, selectinload

from socialhub.core.auth import get_current_user
from socialhub.core.errors import BadRequestError, ConflictError, NotFoundError
from socialhub.core.notifications import notify
from socialhub.core.policy import authorize
from socialhub.core.responses import success
from socialhub.db.session import get_db
from socialhub.models.friend_request import FriendRequest, FriendStatus
from socialhub.models.notification import NotificationType
from socialhub.models.user import User
from socialhub.schemas.common import ApiResponse
from socialhub.schemas.friend import (
    FriendRequestCreate,
    FriendRequestResponse,
    FriendRequestsResponse,
    FriendRequestUpdate,
)
from socialhub.schemas.user import FriendResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def find_request_between(db: Session, user_a: UUID, user_b: UUID) -> Optional[FriendRequest]:
    """Return the friend request linking two users, whichever of them sent it."""
    return db.query(FriendRequest).filter(
        or_(
            and_(FriendRequest.sender_id == user_a, FriendRequest.receiver_id == user_b),
            and_(FriendRequest.sender_id == user_b, FriendRequest.receiver_id == user_a),
        )
    ).first()


@router.get("/", response_model=ApiResponse[List[FriendResponse]])
def get_friends(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get all accepted friends of the current user
    """
    accepted = (
        db.query(FriendRequest)
        .options(selectinload(FriendRequest.sender), selectinload(FriendRequest.receiver))
        .filter(
            FriendRequest.status == FriendStatus.ACCEPTED,
            or_(
                FriendRequest.sender_id == current_user.id,
                FriendRequest.receiver_id == current_user.id,
            ),
        )
        .order_by(FriendRequest.updated_at.desc())
        .all()
    )

    friends = [
        request.receiver if request.sender_id == current_user.id else request.sender
        for request in accepted
    ]
    return success(friends)


@router.get("/requests", response_model=ApiResponse[FriendRequestsResponse])
def get_friend_requests(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get pending requests addressed to the current user and every request they sent
    """
    received = (
        db.query(FriendRequest)
        .options(selectinload(FriendRequest.sender))
        .filter(
            FriendRequest.receiver_id == current_user.id,
            FriendRequest.status == FriendStatus.PENDING,
        )
        .order_by(FriendRequest.created_at.desc())
        .all()
    )
    sent = (
        db.query(FriendRequest)
        .options(selectinload(FriendRequest.receiver))
        .filter(FriendRequest.sender_id == current_user.id)
        .order_by(FriendRequest.created_at.desc())
        .all()
    )

    return success({
        "received": [
            FriendRequestResponse.model_validate(request).model_copy(update={"receiver": None})
            for request in received
        ],
        "sent": [
            FriendRequestResponse.model_validate(request).model_copy(update={"sender": None})
            for request in sent
        ],
    })


@router.post("/requests", response_model=ApiResponse[FriendRequestResponse], status_code=status.HTTP_201_CREATED)
def send_friend_request(
    request_in: FriendRequestCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Send a friend request
    """
    receiver_id = request_in.user_id
    if receiver_id == current_user.id:
        raise BadRequestError("Cannot send friend request to yourself")

    receiver = db.query(User).filter(User.id == receiver_id).first()
    if not receiver:
        raise NotFoundError("User not found")

    if find_request_between(db, current_user.id, receiver_id):
        raise ConflictError("Friend request already exists")

    friend_request = FriendRequest(
        sender_id=current_user.id,
        receiver_id=receiver_id,
        status=FriendStatus.PENDING,
    )
    db.add(friend_request)
    notify(
        db,
        recipient_id=receiver_id,
        actor_id=current_user.id,
        notification_type=NotificationType.FRIEND_REQUEST,
        content=f"{current_user.full_name} sent you a friend request",
    )
    db.commit()
    db.refresh(friend_request)

    logger.info("Friend request sent", extra={"user_id": str(current_user.id)})
    response = FriendRequestResponse.model_validate(friend_request)
    return success(response.model_copy(update={"sender": None}))


@router.patch("/requests/{request_id}", response_model=ApiResponse[FriendRequestResponse])
def respond_to_friend_request(
    request_id: UUID,
    decision: FriendRequestUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Accept or reject a pending friend request (receiver only)
    """
    friend_request = db.query(FriendRequest).filter(FriendRequest.id == request_id).first()
    if not friend_request:
        raise NotFoundError("Friend request not found")

    authorize(
        current_user.id,
        friend_request.receiver_id,
        message="You are not authorized to respond to this friend request",
    )

    if friend_request.status != FriendStatus.PENDING:
        raise ConflictError(f"Friend request has already been {friend_request.status.value.lower()}")

    friend_request.status = decision.status
    if decision.status == FriendStatus.ACCEPTED:
        notify(
            db,
            recipient_id=friend_request.sender_id,
            actor_id=current_user.id,
            notification_type=NotificationType.FRIEND_REQUEST,
            content=f"{current_user.full_name} accepted your friend request",
        )
    db.commit()
    db.refresh(friend_request)

    return success(friend_request)


@router.delete("/{user_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
def delete_friendship(
    user_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Remove the request linking the current user and another user, whatever its status
    """
    friend_request = find_request_between(db, current_user.id, user_id)
    if not friend_request:
        raise NotFoundError("Friendship not found")

    db.delete(friend_request)
    db.commit()
    return success()
