from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import and_, or_
from sqlalchemy.orm import Session, selectinload

from socialhub.core.auth import get_current_user
from socialhub.core.errors import NotFoundError
from socialhub.core.notifications import notify
from socialhub.core.responses import paginate, pagination, success
from socialhub.db.session import get_db
from socialhub.models.message import Message
from socialhub.models.notification import NotificationType
from socialhub.models.user import User
from socialhub.schemas.common import ApiResponse
from socialhub.schemas.message import ConversationResponse, ConversationSummary, MessageCreate, MessageResponse

router = APIRouter()


def between(user_a: UUID, user_b: UUID):
    return or_(
        and_(Message.sender_id == user_a, Message.receiver_id == user_b),
        and_(Message.sender_id == user_b, Message.receiver_id == user_a),
    )


@router.get("/", response_model=ApiResponse[List[ConversationSummary]])
def get_conversations(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get one entry per user the current user has exchanged messages with,
    most recent conversation first
    """
    messages = (
        db.query(Message)
        .filter(or_(Message.sender_id == current_user.id, Message.receiver_id == current_user.id))
        .order_by(Message.created_at.desc(), Message.id.desc())
        .all()
    )

    conversations = {}
    for message in messages:
        other_id = message.receiver_id if message.sender_id == current_user.id else message.sender_id
        entry = conversations.get(other_id)
        if entry is None:
            # Messages arrive newest first, so the first one seen is the latest
            entry = conversations[other_id] = {"latest_message": message, "unread_count": 0}
        if message.receiver_id == current_user.id and message.sender_id == other_id and not message.is_read:
            entry["unread_count"] += 1

    users = {
        user.id: user
        for user in db.query(User).filter(User.id.in_(list(conversations))).all()
    } if conversations else {}

    ordered = sorted(
        conversations.items(),
        key=lambda item: (item[1]["latest_message"].created_at, str(item[0])),
        reverse=True,
    )
    return success([
        {"user": users[other_id], **entry}
        for other_id, entry in ordered
        if other_id in users
    ])


@router.get("/{user_id}", response_model=ApiResponse[ConversationResponse])
def get_conversation(
    user_id: UUID,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get the messages exchanged with another user, newest first.
    Unread messages from that user are marked read first.
    """
    other_user = db.query(User).filter(User.id == user_id).first()
    if not other_user:
        raise NotFoundError("User not found")

    db.query(Message).filter(
        Message.sender_id == user_id,
        Message.receiver_id == current_user.id,
        Message.is_read.is_(False),
    ).update({Message.is_read: True}, synchronize_session=False)
    db.commit()

    messages, total_messages = paginate(
        db.query(Message)
        .options(selectinload(Message.sender), selectinload(Message.receiver))
        .filter(between(current_user.id, user_id))
        .order_by(Message.created_at.desc(), Message.id.desc()),
        page,
        limit,
    )

    return success({
        "other_user": other_user,
        "messages": messages,
        "pagination": pagination(page, limit, total_messages),
    })


@router.post("/", response_model=ApiResponse[MessageResponse], status_code=status.HTTP_201_CREATED)
def send_message(
    message_in: MessageCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Send a direct message and notify the receiver
    """
    receiver = db.query(User).filter(User.id == message_in.receiver_id).first()
    if not receiver:
        raise NotFoundError("Receiver not found")

    message = Message(
        sender_id=current_user.id,
        receiver_id=receiver.id,
        content=message_in.content,
    )
    db.add(message)
    notify(
        db,
        recipient_id=receiver.id,
        actor_id=current_user.id,
        notification_type=NotificationType.MESSAGE,
        content=f"{current_user.full_name} sent you a message",
    )
    db.commit()
    db.refresh(message)
    return success(message)
