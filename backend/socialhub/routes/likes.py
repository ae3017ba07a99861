from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from socialhub.core.auth import get_current_user
from socialhub.core.errors import NotFoundError
from socialhub.core.notifications import notify
from socialhub.core.responses import success
from socialhub.db.session import get_db
from socialhub.models.comment import Comment
from socialhub.models.like import Like
from socialhub.models.notification import NotificationType
from socialhub.models.post import Post
from socialhub.models.user import User
from socialhub.schemas.common import ApiResponse, UserSummary
from socialhub.schemas.like import LikeToggleResponse

router = APIRouter()


def toggle_like(db: Session, actor: User, target_column, target_id: UUID) -> bool:
    """Remove the actor's like on the target if present, otherwise add one.

    Returns the resulting state: True when the target is now liked. Nothing
    is committed here.
    """
    existing_like = (
        db.query(Like)
        .filter(Like.user_id == actor.id, target_column == target_id)
        .first()
    )
    if existing_like:
        db.delete(existing_like)
        return False

    like = Like(user_id=actor.id)
    setattr(like, target_column.key, target_id)
    db.add(like)
    return True


@router.post("/post/{post_id}", response_model=ApiResponse[LikeToggleResponse])
def toggle_post_like(
    post_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Like or unlike a post
    """
    post = db.query(Post).filter(Post.id == post_id).first()
    if not post:
        raise NotFoundError("Post not found")

    is_liked = toggle_like(db, current_user, Like.post_id, post.id)
    if is_liked:
        notify(
            db,
            recipient_id=post.author_id,
            actor_id=current_user.id,
            notification_type=NotificationType.POST_LIKE,
            content=f"{current_user.full_name} liked your post",
        )
    db.commit()

    like_count = db.query(Like).filter(Like.post_id == post.id).count()
    return success({"is_liked": is_liked, "like_count": like_count})


@router.post("/comment/{comment_id}", response_model=ApiResponse[LikeToggleResponse])
def toggle_comment_like(
    comment_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Like or unlike a comment
    """
    comment = db.query(Comment).filter(Comment.id == comment_id).first()
    if not comment:
        raise NotFoundError("Comment not found")

    is_liked = toggle_like(db, current_user, Like.comment_id, comment.id)
    if is_liked:
        notify(
            db,
            recipient_id=comment.author_id,
            actor_id=current_user.id,
            notification_type=NotificationType.COMMENT_LIKE,
            content=f"{current_user.full_name} liked your comment",
        )
    db.commit()

    like_count = db.query(Like).filter(Like.comment_id == comment.id).count()
    return success({"is_liked": is_liked, "like_count": like_count})


@router.get("/post/{post_id}", response_model=ApiResponse[List[UserSummary]])
def get_post_likes(
    post_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get all users who liked a post
    """
    if not db.query(Post.id).filter(Post.id == post_id).first():
        raise NotFoundError("Post not found")

    users = (
        db.query(User)
        .join(Like, Like.user_id == User.id)
        .filter(Like.post_id == post_id)
        .order_by(Like.created_at.asc())
        .all()
    )
    return success(users)
