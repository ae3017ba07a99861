from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session, selectinload
from uuid import UUID

from socialhub.core.auth import get_current_user
from socialhub.core.errors import NotFoundError
from socialhub.core.notifications import notify
from socialhub.core.policy import authorize
from socialhub.core.responses import paginate, pagination, success
from socialhub.db.session import get_db
from socialhub.models.comment import Comment
from socialhub.models.notification import NotificationType
from socialhub.models.post import Post
from socialhub.models.user import User
from socialhub.schemas.comment import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    CommentUpdate,
)
from socialhub.schemas.common import ApiResponse

router = APIRouter()


def get_comment_or_404(db: Session, comment_id: UUID) -> Comment:
    comment = db.query(Comment).filter(Comment.id == comment_id).first()
    if not comment:
        raise NotFoundError("Comment not found")
    return comment


@router.get("/post/{post_id}", response_model=ApiResponse[CommentListResponse])
def get_comments_for_post(
    post_id: UUID,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get comments for a post, newest first
    """
    if not db.query(Post.id).filter(Post.id == post_id).first():
        raise NotFoundError("Post not found")

    comments, total_comments = paginate(
        db.query(Comment)
        .options(selectinload(Comment.author))
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc()),
        page,
        limit,
    )

    return success({"comments": comments, "pagination": pagination(page, limit, total_comments)})


@router.post("/", response_model=ApiResponse[CommentResponse], status_code=status.HTTP_201_CREATED)
def create_comment(
    comment_in: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Comment on a post and notify the post author
    """
    post = db.query(Post).filter(Post.id == comment_in.post_id).first()
    if not post:
        raise NotFoundError("Post not found")

    comment = Comment(content=comment_in.content, post_id=post.id, author_id=current_user.id)
    db.add(comment)
    notify(
        db,
        recipient_id=post.author_id,
        actor_id=current_user.id,
        notification_type=NotificationType.COMMENT,
        content=f"{current_user.full_name} commented on your post",
    )
    db.commit()
    db.refresh(comment)
    return success(comment)


@router.patch("/{comment_id}", response_model=ApiResponse[CommentResponse])
def update_comment(
    comment_id: UUID,
    comment_update: CommentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Update a comment (author only)
    """
    comment = get_comment_or_404(db, comment_id)
    authorize(current_user.id, comment.author_id, message="You are not authorized to update this comment")

    comment.content = comment_update.content
    db.commit()
    db.refresh(comment)
    return success(comment)


@router.delete("/{comment_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
def delete_comment(
    comment_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Delete a comment; allowed for the comment author and the author of the post it belongs to
    """
    comment = get_comment_or_404(db, comment_id)
    post_author_id = db.query(Post.author_id).filter(Post.id == comment.post_id).scalar()

    authorize(
        current_user.id,
        comment.author_id,
        extra_grantees=[post_author_id],
        message="You are not authorized to delete this comment",
    )

    db.delete(comment)
    db.commit()
    return success()
