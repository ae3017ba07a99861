from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session, selectinload
from uuid import UUID

from socialhub.core.auth import get_current_user
from socialhub.core.errors import NotFoundError
from socialhub.core.policy import authorize
from socialhub.core.responses import paginate, pagination, success
from socialhub.db.session import get_db
from socialhub.models.comment import Comment
from socialhub.models.post import Post
from socialhub.models.user import User
from socialhub.schemas.common import ApiResponse
from socialhub.schemas.post import (
    PostCreate,
    PostDetailResponse,
    PostListResponse,
    PostResponse,
    PostUpdate,
)

router = APIRouter()


def get_post_or_404(db: Session, post_id: UUID) -> Post:
    post = db.query(Post).filter(Post.id == post_id).first()
    if not post:
        raise NotFoundError("Post not found")
    return post


@router.get("/", response_model=ApiResponse[PostListResponse])
def get_posts(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get all posts, newest first
    """
    posts, total_posts = paginate(
        db.query(Post)
        .options(selectinload(Post.author))
        .order_by(Post.created_at.desc(), Post.id.desc()),
        page,
        limit,
    )

    return success({"posts": posts, "pagination": pagination(page, limit, total_posts)})


@router.get("/{post_id}", response_model=ApiResponse[PostDetailResponse])
def get_post(
    post_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get a post with its comments
    """
    post = (
        db.query(Post)
        .options(
            selectinload(Post.author),
            selectinload(Post.comments).selectinload(Comment.author),
        )
        .filter(Post.id == post_id)
        .first()
    )
    if not post:
        raise NotFoundError("Post not found")
    return success(post)


@router.post("/", response_model=ApiResponse[PostResponse], status_code=status.HTTP_201_CREATED)
def create_post(
    post_in: PostCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Create a new post
    """
    post = Post(content=post_in.content, image_url=post_in.image_url, author_id=current_user.id)
    db.add(post)
    db.commit()
    db.refresh(post)
    return success(post)


@router.patch("/{post_id}", response_model=ApiResponse[PostResponse])
def update_post(
    post_id: UUID,
    post_update: PostUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Update a post (author only)
    """
    post = get_post_or_404(db, post_id)
    authorize(current_user.id, post.author_id, message="You are not authorized to update this post")

    for field, value in post_update.model_dump(exclude_unset=True).items():
        setattr(post, field, value)

    db.commit()
    db.refresh(post)
    return success(post)


@router.delete("/{post_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
def delete_post(
    post_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Delete a post together with its comments and likes (author only)
    """
    post = get_post_or_404(db, post_id)
    authorize(current_user.id, post.author_id, message="You are not authorized to delete this post")

    db.delete(post)
    db.commit()
    return success()
