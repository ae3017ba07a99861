from sqlalchemy import Column, String, DateTime, UUID, ForeignKey, Text, func, select
from sqlalchemy.orm import relationship, column_property
from datetime import datetime
import uuid
from socialhub.db.session import Base
from socialhub.models.comment import Comment
from socialhub.models.like import Like

class Post(Base):
    __tablename__ = "posts"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    content = Column(Text, nullable=False)
    image_url = Column(String, nullable=True)
    author_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    author = relationship("User", back_populates="posts")
    comments = relationship(
        Comment,
        back_populates="post",
        cascade="all, delete",
        order_by=Comment.created_at.desc(),
    )
    likes = relationship(Like, cascade="all, delete")

    like_count = column_property(
        select(func.count(Like.id)).where(Like.post_id == id).correlate_except(Like).scalar_subquery()
    )
    comment_count = column_property(
        select(func.count(Comment.id)).where(Comment.post_id == id).correlate_except(Comment).scalar_subquery()
    )
