from sqlalchemy import Column, DateTime, UUID, ForeignKey, Text, func, select
from sqlalchemy.orm import relationship, column_property
from datetime import datetime
import uuid
from socialhub.db.session import Base
from socialhub.models.like import Like

class Comment(Base):
    __tablename__ = "comments"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    content = Column(Text, nullable=False)
    post_id = Column(UUID(as_uuid=True), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    author_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    author = relationship("User")
    post = relationship("Post", back_populates="comments")
    likes = relationship(Like, cascade="all, delete")

    like_count = column_property(
        select(func.count(Like.id)).where(Like.comment_id == id).correlate_except(Like).scalar_subquery()
    )
