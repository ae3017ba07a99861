from sqlalchemy import Column, DateTime, UUID, ForeignKey, Boolean, Text
from sqlalchemy import Enum as SAEnum
from datetime import datetime
from enum import Enum
import uuid
from socialhub.db.session import Base


class NotificationType(str, Enum):
    COMMENT = "COMMENT"
    POST_LIKE = "POST_LIKE"
    COMMENT_LIKE = "COMMENT_LIKE"
    FRIEND_REQUEST = "FRIEND_REQUEST"
    MESSAGE = "MESSAGE"


class Notification(Base):
    __tablename__ = "notifications"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey('users.id', ondelete="CASCADE"), nullable=False, index=True)
    type = Column(SAEnum(NotificationType, name="notification_type"), nullable=False)
    content = Column(Text, nullable=False)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
