from socialhub.models.user import User
from socialhub.models.like import Like
from socialhub.models.comment import Comment
from socialhub.models.post import Post
from socialhub.models.friend_request import FriendRequest, FriendStatus
from socialhub.models.message import Message
from socialhub.models.notification import Notification, NotificationType

__all__ = [
    "User",
    "Like",
    "Comment",
    "Post",
    "FriendRequest",
    "FriendStatus",
    "Message",
    "Notification",
    "NotificationType"
]
