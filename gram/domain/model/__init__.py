"""Domain model entities for Gram."""

from gram.domain.model.comment import Comment
from gram.domain.model.like import Like
from gram.domain.model.notification import Notification, NotificationPage
from gram.domain.model.post import Post
from gram.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Like",
    "Notification",
    "NotificationPage",
]
