"""Repository interfaces for the Gram domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from gram.domain.repository.comment import CommentRepository
from gram.domain.repository.like import LikeRepository
from gram.domain.repository.notification import NotificationRepository
from gram.domain.repository.post import PostRepository
from gram.domain.repository.transaction import TransactionManager
from gram.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "LikeRepository",
    "NotificationRepository",
    "TransactionManager",
]
