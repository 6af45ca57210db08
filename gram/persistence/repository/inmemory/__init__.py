"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .notification import InMemoryNotificationRepository
from .post import InMemoryPostRepository
from .store import InMemoryStore
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
    "InMemoryStore",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
]
