"""PostgreSQL repository implementations."""

from gram.persistence.repository.comment import PostgresCommentRepository
from gram.persistence.repository.like import PostgresLikeRepository
from gram.persistence.repository.notification import PostgresNotificationRepository
from gram.persistence.repository.post import PostgresPostRepository
from gram.persistence.repository.transaction import PostgresTransactionManager
from gram.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresNotificationRepository",
    "PostgresTransactionManager",
]
