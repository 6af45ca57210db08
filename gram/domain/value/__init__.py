"""Domain value objects for Gram."""

from gram.domain.value.identifiers import (
    CommentId,
    LikeId,
    NotificationId,
    PostId,
    UserId,
)
from gram.domain.value.types import LikeState, LikeTargetType, NotificationType

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "LikeId",
    "NotificationId",
    # Types
    "LikeState",
    "LikeTargetType",
    "NotificationType",
]
