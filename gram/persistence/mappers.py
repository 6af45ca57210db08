"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from gram.domain.model import Comment, Like, Notification, Post, User
from gram.domain.value import (
    CommentId,
    LikeId,
    LikeTargetType,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        handle=row["handle"],
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(row["id"]),
        author_id=UserId(row["author_id"]),
        caption=row.get("caption"),
        image_url=row.get("image_url"),
        like_count=row["like_count"],
        comment_count=row["comment_count"],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_id=UserId(row["author_id"]),
        content=row["content"],
        parent_id=CommentId(parent_id) if parent_id else None,
        like_count=row["like_count"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(row["id"]),
        user_id=UserId(row["user_id"]),
        target_type=LikeTargetType(row["target_type"]),
        target_id=row["target_id"],
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict.

    Enum values are stored by their string value. The target is also
    written to post_id or comment_id so deleting it cascades to the like.
    """
    data = like.model_dump()
    data["target_type"] = like.target_type.value
    is_post = like.target_type == LikeTargetType.POST
    data["post_id"] = like.target_id if is_post else None
    data["comment_id"] = None if is_post else like.target_id
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(row["id"]),
        recipient_id=UserId(row["recipient_id"]),
        actor_id=UserId(row["actor_id"]),
        type=NotificationType(row["type"]),
        post_id=PostId(row["post_id"]) if row.get("post_id") else None,
        comment_id=CommentId(row["comment_id"]) if row.get("comment_id") else None,
        like_id=LikeId(row["like_id"]) if row.get("like_id") else None,
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
