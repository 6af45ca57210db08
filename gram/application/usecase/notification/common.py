"""Shared notification response models."""

from datetime import datetime
from typing import Optional

from gram.application.usecase.base import UseCaseModel
from gram.domain.model import Notification, User
from gram.domain.value import NotificationType


class NotificationActor(UseCaseModel):
    """User who caused a notification."""

    id: str
    handle: str
    avatar_url: Optional[str] = None


class NotificationItem(UseCaseModel):
    """Notification as shown in the recipient's list."""

    id: str
    type: NotificationType
    actor: Optional[NotificationActor] = None  # None if the actor is gone
    post_id: Optional[str] = None
    comment_id: Optional[str] = None
    is_read: bool
    created_at: datetime


def to_notification_item(
    notification: Notification, actor: Optional[User]
) -> NotificationItem:
    """Build the response item for a notification and its actor."""
    return NotificationItem(
        id=str(notification.id),
        type=notification.type,
        actor=(
            NotificationActor(
                id=str(actor.id), handle=actor.handle, avatar_url=actor.avatar_url
            )
            if actor
            else None
        ),
        post_id=str(notification.post_id) if notification.post_id else None,
        comment_id=str(notification.comment_id) if notification.comment_id else None,
        is_read=notification.is_read,
        created_at=notification.created_at,
    )
