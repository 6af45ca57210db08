"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from gram.domain.model.common import DomainModel
from gram.domain.value import (
    CommentId,
    LikeId,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
)


class Notification(DomainModel):
    """Notification entity.

    Business rules:
    - An actor never notifies themselves
    - is_read only ever moves from False to True
    - Like notifications reference their like (removed together with it)
    """

    id: NotificationId
    recipient_id: UserId
    actor_id: UserId
    type: NotificationType
    post_id: Optional[PostId] = None
    comment_id: Optional[CommentId] = None
    like_id: Optional[LikeId] = None
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)


class NotificationPage(DomainModel):
    """One page of a recipient's notifications, newest first."""

    items: list[Notification]
    next_cursor: Optional[NotificationId] = None
