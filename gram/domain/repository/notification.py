"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from gram.domain.model.notification import Notification
from gram.domain.value import (
    CommentId,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
)


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID.

        Args:
            notification_id: The notification's unique identifier

        Returns:
            The notification if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Args:
            notification: The notification to insert

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def delete_matching(
        self,
        actor_id: UserId,
        recipient_id: UserId,
        type: NotificationType,
        post_id: Optional[PostId] = None,
        comment_id: Optional[CommentId] = None,
    ) -> Optional[Notification]:
        """Delete at most one notification matching the given tuple.

        post_id and comment_id only narrow the match when provided.

        Returns:
            The deleted notification, or None if nothing matched
        """
        pass

    @abstractmethod
    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark an unread notification owned by recipient_id as read.

        Returns:
            The updated notification, or None if no unread notification
            with that ID belongs to the recipient
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        limit: int,
        cursor: Optional[NotificationId] = None,
    ) -> List[Notification]:
        """List a recipient's notifications, newest first.

        Ordering is (created_at DESC, id DESC).

        Args:
            recipient_id: The recipient's ID
            limit: Maximum number of notifications to return
            cursor: ID of the last notification already seen; results
                start strictly after it. An unknown cursor yields nothing.

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a recipient's unread notifications.

        Args:
            recipient_id: The recipient's ID

        Returns:
            Number of unread notifications
        """
        pass
