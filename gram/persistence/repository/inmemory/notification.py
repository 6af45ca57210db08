"""In-memory notification repository for testing."""

from typing import Optional

from gram.domain.model.notification import Notification
from gram.domain.repository.notification import NotificationRepository
from gram.domain.value import (
    CommentId,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
)

from .store import InMemoryStore


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._store.notifications.get(notification_id)

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        self._store.notifications[notification.id] = notification
        return notification

    async def delete_matching(
        self,
        actor_id: UserId,
        recipient_id: UserId,
        type: NotificationType,
        post_id: Optional[PostId] = None,
        comment_id: Optional[CommentId] = None,
    ) -> Optional[Notification]:
        """Delete at most one matching notification."""
        for notification in self._store.notifications.values():
            if (
                notification.actor_id == actor_id
                and notification.recipient_id == recipient_id
                and notification.type == type
                and (post_id is None or notification.post_id == post_id)
                and (comment_id is None or notification.comment_id == comment_id)
            ):
                del self._store.notifications[notification.id]
                return notification
        return None

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark an unread notification as read."""
        notification = self._store.notifications.get(notification_id)
        if (
            notification is None
            or notification.recipient_id != recipient_id
            or notification.is_read
        ):
            return None

        updated = notification.model_copy(update={"is_read": True})
        self._store.notifications[notification_id] = updated
        return updated

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        limit: int,
        cursor: Optional[NotificationId] = None,
    ) -> list[Notification]:
        """List a recipient's notifications, newest first."""
        notifications = sorted(
            (
                n
                for n in self._store.notifications.values()
                if n.recipient_id == recipient_id
            ),
            key=lambda n: (n.created_at, n.id),
            reverse=True,
        )

        if cursor is not None:
            ids = [n.id for n in notifications]
            if cursor not in ids:
                return []
            notifications = notifications[ids.index(cursor) + 1 :]

        return notifications[:limit]

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a recipient's unread notifications."""
        return sum(
            1
            for n in self._store.notifications.values()
            if n.recipient_id == recipient_id and not n.is_read
        )
