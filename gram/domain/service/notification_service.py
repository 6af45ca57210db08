"""Notification domain service."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from gram.domain.error import TransientStoreError
from gram.domain.model.notification import Notification, NotificationPage
from gram.domain.repository import NotificationRepository
from gram.domain.value import (
    CommentId,
    LikeId,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
)

from .base import Service


class NotificationService(Service):
    """Domain service for the notification ledger.

    Writes here never open their own transaction: they join whatever unit
    of work the caller (for example LikeService.toggle) is running.
    Store failures surface as TransientStoreError.
    """

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    @contextmanager
    def _store_operation(self, operation: str, **attributes: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logfire.error(
                "Notification store failure",
                operation=operation,
                error=str(e),
                _exc_info=True,
                **attributes,
            )
            raise TransientStoreError(operation) from e

    async def create(
        self,
        actor_id: UserId,
        recipient_id: UserId,
        type: NotificationType,
        post_id: Optional[PostId] = None,
        comment_id: Optional[CommentId] = None,
        like_id: Optional[LikeId] = None,
    ) -> Notification:
        """Record a notification for recipient_id.

        No duplicate check is made: callers only create on a fresh trigger
        (for likes, a like row that was actually inserted).

        Args:
            actor_id: User who caused the notification
            recipient_id: User who receives it
            type: Notification type
            post_id: Related post, if any
            comment_id: Related comment, if any
            like_id: Like that triggered it, if any

        Returns:
            Created notification
        """
        with logfire.span(
            "notification_service.create",
            type=type.value,
            actor_id=str(actor_id),
            recipient_id=str(recipient_id),
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient_id,
                actor_id=actor_id,
                type=type,
                post_id=post_id,
                comment_id=comment_id,
                like_id=like_id,
                is_read=False,
                created_at=datetime.now(),
            )
            with self._store_operation(
                "notification create", recipient_id=str(recipient_id)
            ):
                return await self.notification_repository.save(notification)

    async def delete(
        self,
        actor_id: UserId,
        recipient_id: UserId,
        type: NotificationType,
        post_id: Optional[PostId] = None,
        comment_id: Optional[CommentId] = None,
    ) -> Optional[Notification]:
        """Remove the notification identified by its idempotency tuple.

        Absence is not an error.

        Returns:
            The removed notification, or None if there was none
        """
        with logfire.span(
            "notification_service.delete",
            type=type.value,
            actor_id=str(actor_id),
            recipient_id=str(recipient_id),
        ):
            with self._store_operation(
                "notification delete", recipient_id=str(recipient_id)
            ):
                deleted = await self.notification_repository.delete_matching(
                    actor_id=actor_id,
                    recipient_id=recipient_id,
                    type=type,
                    post_id=post_id,
                    comment_id=comment_id,
                )
            if deleted is None:
                logfire.debug("No notification to delete", type=type.value)
            return deleted

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark a notification as read on behalf of its recipient.

        Only an unread notification owned by recipient_id changes. Calling
        this again, or for someone else's notification, returns None.

        Args:
            notification_id: Notification to mark
            recipient_id: Authenticated user

        Returns:
            The updated notification, or None if nothing changed
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            recipient_id=str(recipient_id),
        ):
            with self._store_operation(
                "notification mark read", notification_id=str(notification_id)
            ):
                updated = await self.notification_repository.mark_read(
                    notification_id, recipient_id
                )
            if updated is None:
                logfire.info(
                    "Notification not marked read",
                    notification_id=str(notification_id),
                )
            return updated

    async def list(
        self,
        recipient_id: UserId,
        limit: int,
        cursor: Optional[NotificationId] = None,
    ) -> NotificationPage:
        """List a recipient's notifications, newest first.

        Args:
            recipient_id: Recipient
            limit: Page size (already clamped by the caller)
            cursor: ID of the last notification of the previous page

        Returns:
            Page with next_cursor set when the page is full
        """
        with self._store_operation(
            "notification list", recipient_id=str(recipient_id)
        ):
            items = await self.notification_repository.find_by_recipient(
                recipient_id, limit=limit, cursor=cursor
            )
        next_cursor = items[-1].id if len(items) == limit and items else None
        return NotificationPage(items=items, next_cursor=next_cursor)

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a recipient's unread notifications."""
        with self._store_operation(
            "notification unread count", recipient_id=str(recipient_id)
        ):
            return await self.notification_repository.count_unread(recipient_id)
