"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, func, insert, select, tuple_, update
from sqlalchemy.ext.asyncio import AsyncSession

from gram.domain.model import Notification
from gram.domain.repository import NotificationRepository
from gram.domain.value import (
    CommentId,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
)
from gram.persistence.mappers import notification_to_dict, row_to_notification
from gram.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        stmt = insert(notifications_table).values(
            **notification_to_dict(notification)
        )
        await self.session.execute(stmt)
        await self.session.flush()
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
        conditions = [
            notifications_table.c.actor_id == actor_id,
            notifications_table.c.recipient_id == recipient_id,
            notifications_table.c.type == type.value,
        ]
        if post_id is not None:
            conditions.append(notifications_table.c.post_id == post_id)
        if comment_id is not None:
            conditions.append(notifications_table.c.comment_id == comment_id)

        target = (
            select(notifications_table.c.id)
            .where(and_(*conditions))
            .limit(1)
            .scalar_subquery()
        )
        stmt = (
            delete(notifications_table)
            .where(notifications_table.c.id == target)
            .returning(notifications_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_notification(row._asdict()) if row else None

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark an unread notification as read."""
        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.id == notification_id,
                    notifications_table.c.recipient_id == recipient_id,
                    notifications_table.c.is_read.is_(False),
                )
            )
            .values(is_read=True)
            .returning(notifications_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_notification(row._asdict()) if row else None

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        limit: int,
        cursor: Optional[NotificationId] = None,
    ) -> List[Notification]:
        """List a recipient's notifications, newest first (keyset pagination)."""
        stmt = select(notifications_table).where(
            notifications_table.c.recipient_id == recipient_id
        )

        if cursor is not None:
            anchor = await self.find_by_id(cursor)
            if anchor is None or anchor.recipient_id != recipient_id:
                return []
            stmt = stmt.where(
                tuple_(notifications_table.c.created_at, notifications_table.c.id)
                < tuple_(anchor.created_at, anchor.id)
            )

        stmt = stmt.order_by(
            notifications_table.c.created_at.desc(), notifications_table.c.id.desc()
        ).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a recipient's unread notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(
                and_(
                    notifications_table.c.recipient_id == recipient_id,
                    notifications_table.c.is_read.is_(False),
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
