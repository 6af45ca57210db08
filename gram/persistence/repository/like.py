"""PostgreSQL implementation of Like repository."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from gram.domain.model import Like
from gram.domain.repository import LikeRepository
from gram.domain.value import LikeTargetType, UserId
from gram.persistence.mappers import like_to_dict, row_to_like
from gram.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository.

    Inserts and deletes use RETURNING so the caller learns whether this
    statement, and not a concurrent one, changed the row.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _matches(self, user_id: UserId, target_type: LikeTargetType, target_id: UUID):
        return and_(
            likes_table.c.user_id == user_id,
            likes_table.c.target_type == target_type.value,
            likes_table.c.target_id == target_id,
        )

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> Optional[Like]:
        """Find a user's like on a specific target."""
        stmt = select(likes_table).where(self._matches(user_id, target_type, target_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_ids: Sequence[UUID],
    ) -> List[Like]:
        """Find a user's likes on multiple targets (batch query)."""
        if not target_ids:
            return []

        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.target_type == target_type.value,
                likes_table.c.target_id.in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def save_if_absent(self, like: Like) -> Optional[Like]:
        """Insert a like, doing nothing if the unique constraint is hit."""
        stmt = (
            insert(likes_table)
            .values(**like_to_dict(like))
            .on_conflict_do_nothing(constraint="unique_like")
            .returning(likes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_like(row._asdict()) if row else None

    async def delete_by_user_and_target(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> Optional[Like]:
        """Delete a user's like on a target."""
        stmt = (
            delete(likes_table)
            .where(self._matches(user_id, target_type, target_id))
            .returning(likes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_like(row._asdict()) if row else None

    async def count_by_target(
        self,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> int:
        """Count likes on a target."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(
                and_(
                    likes_table.c.target_type == target_type.value,
                    likes_table.c.target_id == target_id,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
