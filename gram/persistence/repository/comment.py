"""PostgreSQL implementation of Comment repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from gram.domain.model import Comment
from gram.domain.repository.comment import CommentRepository
from gram.domain.value import CommentId
from gram.persistence.mappers import comment_to_dict, row_to_comment
from gram.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (upsert on ID)."""
        comment_dict = comment_to_dict(comment)
        stmt = insert(comments_table).values(**comment_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[comments_table.c.id],
            set_={"content": stmt.excluded.content},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def increment_like_count(self, comment_id: CommentId) -> None:
        """Atomically increment like_count by 1."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(like_count=comments_table.c.like_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_like_count(self, comment_id: CommentId) -> None:
        """Atomically decrement like_count by 1 (minimum 0)."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.like_count > 0)
            .values(like_count=comments_table.c.like_count - 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
