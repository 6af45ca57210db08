"""PostgreSQL implementation of Post repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from gram.domain.model import Post
from gram.domain.repository.post import PostRepository
from gram.domain.value import PostId
from gram.persistence.mappers import post_to_dict, row_to_post
from gram.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def save(self, post: Post) -> Post:
        """Save a post (upsert on ID).

        Counters are left alone on update; they belong to the like and
        comment flows.
        """
        post_dict = post_to_dict(post)
        stmt = insert(posts_table).values(**post_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[posts_table.c.id],
            set_={
                "caption": stmt.excluded.caption,
                "image_url": stmt.excluded.image_url,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def increment_like_count(self, post_id: PostId) -> None:
        """Atomically increment like_count by 1."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(like_count=posts_table.c.like_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_like_count(self, post_id: PostId) -> None:
        """Atomically decrement like_count by 1 (minimum 0)."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .where(posts_table.c.like_count > 0)  # Don't go below 0
            .values(like_count=posts_table.c.like_count - 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
