"""Integration tests for the PostgreSQL like and notification repositories.

Needs a migrated PostgreSQL at DATABASE__URL. Run with:
    pytest -m integration
"""

from datetime import datetime
from uuid import uuid4

import pytest
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from gram.domain.model import Like
from gram.domain.repository import (
    LikeRepository,
    NotificationRepository,
    PostRepository,
)
from gram.domain.service import LikeService
from gram.domain.value import LikeId, LikeTargetType, NotificationType
from gram.persistence.tables import comments_table, posts_table
from tests.factories import make_comment, make_notifications, make_post, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresLikeRepository:
    """Tests for PostgresLikeRepository."""

    @pytest.mark.asyncio
    async def test_save_if_absent_inserts_once(self, integration_env):
        """The unique constraint turns a duplicate insert into None."""
        # Arrange
        like_repo = await integration_env.get(LikeRepository)
        author = await make_user(integration_env)
        liker = await make_user(integration_env)
        post = await make_post(integration_env, author)

        def new_like() -> Like:
            return Like(
                id=LikeId(uuid4()),
                user_id=liker.id,
                target_type=LikeTargetType.POST,
                target_id=post.id,
                created_at=datetime.now(),
            )

        # Act
        first = await like_repo.save_if_absent(new_like())
        second = await like_repo.save_if_absent(new_like())

        # Assert
        assert first is not None
        assert second is None
        assert await like_repo.count_by_target(LikeTargetType.POST, post.id) == 1

    @pytest.mark.asyncio
    async def test_delete_returns_row_once(self, integration_env):
        """Deleting twice only reports the row the first time."""
        # Arrange
        like_service = await integration_env.get(LikeService)
        like_repo = await integration_env.get(LikeRepository)
        author = await make_user(integration_env)
        liker = await make_user(integration_env)
        post = await make_post(integration_env, author)
        await like_service.toggle(post.id, LikeTargetType.POST, liker.id, True)

        # Act
        first = await like_repo.delete_by_user_and_target(
            liker.id, LikeTargetType.POST, post.id
        )
        second = await like_repo.delete_by_user_and_target(
            liker.id, LikeTargetType.POST, post.id
        )

        # Assert
        assert first is not None
        assert second is None

    @pytest.mark.asyncio
    async def test_deleting_post_removes_its_likes(self, integration_env):
        """Likes cascade away with the post they point at."""
        # Arrange
        like_service = await integration_env.get(LikeService)
        like_repo = await integration_env.get(LikeRepository)
        session = await integration_env.get(AsyncSession)
        author = await make_user(integration_env)
        liker = await make_user(integration_env)
        post = await make_post(integration_env, author)
        await like_service.toggle(post.id, LikeTargetType.POST, liker.id, True)

        # Act
        await session.execute(delete(posts_table).where(posts_table.c.id == post.id))

        # Assert
        assert (
            await like_repo.find_by_user_and_target(
                liker.id, LikeTargetType.POST, post.id
            )
            is None
        )
        assert await like_repo.count_by_target(LikeTargetType.POST, post.id) == 0

    @pytest.mark.asyncio
    async def test_deleting_comment_removes_its_likes(self, integration_env):
        """Comment likes cascade the same way."""
        # Arrange
        like_service = await integration_env.get(LikeService)
        like_repo = await integration_env.get(LikeRepository)
        session = await integration_env.get(AsyncSession)
        author = await make_user(integration_env)
        liker = await make_user(integration_env)
        post = await make_post(integration_env, author)
        comment = await make_comment(integration_env, post, author)
        await like_service.toggle(
            comment.id, LikeTargetType.COMMENT, liker.id, True
        )

        # Act
        await session.execute(
            delete(comments_table).where(comments_table.c.id == comment.id)
        )

        # Assert
        assert (
            await like_repo.count_by_target(LikeTargetType.COMMENT, comment.id) == 0
        )


class TestLikeServiceOnPostgres:
    """LikeService against the real schema."""

    @pytest.mark.asyncio
    async def test_toggle_updates_counter_and_notification(self, integration_env):
        """Counter and notification follow the like through a round trip."""
        # Arrange
        like_service = await integration_env.get(LikeService)
        post_repo = await integration_env.get(PostRepository)
        notification_repo = await integration_env.get(NotificationRepository)
        author = await make_user(integration_env)
        liker = await make_user(integration_env)
        post = await make_post(integration_env, author)

        # Act
        liked = await like_service.toggle(
            post.id, LikeTargetType.POST, liker.id, True
        )
        notifications = await notification_repo.find_by_recipient(
            author.id, limit=10
        )

        # Assert
        assert liked.like_count == 1
        assert (await post_repo.find_by_id(post.id)).like_count == 1
        assert [n.type for n in notifications] == [NotificationType.LIKE]

        # Act
        unliked = await like_service.toggle(
            post.id, LikeTargetType.POST, liker.id, False
        )

        # Assert
        assert unliked.like_count == 0
        assert (await post_repo.find_by_id(post.id)).like_count == 0
        assert await notification_repo.count_unread(author.id) == 0


class TestPostgresNotificationRepository:
    """Tests for PostgresNotificationRepository."""

    @pytest.mark.asyncio
    async def test_keyset_pagination(self, integration_env):
        """Pages follow (created_at, id) descending without gaps."""
        # Arrange
        notification_repo = await integration_env.get(NotificationRepository)
        actor = await make_user(integration_env)
        recipient = await make_user(integration_env)
        created = await make_notifications(integration_env, recipient, actor, 3)

        # Act
        first = await notification_repo.find_by_recipient(recipient.id, limit=2)
        second = await notification_repo.find_by_recipient(
            recipient.id, limit=2, cursor=first[-1].id
        )

        # Assert
        assert [n.id for n in first + second] == [n.id for n in reversed(created)]

    @pytest.mark.asyncio
    async def test_mark_read_only_once(self, integration_env):
        """The conditional update only matches unread rows."""
        notification_repo = await integration_env.get(NotificationRepository)
        actor = await make_user(integration_env)
        recipient = await make_user(integration_env)
        [notification] = await make_notifications(
            integration_env, recipient, actor, 1
        )

        first = await notification_repo.mark_read(notification.id, recipient.id)
        second = await notification_repo.mark_read(notification.id, recipient.id)

        assert first is not None and first.is_read
        assert second is None
