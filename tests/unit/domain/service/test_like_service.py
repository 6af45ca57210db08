"""Unit tests for LikeService."""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from gram.domain.error import (
    AuthRequiredError,
    SelfActionForbiddenError,
    TargetNotFoundError,
    TransientStoreError,
)
from gram.domain.model import Notification
from gram.domain.repository import (
    CommentRepository,
    LikeRepository,
    NotificationRepository,
    PostRepository,
    TransactionManager,
    UserRepository,
)
from gram.domain.service import LikeService, NotificationService
from gram.domain.value import LikeTargetType, NotificationType, UserId
from gram.persistence.repository.inmemory import (
    InMemoryNotificationRepository,
    InMemoryStore,
)
from tests.factories import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class FailingNotificationRepository(InMemoryNotificationRepository):
    """Notification repository whose inserts hit a dead connection."""

    async def save(self, notification: Notification) -> Notification:
        raise OperationalError("INSERT INTO notifications", {}, Exception("gone"))


class TestToggleLikeOnPost:
    """Tests for toggle on posts."""

    @pytest.mark.asyncio
    async def test_like_then_unlike_keeps_count_and_notification_in_step(
        self, unit_env
    ):
        """Liking creates one notification; unliking removes it again."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        notification_repo = await unit_env.get(NotificationRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await make_user(unit_env)
        liker = await make_user(unit_env)
        post = await make_post(unit_env, author)

        # Act
        liked = await like_service.toggle(post.id, LikeTargetType.POST, liker.id, True)

        # Assert
        assert liked.is_liked is True
        assert liked.like_count == 1
        assert (await post_repo.find_by_id(post.id)).like_count == 1

        page = await notification_repo.find_by_recipient(author.id, limit=10)
        assert len(page) == 1
        notification = page[0]
        assert notification.type == NotificationType.LIKE
        assert notification.actor_id == liker.id
        assert notification.post_id == post.id
        assert notification.comment_id is None
        assert notification.like_id is not None
        assert notification.is_read is False

        # Act
        unliked = await like_service.toggle(
            post.id, LikeTargetType.POST, liker.id, False
        )

        # Assert
        assert unliked.is_liked is False
        assert unliked.like_count == 0
        assert (await post_repo.find_by_id(post.id)).like_count == 0
        assert await notification_repo.find_by_recipient(author.id, limit=10) == []

    @pytest.mark.asyncio
    async def test_repeated_like_is_idempotent(self, unit_env):
        """Sending the same final state twice changes nothing the second time."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        notification_repo = await unit_env.get(NotificationRepository)
        author = await make_user(unit_env)
        liker = await make_user(unit_env)
        post = await make_post(unit_env, author)

        # Act
        first = await like_service.toggle(post.id, LikeTargetType.POST, liker.id, True)
        second = await like_service.toggle(post.id, LikeTargetType.POST, liker.id, True)

        # Assert
        assert first == second
        assert second.like_count == 1
        assert await notification_repo.count_unread(author.id) == 1

    @pytest.mark.asyncio
    async def test_unlike_without_like_is_noop(self, unit_env):
        """Unliking something never liked returns the current state."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        author = await make_user(unit_env)
        viewer = await make_user(unit_env)
        post = await make_post(unit_env, author)

        # Act
        result = await like_service.toggle(
            post.id, LikeTargetType.POST, viewer.id, False
        )

        # Assert
        assert result.is_liked is False
        assert result.like_count == 0
        assert (await post_repo.find_by_id(post.id)).like_count == 0

    @pytest.mark.asyncio
    async def test_count_reflects_other_users_likes(self, unit_env):
        """Returned count is the target's total, not just the caller's like."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        author = await make_user(unit_env)
        others = [await make_user(unit_env) for _ in range(3)]
        liker = await make_user(unit_env)
        post = await make_post(unit_env, author)
        for other in others:
            await like_service.toggle(post.id, LikeTargetType.POST, other.id, True)

        # Act
        result = await like_service.toggle(post.id, LikeTargetType.POST, liker.id, True)

        # Assert
        assert result.like_count == 4

    @pytest.mark.asyncio
    async def test_self_like_on_post_is_forbidden(self, unit_env):
        """Authors cannot like their own post, and nothing is written."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await make_user(unit_env)
        post = await make_post(unit_env, author)

        # Act & Assert
        with pytest.raises(SelfActionForbiddenError):
            await like_service.toggle(post.id, LikeTargetType.POST, author.id, True)

        assert await like_repo.count_by_target(LikeTargetType.POST, post.id) == 0
        assert (await post_repo.find_by_id(post.id)).like_count == 0

    @pytest.mark.asyncio
    async def test_nonexistent_post_raises_not_found(self, unit_env):
        """Liking a missing post raises TargetNotFoundError."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        liker = await make_user(unit_env)

        # Act & Assert
        with pytest.raises(TargetNotFoundError, match="Post not found"):
            await like_service.toggle(uuid4(), LikeTargetType.POST, liker.id, True)

    @pytest.mark.asyncio
    async def test_signed_out_user_raises_auth_required(self, unit_env):
        """A missing user ID is rejected before touching the store."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        author = await make_user(unit_env)
        post = await make_post(unit_env, author)

        # Act & Assert
        with pytest.raises(AuthRequiredError):
            await like_service.toggle(post.id, LikeTargetType.POST, None, True)

    @pytest.mark.asyncio
    async def test_unknown_user_raises_auth_required(self, unit_env):
        """A token for a user that no longer exists is treated as signed out."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        author = await make_user(unit_env)
        post = await make_post(unit_env, author)

        # Act & Assert
        with pytest.raises(AuthRequiredError):
            await like_service.toggle(
                post.id, LikeTargetType.POST, UserId(uuid4()), True
            )


class TestToggleLikeOnComment:
    """Tests for toggle on comments."""

    @pytest.mark.asyncio
    async def test_comment_like_notifies_comment_author(self, unit_env):
        """Comment likes notify the comment author with post and comment IDs."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        notification_repo = await unit_env.get(NotificationRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post_author = await make_user(unit_env)
        commenter = await make_user(unit_env)
        liker = await make_user(unit_env)
        post = await make_post(unit_env, post_author)
        comment = await make_comment(unit_env, post, commenter)

        # Act
        result = await like_service.toggle(
            comment.id, LikeTargetType.COMMENT, liker.id, True
        )

        # Assert
        assert result.like_count == 1
        assert (await comment_repo.find_by_id(comment.id)).like_count == 1

        notifications = await notification_repo.find_by_recipient(
            commenter.id, limit=10
        )
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.COMMENT_LIKE
        assert notifications[0].post_id == post.id
        assert notifications[0].comment_id == comment.id
        assert await notification_repo.count_unread(post_author.id) == 0

    @pytest.mark.asyncio
    async def test_reply_like_carries_parent_post(self, unit_env):
        """Replies resolve to the post they belong to."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        notification_repo = await unit_env.get(NotificationRepository)
        author = await make_user(unit_env)
        replier = await make_user(unit_env)
        liker = await make_user(unit_env)
        post = await make_post(unit_env, author)
        parent = await make_comment(unit_env, post, author)
        reply = await make_comment(unit_env, post, replier, parent=parent)

        # Act
        await like_service.toggle(reply.id, LikeTargetType.COMMENT, liker.id, True)

        # Assert
        notifications = await notification_repo.find_by_recipient(
            replier.id, limit=10
        )
        assert notifications[0].post_id == post.id
        assert notifications[0].comment_id == reply.id

    @pytest.mark.asyncio
    async def test_self_like_on_comment_counts_without_notification(self, unit_env):
        """Authors may like their own comment; no one is notified."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        notification_repo = await unit_env.get(NotificationRepository)
        post_author = await make_user(unit_env)
        commenter = await make_user(unit_env)
        post = await make_post(unit_env, post_author)
        comment = await make_comment(unit_env, post, commenter)

        # Act
        result = await like_service.toggle(
            comment.id, LikeTargetType.COMMENT, commenter.id, True
        )

        # Assert
        assert result.is_liked is True
        assert result.like_count == 1
        assert await notification_repo.count_unread(commenter.id) == 0

    @pytest.mark.asyncio
    async def test_nonexistent_comment_raises_not_found(self, unit_env):
        """Liking a missing comment raises TargetNotFoundError."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        liker = await make_user(unit_env)

        # Act & Assert
        with pytest.raises(TargetNotFoundError, match="Comment not found"):
            await like_service.toggle(uuid4(), LikeTargetType.COMMENT, liker.id, True)


class TestConcurrentToggles:
    """Concurrent toggles must not lose or double count likes."""

    @pytest.mark.asyncio
    async def test_many_users_liking_at_once(self, unit_env):
        """N simultaneous likes from N users give a count of exactly N."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        author = await make_user(unit_env)
        likers = [await make_user(unit_env) for _ in range(20)]
        post = await make_post(unit_env, author)

        # Act
        await asyncio.gather(
            *(
                like_service.toggle(post.id, LikeTargetType.POST, liker.id, True)
                for liker in likers
            )
        )

        # Assert
        assert (await post_repo.find_by_id(post.id)).like_count == 20
        assert await notification_repo.count_unread(author.id) == 20

    @pytest.mark.asyncio
    async def test_same_user_liking_at_once_counts_once(self, unit_env):
        """Duplicate concurrent likes from one user record a single like."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await make_user(unit_env)
        liker = await make_user(unit_env)
        post = await make_post(unit_env, author)

        # Act
        results = await asyncio.gather(
            *(
                like_service.toggle(post.id, LikeTargetType.POST, liker.id, True)
                for _ in range(5)
            )
        )

        # Assert
        assert all(r.like_count == 1 for r in results)
        assert await like_repo.count_by_target(LikeTargetType.POST, post.id) == 1
        assert (await post_repo.find_by_id(post.id)).like_count == 1


class TestToggleRollback:
    """A failure part-way through leaves no partial writes."""

    async def _service_with_failing_notifications(self, unit_env) -> LikeService:
        store = await unit_env.get(InMemoryStore)
        return LikeService(
            like_repository=await unit_env.get(LikeRepository),
            post_repository=await unit_env.get(PostRepository),
            comment_repository=await unit_env.get(CommentRepository),
            user_repository=await unit_env.get(UserRepository),
            notification_service=NotificationService(
                FailingNotificationRepository(store)
            ),
            transaction_manager=await unit_env.get(TransactionManager),
        )

    @pytest.mark.asyncio
    async def test_store_failure_rolls_back_like_and_counter(self, unit_env):
        """If the notification insert fails, the like and counter are undone."""
        # Arrange
        like_service = await self._service_with_failing_notifications(unit_env)
        like_repo = await unit_env.get(LikeRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await make_user(unit_env)
        liker = await make_user(unit_env)
        post = await make_post(unit_env, author)

        # Act & Assert
        with pytest.raises(TransientStoreError):
            await like_service.toggle(post.id, LikeTargetType.POST, liker.id, True)

        assert (
            await like_repo.find_by_user_and_target(
                liker.id, LikeTargetType.POST, post.id
            )
            is None
        )
        assert (await post_repo.find_by_id(post.id)).like_count == 0

    @pytest.mark.asyncio
    async def test_service_recovers_after_failure(self, unit_env):
        """A failed toggle does not block later toggles."""
        # Arrange
        failing_service = await self._service_with_failing_notifications(unit_env)
        like_service = await unit_env.get(LikeService)
        author = await make_user(unit_env)
        liker = await make_user(unit_env)
        post = await make_post(unit_env, author)

        with pytest.raises(TransientStoreError):
            await failing_service.toggle(post.id, LikeTargetType.POST, liker.id, True)

        # Act
        result = await like_service.toggle(post.id, LikeTargetType.POST, liker.id, True)

        # Assert
        assert result.like_count == 1


class TestGetLikeState:
    """Tests for get_like_state and get_user_likes_for_targets."""

    @pytest.mark.asyncio
    async def test_state_for_liker_and_signed_out_viewer(self, unit_env):
        """The liker sees is_liked; a signed-out viewer sees only the count."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        author = await make_user(unit_env)
        liker = await make_user(unit_env)
        post = await make_post(unit_env, author)
        await like_service.toggle(post.id, LikeTargetType.POST, liker.id, True)

        # Act
        as_liker = await like_service.get_like_state(
            post.id, LikeTargetType.POST, liker.id
        )
        as_guest = await like_service.get_like_state(post.id, LikeTargetType.POST)

        # Assert
        assert as_liker.is_liked is True
        assert as_liker.like_count == 1
        assert as_guest.is_liked is False
        assert as_guest.like_count == 1

    @pytest.mark.asyncio
    async def test_state_for_missing_target_raises(self, unit_env):
        """Unknown targets raise TargetNotFoundError."""
        like_service = await unit_env.get(LikeService)

        with pytest.raises(TargetNotFoundError):
            await like_service.get_like_state(uuid4(), LikeTargetType.COMMENT)

    @pytest.mark.asyncio
    async def test_user_likes_for_targets(self, unit_env):
        """Batch lookup maps every requested target to a boolean."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        author = await make_user(unit_env)
        liker = await make_user(unit_env)
        liked_post = await make_post(unit_env, author)
        other_post = await make_post(unit_env, author)
        await like_service.toggle(liked_post.id, LikeTargetType.POST, liker.id, True)

        # Act
        result = await like_service.get_user_likes_for_targets(
            liker.id, LikeTargetType.POST, [liked_post.id, other_post.id]
        )

        # Assert
        assert result == {liked_post.id: True, other_post.id: False}

    @pytest.mark.asyncio
    async def test_user_likes_for_no_targets(self, unit_env):
        """An empty request gives an empty mapping."""
        like_service = await unit_env.get(LikeService)

        result = await like_service.get_user_likes_for_targets(
            UserId(uuid4()), LikeTargetType.POST, []
        )

        assert result == {}
