"""Like domain service."""

from datetime import datetime
from typing import NamedTuple, Optional
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from gram.domain.error import (
    AuthRequiredError,
    SelfActionForbiddenError,
    TargetNotFoundError,
    TransientStoreError,
)
from gram.domain.model.like import Like
from gram.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    TransactionManager,
    UserRepository,
)
from gram.domain.value import (
    CommentId,
    LikeId,
    LikeState,
    LikeTargetType,
    NotificationType,
    PostId,
    UserId,
)

from .base import Service
from .notification_service import NotificationService


class _Target(NamedTuple):
    owner_id: UserId
    post_id: PostId
    comment_id: Optional[CommentId]


class LikeService(Service):
    """Domain service for liking posts and comments.

    Keeps three things in agreement inside one transaction: the like
    record, the target's like_count, and the owner's notification.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        notification_service: NotificationService,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            post_repository: Post repository
            comment_repository: Comment repository
            user_repository: User repository
            notification_service: Notification domain service
            transaction_manager: Unit-of-work boundary
        """
        self.like_repository = like_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.user_repository = user_repository
        self.notification_service = notification_service
        self.transaction_manager = transaction_manager

    async def toggle(
        self,
        target_id: UUID,
        target_type: LikeTargetType,
        user_id: Optional[UserId],
        final_is_liked: bool,
    ) -> LikeState:
        """Bring the user's like on a target to final_is_liked.

        The request carries the desired final state, not a flip, so
        repeating it is harmless. Counter and notification changes only
        happen when this call actually inserted or deleted the like row.

        Args:
            target_id: Post or comment ID
            target_type: Kind of target
            user_id: Authenticated user, None when signed out
            final_is_liked: Desired like state

        Returns:
            The requested state and a fresh count of the target's likes

        Raises:
            AuthRequiredError: If there is no authenticated, existing user
            TargetNotFoundError: If the target does not exist
            SelfActionForbiddenError: If the user likes their own post
            TransientStoreError: If the store fails; nothing is applied
        """
        with logfire.span(
            "like_service.toggle",
            target_id=str(target_id),
            target_type=target_type.value,
            user_id=str(user_id),
            final_is_liked=final_is_liked,
        ):
            if user_id is None:
                raise AuthRequiredError()

            try:
                async with self.transaction_manager.transaction():
                    if await self.user_repository.find_by_id(user_id) is None:
                        raise AuthRequiredError(f"User {user_id} does not exist")

                    target = await self._resolve_target(target_type, target_id)

                    # Comment self-likes are allowed but never notify
                    if target_type == LikeTargetType.POST and target.owner_id == user_id:
                        logfire.warn(
                            "Self-like attempt on post",
                            post_id=str(target_id),
                            user_id=str(user_id),
                        )
                        raise SelfActionForbiddenError(
                            "post", str(target_id), str(user_id)
                        )

                    existing = await self.like_repository.find_by_user_and_target(
                        user_id, target_type, target_id
                    )

                    if final_is_liked and existing is None:
                        await self._add_like(target, target_type, target_id, user_id)
                    elif not final_is_liked and existing is not None:
                        await self._remove_like(target, target_type, target_id, user_id)
                    else:
                        logfire.info(
                            "Like already in requested state",
                            target_id=str(target_id),
                            user_id=str(user_id),
                            is_liked=final_is_liked,
                        )

                    like_count = await self.like_repository.count_by_target(
                        target_type, target_id
                    )
            except SQLAlchemyError as e:
                logfire.error(
                    "Like toggle failed",
                    target_id=str(target_id),
                    target_type=target_type.value,
                    user_id=str(user_id),
                    error=str(e),
                    _exc_info=True,
                )
                raise TransientStoreError("like toggle") from e

            return LikeState(is_liked=final_is_liked, like_count=like_count)

    async def get_like_state(
        self,
        target_id: UUID,
        target_type: LikeTargetType,
        user_id: Optional[UserId] = None,
    ) -> LikeState:
        """Current like state of a target as seen by user_id.

        Signed-out viewers (user_id None) always see is_liked False.

        Raises:
            TargetNotFoundError: If the target does not exist
            TransientStoreError: If the store fails
        """
        try:
            await self._resolve_target(target_type, target_id)
            existing = None
            if user_id is not None:
                existing = await self.like_repository.find_by_user_and_target(
                    user_id, target_type, target_id
                )
            like_count = await self.like_repository.count_by_target(
                target_type, target_id
            )
        except SQLAlchemyError as e:
            logfire.error(
                "Like state lookup failed",
                target_id=str(target_id),
                error=str(e),
                _exc_info=True,
            )
            raise TransientStoreError("like state lookup") from e

        return LikeState(is_liked=existing is not None, like_count=like_count)

    async def get_user_likes_for_targets(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_ids: list[UUID],
    ) -> dict[UUID, bool]:
        """Check which targets a user has liked.

        Args:
            user_id: User ID
            target_type: Kind of the targets
            target_ids: Targets to check

        Returns:
            Dictionary mapping target ID to whether the user likes it
        """
        if not target_ids:
            return {}

        # Batch query to fetch all likes at once (avoid N+1)
        likes = await self.like_repository.find_by_user_and_targets(
            user_id=user_id,
            target_type=target_type,
            target_ids=target_ids,
        )
        liked_ids = {like.target_id for like in likes}
        return {tid: tid in liked_ids for tid in target_ids}

    async def _resolve_target(
        self, target_type: LikeTargetType, target_id: UUID
    ) -> _Target:
        if target_type == LikeTargetType.POST:
            post = await self.post_repository.find_by_id(PostId(target_id))
            if post is None:
                logfire.warn("Like on non-existent post", post_id=str(target_id))
                raise TargetNotFoundError("Post", str(target_id))
            return _Target(owner_id=post.author_id, post_id=post.id, comment_id=None)

        comment = await self.comment_repository.find_by_id(CommentId(target_id))
        if comment is None:
            logfire.warn("Like on non-existent comment", comment_id=str(target_id))
            raise TargetNotFoundError("Comment", str(target_id))
        return _Target(
            owner_id=comment.author_id, post_id=comment.post_id, comment_id=comment.id
        )

    async def _add_like(
        self,
        target: _Target,
        target_type: LikeTargetType,
        target_id: UUID,
        user_id: UserId,
    ) -> None:
        like = Like(
            id=LikeId(uuid4()),
            user_id=user_id,
            target_type=target_type,
            target_id=target_id,
            created_at=datetime.now(),
        )
        saved = await self.like_repository.save_if_absent(like)
        if saved is None:
            # A concurrent request from the same user got there first
            logfire.info(
                "Like already recorded", target_id=str(target_id), user_id=str(user_id)
            )
            return

        await self._increment(target_type, target_id)

        if target.owner_id != user_id:
            await self.notification_service.create(
                actor_id=user_id,
                recipient_id=target.owner_id,
                type=NotificationType.for_like_on(target_type),
                post_id=target.post_id,
                comment_id=target.comment_id,
                like_id=saved.id,
            )

        logfire.info(
            "Like added",
            target_id=str(target_id),
            target_type=target_type.value,
            user_id=str(user_id),
        )

    async def _remove_like(
        self,
        target: _Target,
        target_type: LikeTargetType,
        target_id: UUID,
        user_id: UserId,
    ) -> None:
        deleted = await self.like_repository.delete_by_user_and_target(
            user_id, target_type, target_id
        )
        if deleted is None:
            logfire.info(
                "Like already removed", target_id=str(target_id), user_id=str(user_id)
            )
            return

        await self._decrement(target_type, target_id)

        if target.owner_id != user_id:
            await self.notification_service.delete(
                actor_id=user_id,
                recipient_id=target.owner_id,
                type=NotificationType.for_like_on(target_type),
                post_id=target.post_id,
                comment_id=target.comment_id,
            )

        logfire.info(
            "Like removed",
            target_id=str(target_id),
            target_type=target_type.value,
            user_id=str(user_id),
        )

    async def _increment(self, target_type: LikeTargetType, target_id: UUID) -> None:
        if target_type == LikeTargetType.POST:
            await self.post_repository.increment_like_count(PostId(target_id))
        else:
            await self.comment_repository.increment_like_count(CommentId(target_id))

    async def _decrement(self, target_type: LikeTargetType, target_id: UUID) -> None:
        if target_type == LikeTargetType.POST:
            await self.post_repository.decrement_like_count(PostId(target_id))
        else:
            await self.comment_repository.decrement_like_count(CommentId(target_id))
