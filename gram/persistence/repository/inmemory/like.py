"""In-memory like repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from gram.domain.model.like import Like
from gram.domain.repository.like import LikeRepository
from gram.domain.value import LikeTargetType, UserId

from .store import InMemoryStore


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> Optional[Like]:
        """Find a like by user and target."""
        for like in self._store.likes.values():
            if (
                like.user_id == user_id
                and like.target_type == target_type
                and like.target_id == target_id
            ):
                return like
        return None

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_ids: Sequence[UUID],
    ) -> list[Like]:
        """Find a user's likes on multiple targets (batch query)."""
        if not target_ids:
            return []

        wanted = set(target_ids)
        return [
            like
            for like in self._store.likes.values()
            if like.user_id == user_id
            and like.target_type == target_type
            and like.target_id in wanted
        ]

    async def save_if_absent(self, like: Like) -> Optional[Like]:
        """Insert a like unless an equivalent one exists."""
        existing = await self.find_by_user_and_target(
            like.user_id, like.target_type, like.target_id
        )
        if existing:
            return None

        self._store.likes[like.id] = like
        return like

    async def delete_by_user_and_target(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> Optional[Like]:
        """Delete a like by user and target.

        Notifications referencing the like go with it, like the
        ON DELETE CASCADE foreign key in PostgreSQL.
        """
        like = await self.find_by_user_and_target(user_id, target_type, target_id)
        if like is None:
            return None

        del self._store.likes[like.id]
        self._store.notifications = {
            nid: n
            for nid, n in self._store.notifications.items()
            if n.like_id != like.id
        }
        return like

    async def count_by_target(
        self,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> int:
        """Count likes on a target."""
        return sum(
            1
            for like in self._store.likes.values()
            if like.target_type == target_type and like.target_id == target_id
        )
