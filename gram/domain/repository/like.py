"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from gram.domain.model.like import Like
from gram.domain.value import LikeTargetType, UserId


class LikeRepository(ABC):
    """Repository for Like entity.

    Write operations report whether they actually changed a row so that
    callers can gate counter and notification side effects on it.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> Optional[Like]:
        """Find a user's like on a specific target.

        Args:
            user_id: The user's ID
            target_type: Type of target (post or comment)
            target_id: ID of the target

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_ids: Sequence[UUID],
    ) -> List[Like]:
        """Find a user's likes on multiple targets (batch query).

        Args:
            user_id: The user's ID
            target_type: Type of targets
            target_ids: IDs of the targets to check

        Returns:
            List of likes by the user on the given targets
        """
        pass

    @abstractmethod
    async def save_if_absent(self, like: Like) -> Optional[Like]:
        """Insert a like unless the user already likes the target.

        Args:
            like: The like to insert

        Returns:
            The inserted like, or None if an equivalent like already existed
        """
        pass

    @abstractmethod
    async def delete_by_user_and_target(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> Optional[Like]:
        """Delete a user's like on a target.

        Args:
            user_id: The user's ID
            target_type: Type of target
            target_id: ID of the target

        Returns:
            The deleted like, or None if there was nothing to delete
        """
        pass

    @abstractmethod
    async def count_by_target(
        self,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> int:
        """Count likes on a target from the like records themselves.

        Args:
            target_type: Type of target
            target_id: ID of the target

        Returns:
            Number of likes
        """
        pass
