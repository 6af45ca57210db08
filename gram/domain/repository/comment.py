"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from gram.domain.model.comment import Comment
from gram.domain.value import CommentId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def increment_like_count(self, comment_id: CommentId) -> None:
        """Atomically increment like_count by 1.

        Args:
            comment_id: The comment's unique identifier
        """
        pass

    @abstractmethod
    async def decrement_like_count(self, comment_id: CommentId) -> None:
        """Atomically decrement like_count by 1 (never below 0).

        Args:
            comment_id: The comment's unique identifier
        """
        pass
