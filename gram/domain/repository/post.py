"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from gram.domain.model.post import Post
from gram.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def increment_like_count(self, post_id: PostId) -> None:
        """Atomically increment like_count by 1.

        Must be a relative update evaluated by the store, never a
        read-modify-write in application code.

        Args:
            post_id: The post's unique identifier
        """
        pass

    @abstractmethod
    async def decrement_like_count(self, post_id: PostId) -> None:
        """Atomically decrement like_count by 1 (never below 0).

        Args:
            post_id: The post's unique identifier
        """
        pass
