"""In-memory post repository for testing."""

from typing import Optional

from gram.domain.model.post import Post
from gram.domain.repository.post import PostRepository
from gram.domain.value import PostId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._store.posts[post.id] = post
        return post

    async def increment_like_count(self, post_id: PostId) -> None:
        """Increment like_count by 1."""
        post = self._store.posts.get(post_id)
        if post:
            # Posts are immutable, store an updated copy
            self._store.posts[post_id] = post.model_copy(
                update={"like_count": post.like_count + 1}
            )

    async def decrement_like_count(self, post_id: PostId) -> None:
        """Decrement like_count by 1 (minimum 0)."""
        post = self._store.posts.get(post_id)
        if post and post.like_count > 0:
            self._store.posts[post_id] = post.model_copy(
                update={"like_count": post.like_count - 1}
            )
