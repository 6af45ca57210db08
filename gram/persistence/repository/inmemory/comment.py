"""In-memory comment repository for testing."""

from typing import Optional

from gram.domain.model.comment import Comment
from gram.domain.repository.comment import CommentRepository
from gram.domain.value import CommentId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._store.comments[comment.id] = comment
        return comment

    async def increment_like_count(self, comment_id: CommentId) -> None:
        """Increment like_count by 1."""
        comment = self._store.comments.get(comment_id)
        if comment:
            self._store.comments[comment_id] = comment.model_copy(
                update={"like_count": comment.like_count + 1}
            )

    async def decrement_like_count(self, comment_id: CommentId) -> None:
        """Decrement like_count by 1 (minimum 0)."""
        comment = self._store.comments.get(comment_id)
        if comment and comment.like_count > 0:
            self._store.comments[comment_id] = comment.model_copy(
                update={"like_count": comment.like_count - 1}
            )
