"""Shared in-memory store backing the in-memory repositories."""

import asyncio
from typing import Any

from gram.domain.model import Comment, Like, Notification, Post, User
from gram.domain.value import CommentId, LikeId, NotificationId, PostId, UserId

_TABLES = ("users", "posts", "comments", "likes", "notifications")


class InMemoryStore:
    """Tables held as dicts of immutable domain models.

    All in-memory repositories of one container share a store, so a
    transaction can snapshot and restore every table together.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.posts: dict[PostId, Post] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.likes: dict[LikeId, Like] = {}
        self.notifications: dict[NotificationId, Notification] = {}
        self.lock = asyncio.Lock()

    def snapshot(self) -> dict[str, dict[Any, Any]]:
        """Copy every table (rows are frozen, so shallow copies suffice)."""
        return {name: dict(getattr(self, name)) for name in _TABLES}

    def restore(self, snapshot: dict[str, dict[Any, Any]]) -> None:
        """Put every table back to a previous snapshot."""
        for name, rows in snapshot.items():
            setattr(self, name, rows)
