"""Typed entity identifiers.

All IDs are UUIDs; NewType keeps a PostId from being passed where a
CommentId is expected. Like targets are plain UUIDs because they may be
either.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)
NotificationId = NewType("NotificationId", UUID)
