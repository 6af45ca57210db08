"""Like entity.

A like's existence is the liked state: there is at most one like per
user per target (enforced by a database unique constraint).
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from gram.domain.model.common import DomainModel
from gram.domain.value import LikeId, LikeTargetType, UserId


class Like(DomainModel):
    """Like entity.

    Polymorphic reference to the liked target (post or comment).
    """

    id: LikeId
    user_id: UserId
    target_type: LikeTargetType
    target_id: UUID  # PostId or CommentId (both are UUIDs)
    created_at: datetime = Field(default_factory=datetime.now)
