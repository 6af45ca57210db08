"""Comment entity.

Comments belong to a post and may reply to another comment on the same
post (threaded replies).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from gram.domain.model.common import DomainModel
from gram.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through parent_id (None for top-level comments).
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=2200)
    parent_id: Optional[CommentId] = None
    like_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
