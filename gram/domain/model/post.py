"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from gram.domain.model.common import DomainModel
from gram.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    like_count is a denormalized counter of the likes on this post. It is
    only ever changed through relative increments by the like service.
    """

    id: PostId
    author_id: UserId
    caption: Optional[str] = Field(default=None, max_length=2200)
    image_url: Optional[str] = None
    like_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
