"""Domain value objects for Gram.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field

from gram.domain.value.common import ValueObject


class LikeTargetType(str, Enum):
    """Type of entity that can be liked."""

    POST = "POST"
    COMMENT = "COMMENT"


class NotificationType(str, Enum):
    """Kind of event a notification reports.

    Only LIKE and COMMENT_LIKE are produced by the like subsystem; the
    rest are written by features that live outside it.
    """

    LIKE = "LIKE"
    COMMENT = "COMMENT"
    FOLLOW = "FOLLOW"
    FOLLOW_REQUEST = "FOLLOW_REQUEST"
    REPLY = "REPLY"
    COMMENT_LIKE = "COMMENT_LIKE"

    @classmethod
    def for_like_on(cls, target_type: LikeTargetType) -> "NotificationType":
        """Notification type emitted when a target of this type is liked."""
        if target_type == LikeTargetType.POST:
            return cls.LIKE
        return cls.COMMENT_LIKE


class LikeState(ValueObject):
    """Like state of a target as seen by one viewer."""

    is_liked: bool
    like_count: int = Field(ge=0)
