"""User entity.

Accounts are created by the external auth provider; this service only
needs the identity and display fields used by likes and notifications.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from gram.domain.model.common import DomainModel
from gram.domain.value import UserId


class User(DomainModel):
    """User entity."""

    id: UserId
    handle: str = Field(min_length=1, max_length=255)
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
