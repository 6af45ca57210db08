"""List notifications use case."""

from typing import Optional
from uuid import UUID

from gram.application.usecase.base import BaseUseCase, UseCaseModel
from gram.config import NotificationSettings
from gram.domain.error import AuthRequiredError
from gram.domain.repository import UserRepository
from gram.domain.service import NotificationService
from gram.domain.value import NotificationId, UserId

from .common import NotificationItem, to_notification_item


class ListNotificationsRequest(UseCaseModel):
    """List notifications request."""

    recipient_id: Optional[str] = None
    cursor: Optional[str] = None
    limit: Optional[int] = None


class ListNotificationsResponse(UseCaseModel):
    """One page of notifications, newest first."""

    items: list[NotificationItem]
    next_cursor: Optional[str] = None


class ListNotificationsUseCase(BaseUseCase):
    """Use case for paging through the signed-in user's notifications."""

    def __init__(
        self,
        notification_service: NotificationService,
        user_repository: UserRepository,
        settings: NotificationSettings,
    ) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
            user_repository: User repository (actor lookup)
            settings: Page size limits
        """
        self.notification_service = notification_service
        self.user_repository = user_repository
        self.settings = settings

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow.

        Raises:
            AuthRequiredError: If there is no signed-in user
            ValueError: If the cursor is not a valid UUID
        """
        if not request.recipient_id:
            raise AuthRequiredError()

        recipient_id = UserId(UUID(request.recipient_id))
        cursor = NotificationId(UUID(request.cursor)) if request.cursor else None
        limit = self._clamp_limit(request.limit)

        page = await self.notification_service.list(
            recipient_id, limit=limit, cursor=cursor
        )

        # Batch actor lookup (avoid N+1)
        actors = await self.user_repository.find_by_ids(
            [n.actor_id for n in page.items]
        )
        actors_by_id = {actor.id: actor for actor in actors}

        return ListNotificationsResponse(
            items=[
                to_notification_item(n, actors_by_id.get(n.actor_id))
                for n in page.items
            ],
            next_cursor=str(page.next_cursor) if page.next_cursor else None,
        )

    def _clamp_limit(self, limit: Optional[int]) -> int:
        if limit is None:
            return self.settings.default_page_size
        return max(1, min(limit, self.settings.max_page_size))
