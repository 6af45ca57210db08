"""Mark notification read use case."""

from typing import Optional
from uuid import UUID

from gram.application.usecase.base import BaseUseCase, UseCaseModel
from gram.domain.error import AuthRequiredError
from gram.domain.repository import UserRepository
from gram.domain.service import NotificationService
from gram.domain.value import NotificationId, UserId

from .common import NotificationItem, to_notification_item


class MarkNotificationReadRequest(UseCaseModel):
    """Mark notification read request."""

    notification_id: str
    recipient_id: Optional[str] = None


class MarkNotificationReadResponse(UseCaseModel):
    """The notification that was marked, or None if nothing changed."""

    notification: Optional[NotificationItem] = None


class MarkNotificationReadUseCase(BaseUseCase):
    """Use case for marking one of the signed-in user's notifications read."""

    def __init__(
        self,
        notification_service: NotificationService,
        user_repository: UserRepository,
    ) -> None:
        self.notification_service = notification_service
        self.user_repository = user_repository

    async def execute(
        self, request: MarkNotificationReadRequest
    ) -> MarkNotificationReadResponse:
        """Execute mark read flow.

        Marking twice is not an error; the second call reports None.

        Raises:
            AuthRequiredError: If there is no signed-in user
            ValueError: If an ID is not a valid UUID
        """
        if not request.recipient_id:
            raise AuthRequiredError()

        updated = await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.recipient_id)),
        )
        if updated is None:
            return MarkNotificationReadResponse(notification=None)

        actor = await self.user_repository.find_by_id(updated.actor_id)
        return MarkNotificationReadResponse(
            notification=to_notification_item(updated, actor)
        )
