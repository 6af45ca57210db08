"""Get unread notification count use case."""

from typing import Optional
from uuid import UUID

from gram.application.usecase.base import BaseUseCase, UseCaseModel
from gram.domain.error import AuthRequiredError
from gram.domain.service import NotificationService
from gram.domain.value import UserId


class GetUnreadCountRequest(UseCaseModel):
    """Unread count request."""

    recipient_id: Optional[str] = None


class GetUnreadCountResponse(UseCaseModel):
    """Unread count response."""

    count: int


class GetUnreadCountUseCase(BaseUseCase):
    """Use case for the unread badge on the notification icon."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: GetUnreadCountRequest) -> GetUnreadCountResponse:
        if not request.recipient_id:
            raise AuthRequiredError()

        count = await self.notification_service.count_unread(
            UserId(UUID(request.recipient_id))
        )
        return GetUnreadCountResponse(count=count)
