"""Application layer DI providers."""

from dishka import Scope, provide

from gram.application.usecase.like import GetLikeStatusUseCase, ToggleLikeUseCase
from gram.application.usecase.notification import (
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkNotificationReadUseCase,
)
from gram.config import NotificationSettings
from gram.domain.repository import UserRepository
from gram.domain.service import LikeService, NotificationService
from gram.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_like_status_use_case(
        self, like_service: LikeService
    ) -> GetLikeStatusUseCase:
        """Provide get like status use case."""
        return GetLikeStatusUseCase(like_service=like_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self,
        notification_service: NotificationService,
        user_repository: UserRepository,
        settings: NotificationSettings,
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(
            notification_service=notification_service,
            user_repository=user_repository,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_use_case(
        self,
        notification_service: NotificationService,
        user_repository: UserRepository,
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(
            notification_service=notification_service,
            user_repository=user_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> GetUnreadCountUseCase:
        """Provide unread count use case."""
        return GetUnreadCountUseCase(notification_service=notification_service)
