"""Domain layer DI providers."""

from dishka import Scope, provide

from gram.config import AuthSettings
from gram.domain.repository import (
    CommentRepository,
    LikeRepository,
    NotificationRepository,
    PostRepository,
    TransactionManager,
    UserRepository,
)
from gram.domain.service import JWTService, LikeService, NotificationService
from gram.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        notification_service: NotificationService,
        transaction_manager: TransactionManager,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
            user_repository=user_repository,
            notification_service=notification_service,
            transaction_manager=transaction_manager,
        )
