"""Toggle like use case."""

from typing import Optional
from uuid import UUID

from gram.application.usecase.base import BaseUseCase, UseCaseModel
from gram.domain.service import LikeService
from gram.domain.value import LikeTargetType, UserId


class ToggleLikeRequest(UseCaseModel):
    """Toggle like request."""

    target_id: str  # UUID string
    target_type: LikeTargetType
    final_is_liked: bool
    user_id: Optional[str] = None  # From the session token, None when signed out


class ToggleLikeResponse(UseCaseModel):
    """Toggle like response."""

    is_liked: bool
    like_count: int


class ToggleLikeUseCase(BaseUseCase):
    """Use case for setting a user's like on a post or comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request

        Returns:
            Final like state and authoritative like count

        Raises:
            ValueError: If target_id or user_id is not a valid UUID
            DomainError: Propagated from LikeService.toggle
        """
        target_id = UUID(request.target_id)
        user_id = UserId(UUID(request.user_id)) if request.user_id else None

        state = await self.like_service.toggle(
            target_id=target_id,
            target_type=request.target_type,
            user_id=user_id,
            final_is_liked=request.final_is_liked,
        )

        return ToggleLikeResponse(is_liked=state.is_liked, like_count=state.like_count)
