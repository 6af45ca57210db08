"""Get like status use case."""

from typing import Optional
from uuid import UUID

from gram.application.usecase.base import BaseUseCase, UseCaseModel
from gram.domain.service import LikeService
from gram.domain.value import LikeTargetType, UserId


class GetLikeStatusRequest(UseCaseModel):
    """Get like status request."""

    target_id: str
    target_type: LikeTargetType
    user_id: Optional[str] = None


class GetLikeStatusResponse(UseCaseModel):
    """Like state used to seed a client coordinator."""

    is_liked: bool
    like_count: int


class GetLikeStatusUseCase(BaseUseCase):
    """Use case for reading the like state of a target."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: GetLikeStatusRequest) -> GetLikeStatusResponse:
        target_id = UUID(request.target_id)
        user_id = UserId(UUID(request.user_id)) if request.user_id else None

        state = await self.like_service.get_like_state(
            target_id, request.target_type, user_id
        )
        return GetLikeStatusResponse(
            is_liked=state.is_liked, like_count=state.like_count
        )
