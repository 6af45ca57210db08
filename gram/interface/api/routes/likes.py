"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from gram.application.usecase.base import UseCaseModel
from gram.application.usecase.like import (
    GetLikeStatusRequest,
    GetLikeStatusResponse,
    GetLikeStatusUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from gram.domain.error import AuthRequiredError
from gram.domain.service import JWTService
from gram.domain.value import LikeTargetType
from gram.interface.api.envelope import SuccessEnvelope

router = APIRouter(prefix="/likes", tags=["likes"], route_class=DishkaRoute)


class ToggleLikeBody(UseCaseModel):
    """Body of POST /likes/toggle."""

    target_id: str
    target_type: LikeTargetType
    final_is_liked: bool


@router.post("/toggle", response_model=SuccessEnvelope[ToggleLikeResponse])
async def toggle_like(
    body: ToggleLikeBody,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SuccessEnvelope[ToggleLikeResponse]:
    """Set the caller's like on a post or comment to finalIsLiked.

    Requires authentication.

    Args:
        body: Target and desired final like state
        toggle_like_use_case: Toggle like use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Envelope with the final like state and authoritative count
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        raise AuthRequiredError("Missing or invalid session token")

    response = await toggle_like_use_case.execute(
        ToggleLikeRequest(
            target_id=body.target_id,
            target_type=body.target_type,
            final_is_liked=body.final_is_liked,
            user_id=str(user_id),
        )
    )
    return SuccessEnvelope(data=response)


@router.get("/status", response_model=SuccessEnvelope[GetLikeStatusResponse])
async def get_like_status(
    get_like_status_use_case: FromDishka[GetLikeStatusUseCase],
    jwt_service: FromDishka[JWTService],
    target_type: LikeTargetType = Query(alias="targetType"),
    target_id: str = Query(alias="targetId"),
    auth_token: str | None = Cookie(default=None),
) -> SuccessEnvelope[GetLikeStatusResponse]:
    """Read a target's like state for the caller (signed-out callers allowed)."""
    user_id = jwt_service.get_user_id_from_token(auth_token)

    response = await get_like_status_use_case.execute(
        GetLikeStatusRequest(
            target_id=target_id,
            target_type=target_type,
            user_id=str(user_id) if user_id else None,
        )
    )
    return SuccessEnvelope(data=response)
