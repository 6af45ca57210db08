"""Notification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from gram.application.usecase.base import UseCaseModel
from gram.application.usecase.notification import (
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
    NotificationItem,
)
from gram.domain.service import JWTService
from gram.interface.api.envelope import SuccessEnvelope

router = APIRouter(prefix="/notifications", tags=["notifications"], route_class=DishkaRoute)


class MarkReadBody(UseCaseModel):
    """Body of POST /notifications/read."""

    notification_id: str


def _caller(jwt_service: JWTService, auth_token: str | None) -> str | None:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    return str(user_id) if user_id else None


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    cursor: str | None = Query(default=None),
    limit: int | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List the caller's notifications, newest first.

    Pass the returned nextCursor as cursor to fetch the following page.
    """
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            recipient_id=_caller(jwt_service, auth_token),
            cursor=cursor,
            limit=limit,
        )
    )


@router.get("/unread-count", response_model=GetUnreadCountResponse)
async def get_unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetUnreadCountResponse:
    """Number of unread notifications for the caller."""
    return await get_unread_count_use_case.execute(
        GetUnreadCountRequest(recipient_id=_caller(jwt_service, auth_token))
    )


@router.post("/read", response_model=SuccessEnvelope[NotificationItem | None])
async def mark_notification_read(
    body: MarkReadBody,
    mark_notification_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SuccessEnvelope[NotificationItem | None]:
    """Mark one of the caller's notifications as read.

    data is null when the notification was already read or is not the
    caller's; that is still a success.
    """
    response = await mark_notification_read_use_case.execute(
        MarkNotificationReadRequest(
            notification_id=body.notification_id,
            recipient_id=_caller(jwt_service, auth_token),
        )
    )
    return SuccessEnvelope(data=response.notification)
