"""Client-side like coordination."""

from gram.client.coordinator import (
    DEFAULT_LIKE_DEBOUNCE_SECONDS,
    ClientLikeCoordinator,
    CoordinatorState,
)
from gram.client.debounce import Debouncer
from gram.client.error import ClientError, CoordinatorClosedError, LikeRequestError
from gram.client.gateway import HttpLikeGateway, LikeGateway

__all__ = [
    "DEFAULT_LIKE_DEBOUNCE_SECONDS",
    "ClientError",
    "ClientLikeCoordinator",
    "CoordinatorClosedError",
    "CoordinatorState",
    "Debouncer",
    "HttpLikeGateway",
    "LikeGateway",
    "LikeRequestError",
]
