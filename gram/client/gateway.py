"""HTTP gateway used by the like coordinator."""

from abc import ABC, abstractmethod
from typing import Optional

import httpx
import logfire

from gram.client.error import LikeRequestError
from gram.config import ClientSettings
from gram.domain.value import LikeState, LikeTargetType
from gram.util.observability import instrument_httpx

NETWORK_ERROR_MESSAGE = "Couldn't reach the server. Please try again."
UNEXPECTED_RESPONSE_MESSAGE = "Something went wrong. Please try again."


class LikeGateway(ABC):
    """Sends the desired like state of a target to the server."""

    @abstractmethod
    async def toggle_like(
        self, target_id: str, target_type: LikeTargetType, final_is_liked: bool
    ) -> LikeState:
        """Ask the server to make the like state equal final_is_liked.

        Returns:
            Authoritative like state from the server

        Raises:
            LikeRequestError: If the request fails for any reason
        """
        pass


class HttpLikeGateway(LikeGateway):
    """LikeGateway speaking the JSON envelope API over httpx."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize gateway.

        Args:
            client: httpx client with base_url and session cookie set
        """
        self.client = client

    @classmethod
    def from_settings(
        cls, settings: ClientSettings, auth_token: Optional[str] = None
    ) -> "HttpLikeGateway":
        """Build a gateway with its own httpx client.

        Args:
            settings: Client settings
            auth_token: Session token sent as the auth_token cookie
        """
        cookies = {"auth_token": auth_token} if auth_token else None
        client = httpx.AsyncClient(
            base_url=settings.api_base_url,
            timeout=settings.request_timeout_seconds,
            cookies=cookies,
        )
        instrument_httpx(client)
        return cls(client)

    async def toggle_like(
        self, target_id: str, target_type: LikeTargetType, final_is_liked: bool
    ) -> LikeState:
        """POST /likes/toggle and unwrap the envelope."""
        payload = {
            "targetId": target_id,
            "targetType": target_type.value,
            "finalIsLiked": final_is_liked,
        }

        try:
            response = await self.client.post("/likes/toggle", json=payload)
        except httpx.HTTPError as e:
            logfire.warn("Like request transport error", error=str(e))
            raise LikeRequestError(NETWORK_ERROR_MESSAGE) from e

        try:
            body = response.json()
        except ValueError as e:
            logfire.warn(
                "Like response is not JSON", status_code=response.status_code
            )
            raise LikeRequestError(
                UNEXPECTED_RESPONSE_MESSAGE, status_code=response.status_code
            ) from e

        if not body.get("success"):
            raise LikeRequestError(
                body.get("message") or UNEXPECTED_RESPONSE_MESSAGE,
                status_code=response.status_code,
            )

        data = body["data"]
        return LikeState(is_liked=data["isLiked"], like_count=data["likeCount"])

    async def aclose(self) -> None:
        """Close the underlying httpx client."""
        await self.client.aclose()
