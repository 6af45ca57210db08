"""Optimistic like button state for one target.

The coordinator flips the displayed state immediately on every tap,
coalesces bursts of taps with a debouncer and sends only the final
desired state. Responses that belong to an older burst are ignored so a
slow network can never overwrite what the user sees now.
"""

from collections.abc import Callable
from enum import Enum
from typing import Optional

import logfire

from gram.client.debounce import Debouncer
from gram.client.error import CoordinatorClosedError, LikeRequestError
from gram.client.gateway import LikeGateway
from gram.config import ClientSettings
from gram.domain.value import LikeState, LikeTargetType

DEFAULT_LIKE_DEBOUNCE_SECONDS = 0.3


class CoordinatorState(str, Enum):
    """Whether local changes are waiting for the server."""

    IDLE = "IDLE"
    OPTIMISTIC_PENDING = "OPTIMISTIC_PENDING"


class ClientLikeCoordinator:
    """Per-target optimistic like state with debounced submission.

    Every toggle() bumps a generation number. A request remembers the
    generation it was sent for, and its response is applied only while
    that generation is still the latest one.
    """

    def __init__(
        self,
        target_id: str,
        target_type: LikeTargetType,
        initial: LikeState,
        gateway: LikeGateway,
        debounce_seconds: float = DEFAULT_LIKE_DEBOUNCE_SECONDS,
        on_error: Optional[Callable[[str], None]] = None,
    ) -> None:
        """Initialize coordinator.

        Args:
            target_id: ID of the post or comment
            target_type: POST or COMMENT
            initial: Server state the button was rendered with
            gateway: Transport used to reach the server
            debounce_seconds: Quiet period before the final state is sent
            on_error: Called with a user-facing message when a request fails
        """
        self.target_id = target_id
        self.target_type = target_type
        self.gateway = gateway
        self.on_error = on_error

        self._display = initial
        self._confirmed = initial
        self._confirmed_generation = 0
        self._latest_intent = initial.is_liked
        self._generation = 0
        self._state = CoordinatorState.IDLE
        self._closed = False
        self._debouncer = Debouncer(self._send, debounce_seconds)

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        target_id: str,
        target_type: LikeTargetType,
        initial: LikeState,
        gateway: LikeGateway,
        on_error: Optional[Callable[[str], None]] = None,
    ) -> "ClientLikeCoordinator":
        """Build a coordinator using the configured debounce delay."""
        return cls(
            target_id,
            target_type,
            initial,
            gateway,
            debounce_seconds=settings.like_debounce_seconds,
            on_error=on_error,
        )

    @property
    def state(self) -> CoordinatorState:
        return self._state

    @property
    def is_liked(self) -> bool:
        return self._display.is_liked

    @property
    def like_count(self) -> int:
        return self._display.like_count

    @property
    def snapshot(self) -> LikeState:
        """What the button should display right now."""
        return self._display

    @property
    def latest_intent(self) -> bool:
        return self._latest_intent

    @property
    def closed(self) -> bool:
        return self._closed

    def toggle(self) -> LikeState:
        """Flip the displayed state and (re)arm the debounce timer.

        Must be called from a running event loop.

        Returns:
            The new displayed state

        Raises:
            CoordinatorClosedError: If close() was called
        """
        if self._closed:
            raise CoordinatorClosedError(
                f"Coordinator for {self.target_type.value} {self.target_id} is closed"
            )

        is_liked = not self._display.is_liked
        delta = 1 if is_liked else -1
        self._display = LikeState(
            is_liked=is_liked,
            like_count=max(0, self._display.like_count + delta),
        )
        self._latest_intent = is_liked
        self._generation += 1
        self._state = CoordinatorState.OPTIMISTIC_PENDING
        self._debouncer.trigger()
        return self._display

    def close(self) -> None:
        """Stop the timer and ignore any response still in flight."""
        self._closed = True
        self._debouncer.cancel()

    async def flush(self) -> None:
        """Wait for every request sent so far to settle."""
        await self._debouncer.drain()

    async def _send(self) -> None:
        if self._closed:
            return

        intent = self._latest_intent
        generation = self._generation

        with logfire.span(
            "like_coordinator.send",
            target_id=self.target_id,
            target_type=self.target_type.value,
            final_is_liked=intent,
            generation=generation,
        ):
            try:
                result = await self.gateway.toggle_like(
                    self.target_id, self.target_type, intent
                )
            except LikeRequestError as e:
                self._handle_failure(generation, e)
                return

            self._handle_success(generation, intent, result)

    def _handle_success(self, generation: int, intent: bool, result: LikeState) -> None:
        if self._closed:
            return

        # Track the newest server answer even when it is not displayed
        if generation > self._confirmed_generation:
            self._confirmed = result
            self._confirmed_generation = generation

        # Nothing local is pending, so the display follows the server
        if self._state == CoordinatorState.IDLE:
            self._display = self._confirmed
            self._latest_intent = self._confirmed.is_liked
            return

        if generation != self._generation or result.is_liked != intent:
            logfire.debug(
                "Discarding stale like response",
                target_id=self.target_id,
                generation=generation,
                latest_generation=self._generation,
            )
            return

        self._display = result
        self._state = CoordinatorState.IDLE

    def _handle_failure(self, generation: int, error: LikeRequestError) -> None:
        if self._closed:
            return

        superseded = generation != self._generation
        logfire.warn(
            "Like request failed",
            target_id=self.target_id,
            target_type=self.target_type.value,
            status_code=error.status_code,
            superseded=superseded,
        )

        if not superseded:
            self._display = self._confirmed
            self._latest_intent = self._confirmed.is_liked
            self._state = CoordinatorState.IDLE

        if self.on_error is not None:
            self.on_error(error.message)
