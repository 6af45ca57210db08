"""Unit tests for ClientLikeCoordinator."""

import asyncio

import pytest

from gram.client import (
    ClientLikeCoordinator,
    CoordinatorClosedError,
    CoordinatorState,
    LikeGateway,
    LikeRequestError,
)
from gram.config import ClientSettings
from gram.domain.value import LikeState, LikeTargetType

DELAY = 0.02
TARGET_ID = "6f1c1d8e-9a52-4b57-9a0f-3c1f4a3e2b10"


class ScriptedGateway(LikeGateway):
    """Gateway whose responses are released by the test."""

    def __init__(self) -> None:
        self.calls: list[tuple[bool, asyncio.Future]] = []

    async def toggle_like(self, target_id, target_type, final_is_liked):
        future = asyncio.get_running_loop().create_future()
        self.calls.append((final_is_liked, future))
        return await future

    @property
    def intents(self) -> list[bool]:
        return [intent for intent, _ in self.calls]

    async def wait_for_calls(self, count: int) -> None:
        async def _poll():
            while len(self.calls) < count:
                await asyncio.sleep(DELAY / 4)

        await asyncio.wait_for(_poll(), timeout=1)

    def succeed(self, index: int, is_liked: bool, like_count: int) -> None:
        self.calls[index][1].set_result(
            LikeState(is_liked=is_liked, like_count=like_count)
        )

    def fail(self, index: int, message: str, status_code: int | None = None) -> None:
        self.calls[index][1].set_exception(LikeRequestError(message, status_code))


def make_coordinator(gateway, initial=None, errors=None) -> ClientLikeCoordinator:
    return ClientLikeCoordinator(
        target_id=TARGET_ID,
        target_type=LikeTargetType.POST,
        initial=initial or LikeState(is_liked=False, like_count=10),
        gateway=gateway,
        debounce_seconds=DELAY,
        on_error=errors.append if errors is not None else None,
    )


class TestOptimisticToggle:
    """Tests for the immediate local update."""

    @pytest.mark.asyncio
    async def test_toggle_flips_state_immediately(self):
        """Display changes before any request is made."""
        # Arrange
        gateway = ScriptedGateway()
        coordinator = make_coordinator(gateway)

        # Act
        snapshot = coordinator.toggle()

        # Assert
        assert snapshot == LikeState(is_liked=True, like_count=11)
        assert coordinator.state == CoordinatorState.OPTIMISTIC_PENDING
        assert gateway.calls == []
        coordinator.close()

    @pytest.mark.asyncio
    async def test_unlike_count_never_goes_negative(self):
        """The optimistic count is floored at zero."""
        gateway = ScriptedGateway()
        coordinator = make_coordinator(
            gateway, initial=LikeState(is_liked=True, like_count=0)
        )

        snapshot = coordinator.toggle()

        assert snapshot == LikeState(is_liked=False, like_count=0)
        coordinator.close()


class TestDebouncedSubmission:
    """Tests for coalescing taps into one request."""

    @pytest.mark.asyncio
    async def test_rapid_taps_send_only_final_intent(self):
        """Three quick taps send one request with the final state."""
        # Arrange
        gateway = ScriptedGateway()
        coordinator = make_coordinator(gateway)

        # Act
        for _ in range(3):
            coordinator.toggle()
        await gateway.wait_for_calls(1)
        gateway.succeed(0, True, 11)
        await coordinator.flush()

        # Assert
        assert gateway.intents == [True]
        assert coordinator.snapshot == LikeState(is_liked=True, like_count=11)
        assert coordinator.state == CoordinatorState.IDLE

    @pytest.mark.asyncio
    async def test_server_count_replaces_optimistic_count(self):
        """The authoritative count wins once the response is current."""
        # Arrange
        gateway = ScriptedGateway()
        coordinator = make_coordinator(gateway)

        # Act
        coordinator.toggle()
        await gateway.wait_for_calls(1)
        gateway.succeed(0, True, 42)
        await coordinator.flush()

        # Assert
        assert coordinator.like_count == 42
        assert coordinator.is_liked is True


class TestStaleResponses:
    """Responses for superseded intents must not overwrite newer state."""

    @pytest.mark.asyncio
    async def test_response_after_newer_tap_is_ignored(self):
        """A slow response for an old intent is discarded."""
        # Arrange
        gateway = ScriptedGateway()
        coordinator = make_coordinator(gateway)
        coordinator.toggle()
        await gateway.wait_for_calls(1)

        # Act - user taps again while the first request is in flight
        coordinator.toggle()
        gateway.succeed(0, True, 11)
        await asyncio.sleep(0)

        # Assert
        assert coordinator.is_liked is False
        assert coordinator.like_count == 10
        assert coordinator.state == CoordinatorState.OPTIMISTIC_PENDING

        # Act - the newer intent goes out and is confirmed
        await gateway.wait_for_calls(2)
        gateway.succeed(1, False, 10)
        await coordinator.flush()

        # Assert
        assert gateway.intents == [True, False]
        assert coordinator.snapshot == LikeState(is_liked=False, like_count=10)
        assert coordinator.state == CoordinatorState.IDLE

    @pytest.mark.asyncio
    async def test_out_of_order_responses_keep_latest(self):
        """The newest response wins even if an older one arrives last."""
        # Arrange
        gateway = ScriptedGateway()
        coordinator = make_coordinator(gateway)
        coordinator.toggle()
        await gateway.wait_for_calls(1)
        coordinator.toggle()
        await gateway.wait_for_calls(2)

        # Act
        gateway.succeed(1, False, 10)
        await asyncio.sleep(0)
        gateway.succeed(0, True, 11)
        await coordinator.flush()

        # Assert
        assert coordinator.snapshot == LikeState(is_liked=False, like_count=10)
        assert coordinator.state == CoordinatorState.IDLE


class TestFailures:
    """Tests for request failures."""

    @pytest.mark.asyncio
    async def test_failure_reverts_to_confirmed_state(self):
        """A failed current request rolls the display back and reports."""
        # Arrange
        errors: list[str] = []
        gateway = ScriptedGateway()
        coordinator = make_coordinator(gateway, errors=errors)
        coordinator.toggle()
        await gateway.wait_for_calls(1)

        # Act
        gateway.fail(0, "Please sign in to continue.", 401)
        await coordinator.flush()

        # Assert
        assert coordinator.snapshot == LikeState(is_liked=False, like_count=10)
        assert coordinator.latest_intent is False
        assert coordinator.state == CoordinatorState.IDLE
        assert errors == ["Please sign in to continue."]

    @pytest.mark.asyncio
    async def test_superseded_failure_keeps_newer_state(self):
        """A failure for an old intent only surfaces the error."""
        # Arrange
        errors: list[str] = []
        gateway = ScriptedGateway()
        coordinator = make_coordinator(gateway, errors=errors)
        coordinator.toggle()
        await gateway.wait_for_calls(1)
        coordinator.toggle()
        coordinator.toggle()

        # Act
        gateway.fail(0, "Couldn't reach the server. Please try again.")
        await asyncio.sleep(0)

        # Assert
        assert coordinator.is_liked is True
        assert coordinator.like_count == 11
        assert coordinator.state == CoordinatorState.OPTIMISTIC_PENDING
        assert errors == ["Couldn't reach the server. Please try again."]

        await gateway.wait_for_calls(2)
        gateway.succeed(1, True, 11)
        await coordinator.flush()
        assert coordinator.state == CoordinatorState.IDLE

    @pytest.mark.asyncio
    async def test_revert_uses_last_server_state(self):
        """After a confirmed like, a failed unlike returns to liked."""
        # Arrange
        gateway = ScriptedGateway()
        coordinator = make_coordinator(gateway)
        coordinator.toggle()
        await gateway.wait_for_calls(1)
        gateway.succeed(0, True, 11)
        await coordinator.flush()

        # Act
        coordinator.toggle()
        await gateway.wait_for_calls(2)
        gateway.fail(1, "Something went wrong. Please try again.", 503)
        await coordinator.flush()

        # Assert
        assert coordinator.snapshot == LikeState(is_liked=True, like_count=11)

    @pytest.mark.asyncio
    async def test_older_success_after_revert_is_adopted(self):
        """A success landing after a revert repaints with the server state."""
        # Arrange - like goes out, then an unlike goes out behind it
        gateway = ScriptedGateway()
        coordinator = make_coordinator(gateway)
        coordinator.toggle()
        await gateway.wait_for_calls(1)
        coordinator.toggle()
        await gateway.wait_for_calls(2)

        # Act - the unlike fails, then the like is confirmed
        gateway.fail(1, "Something went wrong. Please try again.", 503)
        await asyncio.sleep(0)
        gateway.succeed(0, True, 11)
        await coordinator.flush()

        # Assert
        assert gateway.intents == [True, False]
        assert coordinator.snapshot == LikeState(is_liked=True, like_count=11)
        assert coordinator.latest_intent is True
        assert coordinator.state == CoordinatorState.IDLE


class TestClose:
    """Tests for teardown."""

    @pytest.mark.asyncio
    async def test_close_cancels_pending_send(self):
        """Closing before the timer fires means no request is made."""
        # Arrange
        gateway = ScriptedGateway()
        coordinator = make_coordinator(gateway)
        coordinator.toggle()

        # Act
        coordinator.close()
        await asyncio.sleep(DELAY * 3)

        # Assert
        assert gateway.calls == []
        assert coordinator.closed is True

    @pytest.mark.asyncio
    async def test_late_response_after_close_is_ignored(self):
        """Responses arriving after close do not touch state."""
        # Arrange
        errors: list[str] = []
        gateway = ScriptedGateway()
        coordinator = make_coordinator(gateway, errors=errors)
        coordinator.toggle()
        await gateway.wait_for_calls(1)

        # Act
        coordinator.close()
        gateway.fail(0, "Something went wrong. Please try again.")
        await coordinator.flush()

        # Assert
        assert coordinator.is_liked is True
        assert errors == []

    @pytest.mark.asyncio
    async def test_toggle_after_close_raises(self):
        """A closed coordinator refuses new taps."""
        coordinator = make_coordinator(ScriptedGateway())
        coordinator.close()

        with pytest.raises(CoordinatorClosedError):
            coordinator.toggle()


class TestFromSettings:
    """Tests for settings-driven construction."""

    @pytest.mark.asyncio
    async def test_uses_configured_delay(self):
        """The debounce delay comes from ClientSettings."""
        # Arrange
        gateway = ScriptedGateway()
        settings = ClientSettings(like_debounce_seconds=DELAY)
        coordinator = ClientLikeCoordinator.from_settings(
            settings,
            TARGET_ID,
            LikeTargetType.COMMENT,
            LikeState(is_liked=False, like_count=0),
            gateway,
        )

        # Act
        coordinator.toggle()
        await gateway.wait_for_calls(1)
        gateway.succeed(0, True, 1)
        await coordinator.flush()

        # Assert
        assert coordinator.snapshot == LikeState(is_liked=True, like_count=1)
