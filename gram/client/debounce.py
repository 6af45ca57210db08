"""Trailing-edge debouncer for asyncio."""

import asyncio
from collections.abc import Awaitable, Callable

import logfire


class Debouncer:
    """Run an async callback once a burst of triggers has gone quiet.

    Each trigger() restarts the timer; the callback runs delay seconds
    after the last one. Any feature needing this (like toggles, search
    input) creates its own instance with its own delay.
    """

    def __init__(self, callback: Callable[[], Awaitable[None]], delay: float) -> None:
        """Initialize debouncer.

        Args:
            callback: Coroutine function run when the timer fires
            delay: Quiet period in seconds
        """
        self._callback = callback
        self._delay = delay
        self._handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        """Whether a timer is armed and has not fired yet."""
        return self._handle is not None

    def trigger(self) -> None:
        """(Re)start the timer. Must be called from a running event loop."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._delay, self._fire)

    def cancel(self) -> None:
        """Disarm the timer. Callbacks already running are not interrupted."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    async def drain(self) -> None:
        """Wait until every callback started so far has finished."""
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    def _fire(self) -> None:
        self._handle = None
        task = asyncio.get_running_loop().create_task(self._callback())
        self._tasks.add(task)
        task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logfire.error(
                "Debounced callback failed",
                error=str(error),
                error_type=type(error).__name__,
                _exc_info=error,
            )
