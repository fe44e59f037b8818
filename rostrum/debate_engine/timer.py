"""Countdown timer driving per-phase time limits."""

import asyncio
import logging

from .types import CompleteCallback, TickCallback

logger = logging.getLogger(__name__)


class PhaseTimer:
    """Cooperative one-second countdown with tick and completion notifications.

    A single asyncio task performs the countdown, so `on_tick` and
    `on_complete` never run concurrently with themselves. `pause()` and
    `stop()` cancel the pending tick before returning.
    """

    def __init__(
        self,
        initial_seconds: int,
        on_tick: TickCallback | None = None,
        on_complete: CompleteCallback | None = None,
        interval: float = 1.0,
    ):
        if initial_seconds < 0:
            raise ValueError("initial_seconds must be non-negative")
        self.initial_seconds = initial_seconds
        self.seconds_remaining = initial_seconds
        self.on_tick = on_tick
        self.on_complete = on_complete
        self.interval = interval
        self._task: asyncio.Task[None] | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def progress(self) -> float:
        if self.initial_seconds == 0:
            return 0.0
        return self.seconds_remaining / self.initial_seconds

    @property
    def minutes(self) -> int:
        return self.seconds_remaining // 60

    @property
    def remaining_seconds(self) -> int:
        return self.seconds_remaining % 60

    @property
    def formatted_time(self) -> str:
        return f"{self.minutes}:{self.remaining_seconds:02d}"

    def start(self) -> None:
        """Begin counting down. No-op while running or once expired."""
        if self.is_running or self.seconds_remaining <= 0:
            return
        logger.debug(f"Timer started with {self.seconds_remaining}s remaining")
        self._task = asyncio.get_running_loop().create_task(self._run())

    def pause(self) -> None:
        """Stop counting down, keeping the remaining time."""
        self._cancel()
        logger.debug(f"Timer paused at {self.seconds_remaining}s")

    def stop(self) -> None:
        """Stop counting down and reset to the initial duration."""
        self.reset()

    def reset(self, new_seconds: int | None = None) -> None:
        """Stop and reset, optionally to a new initial duration."""
        self._cancel()
        if new_seconds is not None:
            if new_seconds < 0:
                raise ValueError("new_seconds must be non-negative")
            self.initial_seconds = new_seconds
        self.seconds_remaining = self.initial_seconds
        logger.debug(f"Timer reset to {self.seconds_remaining}s")

    async def tick(self) -> None:
        """Advance the countdown by one second and fire notifications."""
        if self.seconds_remaining <= 0:
            return
        self.seconds_remaining -= 1
        if self.on_tick is not None:
            await self.on_tick(self.seconds_remaining)
        if self.seconds_remaining == 0 and self.on_complete is not None:
            await self.on_complete()

    async def wait(self) -> None:
        """Wait for the running countdown (if any) to finish or be cancelled."""
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    async def _run(self) -> None:
        while self.seconds_remaining > 0 and self._task is asyncio.current_task():
            await asyncio.sleep(self.interval)
            await self.tick()

    def _cancel(self) -> None:
        task = self._task
        self._task = None
        if task is None or task.done():
            return
        if task is asyncio.current_task():
            # Called from a notification inside the countdown; the loop exits
            # once it sees it no longer owns self._task.
            return
        task.cancel()
