"""Request-rate ceiling for the speech endpoint."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from .constants import RATE_WINDOW_SECONDS, REQUESTS_PER_MINUTE

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[None]]


class RateLimiter:
    """Spaces out remote calls to stay under requests_per_window per window.

    Consecutive calls are spaced window/requests apart, and after every
    requests_per_window-th call the limiter pauses for a whole window. The
    first call never waits. Create one limiter per synthesis request.
    """

    def __init__(
        self,
        requests_per_window: int = REQUESTS_PER_MINUTE,
        window_seconds: float = RATE_WINDOW_SECONDS,
        sleep: SleepFn | None = None,
    ) -> None:
        if requests_per_window < 1:
            raise ValueError("requests_per_window must be at least 1")
        if window_seconds < 0:
            raise ValueError("window_seconds cannot be negative")

        self.requests_per_window = requests_per_window
        self.window_seconds = window_seconds
        self.interval = window_seconds / requests_per_window
        self.calls = 0
        self._sleep = sleep or asyncio.sleep

    def next_delay(self) -> float:
        """Seconds to wait before the next remote call."""
        if self.calls == 0:
            return 0.0
        if self.calls % self.requests_per_window == 0:
            return self.window_seconds
        return self.interval

    async def acquire(self, sleep: SleepFn | None = None) -> float:
        """Wait out the delay for the next call and count it.

        Args:
            sleep: Optional override for the wait (e.g. a cancellable sleep)

        Returns:
            The delay that was waited, in seconds
        """
        delay = self.next_delay()
        if delay > 0:
            logger.debug(f"Rate limit: waiting {delay:.2f}s before call {self.calls + 1}")
            await (sleep or self._sleep)(delay)
        self.calls += 1
        return delay
