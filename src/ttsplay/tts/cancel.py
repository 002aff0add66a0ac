"""Cooperative cancellation for long-running synthesis requests."""

import asyncio

from .errors import SynthesisCancelledError
from .ratelimit import SleepFn


class CancellationToken:
    """Flag a caller sets to stop a synthesis between chunks.

    Example:
        token = CancellationToken()
        task = asyncio.create_task(session.synthesize(text, config, cancel_token=token))
        ...
        token.cancel()  # user navigated away
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise SynthesisCancelledError("Synthesis was cancelled")

    async def sleep(self, delay: float, sleep: SleepFn | None = None) -> None:
        """Wait for delay seconds, waking early if cancelled.

        Args:
            delay: Seconds to wait
            sleep: Timer to race against cancellation (asyncio.sleep if None)

        Raises:
            SynthesisCancelledError: If cancelled before or during the wait
        """
        self.raise_if_cancelled()

        timer = asyncio.ensure_future((sleep or asyncio.sleep)(delay))
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            await asyncio.wait({timer, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (timer, waiter):
                if not task.done():
                    task.cancel()

        self.raise_if_cancelled()
        # Surface errors raised by the timer itself
        timer.result()
