# One pending wake at a time: schedule() replaces, clear() drops.
import asyncio
import logging
from typing import Awaitable, Callable, Optional

log = logging.getLogger(__name__)

class WakeScheduler:
    def __init__(self, callback: Callable[[], Awaitable[object]], *, clock: Callable[[], int]):
        self._callback = callback
        self._clock = clock
        self._handle: Optional[asyncio.TimerHandle] = None
        self._at: Optional[int] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> Optional[int]:
        """Absolute time (ms) of the pending wake, or None."""
        return self._at

    def schedule(self, at_ms: int):
        if self._handle is not None and self._at == at_ms:
            return
        self.clear()
        loop = asyncio.get_running_loop()
        delay = max(0, at_ms - self._clock()) / 1000
        self._handle = loop.call_later(delay, self._fire)
        self._at = at_ms
        log.debug("wake armed for %d (in %.3fs)", at_ms, delay)

    def clear(self):
        if self._handle is not None:
            self._handle.cancel()
            log.debug("wake cleared (was %s)", self._at)
        self._handle = None
        self._at = None

    def _fire(self):
        self._handle = None
        self._at = None
        # runs as its own task so the callback can take the store lock
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def _run(self):
        try:
            await self._callback()
        except Exception:
            # the next mutation re-arms the wake from the table
            log.exception("wake callback failed")

    async def drain(self):
        """Wait for a callback that already fired to finish."""
        if self._task is not None and not self._task.done():
            await self._task
