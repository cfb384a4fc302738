import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Single-slot trailing-edge debounce.

    schedule() always cancels and replaces the pending call, so only the
    last callback scheduled within `delay` seconds of quiet actually runs.
    Must be used from inside a running event loop.
    """

    def __init__(self, delay: float):
        self.delay = delay
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def schedule(self, callback: Callable[[], None]) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(callback))

    async def _run(self, callback: Callable[[], None]) -> None:
        await asyncio.sleep(self.delay)
        callback()

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def flush(self) -> None:
        """Wait until no call is pending (follows re-schedules made meanwhile)."""
        while self._task is not None:
            task = self._task
            await asyncio.wait({task})
            if self._task is task:
                self._task = None
            if not task.cancelled():
                task.result()
