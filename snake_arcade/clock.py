"""Fixed-interval tick scheduling on the asyncio event loop."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

TickCallback = Callable[[], Awaitable[None]]
Sleep = Callable[[float], Awaitable[None]]


class GameClock:
    """Runs ``callback`` every ``interval`` seconds until stopped.

    At most one ticking task exists: ``start()`` while running does nothing,
    and after ``stop()`` the old task never runs another tick, even if it is
    suspended inside a callback at the time. ``sleep`` is injectable so tests
    can step the clock by hand.
    """

    def __init__(self, interval: float, callback: TickCallback, sleep: Sleep = asyncio.sleep):
        self.interval = interval
        self.callback = callback
        self._sleep = sleep
        self._task: Optional[asyncio.Task] = None
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._task is not None

    def start(self) -> bool:
        if self._task is not None:
            return False
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug("clock started, interval %.3fs", self.interval)
        return True

    def stop(self) -> bool:
        task, self._task = self._task, None
        if task is None:
            return False
        # A tick that stops its own clock just falls out of the loop.
        if task is not asyncio.current_task():
            task.cancel()
        logger.debug("clock stopped after %d ticks", self.ticks)
        return True

    async def _run(self):
        me = asyncio.current_task()
        try:
            while self._task is me:
                await self._sleep(self.interval)
                if self._task is not me:
                    break
                self.ticks += 1
                await self.callback()
        except Exception:
            logger.exception("tick failed, clock stopped")
        finally:
            if self._task is me:
                self._task = None
