import asyncio
import random
import sys
from collections import deque
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


class FakeSleep:
    """Stand-in for asyncio.sleep that only returns when the test says so."""

    def __init__(self):
        self.calls: list[float] = []
        self._waiters: deque = deque()

    async def __call__(self, delay: float) -> None:
        self.calls.append(delay)
        fut = asyncio.get_running_loop().create_future()
        self._waiters.append(fut)
        await fut

    @property
    def waiting(self) -> int:
        return sum(1 for f in self._waiters if not f.done())

    async def settle(self, rounds: int = 20) -> None:
        for _ in range(rounds):
            await asyncio.sleep(0)

    async def advance(self, intervals: int = 1) -> None:
        """Let ``intervals`` pending sleeps elapse, running each tick to completion."""
        for _ in range(intervals):
            await self.settle()
            while self._waiters and self._waiters[0].done():
                self._waiters.popleft()
            if not self._waiters:
                return
            self._waiters.popleft().set_result(None)
        await self.settle()


@pytest.fixture
def fake_sleep():
    return FakeSleep()


@pytest.fixture
def rng():
    return random.Random(1234)
