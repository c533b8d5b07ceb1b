"""Top-level wiring of game state, clock and subscribers."""

import asyncio
import logging
import random
from typing import Awaitable, Callable, Optional

from .clock import GameClock, Sleep
from .config import GameConfig
from .game import GameState
from .models import GamePhase, InputEvent, Snapshot
from .score import HighScoreListener

logger = logging.getLogger(__name__)

SnapshotSubscriber = Callable[[Snapshot], Awaitable[None]]


class GameController:
    """Owns one GameState and the clock that drives it.

    Inputs and ticks both run on the event loop and ``GameState`` methods
    never await, so an input always lands wholly before or after a tick.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        high_score: int = 0,
        rng: Optional[random.Random] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.game = GameState(config, high_score=high_score, rng=rng)
        self.clock = GameClock(self.game.config.tick_interval, self._on_tick, sleep=sleep)
        self._subscribers: list[SnapshotSubscriber] = []

    @property
    def config(self) -> GameConfig:
        return self.game.config

    def subscribe(self, subscriber: SnapshotSubscriber) -> None:
        self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: SnapshotSubscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    def on_high_score(self, listener: HighScoreListener) -> None:
        self.game.on_high_score(listener)

    def snapshot(self) -> Snapshot:
        return self.game.snapshot()

    async def handle_input(self, event: InputEvent) -> bool:
        if event == InputEvent.RESET:
            self.clock.stop()
            await self._publish(self.game.reset())
            return True

        changed = self.game.handle_input(event)
        if changed and self.game.phase == GamePhase.RUNNING:
            self.clock.start()
        return changed

    def shutdown(self) -> None:
        self.clock.stop()

    async def _on_tick(self):
        snap = self.game.tick()
        if snap is None:
            return
        if snap.phase == GamePhase.GAME_OVER:
            self.clock.stop()
        await self._publish(snap)

    async def _publish(self, snap: Snapshot):
        for subscriber in list(self._subscribers):
            try:
                await subscriber(snap)
            except Exception:
                logger.exception("snapshot subscriber %r failed", subscriber)
