"""Score and high score tracking."""

import logging
from typing import Callable

from .constants import SCORE_INCREMENT

logger = logging.getLogger(__name__)

HighScoreListener = Callable[[int], None]


class ScoreTracker:
    def __init__(self, increment: int = SCORE_INCREMENT, high_score: int = 0):
        if high_score < 0:
            raise ValueError(f"high score must be non-negative, got {high_score}")
        self.increment = increment
        self.score = 0
        self.high_score = high_score
        self._listeners: list[HighScoreListener] = []

    def subscribe(self, listener: HighScoreListener) -> None:
        """Call ``listener(new_high_score)`` whenever the high score rises."""
        self._listeners.append(listener)

    def record_food(self) -> None:
        self.score += self.increment

    def finalize(self) -> bool:
        """Fold the current score into the high score. Returns True on a new best."""
        if self.score <= self.high_score:
            return False
        self.high_score = self.score
        logger.info("new high score: %d", self.high_score)
        for listener in self._listeners:
            try:
                listener(self.high_score)
            except Exception:
                logger.exception("high score listener %r failed", listener)
        return True

    def reset(self) -> None:
        self.score = 0
