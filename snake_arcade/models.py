"""Data models."""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from .constants import DIRECTIONS, OPPOSITES


class Coordinate(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    """One of the four unit moves on the grid.

    Members are looked up by delta, so ``Direction((1, 0))`` is RIGHT and any
    other delta (zero, diagonal, longer than one cell) raises ``ValueError``.
    """

    UP = DIRECTIONS["up"]
    DOWN = DIRECTIONS["down"]
    LEFT = DIRECTIONS["left"]
    RIGHT = DIRECTIONS["right"]

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction[OPPOSITES[self.name.lower()].upper()]

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        return cls[name.upper()]


class GamePhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class InputEvent(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    TOGGLE_PAUSE = "toggle_pause"
    RESET = "reset"

    @property
    def direction(self) -> Optional[Direction]:
        return MOVE_EVENTS.get(self)


MOVE_EVENTS = {
    InputEvent.MOVE_UP: Direction.UP,
    InputEvent.MOVE_DOWN: Direction.DOWN,
    InputEvent.MOVE_LEFT: Direction.LEFT,
    InputEvent.MOVE_RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the game handed to renderers once per tick."""

    snake: tuple[Coordinate, ...]
    food: Optional[Coordinate]
    score: int
    high_score: int
    phase: GamePhase
    won: bool = False

    @property
    def head(self) -> Coordinate:
        return self.snake[0]

    def to_dict(self) -> dict:
        return {
            "snake": [list(c) for c in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "high_score": self.high_score,
            "state": self.phase.value,
            "won": self.won,
        }
