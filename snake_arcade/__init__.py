"""Single-player snake on a toroidal grid."""

from .config import GameConfig
from .controller import GameController
from .game import GameState
from .models import Coordinate, Direction, GamePhase, InputEvent, Snapshot

__all__ = [
    "Coordinate",
    "Direction",
    "GameConfig",
    "GameController",
    "GamePhase",
    "GameState",
    "InputEvent",
    "Snapshot",
]
