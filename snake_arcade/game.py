"""Core game state and logic."""

import logging
import random
from typing import Optional

from . import constants
from .collision import is_terminal
from .config import GameConfig
from .errors import BoardFullError
from .food import FoodGenerator
from .grid import center
from .input_buffer import DirectionBuffer
from .models import Coordinate, Direction, GamePhase, InputEvent, Snapshot
from .score import HighScoreListener, ScoreTracker
from .snake import Snake

logger = logging.getLogger(__name__)

START_DIRECTION = Direction.from_name(constants.START_DIRECTION)


class GameState:
    """Authoritative state of one game session.

    Timing lives elsewhere: ``tick()`` performs exactly one update step when
    called, so a scheduler (or a test) decides when ticks happen. The high
    score survives ``reset()`` for the lifetime of the instance.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        high_score: int = 0,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        self.scores = ScoreTracker(self.config.score_increment, high_score)
        self.food_generator = FoodGenerator(rng)
        self.phase = GamePhase.IDLE
        self.won = False
        self.snake: Snake
        self.food: Optional[Coordinate]
        self.buffer: DirectionBuffer
        self._init_board()

    def _init_board(self):
        dim = self.config.grid_dimension
        self.snake = Snake([center(dim)], START_DIRECTION, dim)
        self.buffer = DirectionBuffer(START_DIRECTION)
        try:
            self.food = self.food_generator.generate(self.snake.segments, dim)
        except BoardFullError:
            self.food = None

    @property
    def score(self) -> int:
        return self.scores.score

    @property
    def high_score(self) -> int:
        return self.scores.high_score

    @property
    def pending_direction(self) -> Direction:
        return self.buffer.pending

    def on_high_score(self, listener: HighScoreListener) -> None:
        self.scores.subscribe(listener)

    # ── Commands ──────────────────────────────────────────────────

    def start(self) -> bool:
        if self.phase != GamePhase.IDLE:
            return False
        self.phase = GamePhase.RUNNING
        logger.info("game started")
        return True

    def toggle_pause(self) -> bool:
        if self.phase == GamePhase.IDLE:
            return self.start()
        if self.phase == GamePhase.RUNNING:
            self.phase = GamePhase.PAUSED
        elif self.phase == GamePhase.PAUSED:
            self.phase = GamePhase.RUNNING
        else:
            return False
        logger.debug("pause toggled, now %s", self.phase.value)
        return True

    def reset(self) -> Snapshot:
        self.scores.reset()
        self.won = False
        self._init_board()
        self.phase = GamePhase.IDLE
        logger.info("game reset")
        return self.snapshot()

    def request_direction(self, direction: Direction) -> bool:
        """Buffer a turn for the next tick. Ignored once the game is over."""
        if self.phase == GamePhase.GAME_OVER:
            return False
        return self.buffer.request(direction, self.snake.direction)

    def handle_input(self, event: InputEvent) -> bool:
        """Route an input event. Returns True when it changed anything."""
        if event == InputEvent.RESET:
            self.reset()
            return True
        if event == InputEvent.TOGGLE_PAUSE:
            return self.toggle_pause()
        direction = event.direction
        if direction is None:
            return False
        return self.request_direction(direction)

    # ── Update loop ───────────────────────────────────────────────

    def tick(self) -> Optional[Snapshot]:
        """Advance one step. Returns None (and changes nothing) unless running."""
        if self.phase != GamePhase.RUNNING:
            return None

        result = self.snake.advance(self.buffer.pending, self.food)
        if result.ate_food:
            self.scores.record_food()
            try:
                self.food = self.food_generator.generate(
                    self.snake.segments, self.config.grid_dimension,
                )
            except BoardFullError:
                self.food = None
                self.won = True
                self._end_game("board full, snake wins")
                return self.snapshot()

        if is_terminal(self.snake.segments):
            self._end_game(f"collided at {tuple(result.new_head)}")
        return self.snapshot()

    def _end_game(self, reason: str):
        self.phase = GamePhase.GAME_OVER
        self.scores.finalize()
        logger.info("game over (%s) with score %d", reason, self.score)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake.segments),
            food=self.food,
            score=self.score,
            high_score=self.high_score,
            phase=self.phase,
            won=self.won,
        )
