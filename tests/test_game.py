import random

import pytest

from snake_arcade.config import GameConfig
from snake_arcade.game import GameState
from snake_arcade.grid import step
from snake_arcade.models import Coordinate as C
from snake_arcade.models import Direction, GamePhase, InputEvent
from snake_arcade.snake import Snake


@pytest.fixture
def game(rng):
    g = GameState(GameConfig(), rng=rng)
    g.food = C(0, 0)
    return g


def feed(game):
    """Place food right in front of the snake and tick onto it."""
    game.food = step(game.snake.head, game.pending_direction, game.config.grid_dimension)
    return game.tick()


def crash(game):
    game.buffer.pending = game.snake.direction.opposite
    return game.tick()


def test_initial_state(game):
    assert game.phase is GamePhase.IDLE
    assert game.snake.segments == [C(10, 10)]
    assert game.snake.direction is Direction.RIGHT
    assert game.score == 0


def test_fresh_food_is_not_on_snake():
    g = GameState(GameConfig(grid_dimension=3), rng=random.Random(5))
    assert g.food is not None
    assert g.food not in g.snake.segments


def test_tick_does_nothing_while_idle(game):
    assert game.tick() is None
    assert game.snake.segments == [C(10, 10)]


def test_move_without_food(game):
    game.start()
    snap = game.tick()
    assert snap.snake == (C(11, 10),)
    assert snap.score == 0


def test_eating_food_grows_scores_and_respawns(game):
    game.start()
    game.food = C(11, 10)
    snap = game.tick()
    assert snap.snake == (C(11, 10), C(10, 10))
    assert snap.score == 10
    assert snap.food is not None
    assert snap.food != C(11, 10)
    assert snap.food not in snap.snake


def test_wraparound(game):
    game.snake = Snake([C(19, 10)], Direction.RIGHT, 20)
    game.start()
    assert game.tick().head == C(0, 10)


def test_reversal_onto_body_ends_game(game):
    game.snake = Snake([C(5, 5), C(4, 5), C(3, 5)], Direction.RIGHT, 20)
    game.scores.score = 30
    game.start()
    game.buffer.pending = Direction.LEFT
    snap = game.tick()
    assert snap.head == C(4, 5)
    assert snap.phase is GamePhase.GAME_OVER
    assert snap.high_score == 30


def test_turning_into_body_ends_game(game):
    game.snake = Snake([C(5, 5), C(4, 5), C(3, 5), C(2, 5), C(1, 5)], Direction.RIGHT, 20)
    game.start()
    for turn in (Direction.DOWN, Direction.LEFT, Direction.UP):
        assert game.request_direction(turn)
        snap = game.tick()
    assert snap.head == C(4, 5)
    assert snap.phase is GamePhase.GAME_OVER


def test_growth_invariant(game):
    game.start()
    for i in range(30):
        before = len(game.snake)
        if i % 3 == 0:
            snap = feed(game)
            assert len(snap.snake) == before + 1
        else:
            ahead = step(game.snake.head, game.pending_direction, 20)
            game.food = C((ahead.x + 7) % 20, ahead.y)
            snap = game.tick()
            assert len(snap.snake) == before
        if i % 5 == 4:
            turn = Direction.UP if game.snake.direction.dx else Direction.RIGHT
            game.request_direction(turn)


def test_pause_freezes_state(game):
    game.start()
    game.tick()
    game.toggle_pause()
    frozen = game.snapshot()
    assert frozen.phase is GamePhase.PAUSED
    for _ in range(25):
        assert game.tick() is None
    assert game.snapshot() == frozen

    game.toggle_pause()
    snap = game.tick()
    assert snap.head == C(frozen.head.x + 1, frozen.head.y)
    assert snap.score == frozen.score


def test_toggle_pause_from_idle_starts(game):
    assert game.handle_input(InputEvent.TOGGLE_PAUSE)
    assert game.phase is GamePhase.RUNNING


def test_start_is_idempotent(game):
    assert game.start()
    assert not game.start()
    assert game.phase is GamePhase.RUNNING


def test_game_over_is_sticky_until_reset(game):
    game.start()
    feed(game)
    crash(game)
    assert game.phase is GamePhase.GAME_OVER
    body = list(game.snake.segments)
    assert game.tick() is None
    assert not game.start()
    assert not game.toggle_pause()
    assert not game.handle_input(InputEvent.MOVE_UP)
    assert game.snake.segments == body


def test_reset_restores_initial_board_and_keeps_high_score(game):
    game.start()
    feed(game)
    feed(game)
    crash(game)
    assert game.high_score == 20

    snap = game.reset()
    assert snap.phase is GamePhase.IDLE
    assert snap.snake == (C(10, 10),)
    assert snap.score == 0
    assert snap.high_score == 20
    assert game.pending_direction is Direction.RIGHT
    assert snap.food not in snap.snake


def test_high_score_never_decreases(rng):
    seen = []
    game = GameState(GameConfig(), high_score=25, rng=rng)
    game.on_high_score(seen.append)
    history = []
    for meals in (1, 4, 2, 0, 5):
        game.reset()
        game.start()
        for _ in range(meals):
            feed(game)
        if meals:
            crash(game)
        history.append(game.high_score)
    assert history == sorted(history)
    assert history == [25, 40, 40, 40, 50]
    assert seen == [40, 50]


def test_direction_input_routing(game):
    assert game.handle_input(InputEvent.MOVE_UP)
    assert game.pending_direction is Direction.UP
    assert not game.handle_input(InputEvent.MOVE_LEFT)
    assert game.pending_direction is Direction.UP


def test_filling_the_board_is_a_win():
    seen = []
    game = GameState(GameConfig(grid_dimension=2), rng=random.Random(3))
    game.on_high_score(seen.append)
    game.snake = Snake([C(0, 1), C(1, 1), C(1, 0)], Direction.LEFT, 2)
    game.scores.score = 20
    game.food = C(0, 0)
    game.start()
    assert game.request_direction(Direction.UP)
    snap = game.tick()
    assert snap.phase is GamePhase.GAME_OVER
    assert snap.won
    assert snap.food is None
    assert len(snap.snake) == 4
    assert seen == [30]


def test_one_cell_board_has_no_food():
    game = GameState(GameConfig(grid_dimension=1))
    assert game.food is None
    game.start()
    snap = game.tick()
    assert snap.snake == (C(0, 0),)
    assert snap.phase is GamePhase.RUNNING
