"""Snake body and movement."""

from dataclasses import dataclass
from typing import Optional

from .grid import step
from .models import Coordinate, Direction


@dataclass(frozen=True)
class AdvanceResult:
    new_head: Coordinate
    ate_food: bool


class Snake:
    def __init__(self, segments: list[Coordinate], direction: Direction, dimension: int):
        if not segments:
            raise ValueError("a snake needs at least one segment")
        self.segments = [Coordinate(*s) for s in segments]
        self.direction = direction
        self.dimension = dimension

    @property
    def head(self) -> Coordinate:
        return self.segments[0]

    def __len__(self) -> int:
        return len(self.segments)

    def advance(self, direction: Direction, food: Optional[Coordinate]) -> AdvanceResult:
        """Commit ``direction`` and move one cell, growing when landing on food.

        The body may overlap itself afterwards; ruling on that is left to
        collision.is_terminal.
        """
        self.direction = direction
        new_head = step(self.head, direction, self.dimension)
        self.segments.insert(0, new_head)

        ate_food = new_head == food
        if not ate_food:
            self.segments.pop()
        return AdvanceResult(new_head, ate_food)
