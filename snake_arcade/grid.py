"""Toroidal grid geometry."""

from .models import Coordinate, Direction


def wrap(coord: tuple[int, int], dimension: int) -> Coordinate:
    """Reduce both axes into [0, dimension), wrapping negatives to the far edge."""
    x, y = coord
    return Coordinate((x + dimension) % dimension, (y + dimension) % dimension)


def step(coord: Coordinate, direction: Direction, dimension: int) -> Coordinate:
    return wrap((coord.x + direction.dx, coord.y + direction.dy), dimension)


def center(dimension: int) -> Coordinate:
    return Coordinate(dimension // 2, dimension // 2)


def in_bounds(coord: tuple[int, int], dimension: int) -> bool:
    x, y = coord
    return 0 <= x < dimension and 0 <= y < dimension
