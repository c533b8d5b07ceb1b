"""Food placement."""

import random
from collections.abc import Collection
from typing import Optional

from .errors import BoardFullError
from .grid import in_bounds
from .models import Coordinate


def generate_food(
    occupied: Collection[Coordinate],
    dimension: int,
    rng: Optional[random.Random] = None,
) -> Coordinate:
    """Pick a uniformly random free cell by rejection sampling.

    Raises BoardFullError instead of sampling forever when ``occupied``
    covers every cell of the grid.
    """
    rng = rng or random
    blocked = {c for c in occupied if in_bounds(c, dimension)}
    if len(blocked) >= dimension * dimension:
        raise BoardFullError(dimension)

    while True:
        cell = Coordinate(rng.randrange(dimension), rng.randrange(dimension))
        if cell not in blocked:
            return cell


class FoodGenerator:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate(self, occupied: Collection[Coordinate], dimension: int) -> Coordinate:
        return generate_food(occupied, dimension, self.rng)
