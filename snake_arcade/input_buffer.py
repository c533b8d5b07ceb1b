"""Buffering of directional input between ticks."""

import logging
from typing import Optional

from .models import Direction

logger = logging.getLogger(__name__)


def set_pending_direction(requested: Direction, current: Direction) -> Optional[Direction]:
    """Return ``requested`` if it may become the pending direction, else None.

    A turn is only allowed onto the axis the snake is not moving along, so
    reversing (and re-requesting the current heading) is rejected.
    """
    if requested in (current, current.opposite):
        return None
    return requested


class DirectionBuffer:
    """Holds the one pending direction consumed at the next tick.

    Requests between ticks overwrite each other; only the last accepted one
    survives.
    """

    def __init__(self, direction: Direction):
        self.pending = direction

    def request(self, requested: Direction, current: Direction) -> bool:
        accepted = set_pending_direction(requested, current)
        if accepted is None:
            logger.debug("ignored %s while moving %s", requested.name, current.name)
            return False
        self.pending = accepted
        return True

    def reset(self, direction: Direction) -> None:
        self.pending = direction
