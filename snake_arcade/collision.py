"""Self-collision detection."""

from collections.abc import Sequence

from .models import Coordinate


def is_terminal(segments: Sequence[Coordinate]) -> bool:
    """True when the head shares a cell with any other segment."""
    head = segments[0]
    return any(seg == head for seg in segments[1:])
