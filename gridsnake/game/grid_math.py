"""
Grid Math - Pure coordinate utilities for a wrap-around grid.

Cells are addressed by a single linear index in [0, rows * cols).
Index i maps to x = i % cols, y = i // cols.
"""
from enum import Enum, IntEnum
from typing import Dict, Tuple


class Direction(IntEnum):
    """Snake movement directions."""
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3


class Axis(Enum):
    """Movement axis of a direction."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


AXIS: Dict[Direction, Axis] = {
    Direction.UP: Axis.VERTICAL,
    Direction.DOWN: Axis.VERTICAL,
    Direction.LEFT: Axis.HORIZONTAL,
    Direction.RIGHT: Axis.HORIZONTAL,
}

OPPOSITE: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def to_xy(index: int, cols: int) -> Tuple[int, int]:
    """Convert a linear cell index to (x, y)."""
    return index % cols, index // cols


def to_index(x: int, y: int, cols: int) -> int:
    """Convert (x, y) to a linear cell index."""
    return y * cols + x


def step(index: int, direction: Direction, rows: int, cols: int) -> int:
    """
    Get the neighboring cell one step in a direction, wrapping at the edges.

    Args:
        index: Current cell index
        direction: Direction to move
        rows: Number of grid rows
        cols: Number of grid columns

    Returns:
        Index of the neighboring cell
    """
    x, y = to_xy(index, cols)

    if direction == Direction.UP:
        y = rows - 1 if y <= 0 else y - 1
    elif direction == Direction.DOWN:
        y = 0 if y >= rows - 1 else y + 1
    elif direction == Direction.LEFT:
        x = cols - 1 if x <= 0 else x - 1
    elif direction == Direction.RIGHT:
        x = 0 if x >= cols - 1 else x + 1
    else:
        raise ValueError(f"Unknown direction: {direction!r}")

    return to_index(x, y, cols)


def is_legal_turn(current: Direction, new: Direction) -> bool:
    """
    Check whether a direction change is allowed.

    A turn is legal only onto the perpendicular axis: left/right can be
    countermanded by up/down and vice versa. Reversals and repeats are not.
    """
    return AXIS[new] != AXIS[current]
