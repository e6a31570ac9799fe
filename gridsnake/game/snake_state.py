"""
Snake State - The immutable game session and its mutation primitives.

Every primitive takes a GameSession and returns a new one; the input
session and its board are never modified. Boards are read-only numpy
arrays so snapshots handed to renderers cannot alias live state.
"""
from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

import numpy as np

from .grid_math import Direction


class Cell(IntEnum):
    """Board cell codes."""
    EMPTY = 0
    BODY = 1
    FOOD = 2


class SessionState(Enum):
    """Lifecycle state derived from the session flags."""
    PAUSED = "paused"
    RUNNING = "running"
    GAME_OVER = "game_over"


def _freeze(board: np.ndarray) -> np.ndarray:
    board.setflags(write=False)
    return board


@dataclass(frozen=True, eq=False)
class GameSession:
    """
    Snapshot of a whole game.

    Attributes:
        rows, cols: Grid dimensions
        board: Read-only flat int8 array of Cell codes, length rows * cols
        snake: Cell indices from head (first) to tail (last)
        food: Index of the food cell, or None
        direction: Current movement direction
        paused: Whether ticks are currently ignored
        game_over: Whether the snake has collided with itself
    """
    rows: int
    cols: int
    board: np.ndarray
    snake: Tuple[int, ...]
    food: Optional[int] = None
    direction: Direction = Direction.RIGHT
    paused: bool = True
    game_over: bool = False

    def __eq__(self, other):
        if not isinstance(other, GameSession):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.cols == other.cols
            and self.snake == other.snake
            and self.food == other.food
            and self.direction == other.direction
            and self.paused == other.paused
            and self.game_over == other.game_over
            and np.array_equal(self.board, other.board)
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def head(self) -> int:
        """Index of the snake's head."""
        return self.snake[0]

    @property
    def tail(self) -> int:
        """Index of the snake's tail."""
        return self.snake[-1]

    @property
    def length(self) -> int:
        """Number of snake segments."""
        return len(self.snake)

    @property
    def state(self) -> SessionState:
        """Current lifecycle state."""
        if self.game_over:
            return SessionState.GAME_OVER
        if self.paused:
            return SessionState.PAUSED
        return SessionState.RUNNING

    def cell(self, index: int) -> Cell:
        """Get the cell code at an index."""
        return Cell(int(self.board[index]))

    def body_cells(self) -> FrozenSet[int]:
        """Indices of all board cells marked as body."""
        return frozenset(int(i) for i in np.flatnonzero(self.board == Cell.BODY))

    def to_dict(self) -> Dict[str, Any]:
        """
        Get the session as a plain dictionary for rendering or logging.

        Returns:
            Dictionary containing full session state
        """
        return {
            "rows": self.rows,
            "cols": self.cols,
            "board": self.board.tolist(),
            "snake": list(self.snake),
            "food": self.food,
            "direction": int(self.direction),
            "length": self.length,
            "paused": self.paused,
            "game_over": self.game_over,
            "state": self.state.value,
        }


def new_session(rows: int, cols: int, start_index: int) -> GameSession:
    """
    Create a fresh session: a single segment at start_index, no food,
    paused, heading right.
    """
    board = np.zeros(rows * cols, dtype=np.int8)
    board[start_index] = Cell.BODY
    return GameSession(
        rows=rows,
        cols=cols,
        board=_freeze(board),
        snake=(start_index,),
    )


def session_from_segments(
    rows: int,
    cols: int,
    segments: Iterable[int],
    direction: Direction = Direction.RIGHT,
    food: Optional[int] = None,
    paused: bool = False,
    game_over: bool = False
) -> GameSession:
    """
    Build a consistent session from an explicit snake body.

    Args:
        rows: Number of grid rows
        cols: Number of grid columns
        segments: Snake cell indices, head first
        direction: Movement direction
        food: Optional food index
        paused: Paused flag
        game_over: Game over flag

    Returns:
        New GameSession with the board painted from the segments

    Raises:
        ValueError: If segments are empty, duplicated, out of range, or
            overlap the food cell
    """
    snake = tuple(int(s) for s in segments)
    size = rows * cols

    if not snake:
        raise ValueError("Snake must have at least one segment")
    if len(set(snake)) != len(snake):
        raise ValueError("Snake segments must be unique")
    if any(s < 0 or s >= size for s in snake):
        raise ValueError(f"Snake segments must lie in [0, {size})")
    if food is not None and (food in snake or not 0 <= food < size):
        raise ValueError(f"Invalid food cell: {food}")

    board = np.zeros(size, dtype=np.int8)
    board[list(snake)] = Cell.BODY
    if food is not None:
        board[food] = Cell.FOOD

    return GameSession(
        rows=rows,
        cols=cols,
        board=_freeze(board),
        snake=snake,
        food=food,
        direction=direction,
        paused=paused,
        game_over=game_over,
    )


def advance_head(session: GameSession, new_head: int, ate_food: bool) -> GameSession:
    """
    Move the snake one cell, growing it if food was eaten.

    The new head is prepended and marked as body. Without food the tail is
    dropped and its cell cleared; with food the tail stays and food is
    cleared to absent.

    Args:
        session: Session before the move
        new_head: Cell index the head moves into
        ate_food: Whether the new head cell held food

    Returns:
        Session after the move
    """
    board = session.board.copy()
    snake = (new_head,) + session.snake
    food = session.food

    if ate_food:
        food = None
    else:
        board[snake[-1]] = Cell.EMPTY
        snake = snake[:-1]

    board[new_head] = Cell.BODY
    return replace(session, board=_freeze(board), snake=snake, food=food)


def with_food(session: GameSession, index: int) -> GameSession:
    """Mark a cell as food."""
    board = session.board.copy()
    board[index] = Cell.FOOD
    return replace(session, board=_freeze(board), food=index)


def with_direction(session: GameSession, direction: Direction) -> GameSession:
    return replace(session, direction=direction)


def with_paused(session: GameSession, paused: bool) -> GameSession:
    return replace(session, paused=paused)


def with_game_over(session: GameSession) -> GameSession:
    return replace(session, game_over=True)
