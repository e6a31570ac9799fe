"""
Food Placer - Chooses an unoccupied cell for new food.
"""
import logging
import numbers
from typing import Optional, Union

import numpy as np

from .snake_state import Cell

logger = logging.getLogger(__name__)

MAX_FOOD_ATTEMPTS = 500

STRATEGY_RETRY = "retry"
STRATEGY_SCAN = "scan"
FOOD_STRATEGIES = (STRATEGY_RETRY, STRATEGY_SCAN)


class BoardFullOrUnlucky(RuntimeError):
    """No empty cell was found for food within the attempt budget."""

    def __init__(self, attempts: int, rows: int, cols: int):
        self.attempts = attempts
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"Failed to generate new food position after {attempts} retries "
            f"on a {rows}x{cols} board."
        )


def place_food(
    board: np.ndarray,
    rows: int,
    cols: int,
    rng: np.random.Generator,
    max_attempts: int = MAX_FOOD_ATTEMPTS
) -> int:
    """
    Pick a random empty cell using bounded random retry.

    Samples indices uniformly in [0, rows * cols) and accepts the first
    whose board cell is empty. The returned cell is empty at call time;
    the caller must mark it as food before anything else touches the board.

    Args:
        board: Flat board array of cell codes
        rows: Number of grid rows
        cols: Number of grid columns
        rng: Random generator to sample from
        max_attempts: Sampling budget

    Returns:
        Index of an empty cell

    Raises:
        BoardFullOrUnlucky: If no empty cell was hit within the budget
    """
    size = rows * cols
    for _ in range(max_attempts):
        candidate = int(rng.integers(0, size))
        if board[candidate] == Cell.EMPTY:
            return candidate

    raise BoardFullOrUnlucky(max_attempts, rows, cols)


def scan_food(board: np.ndarray, rows: int, cols: int, rng: np.random.Generator) -> int:
    """
    Pick uniformly among all empty cells.

    Fails only when the board has no empty cell at all.
    """
    empty = np.flatnonzero(board == Cell.EMPTY)
    if empty.size == 0:
        raise BoardFullOrUnlucky(0, rows, cols)
    return int(empty[rng.integers(0, empty.size)])


class FoodPlacer:
    """
    Places food on the board with an owned random generator.

    Strategies:
    - retry: bounded random retry (default)
    - scan: uniform choice among the empty cells
    """

    def __init__(
        self,
        rng: Optional[Union[np.random.Generator, int]] = None,
        max_attempts: int = MAX_FOOD_ATTEMPTS,
        strategy: str = STRATEGY_RETRY
    ):
        """
        Initialize the placer.

        Args:
            rng: Generator to use, or a seed to build one from
            max_attempts: Sampling budget for the retry strategy
            strategy: "retry" or "scan"
        """
        if strategy not in FOOD_STRATEGIES:
            raise ValueError(f"Unknown food strategy: {strategy}")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        if rng is None or isinstance(rng, numbers.Integral):
            self.rng = np.random.default_rng(rng)
        else:
            self.rng = rng
        self.max_attempts = max_attempts
        self.strategy = strategy

    def place(self, board: np.ndarray, rows: int, cols: int) -> int:
        """Pick an empty cell for food."""
        try:
            if self.strategy == STRATEGY_SCAN:
                index = scan_food(board, rows, cols, self.rng)
            else:
                index = place_food(board, rows, cols, self.rng, self.max_attempts)
        except BoardFullOrUnlucky:
            logger.error("Food placement failed on %dx%d board", rows, cols)
            raise

        logger.debug("Placed food at %d", index)
        return index
