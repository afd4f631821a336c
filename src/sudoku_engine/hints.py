"""Hint provider: reveal the solved value of one random empty cell."""

from typing import Optional, Tuple

import numpy as np

from .constants import EMPTY, SIZE, Board, copy_board
from .solver import solve


def get_hint(board: Board, rng=None) -> Optional[Tuple[int, int, int]]:
    """
    Pick a random empty cell and return (row, col, value) from the solution.

    The solver runs on a copy of the current board, player entries included.
    Returns None when the board is already full or has no solution; callers
    that must tell these apart should check `is_completed` first.
    """
    solved = copy_board(board)
    if not solve(solved):
        return None

    empty_cells = [
        (r, c) for r in range(SIZE) for c in range(SIZE) if board[r][c] == EMPTY
    ]
    if not empty_cells:
        return None

    rng = rng if rng is not None else np.random
    row, col = empty_cells[int(rng.randint(len(empty_cells)))]
    return row, col, solved[row][col]
