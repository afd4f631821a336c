"""
Random Sudoku puzzle generation.

Phase A builds a complete random grid: the three diagonal 3x3 blocks are
seeded with shuffled digits (they share no row, column or block), then the
rest is filled by row-major backtracking with a shuffled digit order per
cell. Phase B clears cells in random order, keeping a removal only when the
puzzle still has exactly one solution, until the difficulty's clue target
is reached or every position has been tried.

`rng` is any object with a numpy-style `permutation`; it defaults to the
global `numpy.random` state. Pass a seeded `np.random.RandomState` for
reproducible boards.
"""

from typing import List, Tuple

import numpy as np

from .constants import BOX, DIGITS, EMPTY, SIZE, Board, copy_board, empty_board
from .difficulty import get_clue_target
from .solver import count_solutions
from .validator import count_filled, is_valid

# A count of 1 under this limit means exactly one solution
UNIQUENESS_LIMIT = 2


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _shuffled(rng, items) -> List[int]:
    return [int(v) for v in rng.permutation(items)]


def _fill_diagonal_blocks(board: Board, rng) -> None:
    for block in range(BOX):
        origin = block * BOX
        sequence = _shuffled(rng, DIGITS)
        for k, value in enumerate(sequence):
            board[origin + k // BOX][origin + k % BOX] = value


def _fill_board(board: Board, index: int, rng) -> bool:
    if index >= SIZE * SIZE:
        return True

    row, col = divmod(index, SIZE)
    if board[row][col] != EMPTY:
        return _fill_board(board, index + 1, rng)

    for num in _shuffled(rng, DIGITS):
        if is_valid(board, row, col, num):
            board[row][col] = num
            if _fill_board(board, index + 1, rng):
                return True
            board[row][col] = EMPTY
    return False


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def generate_full_board(rng=None) -> Board:
    """Produce a completely filled, rule-valid random board."""
    rng = rng if rng is not None else np.random
    board = empty_board()
    _fill_diagonal_blocks(board, rng)
    if not _fill_board(board, 0, rng):
        # Diagonal seeding always leaves a completable grid
        raise RuntimeError("Failed to complete a board from diagonal seeding")
    return board


def remove_cells_for_difficulty(full_board: Board, difficulty: str, rng=None) -> Board:
    """
    Clear cells from `full_board` while the puzzle stays uniquely solvable.

    Args:
        full_board: A complete board. Not modified.
        difficulty: Any difficulty label; unknown labels act as medium.
        rng: Random source for the removal order.

    Returns:
        The puzzle. It never has fewer clues than the target; it can have
        more when every position was tried before reaching the target.
    """
    rng = rng if rng is not None else np.random
    clues = get_clue_target(difficulty)

    puzzle = copy_board(full_board)
    filled = count_filled(puzzle)

    for pos in _shuffled(rng, SIZE * SIZE):
        if filled <= clues:
            break

        row, col = divmod(pos, SIZE)
        if puzzle[row][col] == EMPTY:
            continue

        old_value = puzzle[row][col]
        puzzle[row][col] = EMPTY

        if count_solutions(puzzle, UNIQUENESS_LIMIT) != 1:
            puzzle[row][col] = old_value
        else:
            filled -= 1

    return puzzle


def generate_puzzle_with_solution(difficulty: str, rng=None) -> Tuple[Board, Board]:
    """Return (puzzle, solution) for the given difficulty."""
    full_board = generate_full_board(rng)
    puzzle = remove_cells_for_difficulty(full_board, difficulty, rng=rng)
    return puzzle, full_board


def generate_puzzle(difficulty: str, rng=None) -> Board:
    """Generate a new puzzle's initial board."""
    puzzle, _ = generate_puzzle_with_solution(difficulty, rng=rng)
    return puzzle
