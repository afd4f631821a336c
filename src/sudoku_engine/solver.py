"""
Backtracking solver and bounded solution counter.

Both walk the empty cells in row-major order and try digits 1-9 in
ascending order. Each call works on its own copy of the board; the
recursion mutates that copy in place and undoes each placement on the
way back.
"""

from typing import List, Tuple

from .constants import EMPTY, SIZE, Board, copy_board
from .validator import get_possible_numbers, has_consistent_givens


def _empty_cells(board: Board) -> List[Tuple[int, int]]:
    return [(r, c) for r in range(SIZE) for c in range(SIZE) if board[r][c] == EMPTY]


def _fill(work: Board, empties: List[Tuple[int, int]], index: int) -> bool:
    if index == len(empties):
        return True
    row, col = empties[index]
    for num in get_possible_numbers(work, row, col):
        work[row][col] = num
        if _fill(work, empties, index + 1):
            return True
        work[row][col] = EMPTY
    return False


def solve(board: Board) -> bool:
    """
    Fill `board` with a complete solution.

    Returns True and writes the solution into `board` on success. On
    failure returns False and leaves `board` exactly as it was.
    """
    if not has_consistent_givens(board):
        return False

    work = copy_board(board)
    if not _fill(work, _empty_cells(work), 0):
        return False

    for r in range(SIZE):
        for c in range(SIZE):
            board[r][c] = work[r][c]
    return True


def count_solutions(board: Board, limit: int = 2) -> int:
    """
    Count completions of `board`, stopping once `limit` are found.

    Returns min(actual count, limit): with limit=2, 0 means unsolvable,
    1 unique and 2 ambiguous. The caller's board is not modified.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    if limit == 0 or not has_consistent_givens(board):
        return 0

    work = copy_board(board)
    empties = _empty_cells(work)
    count = 0

    def helper(index: int) -> bool:
        """Returns True once the limit has been reached."""
        nonlocal count
        if index == len(empties):
            count += 1
            return count >= limit
        row, col = empties[index]
        for num in get_possible_numbers(work, row, col):
            work[row][col] = num
            done = helper(index + 1)
            work[row][col] = EMPTY
            if done:
                return True
        return False

    helper(0)
    return count
