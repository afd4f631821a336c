"""
Rule checks for 9x9 Sudoku boards.

Every function here is pure: boards are read, never written (the one
temporary placement in `would_create_conflict` happens on a copy).
"""

from typing import Dict, List, Set, Tuple

from .constants import BOX, DIGITS, EMPTY, SIZE, Board, copy_board


def _block_origin(row: int, col: int) -> Tuple[int, int]:
    return (row // BOX) * BOX, (col // BOX) * BOX


def _peers(row: int, col: int) -> List[Tuple[int, int]]:
    """Cells sharing a row, column or block with (row, col), each once."""
    peers = [(row, c) for c in range(SIZE) if c != col]
    peers += [(r, col) for r in range(SIZE) if r != row]
    br, bc = _block_origin(row, col)
    for r in range(br, br + BOX):
        for c in range(bc, bc + BOX):
            # Row/column mates inside the block are already listed
            if r != row and c != col:
                peers.append((r, c))
    return peers


PEERS: Dict[Tuple[int, int], List[Tuple[int, int]]] = {
    (r, c): _peers(r, c) for r in range(SIZE) for c in range(SIZE)
}


def is_valid(board: Board, row: int, col: int, value: int) -> bool:
    """
    Check whether `value` may stand at (row, col).

    The cell itself is skipped by exact coordinate match, so a filled cell
    is always valid for its own value. 0 never conflicts.
    """
    if value == EMPTY:
        return True

    for c in range(SIZE):
        if c != col and board[row][c] == value:
            return False

    for r in range(SIZE):
        if r != row and board[r][col] == value:
            return False

    br, bc = _block_origin(row, col)
    for r in range(br, br + BOX):
        for c in range(bc, bc + BOX):
            if (r, c) != (row, col) and board[r][c] == value:
                return False

    return True


def get_conflicts(board: Board, row: int, col: int) -> List[Tuple[int, int]]:
    """Coordinates of other cells holding the same value as (row, col)."""
    value = board[row][col]
    if value == EMPTY:
        return []
    return [(r, c) for r, c in PEERS[(row, col)] if board[r][c] == value]


def would_create_conflict(board: Board, row: int, col: int, value: int) -> bool:
    """Would placing `value` at (row, col) clash with any peer?"""
    if value == EMPTY:
        return False
    trial = copy_board(board)
    trial[row][col] = value
    return len(get_conflicts(trial, row, col)) > 0


def is_completed(board: Board) -> bool:
    return all(cell != EMPTY for row in board for cell in row)


def count_filled(board: Board) -> int:
    return sum(1 for row in board for cell in row if cell != EMPTY)


def candidates(board: Board, row: int, col: int) -> Set[int]:
    """Compute valid candidates for cell (row, col) using Sudoku constraints."""
    if board[row][col] != EMPTY:
        return set()
    vals = set(DIGITS)
    # Row constraint
    vals -= set(board[row])
    # Column constraint
    vals -= {board[r][col] for r in range(SIZE)}
    # Block constraint
    br, bc = _block_origin(row, col)
    vals -= {board[r][c] for r in range(br, br + BOX) for c in range(bc, bc + BOX)}
    return vals


def get_possible_numbers(board: Board, row: int, col: int) -> List[int]:
    """Sorted digits that can go in an empty cell; [] for a filled one."""
    return sorted(candidates(board, row, col))


def get_obvious_moves(board: Board) -> List[Dict[str, int]]:
    """Empty cells with exactly one candidate (naked singles)."""
    moves = []
    for r in range(SIZE):
        for c in range(SIZE):
            if board[r][c] != EMPTY:
                continue
            possible = candidates(board, r, c)
            if len(possible) == 1:
                moves.append({"row": r, "col": c, "value": possible.pop()})
    return moves


def has_consistent_givens(board: Board) -> bool:
    """True when no two filled cells in the same unit share a value."""
    for r in range(SIZE):
        for c in range(SIZE):
            if board[r][c] != EMPTY and not is_valid(board, r, c, board[r][c]):
                return False
    return True


# ============================================================================
# Whole-grid verification with reasons
# ============================================================================


def _shape_ok(grid: Board) -> bool:
    return len(grid) == SIZE and all(len(row) == SIZE for row in grid)


def verify_complete_solution(puzzle: Board, solution: Board) -> Tuple[bool, str]:
    """Verify that a complete grid solves `puzzle`."""
    if not _shape_ok(solution):
        return False, "Grid is not 9x9"

    for r in range(SIZE):
        for c in range(SIZE):
            if solution[r][c] not in DIGITS:
                return False, f"Invalid value at ({r},{c}): {solution[r][c]}"

    for r in range(SIZE):
        for c in range(SIZE):
            if puzzle[r][c] != EMPTY and puzzle[r][c] != solution[r][c]:
                return (
                    False,
                    f"Doesn't match clue at ({r},{c}): "
                    f"expected {puzzle[r][c]}, got {solution[r][c]}",
                )

    for r in range(SIZE):
        if sorted(solution[r]) != DIGITS:
            return False, f"Row {r} invalid: {solution[r]}"

    for c in range(SIZE):
        col_vals = [solution[r][c] for r in range(SIZE)]
        if sorted(col_vals) != DIGITS:
            return False, f"Column {c} invalid: {col_vals}"

    for br in range(0, SIZE, BOX):
        for bc in range(0, SIZE, BOX):
            block = [
                solution[r][c]
                for r in range(br, br + BOX)
                for c in range(bc, bc + BOX)
            ]
            if sorted(block) != DIGITS:
                return False, f"Block ({br // BOX},{bc // BOX}) invalid: {block}"

    return True, "Solution is correct!"


def verify_partial_solution(puzzle: Board, current_grid: Board) -> Tuple[bool, str]:
    """Verify a partially filled grid keeps the clues and has no conflicts."""
    if not _shape_ok(current_grid):
        return False, "Grid is not 9x9"

    for r in range(SIZE):
        for c in range(SIZE):
            value = current_grid[r][c]
            if value != EMPTY and value not in DIGITS:
                return False, f"Invalid value at ({r},{c}): {value}"

    for r in range(SIZE):
        for c in range(SIZE):
            if puzzle[r][c] != EMPTY and current_grid[r][c] != puzzle[r][c]:
                return False, f"Conflicts with clue at ({r},{c})"

    for r in range(SIZE):
        for c in range(SIZE):
            conflicts = get_conflicts(current_grid, r, c)
            if conflicts:
                return False, f"Duplicate {current_grid[r][c]} at ({r},{c}) and {conflicts[0]}"

    return True, "Partial solution is valid"
