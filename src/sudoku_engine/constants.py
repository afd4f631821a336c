"""
Sudoku constants, rules, and display utilities.
"""

from typing import List, Sequence

Board = List[List[int]]

SIZE = 9
BOX = 3
EMPTY = 0
DIGITS = list(range(1, SIZE + 1))


# ============================================================================
# 9x9 Sudoku Rules
# ============================================================================

SUDOKU_RULES = """9x9 Sudoku Rules:
- The grid is 9x9, divided into nine 3x3 blocks
- Fill each cell with a number from 1 to 9
- Each ROW must contain the numbers 1-9 exactly once
- Each COLUMN must contain the numbers 1-9 exactly once
- Each 3x3 BLOCK must contain the numbers 1-9 exactly once
- Some cells are given as clues and cannot be changed
"""


# ============================================================================
# Board helpers
# ============================================================================

def empty_board() -> Board:
    return [[EMPTY] * SIZE for _ in range(SIZE)]


def copy_board(board: Sequence[Sequence[int]]) -> Board:
    return [list(row) for row in board]


def as_board(grid) -> Board:
    """Convert a nested sequence or numpy array into a list-of-lists of int."""
    if hasattr(grid, "tolist"):
        grid = grid.tolist()
    return [[int(cell) for cell in row] for row in grid]


def parse_grid(text: str) -> Board:
    """
    Parse an 81-character puzzle string.

    '0' and '.' mark empty cells; whitespace and '|'/'-'/'+' separators are
    ignored so the output of `format_grid` can be read back.

    Raises:
        ValueError: if the string does not hold exactly 81 cells.
    """
    cells = []
    for ch in text:
        if ch.isdigit():
            cells.append(int(ch))
        elif ch == ".":
            cells.append(EMPTY)
        elif ch.isspace() or ch in "|-+":
            continue
        else:
            raise ValueError(f"Unexpected character in grid: {ch!r}")
    if len(cells) != SIZE * SIZE:
        raise ValueError(f"Expected {SIZE * SIZE} cells, got {len(cells)}")
    return [cells[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]


def grid_to_string(board: Sequence[Sequence[int]]) -> str:
    """Flatten a board into an 81-character string (0 = empty)."""
    return "".join(str(cell) for row in board for cell in row)


# ============================================================================
# Display Utility
# ============================================================================


def format_grid(grid: Sequence[Sequence[int]], show_zeros: bool = True) -> str:
    """
    Format a 9x9 grid for display.

    Args:
        grid: 9x9 list of ints (0 = empty)
        show_zeros: If True, show 0s as '.'; if False, show raw numbers.

    Returns:
        Formatted multi-line string with block separators.
    """
    lines = []
    for i, row in enumerate(grid):
        if show_zeros:
            cells = [str(cell) if cell != EMPTY else "." for cell in row]
        else:
            cells = [str(cell) for cell in row]
        groups = [" ".join(cells[b:b + BOX]) for b in range(0, SIZE, BOX)]
        lines.append(" | ".join(groups))
        if i % BOX == BOX - 1 and i != SIZE - 1:
            lines.append("------+-------+------")
    return "\n".join(lines)
