"""Shared boards for tests."""

from sudoku_engine.constants import parse_grid

PUZZLE = parse_grid(
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

SOLUTION = parse_grid(
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def units(board):
    """All 27 rows, columns and blocks of a board as lists."""
    rows = [list(row) for row in board]
    cols = [[board[r][c] for r in range(9)] for c in range(9)]
    blocks = [
        [board[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)]
        for br in range(0, 9, 3)
        for bc in range(0, 9, 3)
    ]
    return rows + cols + blocks


def is_full_valid(board):
    return all(sorted(unit) == list(range(1, 10)) for unit in units(board))


def matches_givens(puzzle, board):
    return all(
        puzzle[r][c] == 0 or puzzle[r][c] == board[r][c]
        for r in range(9)
        for c in range(9)
    )
