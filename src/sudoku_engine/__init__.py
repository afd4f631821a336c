from .config import SudokuConfig, load_config, make_config
from .constants import (
    SUDOKU_RULES, Board, format_grid, parse_grid, grid_to_string,
    copy_board, empty_board, as_board,
)
from .difficulty import normalize_difficulty, get_clue_target, get_hint_budget
from .validator import (
    is_valid, get_conflicts, would_create_conflict, is_completed,
    count_filled, get_possible_numbers, get_obvious_moves,
    verify_complete_solution, verify_partial_solution,
)
from .solver import solve, count_solutions
from .generator import (
    generate_full_board, remove_cells_for_difficulty,
    generate_puzzle, generate_puzzle_with_solution,
)
from .hints import get_hint
from .game_state import GameState, create_game_state
from .storage import (
    KeyValueStore, MemoryStore, JsonFileStore, StorageService, make_store,
)
from .pregeneration import (
    PuzzleRecord, generate_puzzle_bank, load_puzzle_bank, analyze_puzzle_bank,
)
