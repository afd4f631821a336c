"""
Game state snapshot handed to the session logic and the storage layer.

The engine fills `initial_board` and the difficulty-derived fields; playing
the game (editing `board`, notes, history, timers) is the caller's job.
"""

import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .config import SudokuConfig
from .constants import SIZE, Board, copy_board
from .difficulty import DEFAULT_DIFFICULTY, get_hint_budget
from .generator import generate_puzzle


def _empty_notes() -> List[List[List[int]]]:
    return [[[] for _ in range(SIZE)] for _ in range(SIZE)]


@dataclass
class GameState:
    board: Board
    initial_board: Board
    difficulty: str
    max_hints: int
    start_time: float
    selected_cell: Optional[Tuple[int, int]] = None
    history: List[Board] = field(default_factory=list)
    notes: List[List[List[int]]] = field(default_factory=_empty_notes)
    is_notes_mode: bool = False
    end_time: Optional[float] = None
    hints_used: int = 0

    @property
    def hints_remaining(self) -> int:
        return max(0, self.max_hints - self.hints_used)

    def to_dict(self) -> Dict:
        return {
            "board": copy_board(self.board),
            "initial_board": copy_board(self.initial_board),
            "selected_cell": list(self.selected_cell) if self.selected_cell else None,
            "history": [copy_board(b) for b in self.history],
            "notes": [[list(cell) for cell in row] for row in self.notes],
            "is_notes_mode": self.is_notes_mode,
            "difficulty": self.difficulty,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "hints_used": self.hints_used,
            "max_hints": self.max_hints,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "GameState":
        if not isinstance(d, dict):
            raise ValueError(f"Game state must be a JSON object, got {type(d).__name__}")
        selected = d.get("selected_cell")
        notes = d.get("notes")
        return cls(
            board=copy_board(d["board"]),
            initial_board=copy_board(d["initial_board"]),
            difficulty=d["difficulty"],
            max_hints=d.get("max_hints", get_hint_budget(d["difficulty"])),
            start_time=d["start_time"],
            selected_cell=tuple(selected) if selected else None,
            history=[copy_board(b) for b in d.get("history", [])],
            notes=[[list(cell) for cell in row] for row in notes] if notes else _empty_notes(),
            is_notes_mode=d.get("is_notes_mode", False),
            end_time=d.get("end_time"),
            hints_used=d.get("hints_used", 0),
        )


def create_game_state(
    difficulty: str = None,
    rng=None,
    now: float = None,
    config: SudokuConfig = None,
) -> GameState:
    """
    Start a new game: fresh puzzle, empty notes, full hint budget.

    A missing difficulty or rng is taken from `config` when one is given.
    """
    if config is not None:
        difficulty = difficulty if difficulty is not None else config.default_difficulty
        rng = rng if rng is not None else config.make_rng()
    if difficulty is None:
        difficulty = DEFAULT_DIFFICULTY

    puzzle = generate_puzzle(difficulty, rng=rng)
    return GameState(
        board=copy_board(puzzle),
        initial_board=copy_board(puzzle),
        difficulty=difficulty,
        max_hints=get_hint_budget(difficulty),
        start_time=now if now is not None else time.time(),
        history=[copy_board(puzzle)],
    )
