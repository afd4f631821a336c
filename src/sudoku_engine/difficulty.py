"""
Difficulty labels and their fixed lookup tables.

Labels arrive as free-form strings (English or Portuguese, any case).
Unrecognised labels resolve to medium rather than failing.
"""

from typing import Dict

EASY = "easy"
MEDIUM = "medium"
HARD = "hard"

DEFAULT_DIFFICULTY = MEDIUM

DIFFICULTY_ALIASES: Dict[str, str] = {
    "easy": EASY,
    "facil": EASY,
    "fácil": EASY,
    "medium": MEDIUM,
    "medio": MEDIUM,
    "médio": MEDIUM,
    "hard": HARD,
    "dificil": HARD,
    "difícil": HARD,
}

# Target number of filled cells left in the puzzle
CLUE_TARGETS: Dict[str, int] = {EASY: 40, MEDIUM: 32, HARD: 26}

# Hints a player may request per game
HINT_BUDGETS: Dict[str, int] = {EASY: 8, MEDIUM: 5, HARD: 3}


def normalize_difficulty(label) -> str:
    """Map any accepted label to 'easy' / 'medium' / 'hard'."""
    if not isinstance(label, str):
        return DEFAULT_DIFFICULTY
    return DIFFICULTY_ALIASES.get(label.strip().lower(), DEFAULT_DIFFICULTY)


def get_clue_target(label) -> int:
    return CLUE_TARGETS[normalize_difficulty(label)]


def get_hint_budget(label) -> int:
    return HINT_BUDGETS[normalize_difficulty(label)]
