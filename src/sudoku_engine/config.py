"""
Sudoku engine configuration.

Values come from the dataclass defaults, then an optional YAML file, then
keyword overrides. Storage path and seed fall back to environment
variables when left unset.
"""

import os
from dataclasses import dataclass, fields
from typing import Optional

import numpy as np
import yaml

from .difficulty import DEFAULT_DIFFICULTY


@dataclass
class SudokuConfig:
    """Configuration for puzzle generation and persistence."""

    # Difficulty used when the caller passes none
    default_difficulty: str = DEFAULT_DIFFICULTY

    # JSON file backing the key-value store ("" = in-memory)
    storage_path: str = ""

    # Seed for the random source (None = nondeterministic)
    seed: Optional[int] = None

    def __post_init__(self):
        if not self.storage_path:
            self.storage_path = os.getenv("SUDOKU_STORAGE_PATH", "")
        if self.seed is None:
            env_seed = os.getenv("SUDOKU_SEED", "")
            if env_seed.strip():
                self.seed = int(env_seed)

    def make_rng(self) -> np.random.RandomState:
        """Random source for the generator and hint provider."""
        return np.random.RandomState(self.seed)


def load_config(yaml_path: str) -> dict:
    """Load engine config values from a YAML file."""
    with open(yaml_path, "r") as f:
        return yaml.safe_load(f) or {}


def make_config(yaml_path: str = None, **overrides) -> SudokuConfig:
    """Create SudokuConfig from defaults, an optional YAML file, and overrides."""
    values = {}
    if yaml_path:
        values.update(load_config(yaml_path))
    values.update(overrides)

    cfg = SudokuConfig()
    known = {f.name for f in fields(cfg)}
    for k, v in values.items():
        if k in known:
            setattr(cfg, k, v)

    return cfg
