"""
Key-value persistence for saved games.

`StorageService` stores the JSON snapshot of a `GameState` under a fixed
key in any `KeyValueStore`. Failures are reported and swallowed: saving
never raises, and a missing or unreadable save loads as None.
"""

import json
import os
from abc import ABC, abstractmethod
from typing import Dict, Optional

from .config import SudokuConfig
from .game_state import GameState
from .utils import load_json, save_json


class KeyValueStore(ABC):
    """String key -> string value store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        ...


class MemoryStore(KeyValueStore):
    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """All keys kept in one JSON object on disk, rewritten atomically."""

    def __init__(self, path: str):
        self.path = path

    def _read(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        data = load_json(self.path)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        save_json(data, self.path)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            save_json(data, self.path)


def make_store(path: str = "") -> KeyValueStore:
    return JsonFileStore(path) if path else MemoryStore()


class StorageService:
    GAME_STATE_KEY = "sudoku_game_state"

    def __init__(self, store: KeyValueStore = None):
        self.store = store if store is not None else MemoryStore()

    @classmethod
    def from_config(cls, config: SudokuConfig) -> "StorageService":
        return cls(make_store(config.storage_path))

    def save_game_state(self, game_state: GameState) -> None:
        try:
            self.store.set(self.GAME_STATE_KEY, json.dumps(game_state.to_dict()))
        except (OSError, TypeError, ValueError) as e:
            print(f"❌ Failed to save game state: {e}")

    def load_game_state(self) -> Optional[GameState]:
        try:
            saved = self.store.get(self.GAME_STATE_KEY)
            return GameState.from_dict(json.loads(saved)) if saved else None
        except (OSError, ValueError, KeyError, TypeError) as e:
            print(f"❌ Failed to load game state: {e}")
            return None

    def clear_game_state(self) -> None:
        try:
            self.store.remove(self.GAME_STATE_KEY)
        except (OSError, ValueError) as e:
            print(f"❌ Failed to clear game state: {e}")
