import os
import tempfile
import unittest

import numpy as np

from sudoku_engine.config import make_config
from sudoku_engine.game_state import create_game_state
from sudoku_engine.storage import (
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    StorageService,
    make_store,
)


class TestStorageService(unittest.TestCase):
    def setUp(self):
        self.state = create_game_state("facil", rng=np.random.RandomState(0), now=5.0)

    def _round_trip(self, store):
        service = StorageService(store)
        self.assertIsNone(service.load_game_state())
        service.save_game_state(self.state)
        self.assertEqual(service.load_game_state(), self.state)
        service.clear_game_state()
        self.assertIsNone(service.load_game_state())

    def test_memory_store(self):
        self._round_trip(MemoryStore())

    def test_json_file_store(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "save", "sudoku.json")
            self._round_trip(JsonFileStore(path))

    def test_file_store_survives_new_instance(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "sudoku.json")
            StorageService(make_store(path)).save_game_state(self.state)
            self.assertEqual(StorageService(make_store(path)).load_game_state(), self.state)

    def test_corrupt_save_loads_as_none(self):
        store = MemoryStore()
        store.set(StorageService.GAME_STATE_KEY, "{not json")
        self.assertIsNone(StorageService(store).load_game_state())

    def test_non_object_save_loads_as_none(self):
        for raw in ("42", "null", "[]", "\"text\""):
            with self.subTest(raw=raw):
                store = MemoryStore()
                store.set(StorageService.GAME_STATE_KEY, raw)
                self.assertIsNone(StorageService(store).load_game_state())

    def test_non_object_file_loads_as_none(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "sudoku.json")
            with open(path, "w") as f:
                f.write("[]")
            service = StorageService(JsonFileStore(path))
            self.assertIsNone(service.load_game_state())
            service.save_game_state(self.state)
            service.clear_game_state()
            with open(path) as f:
                self.assertEqual(f.read(), "[]")

    def test_incomplete_store_fails_on_creation(self):
        class ReadOnlyStore(KeyValueStore):
            def get(self, key):
                return None

        with self.assertRaises(TypeError):
            ReadOnlyStore()

    def test_corrupt_file_loads_as_none(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "sudoku.json")
            with open(path, "w") as f:
                f.write("garbage")
            self.assertIsNone(StorageService(JsonFileStore(path)).load_game_state())

    def test_clear_without_save(self):
        service = StorageService()
        service.clear_game_state()
        self.assertIsNone(service.load_game_state())

    def test_from_config(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "sudoku.json")
            service = StorageService.from_config(make_config(storage_path=path))
            self.assertIsInstance(service.store, JsonFileStore)
            service.save_game_state(self.state)
            self.assertTrue(os.path.exists(path))


if __name__ == "__main__":
    unittest.main()
