import os
import tempfile
import unittest
from unittest import mock

import yaml

from sudoku_engine.config import SudokuConfig, make_config


class TestConfig(unittest.TestCase):
    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            cfg = SudokuConfig()
        self.assertEqual(cfg.default_difficulty, "medium")
        self.assertEqual(cfg.storage_path, "")
        self.assertIsNone(cfg.seed)

    def test_environment(self):
        env = {"SUDOKU_STORAGE_PATH": "/tmp/save.json", "SUDOKU_SEED": "17"}
        with mock.patch.dict(os.environ, env, clear=True):
            cfg = SudokuConfig()
        self.assertEqual(cfg.storage_path, "/tmp/save.json")
        self.assertEqual(cfg.seed, 17)

    def test_yaml_then_overrides(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "sudoku.yaml")
            with open(path, "w") as f:
                yaml.safe_dump({"default_difficulty": "dificil", "seed": 3, "unknown": 1}, f)
            with mock.patch.dict(os.environ, {}, clear=True):
                cfg = make_config(path, seed=5)
        self.assertEqual(cfg.default_difficulty, "dificil")
        self.assertEqual(cfg.seed, 5)
        self.assertFalse(hasattr(cfg, "unknown"))

    def test_uniqueness_limit_is_not_configurable(self):
        cfg = make_config(solution_limit=1)
        self.assertFalse(hasattr(cfg, "solution_limit"))

    def test_seeded_rng(self):
        a = make_config(seed=8).make_rng().randint(1000, size=5).tolist()
        b = make_config(seed=8).make_rng().randint(1000, size=5).tolist()
        self.assertEqual(a, b)


if __name__ == "__main__":
    unittest.main()
