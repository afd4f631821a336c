import copy
import unittest

import numpy as np

from sudoku_engine.constants import empty_board
from sudoku_engine.generator import (
    generate_full_board,
    generate_puzzle,
    generate_puzzle_with_solution,
    remove_cells_for_difficulty,
)
from sudoku_engine.solver import count_solutions, solve
from sudoku_engine.validator import count_filled
from tests.boards import is_full_valid, matches_givens


class TestFullBoard(unittest.TestCase):
    def test_every_unit_is_a_permutation(self):
        for seed in range(5):
            with self.subTest(seed=seed):
                board = generate_full_board(np.random.RandomState(seed))
                self.assertTrue(is_full_valid(board))

    def test_values_are_plain_ints(self):
        board = generate_full_board(np.random.RandomState(0))
        self.assertTrue(all(type(v) is int for row in board for v in row))

    def test_seeded_rng_is_reproducible(self):
        a = generate_full_board(np.random.RandomState(42))
        b = generate_full_board(np.random.RandomState(42))
        c = generate_full_board(np.random.RandomState(43))
        self.assertEqual(a, b)
        self.assertNotEqual(a, c)

    def test_default_rng(self):
        self.assertTrue(is_full_valid(generate_full_board()))

    def test_single_cleared_cell_is_unique(self):
        board = generate_full_board(np.random.RandomState(3))
        for r, c in ((0, 0), (3, 5), (8, 8)):
            puzzle = copy.deepcopy(board)
            puzzle[r][c] = 0
            self.assertEqual(count_solutions(puzzle, 2), 1)


class TestRemoval(unittest.TestCase):
    def test_does_not_mutate_full_board(self):
        full = generate_full_board(np.random.RandomState(1))
        before = copy.deepcopy(full)
        remove_cells_for_difficulty(full, "easy", rng=np.random.RandomState(1))
        self.assertEqual(full, before)

    def test_puzzle_is_subset_of_full_board(self):
        full = generate_full_board(np.random.RandomState(2))
        puzzle = remove_cells_for_difficulty(full, "medio", rng=np.random.RandomState(2))
        self.assertTrue(matches_givens(puzzle, full))
        self.assertGreaterEqual(count_filled(puzzle), 32)
        self.assertEqual(count_solutions(puzzle, 2), 1)

    def test_board_below_target_is_returned_as_is(self):
        board = empty_board()
        board[0][0] = 1
        puzzle = remove_cells_for_difficulty(board, "hard", rng=np.random.RandomState(0))
        self.assertEqual(puzzle, board)


class TestGeneratePuzzle(unittest.TestCase):
    def test_easy_alias(self):
        puzzle = generate_puzzle("facil", rng=np.random.RandomState(7))
        self.assertGreaterEqual(count_filled(puzzle), 40)
        self.assertEqual(count_solutions(puzzle, 2), 1)

    def test_each_difficulty_is_unique(self):
        for label, target in (("easy", 40), ("medium", 32), ("hard", 26)):
            with self.subTest(difficulty=label):
                puzzle = generate_puzzle(label, rng=np.random.RandomState(11))
                self.assertGreaterEqual(count_filled(puzzle), target)
                self.assertEqual(count_solutions(puzzle, 2), 1)

    def test_unknown_label_uses_medium(self):
        puzzle = generate_puzzle("impossible", rng=np.random.RandomState(5))
        self.assertGreaterEqual(count_filled(puzzle), 32)
        self.assertEqual(count_solutions(puzzle, 2), 1)

    def test_solve_reproduces_solution(self):
        puzzle, solution = generate_puzzle_with_solution("easy", rng=np.random.RandomState(9))
        board = copy.deepcopy(puzzle)
        self.assertTrue(solve(board))
        self.assertTrue(is_full_valid(board))
        self.assertTrue(matches_givens(puzzle, board))
        self.assertEqual(board, solution)


if __name__ == "__main__":
    unittest.main()
