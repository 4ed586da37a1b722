# -*- coding: utf-8 -*-
"""Test cases for puzzle generation."""
import unittest

import numpy as np

from sudoku_checker import is_safe, verify_sudoku
from sudoku_generator import (
    Difficulty,
    add_empty_cells,
    count_empty,
    fill_diagonal,
    fill_remaining,
    fill_values,
    generate,
    generate_dataset,
    in_diagonal_box,
    is_complete,
    make_rng,
    remaining_cells,
)


class TestDifficulty(unittest.TestCase):
    def test_empty_cell_counts(self):
        self.assertEqual(Difficulty.EASY.value, 13)
        self.assertEqual(Difficulty.MEDIUM.value, 29)
        self.assertEqual(Difficulty.HARD.value, 41)

    def test_from_choice(self):
        self.assertIs(Difficulty.from_choice("1"), Difficulty.EASY)
        self.assertIs(Difficulty.from_choice(" 3 "), Difficulty.HARD)
        self.assertIs(Difficulty.from_choice("hard"), Difficulty.HARD)
        self.assertIs(Difficulty.from_choice(Difficulty.EASY), Difficulty.EASY)

    def test_from_choice_defaults_to_medium(self):
        for choice in ("", "7", "impossible", 0):
            with self.subTest(choice=choice):
                self.assertIs(Difficulty.from_choice(choice), Difficulty.MEDIUM)


class TestDiagonalSeeding(unittest.TestCase):
    def test_in_diagonal_box(self):
        self.assertTrue(in_diagonal_box(0, 2))
        self.assertTrue(in_diagonal_box(4, 5))
        self.assertTrue(in_diagonal_box(8, 6))
        self.assertFalse(in_diagonal_box(0, 3))
        self.assertFalse(in_diagonal_box(6, 5))

    def test_remaining_cells(self):
        cells = remaining_cells()
        self.assertEqual(len(cells), 81 - 27)
        self.assertEqual(cells, sorted(cells))
        self.assertEqual(cells[0], (0, 3))
        self.assertEqual(cells[-1], (8, 5))

    def test_fill_diagonal(self):
        grid = np.zeros((9, 9), dtype=np.int32)
        fill_diagonal(grid, make_rng(7))
        for origin in (0, 3, 6):
            box = grid[origin:origin + 3, origin:origin + 3].flatten()
            self.assertEqual(sorted(box), list(range(1, 10)))
        # Nothing outside the diagonal boxes is touched
        for row, col in remaining_cells():
            self.assertEqual(grid[row, col], 0)


class TestBacktrackingFill(unittest.TestCase):
    def test_fill_remaining_completes_seeded_grid(self):
        for seed in range(5):
            with self.subTest(seed=seed):
                grid = np.zeros((9, 9), dtype=np.int32)
                fill_diagonal(grid, make_rng(seed))
                seeded = grid.copy()
                self.assertTrue(fill_remaining(grid))
                self.assertTrue(verify_sudoku(grid))
                # Diagonal boxes keep their seeded digits
                for origin in (0, 3, 6):
                    np.testing.assert_array_equal(
                        grid[origin:origin + 3, origin:origin + 3],
                        seeded[origin:origin + 3, origin:origin + 3],
                    )

    def test_fill_remaining_reports_dead_end(self):
        grid = np.zeros((9, 9), dtype=np.int32)
        grid[0, 1:] = [1, 2, 3, 4, 5, 6, 7, 8]
        grid[5, 0] = 9
        self.assertFalse(fill_remaining(grid, [(0, 0)]))
        self.assertEqual(grid[0, 0], 0)

    def test_fill_remaining_backtracks(self):
        # Row 0 leaves {1, 2} for its first two cells; the 2 below (0, 1)
        # turns the ascending first try (0, 0) = 1 into a dead end.
        grid = np.zeros((9, 9), dtype=np.int32)
        grid[0, 2:] = [3, 4, 5, 6, 7, 8, 9]
        grid[5, 1] = 2
        self.assertTrue(fill_remaining(grid, [(0, 0), (0, 1)]))
        self.assertEqual(grid[0, 0], 2)
        self.assertEqual(grid[0, 1], 1)

    def test_fill_values(self):
        grid = fill_values(make_rng(11))
        self.assertEqual(grid.shape, (9, 9))
        self.assertTrue(verify_sudoku(grid))


class TestEmptyCellCarving(unittest.TestCase):
    def test_exact_count(self):
        solution = fill_values(make_rng(3))
        for n_empty in (0, 1, 41, 81):
            with self.subTest(n_empty=n_empty):
                puzzle = add_empty_cells(solution.copy(), n_empty, make_rng(n_empty))
                self.assertEqual(count_empty(puzzle), n_empty)

    def test_rejects_impossible_count(self):
        grid = fill_values(make_rng(3))
        with self.assertRaises(ValueError):
            add_empty_cells(grid, 82, make_rng(0))
        with self.assertRaises(ValueError):
            add_empty_cells(grid, -1, make_rng(0))


class TestGenerate(unittest.TestCase):
    def test_generate_each_difficulty(self):
        rng = make_rng(2024)
        for difficulty in Difficulty:
            with self.subTest(difficulty=difficulty):
                solution, puzzle = generate(difficulty, rng)
                self.assertTrue(verify_sudoku(solution))
                self.assertEqual(count_empty(puzzle), difficulty.value)
                filled = puzzle != 0
                np.testing.assert_array_equal(puzzle[filled], solution[filled])

    def test_easy_scenario(self):
        solution, puzzle = generate(Difficulty.EASY)
        self.assertEqual(int(np.sum(puzzle == 0)), 13)
        self.assertTrue(verify_sudoku(solution))

    def test_raw_empty_count(self):
        solution, puzzle = generate(5, make_rng(1))
        self.assertEqual(count_empty(puzzle), 5)

    def test_solution_is_read_only(self):
        solution, puzzle = generate(Difficulty.MEDIUM, make_rng(5))
        with self.assertRaises(ValueError):
            solution[0, 0] = 0
        puzzle[0, 0] = 0  # the puzzle stays writable

    def test_same_seed_same_boards(self):
        a = generate(Difficulty.HARD, make_rng(99))
        b = generate(Difficulty.HARD, make_rng(99))
        np.testing.assert_array_equal(a[0], b[0])
        np.testing.assert_array_equal(a[1], b[1])

    def test_fill_in_round_trip(self):
        solution, puzzle = generate(Difficulty.EASY, make_rng(8))
        self.assertFalse(is_complete(puzzle, solution))
        for row, col in zip(*np.nonzero(puzzle == 0)):
            matches_before = int(np.sum(puzzle == solution))
            value = solution[row, col]
            self.assertTrue(is_safe(puzzle, row, col, value))
            puzzle[row, col] = value
            self.assertEqual(puzzle[row, col], value)
            self.assertEqual(int(np.sum(puzzle == solution)), matches_before + 1)
        self.assertTrue(is_complete(puzzle, solution))


class TestGenerateDataset(unittest.TestCase):
    def test_shapes_and_validity(self):
        puzzles, solutions = generate_dataset(n_puzzles=4, difficulty=Difficulty.EASY, seed=0)
        self.assertEqual(puzzles.shape, (4, 81))
        self.assertEqual(solutions.shape, (4, 81))
        for puzzle, solution in zip(puzzles, solutions):
            self.assertTrue(verify_sudoku(solution))
            self.assertEqual(int(np.sum(puzzle == 0)), 13)


if __name__ == "__main__":
    unittest.main()
