import random
import unittest

from sudoku_puzzle.grid import copy_grid, is_solved_grid, iter_cells, make_empty_grid
from sudoku_puzzle.solver import count_solutions, fill_grid, has_unique_solution, solve

SOLVED = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

CLASSIC_PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]


def _dead_end_grid():
    # (0, 0) can only take 2, after which (0, 1) has no candidate left.
    grid = make_empty_grid()
    grid[0] = [0, 0, 3, 4, 5, 6, 7, 8, 9]
    grid[3][0] = 1
    grid[7][1] = 1
    return grid


class FillGridTests(unittest.TestCase):
    def test_fills_empty_grid_validly(self) -> None:
        for seed in range(5):
            grid = make_empty_grid()
            self.assertTrue(fill_grid(grid, random.Random(seed)))
            self.assertTrue(is_solved_grid(grid))

    def test_unseeded_fill_is_valid(self) -> None:
        grid = make_empty_grid()
        self.assertTrue(fill_grid(grid))
        self.assertTrue(is_solved_grid(grid))

    def test_seed_reproduces_grid(self) -> None:
        first = make_empty_grid()
        second = make_empty_grid()
        fill_grid(first, random.Random(42))
        fill_grid(second, random.Random(42))
        self.assertEqual(first, second)

    def test_different_seeds_give_variety(self) -> None:
        grids = set()
        for seed in range(4):
            grid = make_empty_grid()
            fill_grid(grid, random.Random(seed))
            grids.add(tuple(map(tuple, grid)))
        self.assertGreater(len(grids), 1)

    def test_keeps_prefilled_cells(self) -> None:
        grid = copy_grid(CLASSIC_PUZZLE)
        self.assertTrue(fill_grid(grid, random.Random(3)))
        self.assertEqual(grid, SOLVED)

    def test_dead_end_restores_grid(self) -> None:
        grid = _dead_end_grid()
        self.assertFalse(fill_grid(grid, random.Random(0)))
        self.assertEqual(grid, _dead_end_grid())


class CountSolutionsTests(unittest.TestCase):
    def test_single_hole_has_one_completion(self) -> None:
        for r, c in [(0, 0), (4, 4), (8, 8)]:
            grid = copy_grid(SOLVED)
            grid[r][c] = 0
            self.assertEqual(count_solutions(grid), 1)

    def test_empty_grid_stops_at_limit(self) -> None:
        self.assertEqual(count_solutions(make_empty_grid(), limit=2), 2)
        self.assertEqual(count_solutions(make_empty_grid(), limit=5), 5)

    def test_full_grid_counts_once(self) -> None:
        self.assertEqual(count_solutions(SOLVED), 1)

    def test_non_positive_limit_skips_search(self) -> None:
        self.assertEqual(count_solutions(make_empty_grid(), limit=0), 0)

    def test_classic_puzzle_is_unique(self) -> None:
        self.assertEqual(count_solutions(CLASSIC_PUZZLE), 1)
        self.assertTrue(has_unique_solution(CLASSIC_PUZZLE))

    def test_two_cleared_rows_are_ambiguous(self) -> None:
        # Swapping rows 0 and 1 yields a second completion.
        grid = copy_grid(SOLVED)
        grid[0] = [0] * 9
        grid[1] = [0] * 9
        self.assertEqual(count_solutions(grid, limit=2), 2)
        self.assertFalse(has_unique_solution(grid))

    def test_does_not_mutate_caller_grid(self) -> None:
        grid = copy_grid(CLASSIC_PUZZLE)
        count_solutions(grid)
        self.assertEqual(grid, CLASSIC_PUZZLE)

    def test_accepts_tuples(self) -> None:
        frozen = tuple(tuple(row) for row in CLASSIC_PUZZLE)
        self.assertEqual(count_solutions(frozen), 1)

    def test_dead_end_has_no_completion(self) -> None:
        self.assertEqual(count_solutions(_dead_end_grid()), 0)
        self.assertFalse(has_unique_solution(_dead_end_grid()))


class SolveTests(unittest.TestCase):
    def test_single_hole_round_trip(self) -> None:
        for r, c in iter_cells():
            puzzle = copy_grid(SOLVED)
            puzzle[r][c] = 0
            self.assertEqual(count_solutions(puzzle), 1)
            board = copy_grid(puzzle)
            self.assertTrue(solve(board))
            self.assertEqual(board, SOLVED)

    def test_solves_classic_puzzle(self) -> None:
        board = copy_grid(CLASSIC_PUZZLE)
        self.assertTrue(solve(board))
        self.assertEqual(board, SOLVED)

    def test_full_grid_is_already_solved(self) -> None:
        board = copy_grid(SOLVED)
        self.assertTrue(solve(board))
        self.assertEqual(board, SOLVED)

    def test_failure_leaves_grid_untouched(self) -> None:
        board = _dead_end_grid()
        self.assertFalse(solve(board))
        self.assertEqual(board, _dead_end_grid())

    def test_empty_grid_gets_deterministic_completion(self) -> None:
        first = make_empty_grid()
        second = make_empty_grid()
        self.assertTrue(solve(first))
        self.assertTrue(solve(second))
        self.assertEqual(first, second)
        self.assertTrue(is_solved_grid(first))
        self.assertEqual(first[0], [1, 2, 3, 4, 5, 6, 7, 8, 9])


if __name__ == "__main__":
    unittest.main()
