"""Backtracking search over Sudoku grids: filling, counting and solving."""

from __future__ import annotations

import random
from typing import List, Optional

from .grid import DIGITS, EMPTY, Grid, GridLike, copy_grid, find_empty, is_valid


def fill_grid(grid: Grid, rng: Optional[random.Random] = None) -> bool:
    """Complete ``grid`` in place with randomly ordered candidates.

    The first empty cell in row-major order is tried with a fresh shuffle of
    1..9 on every visit; failed placements are reset to 0 before the next
    candidate. Returns True once no empty cell is left and False when the
    current branch cannot be completed.
    """

    shuffler = rng if rng is not None else random
    cell = find_empty(grid)
    if cell is None:
        return True
    row, col = cell
    candidates = list(DIGITS)
    shuffler.shuffle(candidates)
    for value in candidates:
        if is_valid(grid, row, col, value):
            grid[row][col] = value
            if fill_grid(grid, shuffler):
                return True
            grid[row][col] = EMPTY
    return False


def count_solutions(grid: GridLike, limit: int = 2) -> int:
    """Count completions of ``grid``, stopping as soon as ``limit`` are found.

    The caller's grid is never touched; the search runs on a private copy.
    Every pending choice point is abandoned once the cap is hit.
    """

    work: List[List[int]] = copy_grid(grid)

    def search(count: int) -> int:
        if count >= limit:
            return count
        cell = find_empty(work)
        if cell is None:
            return count + 1
        row, col = cell
        for value in DIGITS:
            if is_valid(work, row, col, value):
                work[row][col] = value
                count = search(count)
                work[row][col] = EMPTY
                if count >= limit:
                    break
        return count

    return search(0)


def has_unique_solution(grid: GridLike) -> bool:
    return count_solutions(grid, limit=2) == 1


def solve(grid: Grid) -> bool:
    """Fill ``grid`` in place with its first completion in ascending digit order.

    Returns False, leaving the grid unchanged, when no completion exists.
    """

    cell = find_empty(grid)
    if cell is None:
        return True
    row, col = cell
    for value in DIGITS:
        if is_valid(grid, row, col, value):
            grid[row][col] = value
            if solve(grid):
                return True
            grid[row][col] = EMPTY
    return False


__all__ = ["fill_grid", "count_solutions", "has_unique_solution", "solve"]
