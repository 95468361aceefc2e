"""Grid primitives and placement checks for 9x9 Sudoku boards."""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Set, Tuple

import numpy as np

GRID_SIZE = 9
SUBGRID_SIZE = 3
TOTAL_CELLS = GRID_SIZE * GRID_SIZE
EMPTY = 0

DIGITS = list(range(1, GRID_SIZE + 1))

Grid = List[List[int]]
FrozenGrid = Tuple[Tuple[int, ...], ...]
GridLike = Sequence[Sequence[int]]
Cell = Tuple[int, int]


def make_empty_grid() -> Grid:
    return [[EMPTY] * GRID_SIZE for _ in range(GRID_SIZE)]


def copy_grid(grid: GridLike) -> Grid:
    """Return an independent, mutable copy of ``grid``."""
    return [list(row) for row in grid]


def freeze_grid(grid: GridLike) -> FrozenGrid:
    return tuple(tuple(row) for row in grid)


def iter_cells() -> Iterator[Cell]:
    """Yield every ``(row, col)`` coordinate in row-major order."""
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            yield row, col


def box_origin(row: int, col: int) -> Cell:
    return (row // SUBGRID_SIZE) * SUBGRID_SIZE, (col // SUBGRID_SIZE) * SUBGRID_SIZE


def is_valid(grid: GridLike, row: int, col: int, num: int) -> bool:
    """Check whether ``num`` can be placed at ``(row, col)``.

    Returns False when ``num`` already occurs elsewhere in the row, the
    column or the 3x3 box of the target cell. The target cell itself is not
    compared, so a cell may already hold the value being tested.
    """

    for c in range(GRID_SIZE):
        if c != col and grid[row][c] == num:
            return False
    for r in range(GRID_SIZE):
        if r != row and grid[r][col] == num:
            return False
    start_row, start_col = box_origin(row, col)
    for r in range(start_row, start_row + SUBGRID_SIZE):
        for c in range(start_col, start_col + SUBGRID_SIZE):
            if (r, c) != (row, col) and grid[r][c] == num:
                return False
    return True


def find_empty(grid: GridLike) -> Optional[Cell]:
    """Return the first empty cell in row-major order, or None when full."""
    for row, col in iter_cells():
        if grid[row][col] == EMPTY:
            return row, col
    return None


def count_clues(grid: GridLike) -> int:
    return sum(value != EMPTY for row in grid for value in row)


def is_complete(grid: GridLike) -> bool:
    return find_empty(grid) is None


def is_solved_grid(grid: GridLike) -> bool:
    """True when every row, column and box is a permutation of 1..9."""

    arr = np.asarray(grid, dtype=np.int64)
    if arr.shape != (GRID_SIZE, GRID_SIZE):
        return False
    expected = np.arange(1, GRID_SIZE + 1)
    for idx in range(GRID_SIZE):
        if not np.array_equal(np.sort(arr[idx, :]), expected):
            return False
        if not np.array_equal(np.sort(arr[:, idx]), expected):
            return False
    for start_row in range(0, GRID_SIZE, SUBGRID_SIZE):
        for start_col in range(0, GRID_SIZE, SUBGRID_SIZE):
            box = arr[start_row : start_row + SUBGRID_SIZE, start_col : start_col + SUBGRID_SIZE]
            if not np.array_equal(np.sort(box, axis=None), expected):
                return False
    return True


def find_conflicts(grid: GridLike) -> Set[Cell]:
    """Collect every filled cell that repeats a value within a row, column or box.

    Both cells of each clashing pair are reported. Empty cells never conflict.
    """

    conflicts: Set[Cell] = set()
    for row, col in iter_cells():
        value = grid[row][col]
        if value == EMPTY:
            continue
        for i in range(GRID_SIZE):
            if i != col and grid[row][i] == value:
                conflicts.update({(row, col), (row, i)})
            if i != row and grid[i][col] == value:
                conflicts.update({(row, col), (i, col)})
        start_row, start_col = box_origin(row, col)
        for r in range(start_row, start_row + SUBGRID_SIZE):
            for c in range(start_col, start_col + SUBGRID_SIZE):
                if (r, c) != (row, col) and grid[r][c] == value:
                    conflicts.update({(row, col), (r, c)})
    return conflicts


__all__ = [
    "GRID_SIZE",
    "SUBGRID_SIZE",
    "TOTAL_CELLS",
    "EMPTY",
    "DIGITS",
    "Grid",
    "FrozenGrid",
    "GridLike",
    "Cell",
    "make_empty_grid",
    "copy_grid",
    "freeze_grid",
    "iter_cells",
    "box_origin",
    "is_valid",
    "find_empty",
    "count_clues",
    "is_complete",
    "is_solved_grid",
    "find_conflicts",
]
