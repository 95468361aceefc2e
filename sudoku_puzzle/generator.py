"""Sudoku puzzle generator with a guaranteed unique solution."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .grid import (
    EMPTY,
    GRID_SIZE,
    TOTAL_CELLS,
    FrozenGrid,
    Grid,
    copy_grid,
    count_clues,
    freeze_grid,
    make_empty_grid,
)
from .solver import count_solutions, fill_grid

logger = logging.getLogger(__name__)


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


REMOVAL_TARGETS: Dict[Difficulty, int] = {
    Difficulty.EASY: 36,
    Difficulty.MEDIUM: 46,
    Difficulty.HARD: 52,
    Difficulty.EXPERT: 58,
}

DEFAULT_DIFFICULTY = Difficulty.MEDIUM


def resolve_difficulty(tag: Any) -> Difficulty:
    """Map a difficulty tag onto :class:`Difficulty`, falling back to medium."""

    if isinstance(tag, Difficulty):
        return tag
    try:
        return Difficulty(tag)
    except ValueError:
        logger.debug("Unknown difficulty %r, using %s", tag, DEFAULT_DIFFICULTY.value)
        return DEFAULT_DIFFICULTY


def removal_target(tag: Any) -> int:
    return REMOVAL_TARGETS[resolve_difficulty(tag)]


@dataclass(frozen=True)
class GenerationResult:
    """A generated puzzle and its unique solution."""

    puzzle: FrozenGrid
    solution: FrozenGrid
    difficulty: Difficulty = DEFAULT_DIFFICULTY

    @property
    def clue_count(self) -> int:
        return count_clues(self.puzzle)

    def puzzle_grid(self) -> Grid:
        return copy_grid(self.puzzle)

    def solution_grid(self) -> Grid:
        return copy_grid(self.solution)

    def to_dict(self) -> dict:
        return {
            "difficulty": self.difficulty.value,
            "puzzle": self.puzzle_grid(),
            "solution": self.solution_grid(),
        }


class PuzzleGenerator:
    """Produce (puzzle, solution) pairs from a private random source."""

    def __init__(self, *, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    def generate_solution(self) -> Grid:
        grid = make_empty_grid()
        fill_grid(grid, self._rng)
        return grid

    def generate_puzzle(self, difficulty: Any = DEFAULT_DIFFICULTY) -> GenerationResult:
        level = resolve_difficulty(difficulty)
        solution = self.generate_solution()
        puzzle = self._carve_puzzle(copy_grid(solution), REMOVAL_TARGETS[level])
        return GenerationResult(
            puzzle=freeze_grid(puzzle),
            solution=freeze_grid(solution),
            difficulty=level,
        )

    def _carve_puzzle(self, grid: Grid, target: int) -> Grid:
        # Single greedy pass: a cell restored here is never retried.
        positions = list(range(TOTAL_CELLS))
        self._rng.shuffle(positions)
        removed = 0
        for pos in positions:
            if removed >= target:
                break
            r, c = divmod(pos, GRID_SIZE)
            backup = grid[r][c]
            grid[r][c] = EMPTY
            if count_solutions(grid, limit=2) == 1:
                removed += 1
            else:
                grid[r][c] = backup
        logger.debug("Removed %d of %d targeted cells", removed, target)
        return grid


def generate_puzzle(
    difficulty: Any = DEFAULT_DIFFICULTY,
    rng: Optional[random.Random] = None,
) -> GenerationResult:
    """Generate a uniquely solvable puzzle for ``difficulty``.

    Unrecognised difficulty tags behave like ``"medium"``. Pass ``rng`` to make
    the result reproducible.
    """

    return PuzzleGenerator(rng=rng).generate_puzzle(difficulty)


__all__ = [
    "Difficulty",
    "REMOVAL_TARGETS",
    "DEFAULT_DIFFICULTY",
    "resolve_difficulty",
    "removal_target",
    "GenerationResult",
    "PuzzleGenerator",
    "generate_puzzle",
]
