"""Sudoku puzzle generation, solving and evaluation toolkit."""

__all__ = [
    "GRID_SIZE",
    "Grid",
    "is_valid",
    "find_conflicts",
    "is_solved_grid",
    "make_empty_grid",
    "copy_grid",
    "fill_grid",
    "count_solutions",
    "has_unique_solution",
    "solve",
    "Difficulty",
    "REMOVAL_TARGETS",
    "GenerationResult",
    "PuzzleGenerator",
    "generate_puzzle",
    "SudokuDatasetGenerator",
    "SudokuPuzzleRecord",
    "SudokuEvaluator",
    "SudokuEvaluationResult",
    "CellEvaluation",
]

from .grid import (
    GRID_SIZE,
    Grid,
    copy_grid,
    find_conflicts,
    is_solved_grid,
    is_valid,
    make_empty_grid,
)
from .solver import count_solutions, fill_grid, has_unique_solution, solve
from .generator import (
    REMOVAL_TARGETS,
    Difficulty,
    GenerationResult,
    PuzzleGenerator,
    generate_puzzle,
)
from .dataset import SudokuDatasetGenerator, SudokuPuzzleRecord
from .evaluator import CellEvaluation, SudokuEvaluationResult, SudokuEvaluator
