"""Validate player entries against a stored Sudoku puzzle and solution."""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set

from .base import AbstractPuzzleEvaluator, PathLike
from .grid import (
    EMPTY,
    GRID_SIZE,
    Cell,
    Grid,
    GridLike,
    copy_grid,
    find_conflicts,
    is_solved_grid,
    iter_cells,
)
from .solver import solve


@dataclass
class CellEvaluation:
    """Result for a single cell filled in by the player."""

    row: int
    col: int
    expected: int
    entered: int
    is_correct: bool

    def to_dict(self) -> dict:
        return {
            "row": self.row,
            "col": self.col,
            "expected": self.expected,
            "entered": self.entered,
            "is_correct": self.is_correct,
        }


@dataclass
class SudokuEvaluationResult:
    """Aggregate evaluation for a Sudoku submission."""

    puzzle_id: str
    correct_cells: int
    total_cells: int
    accuracy: float
    is_valid_solution: bool
    conflicts: Set[Cell] = field(default_factory=set)
    cell_breakdown: List[CellEvaluation] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "puzzle_id": self.puzzle_id,
            "correct_cells": self.correct_cells,
            "total_cells": self.total_cells,
            "accuracy": self.accuracy,
            "is_valid_solution": self.is_valid_solution,
            "conflicts": [list(cell) for cell in sorted(self.conflicts)],
            "cell_breakdown": [cell.to_dict() for cell in self.cell_breakdown],
        }


def merge_entries(entries: GridLike, puzzle: GridLike) -> Grid:
    """Overlay player entries onto the givens; given cells always win."""

    board = copy_grid(puzzle)
    for r, c in iter_cells():
        if board[r][c] == EMPTY:
            board[r][c] = entries[r][c]
    return board


def check_entries(entries: GridLike, puzzle: GridLike, solution: GridLike) -> List[CellEvaluation]:
    """Compare each filled, non-given cell with the solution value."""

    results: List[CellEvaluation] = []
    for r, c in iter_cells():
        if puzzle[r][c] != EMPTY or entries[r][c] == EMPTY:
            continue
        results.append(
            CellEvaluation(
                row=r,
                col=c,
                expected=solution[r][c],
                entered=entries[r][c],
                is_correct=entries[r][c] == solution[r][c],
            )
        )
    return results


def is_won(entries: GridLike, puzzle: GridLike, solution: GridLike) -> bool:
    return all(
        puzzle[r][c] != EMPTY or entries[r][c] == solution[r][c]
        for r, c in iter_cells()
    )


def reveal(puzzle: GridLike) -> Grid:
    """Return a solved copy of ``puzzle``."""

    board = copy_grid(puzzle)
    if not solve(board):
        raise ValueError("Puzzle has no valid completion")
    return board


def _coerce_grid(grid: GridLike) -> Grid:
    if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
        raise ValueError(f"Grid must be {GRID_SIZE}x{GRID_SIZE}")
    return [[int(value) for value in row] for row in grid]


class SudokuEvaluator(AbstractPuzzleEvaluator):
    """Score a submitted grid against a puzzle stored in dataset metadata."""

    def evaluate(self, puzzle_id: str, candidate_grid: GridLike) -> SudokuEvaluationResult:
        record = self.get_record(puzzle_id)
        puzzle = _coerce_grid(record["puzzle_grid"])
        solution = _coerce_grid(record["solution_grid"])
        board = merge_entries(_coerce_grid(candidate_grid), puzzle)

        breakdown = check_entries(board, puzzle, solution)
        total_cells = sum(value == EMPTY for row in puzzle for value in row)
        correct = sum(cell.is_correct for cell in breakdown)
        accuracy = correct / total_cells if total_cells else 1.0

        return SudokuEvaluationResult(
            puzzle_id=puzzle_id,
            correct_cells=correct,
            total_cells=total_cells,
            accuracy=accuracy,
            is_valid_solution=is_solved_grid(board) and is_won(board, puzzle, solution),
            conflicts=find_conflicts(board),
            cell_breakdown=breakdown,
        )

    def reveal(self, puzzle_id: str) -> Grid:
        return reveal(_coerce_grid(self.get_record(puzzle_id)["puzzle_grid"]))


__all__ = [
    "SudokuEvaluator",
    "SudokuEvaluationResult",
    "CellEvaluation",
    "merge_entries",
    "check_entries",
    "is_won",
    "reveal",
]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate a Sudoku submission")
    parser.add_argument("metadata", type=Path, help="Path to sudoku puzzles metadata JSON")
    parser.add_argument("puzzle_id", type=str, help="Identifier of the puzzle to evaluate")
    parser.add_argument("candidate", type=Path, help="JSON file holding the submitted 9x9 grid")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    evaluator = SudokuEvaluator(args.metadata)
    candidate = json.loads(args.candidate.read_text(encoding="utf-8"))
    result = evaluator.evaluate(args.puzzle_id, candidate)
    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    main()
