"""Sudoku dataset builder: JSON metadata plus rendered board images."""

from __future__ import annotations

import argparse
import logging
import random
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from .base import AbstractPuzzleGenerator, PathLike
from .generator import Difficulty, PuzzleGenerator, resolve_difficulty
from .grid import EMPTY, GRID_SIZE, SUBGRID_SIZE, Grid

logger = logging.getLogger(__name__)

MIN_CELL_SIZE = 9


@dataclass
class SudokuPuzzleRecord:
    """Persisted Sudoku puzzle metadata."""

    id: str
    difficulty: str
    puzzle_grid: Grid
    solution_grid: Grid
    clue_count: int
    image: Optional[str]
    solution_image_path: Optional[str]
    cell_bboxes: List[List[Tuple[int, int, int, int]]]
    canvas_size: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "difficulty": self.difficulty,
            "puzzle_grid": self.puzzle_grid,
            "solution_grid": self.solution_grid,
            "clue_count": self.clue_count,
            "image": self.image,
            "solution_image_path": self.solution_image_path,
            "cell_bboxes": [
                [list(map(int, bbox)) for bbox in row] for row in self.cell_bboxes
            ],
            "canvas_size": self.canvas_size,
        }


class SudokuDatasetGenerator(AbstractPuzzleGenerator[SudokuPuzzleRecord]):
    """Generate uniquely solvable 9x9 puzzles and write them out as a dataset."""

    def __init__(
        self,
        output_dir: PathLike = "data/sudoku",
        *,
        difficulty: str = Difficulty.MEDIUM.value,
        canvas_size: int = 450,
        render_images: bool = True,
        seed: Optional[int] = None,
    ) -> None:
        if canvas_size < GRID_SIZE * MIN_CELL_SIZE:
            raise ValueError(f"canvas_size must be at least {GRID_SIZE * MIN_CELL_SIZE} pixels")
        super().__init__(output_dir)
        self.difficulty = resolve_difficulty(difficulty)
        self.canvas_size = canvas_size
        self.render_images = render_images
        self._rng = random.Random(seed)
        self._puzzles = PuzzleGenerator(rng=self._rng)

        self.puzzle_dir = self.output_dir / "puzzles"
        self.solution_dir = self.output_dir / "solutions"
        if self.render_images:
            for path in (self.puzzle_dir, self.solution_dir):
                path.mkdir(parents=True, exist_ok=True)

    def create_puzzle(self, *, puzzle_id: Optional[str] = None) -> SudokuPuzzleRecord:
        puzzle_uuid = puzzle_id or str(uuid.UUID(int=self._rng.getrandbits(128), version=4))
        result = self._puzzles.generate_puzzle(self.difficulty)
        puzzle = result.puzzle_grid()
        solution = result.solution_grid()

        cell_size = self.canvas_size // GRID_SIZE
        cell_bboxes = self._compute_cell_bboxes(cell_size)

        image_rel: Optional[str] = None
        solution_rel: Optional[str] = None
        if self.render_images:
            font = self._resolve_font(cell_size)
            puzzle_image = self._render_board(puzzle, cell_size=cell_size, font=font)
            solution_image = self._render_board(
                solution,
                cell_size=cell_size,
                font=font,
                puzzle_grid=puzzle,
                highlight_solution=True,
            )
            puzzle_path = self.puzzle_dir / f"{puzzle_uuid}_puzzle.png"
            solution_path = self.solution_dir / f"{puzzle_uuid}_solution.png"
            puzzle_image.save(puzzle_path)
            solution_image.save(solution_path)
            image_rel = self.relativize_path(puzzle_path)
            solution_rel = self.relativize_path(solution_path)

        logger.debug("Created puzzle %s with %d clues", puzzle_uuid, result.clue_count)
        return SudokuPuzzleRecord(
            id=puzzle_uuid,
            difficulty=result.difficulty.value,
            puzzle_grid=puzzle,
            solution_grid=solution,
            clue_count=result.clue_count,
            image=image_rel,
            solution_image_path=solution_rel,
            cell_bboxes=cell_bboxes,
            canvas_size=self.canvas_size,
        )

    # --- Rendering -------------------------------------------------------------------

    def _render_board(
        self,
        grid: Sequence[Sequence[int]],
        *,
        cell_size: int,
        font: ImageFont.ImageFont,
        puzzle_grid: Optional[Sequence[Sequence[int]]] = None,
        highlight_solution: bool = False,
    ) -> Image.Image:
        board_size = cell_size * GRID_SIZE
        canvas = Image.new("RGB", (self.canvas_size, self.canvas_size), color="white")
        draw = ImageDraw.Draw(canvas)

        for i in range(GRID_SIZE + 1):
            line_width = 3 if i % SUBGRID_SIZE == 0 else 1
            offset = min(i * cell_size, board_size - 1)
            draw.line((0, offset, board_size, offset), fill="black", width=line_width)
            draw.line((offset, 0, offset, board_size), fill="black", width=line_width)

        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                value = grid[r][c]
                if value == EMPTY:
                    continue
                text = str(value)
                bbox = draw.textbbox((0, 0), text, font=font)
                text_width = bbox[2] - bbox[0]
                text_height = bbox[3] - bbox[1]
                x_text = c * cell_size + (cell_size - text_width) / 2 - bbox[0]
                y_text = r * cell_size + (cell_size - text_height) / 2 - bbox[1]
                is_clue = puzzle_grid is None or puzzle_grid[r][c] != EMPTY
                fill = "blue" if highlight_solution and not is_clue else "black"
                draw.text((x_text, y_text), text, fill=fill, font=font)
        return canvas

    @staticmethod
    def _resolve_font(cell_size: int) -> ImageFont.ImageFont:
        target_size = max(8, int(cell_size * 0.7))
        for font_name in ["arial.ttf", "LiberationSans-Regular.ttf", "DejaVuSans.ttf"]:
            try:
                return ImageFont.truetype(font_name, target_size)
            except OSError:
                continue
        return ImageFont.load_default()

    @staticmethod
    def _compute_cell_bboxes(cell_size: int) -> List[List[Tuple[int, int, int, int]]]:
        return [
            [
                (c * cell_size, r * cell_size, (c + 1) * cell_size, (r + 1) * cell_size)
                for c in range(GRID_SIZE)
            ]
            for r in range(GRID_SIZE)
        ]


__all__ = ["SudokuDatasetGenerator", "SudokuPuzzleRecord"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate uniquely solvable Sudoku puzzles")
    parser.add_argument("count", type=int, help="Number of puzzles to generate")
    parser.add_argument("--output-dir", type=Path, default=Path("data/sudoku"), help="Where to save artifacts")
    parser.add_argument(
        "--difficulty",
        default=Difficulty.MEDIUM.value,
        help="easy, medium, hard or expert (anything else is treated as medium)",
    )
    parser.add_argument("--canvas-size", type=int, default=450, help="Render size in pixels for the board")
    parser.add_argument("--no-images", action="store_true", help="Only write metadata, skip PNG rendering")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    generator = SudokuDatasetGenerator(
        output_dir=args.output_dir,
        difficulty=args.difficulty,
        canvas_size=args.canvas_size,
        render_images=not args.no_images,
        seed=args.seed,
    )
    logging.info(f"Generating {args.count} {generator.difficulty.value} puzzles into {generator.output_dir}")
    metadata_path = generator.output_dir / "data.json"
    records = generator.generate_dataset(args.count, metadata_path=metadata_path, progress=True)
    logging.info(f"Wrote {len(records)} records to {metadata_path}")


if __name__ == "__main__":
    main()
