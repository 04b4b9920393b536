"""Seeded maze generation and the command-line entry point."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional, TextIO

from .maze import Maze

logger = logging.getLogger(__name__)


class MazeGenerator:
    """Generate backtracking mazes of a fixed size from one random stream."""

    def __init__(
        self,
        *,
        rows: int = 20,
        cols: int = 20,
        seed: Optional[int] = None,
    ) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("rows and cols must be non-negative")
        self.rows = rows
        self.cols = cols
        self.seed = seed
        self._rng = random.Random(seed)

    def create_maze(self) -> Maze:
        maze = Maze.from_backtracking(self.rows, self.cols, self._rng)
        if maze is None:
            raise RuntimeError(f"Failed to generate a {self.rows}x{self.cols} maze")
        return maze

    def generate_batch(self, count: int) -> List[Maze]:
        """Generate ``count`` mazes from the generator's random stream."""

        mazes = [self.create_maze() for _ in range(count)]
        logger.debug("Generated %d mazes of %dx%d (seed=%s)", len(mazes), self.rows, self.cols, self.seed)
        return mazes


__all__ = ["MazeGenerator"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate mazes with randomized depth-first backtracking")
    parser.add_argument("--rows", type=int, default=20, help="Maze height in cells")
    parser.add_argument("--cols", type=int, default=20, help="Maze width in cells")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--count", type=int, default=1, help="Number of mazes to print")
    parser.add_argument("--ascii", action="store_true", help="Print '#', ' ' and 'E' instead of block glyphs")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log generation details to stderr")
    return parser.parse_args(argv)


def main(
    argv: Optional[List[str]] = None,
    *,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    args = _parse_args(argv)
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        generator = MazeGenerator(rows=args.rows, cols=args.cols, seed=args.seed)
        mazes = generator.generate_batch(args.count)
    except (ValueError, RuntimeError) as exc:
        logger.debug("Generation failed: %s", exc)
        print("Failed to generate maze.", file=stderr)
        return 1
    for maze in mazes:
        stdout.write(maze.render(plain=args.ascii))
        stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
