#!/usr/bin/env python3
"""
generate_mazes.py

Generates random binary mazes for the solver.

- '0' is an open cell, '1' is blocked
- exactly int(rows * columns * density) cells are open, placed by shuffling
- output is one row per line, values separated by single spaces
- with -m N, up to N mazes are drawn until one has a route from the top-left
  to the bottom-right cell; the last draw is printed either way
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import List, Sequence, Tuple

from models import Grid
from path_finder import PathFinder

logger = logging.getLogger(__name__)


class MazeGenerator:
    def __init__(self, rng: random.Random) -> None:
        self.rng = rng
        self.finder = PathFinder()

    def bits(self, rows: int, columns: int, density: float) -> List[int]:
        """Shuffled flat sequence with a fixed share of open cells."""
        if rows < 0 or columns < 0:
            raise ValueError("rows and columns must be >= 0")
        if not 0.0 <= density <= 1.0:
            raise ValueError("density must be within [0, 1]")

        amt = rows * columns
        zero_amt = int(amt * density)
        seq = [0] * zero_amt + [1] * (amt - zero_amt)
        self.rng.shuffle(seq)
        return seq

    def generate(self, rows: int, columns: int, density: float) -> List[List[int]]:
        seq = self.bits(rows, columns, density)
        return [seq[r * columns:(r + 1) * columns] for r in range(rows)]

    def is_solvable(self, maze: Sequence[Sequence[int]]) -> bool:
        return self.finder.solve(Grid.from_bits(maze)) > 0

    def generate_solvable(
        self, rows: int, columns: int, density: float, tries: int = 1
    ) -> Tuple[List[List[int]], bool]:
        """Draw up to ``tries`` mazes, stopping at the first solvable one.

        Returns:
            (maze, solvable) where maze is the last one drawn.
        """
        attempts = max(1, tries)
        maze: List[List[int]] = []
        for attempt in range(1, attempts + 1):
            maze = self.generate(rows, columns, density)
            if self.is_solvable(maze):
                logger.debug("solvable maze on attempt %d", attempt)
                return maze, True
        if attempts > 1:
            logger.warning("no solvable maze in %d attempts", attempts)
        return maze, False


def format_maze(maze: Sequence[Sequence[int]]) -> str:
    """One row per line, values separated by spaces."""
    return "\n".join(" ".join(str(v) for v in row) for row in maze)


# ----------------------------
# CLI
# ----------------------------


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a random 0/1 maze.")
    p.add_argument("-r", dest="rows", type=int, default=10, help="Rows in the matrix")
    p.add_argument("-c", dest="columns", type=int, default=20, help="Columns in the matrix")
    p.add_argument(
        "-d", dest="density", type=float, default=0.7, help="Ratio of zeroes to ones"
    )
    p.add_argument(
        "-m",
        dest="tries",
        type=int,
        default=1,
        help="Amount of tries if maze isn't solvable",
    )
    p.add_argument(
        "-s",
        dest="seed",
        type=int,
        default=None,
        help="Random seed (default: current time)",
    )
    p.add_argument("-o", dest="outfile", type=str, default=None, help="Write maze to outfile")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    seed = args.seed if args.seed is not None else int(time.time())
    logger.debug("seed %d", seed)
    gen = MazeGenerator(random.Random(seed))
    try:
        maze, _ = gen.generate_solvable(
            args.rows, args.columns, args.density, args.tries
        )
    except ValueError as e:
        raise SystemExit(f"invalid arguments: {e}")

    text = format_maze(maze) + "\n"
    if args.outfile is None:
        sys.stdout.write(text)
    else:
        try:
            Path(args.outfile).write_text(text, encoding="utf-8")
        except OSError as e:
            raise SystemExit(f"failed to open '{args.outfile}': {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
