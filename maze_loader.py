from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, TextIO

from models import Grid

logger = logging.getLogger(__name__)

BIT_CHARS = {"0": 0, "1": 1}


class MazeFormatError(ValueError):
    """Raised when maze text does not describe a rectangular grid."""


def parse_maze_line(line: str) -> List[int]:
    """Return the 0/1 values of a line; every other character is a separator."""
    return [BIT_CHARS[ch] for ch in line if ch in BIT_CHARS]


def parse_maze_lines(lines: Iterable[str]) -> Grid:
    """Build a Grid from text lines of 0 (open) and 1 (blocked) tokens.

    Lines without any 0/1 token are skipped.

    Raises:
        MazeFormatError: If rows are not all the same length.
    """
    rows: List[List[int]] = []
    width = 0
    for lineno, line in enumerate(lines, start=1):
        bits = parse_maze_line(line)
        if not bits:
            continue
        if not rows:
            width = len(bits)
        elif len(bits) != width:
            raise MazeFormatError(
                f"Line {lineno}: expected {width} cells, found {len(bits)}."
            )
        rows.append(bits)

    logger.debug("parsed maze of %d rows x %d columns", len(rows), width)
    return Grid.from_bits(rows)


def read_maze(stream: TextIO) -> Grid:
    """Parse a maze from a text stream.

    Raises:
        MazeFormatError: If the stream is not valid text or not rectangular.
    """
    try:
        return parse_maze_lines(stream)
    except UnicodeDecodeError as e:
        raise MazeFormatError(f"not readable as text: {e}") from e


def load_maze(path: Path) -> Grid:
    """Load a maze from a text file."""
    if not path.exists():
        raise FileNotFoundError(f"Maze not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return read_maze(f)
