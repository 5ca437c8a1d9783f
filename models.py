from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence

from maze_types import Color, Coordinate


class OutOfBounds(IndexError):
    """Raised when a coordinate falls outside the grid."""


class Cell(Enum):
    """State of one grid cell. The value is its default display glyph."""

    OPEN = "."
    BLOCKED = "#"
    ROUTED = "+"


@dataclass
class Grid:
    """Fixed-size rectangular matrix of cells indexed by (row, column)."""

    cells: List[List[Cell]]
    rows: int = field(init=False)
    columns: int = field(init=False)

    def __post_init__(self) -> None:
        self.rows = len(self.cells)
        self.columns = len(self.cells[0]) if self.cells else 0
        for i, row in enumerate(self.cells):
            if len(row) != self.columns:
                raise ValueError(
                    f"Row {i} has {len(row)} cells, expected {self.columns}."
                )

    @classmethod
    def from_bits(cls, bits: Sequence[Sequence[int]]) -> "Grid":
        """Build a grid from rows of 0 (open) / 1 (blocked) values."""
        return cls(
            [[Cell.BLOCKED if b else Cell.OPEN for b in row] for row in bits]
        )

    @property
    def origin(self) -> Coordinate:
        return (0, 0)

    @property
    def terminal(self) -> Coordinate:
        return (self.rows - 1, self.columns - 1)

    def is_empty(self) -> bool:
        return self.rows == 0 or self.columns == 0

    def in_bounds(self, coord: Coordinate) -> bool:
        r, c = coord
        return 0 <= r < self.rows and 0 <= c < self.columns

    def _check(self, coord: Coordinate) -> None:
        if not self.in_bounds(coord):
            raise OutOfBounds(
                f"{coord} is outside a {self.rows}x{self.columns} grid"
            )

    def cell_at(self, coord: Coordinate) -> Cell:
        self._check(coord)
        r, c = coord
        return self.cells[r][c]

    def set_cell(self, coord: Coordinate, state: Cell) -> None:
        """Overwrite one cell. Callers only ever promote OPEN to ROUTED."""
        self._check(coord)
        r, c = coord
        self.cells[r][c] = state

    def routed_cells(self) -> List[Coordinate]:
        """Row-major list of cells currently on the route."""
        return [
            (r, c)
            for r, row in enumerate(self.cells)
            for c, cell in enumerate(row)
            if cell is Cell.ROUTED
        ]


@dataclass(frozen=True)
class RenderStyle:
    tile_size: int = 24
    open_color: Color = (235, 235, 240)
    blocked_color: Color = (40, 44, 56)
    routed_color: Color = (230, 90, 70)
    grid_color: Color = (126, 126, 126)
    bg: Color = (18, 20, 28)
    show_grid: bool = True
    title: str = "Maze Solver"

    def color_for(self, cell: Cell) -> Color:
        if cell is Cell.BLOCKED:
            return self.blocked_color
        if cell is Cell.ROUTED:
            return self.routed_color
        return self.open_color


@dataclass(frozen=True)
class SolverConfig:
    symbols: Dict[Cell, str]
    style: RenderStyle
    log_level: str = "WARNING"
