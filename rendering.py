from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

import pygame

from models import Cell, Grid, RenderStyle

DEFAULT_SYMBOLS: Dict[Cell, str] = {cell: cell.value for cell in Cell}


# ----------------------------
# Text
# ----------------------------


def render_text(grid: Grid, symbols: Optional[Dict[Cell, str]] = None) -> str:
    """Draw the grid inside a box, open at the entrance and the exit.

    Example for a 2x2 grid:

        |-----|
          . # |
        | . .
        |-----|
    """
    glyphs = DEFAULT_SYMBOLS if symbols is None else symbols
    bar = "|" + "-" * (2 * grid.columns + 1) + "|\n"

    parts = [bar]
    last = grid.rows - 1
    for i, row in enumerate(grid.cells):
        parts.append(" " if i == 0 else "|")
        for cell in row:
            parts.append(" ")
            parts.append(glyphs.get(cell, cell.value))
        parts.append(" ")
        parts.append(" " if i == last else "|")
        parts.append("\n")
    parts.append(bar)
    return "".join(parts)


# ----------------------------
# Graphics
# ----------------------------


def surface_size(grid: Grid, tile_size: int) -> Tuple[int, int]:
    """Return (width_px, height_px); never smaller than 1x1."""
    return (max(1, grid.columns * tile_size), max(1, grid.rows * tile_size))


def iter_tiles(grid: Grid, tile_size: int) -> Iterable[Tuple[pygame.Rect, Cell]]:
    """Yield (screen_rect, cell) for every cell of the grid."""
    ts = tile_size
    for r, row in enumerate(grid.cells):
        for c, cell in enumerate(row):
            yield pygame.Rect(c * ts, r * ts, ts, ts), cell


def draw_grid_lines(surf: pygame.Surface, grid: Grid, style: RenderStyle) -> None:
    """Draw the tile grid overlay if enabled."""
    if not style.show_grid:
        return
    ts = style.tile_size
    w, h = surface_size(grid, ts)
    for x in range(0, w + 1, ts):
        pygame.draw.line(surf, style.grid_color, (x, 0), (x, h), 1)
    for y in range(0, h + 1, ts):
        pygame.draw.line(surf, style.grid_color, (0, y), (w, y), 1)


def draw_maze(surf: pygame.Surface, grid: Grid, style: RenderStyle) -> None:
    """Paint every cell with the color of its state."""
    surf.fill(style.bg)
    for rect, cell in iter_tiles(grid, style.tile_size):
        pygame.draw.rect(surf, style.color_for(cell), rect)
    draw_grid_lines(surf, grid, style)


def render_surface(grid: Grid, style: RenderStyle) -> pygame.Surface:
    """Render the grid onto a new off-screen surface."""
    surf = pygame.Surface(surface_size(grid, style.tile_size))
    draw_maze(surf, grid, style)
    return surf


def save_image(grid: Grid, path: Path, style: RenderStyle) -> None:
    """Write the rendered grid to an image file (format from the extension)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(render_surface(grid, style), str(path))


class MazeViewer:
    """Window that shows a (solved) grid until closed, ESC or Q."""

    def __init__(self, grid: Grid, style: RenderStyle) -> None:
        self.grid = grid
        self.style = style
        self.running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
            self.running = False

    def run(self) -> None:
        pygame.init()
        try:
            screen = pygame.display.set_mode(surface_size(self.grid, self.style.tile_size))
            pygame.display.set_caption(self.style.title)
            clock = pygame.time.Clock()
            self.running = True
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                draw_maze(screen, self.grid, self.style)
                pygame.display.flip()
                clock.tick(30)
        finally:
            pygame.quit()
