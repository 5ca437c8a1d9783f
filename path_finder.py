from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, List, Optional

from maze_types import Coordinate
from models import Cell, Grid

logger = logging.getLogger(__name__)

# up, down, left, right; this order breaks ties between equal-length paths
DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class PathFinder:
    """Shortest route from the top-left to the bottom-right cell of a Grid.

    Unweighted breadth-first search over 4-adjacency. When the terminal is
    reached the predecessor chain is walked back to the origin and every
    cell on it is repainted ROUTED.
    """

    def solve(self, grid: Grid) -> int:
        """Mark the shortest route on ``grid`` and return its length in cells.

        Returns 0 (and leaves the grid untouched) when the grid is empty,
        the origin is blocked, or the terminal cannot be reached.
        """
        if grid.is_empty() or grid.cell_at(grid.origin) is Cell.BLOCKED:
            logger.debug("nothing to solve (empty grid or blocked origin)")
            return 0

        parent = self._search(grid)
        if parent is None:
            logger.info("no route through %dx%d grid", grid.rows, grid.columns)
            return 0

        steps = self._mark_route(grid, parent)
        logger.info("route of %d cells through %dx%d grid", steps, grid.rows, grid.columns)
        return steps

    def _search(self, grid: Grid) -> Optional[List[List[Optional[Coordinate]]]]:
        """Run BFS; return the predecessor table if the terminal was reached."""
        visited = [[False] * grid.columns for _ in range(grid.rows)]
        parent: List[List[Optional[Coordinate]]] = [
            [None] * grid.columns for _ in range(grid.rows)
        ]

        start = grid.origin
        goal = grid.terminal
        q = deque([start])
        visited[start[0]][start[1]] = True
        expanded = 0

        while q:
            cur = q.popleft()
            expanded += 1
            if cur == goal:
                logger.debug("terminal reached after expanding %d cells", expanded)
                return parent
            for nr, nc in self._neighbors(grid, cur):
                if visited[nr][nc]:
                    continue
                visited[nr][nc] = True
                parent[nr][nc] = cur
                q.append((nr, nc))

        logger.debug("frontier exhausted after expanding %d cells", expanded)
        return None

    def _neighbors(self, grid: Grid, coord: Coordinate) -> Iterable[Coordinate]:
        r, c = coord
        for dr, dc in DIRECTIONS:
            n = (r + dr, c + dc)
            if grid.in_bounds(n) and grid.cell_at(n) is not Cell.BLOCKED:
                yield n

    def _mark_route(
        self, grid: Grid, parent: List[List[Optional[Coordinate]]]
    ) -> int:
        steps = 0
        cur: Optional[Coordinate] = grid.terminal
        while cur is not None:
            grid.set_cell(cur, Cell.ROUTED)
            steps += 1
            cur = parent[cur[0]][cur[1]]
        return steps


def solve(grid: Grid) -> int:
    """Solve ``grid`` in place with a fresh PathFinder; see PathFinder.solve."""
    return PathFinder().solve(grid)
