from __future__ import annotations

from typing import Tuple

Color = Tuple[int, int, int]
Coordinate = Tuple[int, int]  # (row, column)
