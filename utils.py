from __future__ import annotations

from typing import Any, Dict

from maze_types import Color


def clamp_int(v: int, lo: int, hi: int) -> int:
    """Clamp v into [lo, hi] (tile sizes, color channels)."""
    return max(lo, min(hi, v))


def as_color(value: Any, default: Color) -> Color:
    """Read an ``[r, g, b]`` config entry as a cell color.

    Extra items (e.g. an alpha channel) are ignored and every channel is
    clamped to 0..255. Anything that is not three numbers, including JSON
    ``Infinity``/``NaN``, yields ``default``.
    """
    if not isinstance(value, (list, tuple)) or len(value) < 3:
        return default
    try:
        r, g, b = (clamp_int(int(ch), 0, 255) for ch in value[:3])
    except (TypeError, ValueError, OverflowError):
        return default
    return (r, g, b)


def deep_get(d: Dict[str, Any], path: str, default: Any) -> Any:
    """Look up a dotted config key such as ``"render.colors.routed"``.

    Returns ``default`` as soon as a segment is missing or a parent is not
    a JSON object.
    """
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur
