from __future__ import annotations

import logging
from typing import Any, Dict

from models import Cell, RenderStyle, SolverConfig
from utils import as_color, clamp_int, deep_get

DEFAULT_STYLE = RenderStyle()
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_symbol(raw: Any, default: str) -> str:
    """Parse a display glyph; only the first character is kept."""
    if raw is None:
        return default
    glyph = str(raw).strip()
    # Ensure a single glyph so the box stays aligned.
    return glyph[0] if glyph else default


def _parse_flag(raw: Any, default: bool) -> bool:
    """Accept only real JSON booleans; anything else keeps the default."""
    return raw if isinstance(raw, bool) else default


def parse_symbols(raw: Any) -> Dict[Cell, str]:
    """Parse the glyph table used by the text renderer.

    Allows config like:
      "symbols": { "open": ".", "blocked": "#", "routed": "+" }
    """
    if not isinstance(raw, dict):
        raw = {}
    return {cell: _parse_symbol(raw.get(cell.name.lower()), cell.value) for cell in Cell}


def parse_render_style(cfg: Dict[str, Any]) -> RenderStyle:
    """Parse tile size, colors and window settings from config data.

    Args:
        cfg: Whole config dictionary.

    Returns:
        RenderStyle with defaults applied.
    """
    d = DEFAULT_STYLE
    try:
        tile_size = int(deep_get(cfg, "render.tile_size", d.tile_size))
    except (TypeError, ValueError, OverflowError):
        tile_size = d.tile_size
    return RenderStyle(
        tile_size=clamp_int(tile_size, 4, 128),
        open_color=as_color(deep_get(cfg, "render.colors.open", None), d.open_color),
        blocked_color=as_color(deep_get(cfg, "render.colors.blocked", None), d.blocked_color),
        routed_color=as_color(deep_get(cfg, "render.colors.routed", None), d.routed_color),
        grid_color=as_color(deep_get(cfg, "render.colors.grid", None), d.grid_color),
        bg=as_color(deep_get(cfg, "render.colors.bg", None), d.bg),
        show_grid=_parse_flag(deep_get(cfg, "render.show_grid", None), d.show_grid),
        title=str(deep_get(cfg, "window.title", d.title)),
    )


def parse_log_level(raw: Any) -> str:
    """Parse a logging level name (defaults to WARNING)."""
    if isinstance(raw, str) and raw.strip().upper() in LOG_LEVELS:
        return raw.strip().upper()
    return logging.getLevelName(logging.WARNING)


def parse_solver_config(cfg: Dict[str, Any]) -> SolverConfig:
    """Parse the solver config file contents.

    Args:
        cfg: Dict loaded from the JSON config (may be empty).

    Returns:
        SolverConfig with defaults applied.
    """
    if not isinstance(cfg, dict):
        cfg = {}
    return SolverConfig(
        symbols=parse_symbols(cfg.get("symbols")),
        style=parse_render_style(cfg),
        log_level=parse_log_level(deep_get(cfg, "logging.level", None)),
    )
