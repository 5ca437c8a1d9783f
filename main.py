from __future__ import annotations

import argparse
import contextlib
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

import pygame

from config_io import load_json_config
from config_parsing import parse_solver_config
from maze_loader import MazeFormatError, read_maze
from path_finder import PathFinder
from rendering import MazeViewer, render_text, save_image

logger = logging.getLogger(__name__)

NO_SOLUTION = "No solution"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Find the shortest path through a 0/1 maze, top-left to bottom-right."
    )
    p.add_argument(
        "-d", dest="print_start", action="store_true",
        help="Pretty-print (display) the maze after reading.",
    )
    p.add_argument(
        "-s", dest="print_length", action="store_true",
        help="Print length of shortest path or 'No solution'.",
    )
    p.add_argument(
        "-p", dest="print_solution", action="store_true",
        help="Pretty-print maze with the path, if one exists.",
    )
    p.add_argument("-i", dest="infile", default=None, help="Read maze from infile. (default: stdin)")
    p.add_argument("-o", dest="outfile", default=None, help="Write all output to outfile. (default: stdout)")
    p.add_argument("--config", type=str, default=None, help="JSON config (symbols, colors, logging).")
    p.add_argument("--window", action="store_true", help="Show the solved maze in a window.")
    p.add_argument("--image", type=str, default=None, help="Save the solved maze as an image.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return p.parse_args(argv)


def _open_in(stack: contextlib.ExitStack, infile: str | None) -> TextIO:
    if infile is None:
        return sys.stdin
    try:
        return stack.enter_context(open(infile, "r", encoding="utf-8"))
    except OSError as e:
        raise SystemExit(f"failed to open '{infile}': {e}")


def _open_out(stack: contextlib.ExitStack, outfile: str | None) -> TextIO:
    if outfile is None:
        return sys.stdout
    try:
        return stack.enter_context(open(outfile, "w", encoding="utf-8"))
    except OSError as e:
        raise SystemExit(f"failed to open '{outfile}': {e}")


def main(argv: Sequence[str] | None = None) -> int:
    """Entrypoint for solving a maze from the command line."""
    args = parse_args(argv)

    try:
        raw_cfg = load_json_config(Path(args.config)) if args.config else {}
    except OSError as e:
        raise SystemExit(f"failed to read config '{args.config}': {e}")
    cfg = parse_solver_config(raw_cfg)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else cfg.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    with contextlib.ExitStack() as stack:
        src = _open_in(stack, args.infile)
        try:
            grid = read_maze(src)
        except MazeFormatError as e:
            raise SystemExit(f"invalid maze: {e}")
        out = _open_out(stack, args.outfile)

        if args.print_start:
            out.write(render_text(grid, cfg.symbols))

        steps = PathFinder().solve(grid)

        if args.print_length:
            out.write(f"{steps}\n" if steps else f"{NO_SOLUTION}\n")
        if args.print_solution and steps:
            out.write(render_text(grid, cfg.symbols))

    if args.image:
        try:
            save_image(grid, Path(args.image), cfg.style)
        except (OSError, pygame.error) as e:
            raise SystemExit(f"failed to save image '{args.image}': {e}")
        logger.info("saved image to %s", args.image)
    if args.window:
        MazeViewer(grid, cfg.style).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
