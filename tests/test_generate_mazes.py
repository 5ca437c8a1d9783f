import logging
import os
import random

import pytest

from generate_mazes import MazeGenerator, format_maze, main
from maze_loader import parse_maze_lines


def test_open_cell_ratio_is_exact():
    maze = MazeGenerator(random.Random(1)).generate(10, 20, 0.7)
    assert len(maze) == 10
    assert all(len(row) == 20 for row in maze)
    flat = [v for row in maze for v in row]
    assert flat.count(0) == 140
    assert flat.count(1) == 60


def test_ratio_truncates():
    flat = MazeGenerator(random.Random(0)).bits(3, 3, 0.5)
    assert flat.count(0) == 4


def test_same_seed_same_maze():
    a = MazeGenerator(random.Random(42)).generate(6, 7, 0.6)
    b = MazeGenerator(random.Random(42)).generate(6, 7, 0.6)
    assert a == b


@pytest.mark.parametrize("density", [0.0, 1.0])
def test_density_extremes(density):
    maze = MazeGenerator(random.Random(3)).generate(4, 4, density)
    expected = 0 if density == 1.0 else 1
    assert all(v == expected for row in maze for v in row)


@pytest.mark.parametrize("rows, cols, density", [(-1, 3, 0.5), (3, -1, 0.5), (3, 3, 1.5), (3, 3, -0.1)])
def test_invalid_arguments(rows, cols, density):
    with pytest.raises(ValueError):
        MazeGenerator(random.Random(0)).generate(rows, cols, density)


def test_generate_solvable_open_maze():
    maze, solvable = MazeGenerator(random.Random(0)).generate_solvable(5, 5, 1.0, tries=3)
    assert solvable
    assert maze == [[0] * 5 for _ in range(5)]


def test_generate_solvable_gives_up():
    maze, solvable = MazeGenerator(random.Random(0)).generate_solvable(3, 3, 0.0, tries=4)
    assert not solvable
    assert maze == [[1] * 3 for _ in range(3)]


def test_format_round_trips_through_loader():
    maze = [[0, 1, 0], [1, 0, 0]]
    text = format_maze(maze)
    assert text == "0 1 0\n1 0 0"
    grid = parse_maze_lines(text.splitlines())
    assert (grid.rows, grid.columns) == (2, 3)


def test_cli_writes_seeded_maze(capsys):
    assert main(["-r", "3", "-c", "4", "-d", "0.5", "-s", "7"]) == 0
    first = capsys.readouterr().out
    main(["-r", "3", "-c", "4", "-d", "0.5", "-s", "7"])
    assert capsys.readouterr().out == first
    lines = first.splitlines()
    assert len(lines) == 3
    assert all(len(line.split(" ")) == 4 for line in lines)


def test_cli_outfile(tmp_path):
    out = tmp_path / "maze.txt"
    main(["-r", "2", "-c", "2", "-d", "1", "-s", "1", "-o", str(out)])
    assert out.read_text(encoding="utf-8") == "0 0\n0 0\n"


def test_cli_rejects_bad_density():
    with pytest.raises(SystemExit):
        main(["-d", "2"])


def test_failed_retries_warn_once(caplog):
    with caplog.at_level(logging.INFO):
        main(["-r", "2", "-c", "2", "-d", "0", "-m", "3", "-s", "1", "-o", os.devnull])
    warnings = [r for r in caplog.records if "no solvable maze" in r.getMessage()]
    assert len(warnings) == 1
    assert warnings[0].levelno == logging.WARNING


def test_single_draw_does_not_warn(caplog):
    with caplog.at_level(logging.INFO):
        MazeGenerator(random.Random(0)).generate_solvable(2, 2, 0.0, tries=1)
    assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []
