import io
import json

import pygame
import pytest

from main import main

EXAMPLE = "0 0 1\n1 0 1\n1 0 0\n"


@pytest.fixture
def maze_file(tmp_path):
    path = tmp_path / "maze.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    return path


def test_length(maze_file, capsys):
    assert main(["-s", "-i", str(maze_file)]) == 0
    assert capsys.readouterr().out == "5\n"


def test_no_solution(tmp_path, capsys):
    path = tmp_path / "maze.txt"
    path.write_text("0 1\n1 0\n", encoding="utf-8")
    main(["-s", "-p", "-i", str(path)])
    assert capsys.readouterr().out == "No solution\n"


def test_display_then_solution(maze_file, capsys):
    main(["-d", "-s", "-p", "-i", str(maze_file)])
    assert capsys.readouterr().out == (
        "|-------|\n"
        "  . . # |\n"
        "| # . # |\n"
        "| # . .  \n"
        "|-------|\n"
        "5\n"
        "|-------|\n"
        "  + + # |\n"
        "| # + # |\n"
        "| # + +  \n"
        "|-------|\n"
    )


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(EXAMPLE))
    main(["-s"])
    assert capsys.readouterr().out == "5\n"


def test_outfile(maze_file, tmp_path, capsys):
    out = tmp_path / "result.txt"
    main(["-s", "-i", str(maze_file), "-o", str(out)])
    assert out.read_text(encoding="utf-8") == "5\n"
    assert capsys.readouterr().out == ""


def test_config_symbols(maze_file, tmp_path, capsys):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"symbols": {"routed": "o", "blocked": "X"}}), encoding="utf-8")
    main(["-p", "-i", str(maze_file), "--config", str(cfg)])
    assert "  o o X |\n" in capsys.readouterr().out


def test_image(maze_file, tmp_path):
    img = tmp_path / "solved.png"
    main(["-i", str(maze_file), "--image", str(img)])
    assert img.exists()


def test_missing_infile(tmp_path):
    with pytest.raises(SystemExit, match="failed to open"):
        main(["-s", "-i", str(tmp_path / "nope.txt")])


def test_missing_config(maze_file, tmp_path):
    with pytest.raises(SystemExit, match="Config not found"):
        main(["-s", "-i", str(maze_file), "--config", str(tmp_path / "nope.json")])


def test_malformed_maze(tmp_path):
    path = tmp_path / "maze.txt"
    path.write_text("0 0\n0\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="invalid maze"):
        main(["-s", "-i", str(path)])


def test_maze_not_utf8(tmp_path):
    path = tmp_path / "maze.txt"
    path.write_bytes(b"0 0\n\xff\xfe 0\n")
    with pytest.raises(SystemExit, match="invalid maze"):
        main(["-s", "-i", str(path)])


def test_config_is_directory(maze_file, tmp_path):
    with pytest.raises(SystemExit, match="failed to read config"):
        main(["-s", "-i", str(maze_file), "--config", str(tmp_path)])


def test_image_path_not_writable(maze_file, tmp_path):
    # the parent "directory" is a regular file
    img = maze_file / "solved.png"
    with pytest.raises(SystemExit, match="failed to save image"):
        main(["-i", str(maze_file), "--image", str(img)])


def test_window_closes_on_quit(maze_file):
    pygame.display.init()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert main(["-i", str(maze_file), "--window"]) == 0
    assert pygame.get_init() is False
