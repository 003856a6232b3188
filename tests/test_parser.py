"""Tests for turning maze text into a Grid."""

import io

import pytest

from mazeflood.config import Config
from mazeflood.grid import CellType
from mazeflood.parser import (
    MazeFormatError,
    MazeLimitError,
    RaggedRowError,
    parse_maze,
    read_maze,
)


def test_parse_classifies_walls_and_paths():
    grid = parse_maze("#.#\n# .\n")

    assert grid.row_count == 2
    assert grid.col_count == 3
    assert grid.cell(0, 0).kind is CellType.WALL
    assert grid.cell(0, 1).kind is CellType.PATH
    # Space and any other non-# character are open path
    assert grid.cell(1, 1).kind is CellType.PATH
    assert grid.cell(1, 1).symbol == " "


def test_parse_assigns_coordinates_and_clears_state():
    grid = parse_maze("..\n..\n")

    for row in range(2):
        for col in range(2):
            cell = grid.cell(row, col)
            assert cell.coord == (row, col)
            assert cell.distance is None
            assert cell.reachable is False
            assert cell.on_solution is False
            assert cell.parent is None
    assert grid.solved is False
    assert grid.cost is None


def test_parse_accepts_missing_final_newline_and_crlf():
    assert parse_maze("#.#\n#.#").row_count == 2

    grid = parse_maze("#.#\r\n#.#\r\n")
    assert grid.row_count == 2
    assert grid.col_count == 3
    assert all(cell.symbol != "\r" for cell in grid.iter_cells())


def test_parse_empty_input_gives_zero_rows():
    for text in ("", "\n", "\r\n", "\n#.#\n"):
        grid = parse_maze(text)
        assert grid.row_count == 0
        assert grid.col_count == 0
        assert list(grid.iter_cells()) == []


def test_trailing_blank_lines_are_ignored():
    grid = parse_maze("#.#\n#.#\n\n\n")
    assert grid.row_count == 2


def test_ragged_rows_are_rejected():
    with pytest.raises(RaggedRowError) as excinfo:
        parse_maze("#.#\n#.\n#.#\n")

    err = excinfo.value
    assert err.row == 1
    assert err.width == 2
    assert err.expected == 3
    assert isinstance(err, MazeFormatError)
    assert isinstance(err, ValueError)


def test_blank_line_inside_maze_is_a_ragged_row():
    with pytest.raises(RaggedRowError) as excinfo:
        parse_maze("#.#\n\n#.#\n")
    assert excinfo.value.row == 1
    assert excinfo.value.width == 0


def test_limits_are_enforced_not_truncated():
    with pytest.raises(MazeLimitError) as excinfo:
        parse_maze("...\n...\n...\n", max_rows=2)
    assert excinfo.value.dimension == "rows"
    assert excinfo.value.size == 3
    assert excinfo.value.limit == 2

    with pytest.raises(MazeLimitError) as excinfo:
        parse_maze("....\n", max_cols=3)
    assert excinfo.value.dimension == "cols"
    assert "--max-cols" in str(excinfo.value)


def test_default_limit_is_one_hundred():
    assert Config.MAZE_MAX_ROWS == 100
    assert Config.MAZE_MAX_COLS == 100

    wide = "." * 100 + "\n"
    assert parse_maze(wide * 100).row_count == 100

    with pytest.raises(MazeLimitError):
        parse_maze("." * 101 + "\n")
    with pytest.raises(MazeLimitError):
        parse_maze(wide * 101)


def test_default_limits_follow_config(monkeypatch):
    monkeypatch.setattr(Config, "MAZE_MAX_ROWS", 1)
    with pytest.raises(MazeLimitError):
        parse_maze("#.#\n#.#\n")


def test_read_maze_consumes_stream():
    grid = read_maze(io.StringIO("#.#\n#.#\n"))
    assert grid.row_count == 2
    assert grid.col_count == 3
