"""Tests for the command-line driver."""

import io
import json
from pathlib import Path

import pytest

from mazeflood import logging_utils
from mazeflood.cli import EXIT_INPUT_ERROR, EXIT_OK, main, solve_maze

MAZES_DIR = Path(__file__).resolve().parent.parent / "examples" / "mazes"


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch):
    monkeypatch.setenv("MAZEFLOOD_NO_COLOR", "1")
    monkeypatch.setattr(logging_utils, "_verbose", False)


def run_cli(argv, stdin_text=""):
    out = io.StringIO()
    status = main(argv, stdin=io.StringIO(stdin_text), stdout=out)
    return status, out.getvalue()


def test_reads_stdin_by_default():
    status, output = run_cli([], "#.#\n#.#\n#.#\n")

    assert status == EXIT_OK
    assert output.startswith("Stage 1\n=======\nmaze has 3 rows and 3 columns\n")
    assert "maze has solution with cost 2\n" in output
    assert output.endswith("Stage 4\n=======\nmaze solution\n##00##\n##..##\n##02##\n")


def test_unsolved_maze_still_exits_zero():
    status, output = run_cli(["-"], "###\n###\n")
    assert status == EXIT_OK
    assert "maze has no solution" in output
    assert "Stage 4" not in output


def test_output_is_byte_identical_across_runs():
    text = (MAZES_DIR / "t6.txt").read_text()
    assert run_cli([], text) == run_cli([], text)


def test_file_batch_is_processed_in_order():
    paths = [str(MAZES_DIR / "t2.txt"), str(MAZES_DIR / "t3.txt")]
    status, output = run_cli(paths)

    assert status == EXIT_OK
    first, second = output.split("Stage 1\n")[1:]
    assert "maze has 3 rows and 3 columns" in first
    assert "maze has 2 rows and 3 columns" in second


def test_ragged_input_is_reported_and_skipped(capsys, tmp_path):
    bad = tmp_path / "bad.txt"
    bad.write_text("#.#\n#.\n")
    good = MAZES_DIR / "t2.txt"

    status, output = run_cli([str(bad), str(good)])

    assert status == EXIT_INPUT_ERROR
    assert output.count("Stage 1\n") == 1
    err = capsys.readouterr().err
    assert "bad.txt" in err
    assert "Row 1 has 2 columns" in err


def test_limit_flags_reject_large_mazes(capsys):
    status, output = run_cli(["--max-rows", "2"], "#.#\n#.#\n#.#\n")

    assert status == EXIT_INPUT_ERROR
    assert output == ""
    assert "exceeding the limit of 2" in capsys.readouterr().err


def test_non_positive_limit_flag_is_an_error(capsys):
    status, output = run_cli(["--max-cols", "0"], "...\n")
    assert status == EXIT_INPUT_ERROR
    assert output == ""
    assert "Limits must be positive" in capsys.readouterr().err


def test_missing_file_is_reported(capsys, tmp_path):
    status, output = run_cli([str(tmp_path / "nope.txt")])
    assert status == EXIT_INPUT_ERROR
    assert output == ""
    assert "cannot read maze" in capsys.readouterr().err


def test_json_format():
    status, output = run_cli(["--format", "json"], "#.#\n#.#\n")
    assert status == EXIT_OK

    data = json.loads(output)
    assert data["rows"] == 2
    assert data["cols"] == 3
    assert data["solution"]["cost"] == 1
    assert data["solution"]["path"] == [[0, 1], [1, 1]]


def test_verbose_writes_diagnostics_to_stderr_only(capsys):
    status, output = run_cli(["--verbose"], "#.#\n#.#\n")

    assert status == EXIT_OK
    assert output.startswith("Stage 1\n")
    err = capsys.readouterr().err
    assert "Parsed maze with 2 rows and 3 columns" in err
    assert "Exit at (1, 1) with cost 1" in err


def test_solve_maze_helper():
    grid = solve_maze("...")
    assert grid.solved
    assert grid.cost == 0


def test_undecodable_file_is_reported_and_batch_continues(capsys, tmp_path):
    bad = tmp_path / "binary.txt"
    bad.write_bytes(b"#.#\n#\xff#\n")
    good = MAZES_DIR / "t2.txt"

    status, output = run_cli([str(bad), str(good)])

    assert status == EXIT_INPUT_ERROR
    assert output.count("Stage 1\n") == 1
    assert "maze has 3 rows and 3 columns" in output
    err = capsys.readouterr().err
    assert "binary.txt: cannot read maze" in err
