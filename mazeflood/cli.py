"""Command-line driver: parse, traverse, render.

Reads a maze from standard input by default:

    python -m mazeflood < examples/mazes/t0.txt

or from one or more files, processed in order:

    mazeflood examples/mazes/*.txt

Pass ``--format json`` for a machine-readable snapshot instead of the
four-stage report, and ``--verbose`` to see pipeline diagnostics on stderr.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from .config import Config
from .grid import Grid
from .logging_utils import log_deterministic, log_error, log_info, set_verbose
from .parser import MazeFormatError, parse_maze
from .renderer import render_report
from .schemas import GridState
from .traversal import traverse

EXIT_OK = 0
EXIT_INPUT_ERROR = 2


def solve_maze(
    text: str,
    *,
    max_rows: Optional[int] = None,
    max_cols: Optional[int] = None,
) -> Grid:
    """Parse ``text`` and run the traversal; returns the finalized grid."""
    grid = parse_maze(text, max_rows=max_rows, max_cols=max_cols)
    return traverse(grid)


def format_result(grid: Grid, output_format: str) -> str:
    if output_format == "json":
        return GridState.from_grid(grid).model_dump_json(indent=2) + "\n"
    return render_report(grid)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mazeflood",
        description="Find the cheapest top-to-bottom route through a character maze.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Maze files to solve in order (default: read standard input; '-' also means stdin)",
    )
    parser.add_argument(
        "--max-rows",
        type=int,
        default=None,
        help=f"Reject mazes with more rows than this (default: {Config.MAZE_MAX_ROWS})",
    )
    parser.add_argument(
        "--max-cols",
        type=int,
        default=None,
        help=f"Reject mazes with more columns than this (default: {Config.MAZE_MAX_COLS})",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output the staged text report or a JSON snapshot",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print pipeline diagnostics to stderr",
    )
    return parser


def _read_source(path: str, stdin: TextIO) -> str:
    if path == "-":
        return stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Run the CLI and return the process exit status.

    Unreadable or malformed inputs are reported on stderr and make the exit
    status 2; remaining inputs are still processed. A maze with no solution
    is a normal result (status 0).
    """

    args = build_parser().parse_args(argv)
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout

    if args.verbose:
        set_verbose(True)

    try:
        Config.validate()
    except ValueError as exc:
        log_error(str(exc))
        return EXIT_INPUT_ERROR

    max_rows = Config.MAZE_MAX_ROWS if args.max_rows is None else args.max_rows
    max_cols = Config.MAZE_MAX_COLS if args.max_cols is None else args.max_cols
    if max_rows <= 0 or max_cols <= 0:
        log_error(f"Limits must be positive, got {max_rows} rows x {max_cols} columns")
        return EXIT_INPUT_ERROR

    log_info(Config.display())

    sources: List[str] = list(args.paths) or ["-"]
    status = EXIT_OK

    for source in sources:
        label = "<stdin>" if source == "-" else source
        log_deterministic(f"Solving {label}")
        try:
            text = _read_source(source, stdin)
        except (OSError, UnicodeDecodeError) as exc:
            log_error(f"{label}: cannot read maze: {exc}")
            status = EXIT_INPUT_ERROR
            continue

        try:
            grid = solve_maze(text, max_rows=max_rows, max_cols=max_cols)
        except MazeFormatError as exc:
            log_error(f"{label}: {exc}")
            status = EXIT_INPUT_ERROR
            continue

        stdout.write(format_result(grid, args.format))

    stdout.flush()
    return status


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
