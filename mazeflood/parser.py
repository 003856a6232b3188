"""
Maze parsing for plain-text character grids.

One maze row per line. ``#`` is a wall; every other character (``.``,
space, anything) is open path. There is no dimension header: the row count
is the number of lines read and the column count is the width of the first
row.

Structural problems are raised as ``MazeFormatError`` subclasses before any
traversal happens:
- ``MazeLimitError`` when the grid exceeds the configured row/column limit
- ``RaggedRowError`` when a row is wider or narrower than the first one

Usage:
    grid = parse_maze("#.#\\n#.#\\n")
    grid = read_maze(sys.stdin, max_rows=50)
"""

from typing import List, Optional, TextIO

from .config import Config
from .grid import Cell, CellType, Grid
from .logging_utils import log_deterministic


# =============================
# Module-level Exceptions
# =============================

class MazeFormatError(ValueError):
    """Raised when maze text cannot be turned into a rectangular grid."""


class MazeLimitError(MazeFormatError):
    """Raised when the maze has more rows or columns than allowed."""

    def __init__(self, *, dimension: str, size: int, limit: int) -> None:
        self.dimension = dimension
        self.size = size
        self.limit = limit
        super().__init__(
            f"Maze has {size} {dimension}, exceeding the limit of {limit}. "
            f"Raise MAZE_MAX_{dimension.upper()} or pass --max-{dimension} to allow it."
        )


class RaggedRowError(MazeFormatError):
    """Raised when a row's width differs from the first row's width."""

    def __init__(self, *, row: int, width: int, expected: int) -> None:
        self.row = row
        self.width = width
        self.expected = expected
        super().__init__(
            f"Row {row} has {width} columns but row 0 has {expected}; "
            "maze rows must all be the same width"
        )


def _split_rows(text: str) -> List[str]:
    """Split text into row strings, dropping line terminators.

    A ``\\r`` directly before ``\\n`` belongs to the terminator. Trailing
    empty lines are ignored; an empty line followed by more content is
    returned as a zero-width row so the width check can reject it.
    """
    lines = text.split("\n")
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_maze(
    text: str,
    *,
    max_rows: Optional[int] = None,
    max_cols: Optional[int] = None,
) -> Grid:
    """Build a ``Grid`` from maze text.

    Args:
        text: Raw maze text, one row per line
        max_rows: Row limit (defaults to ``Config.MAZE_MAX_ROWS``)
        max_cols: Column limit (defaults to ``Config.MAZE_MAX_COLS``)

    Returns:
        Grid with every cell classified and traversal state cleared. Empty
        input (or input starting with a line break) yields a zero-row grid.

    Raises:
        MazeLimitError: If the maze exceeds either limit
        RaggedRowError: If rows differ in width
    """
    row_limit = Config.MAZE_MAX_ROWS if max_rows is None else max_rows
    col_limit = Config.MAZE_MAX_COLS if max_cols is None else max_cols

    lines = _split_rows(text)

    # A leading line break means no maze at all, same as empty input.
    if not lines or lines[0] == "":
        log_deterministic("Parsed empty maze (0 rows)")
        return Grid()

    if len(lines) > row_limit:
        raise MazeLimitError(dimension="rows", size=len(lines), limit=row_limit)

    expected = len(lines[0])
    rows: List[List[Cell]] = []
    for row_index, line in enumerate(lines):
        if len(line) > col_limit:
            raise MazeLimitError(dimension="cols", size=len(line), limit=col_limit)
        if len(line) != expected:
            raise RaggedRowError(row=row_index, width=len(line), expected=expected)
        rows.append(
            [
                Cell(
                    row=row_index,
                    col=col_index,
                    kind=CellType.from_symbol(symbol),
                    symbol=symbol,
                )
                for col_index, symbol in enumerate(line)
            ]
        )

    grid = Grid(rows=rows)
    log_deterministic(f"Parsed maze with {grid.row_count} rows and {grid.col_count} columns")
    return grid


def read_maze(
    stream: TextIO,
    *,
    max_rows: Optional[int] = None,
    max_cols: Optional[int] = None,
) -> Grid:
    """Read a whole text stream and parse it with ``parse_maze``."""
    return parse_maze(stream.read(), max_rows=max_rows, max_cols=max_cols)
