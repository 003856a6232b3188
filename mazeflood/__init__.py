"""
Mazeflood - breadth-first maze solving for character grids.

Reads a maze of ``#`` walls and open cells, floods it from every opening on
the top row, picks the cheapest reachable opening on the bottom row and
renders the result in four annotated stages.
"""

__version__ = "0.1.0"

# Grid model
from .grid import Cell, CellType, Grid

# Parsing
from .parser import (
    MazeFormatError,
    MazeLimitError,
    RaggedRowError,
    parse_maze,
    read_maze,
)

# Traversal
from .traversal import find_exit, flood, trace_solution, traverse

# Rendering
from .renderer import (
    render_report,
    render_stage_1,
    render_stage_2,
    render_stage_3,
    render_stage_4,
)

# Snapshots
from .schemas import CellState, GridState, SolutionSummary

# Driver
from .cli import main, solve_maze

__all__ = [
    # Grid model
    "Cell",
    "CellType",
    "Grid",
    # Parsing
    "MazeFormatError",
    "MazeLimitError",
    "RaggedRowError",
    "parse_maze",
    "read_maze",
    # Traversal
    "flood",
    "find_exit",
    "trace_solution",
    "traverse",
    # Rendering
    "render_report",
    "render_stage_1",
    "render_stage_2",
    "render_stage_3",
    "render_stage_4",
    # Snapshots
    "CellState",
    "GridState",
    "SolutionSummary",
    # Driver
    "main",
    "solve_maze",
]
