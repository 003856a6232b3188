"""Text rendering of a traversed maze.

Every cell is printed two characters wide so the maze looks roughly square
in a terminal. Each stage reads finalized grid state only; nothing here
mutates the grid.
"""

from __future__ import annotations

from typing import Callable, List

from .grid import Cell, Grid

REACHABLE = "+"
UNREACHABLE = "-"
NON_SOLUTION = " "
# Odd steps on the solution path reuse the open-path character.
SOLUTION_ODD = "."

STAGE_HEADER = "Stage {number}\n=======\n"


def _double(char: str) -> str:
    return char * 2


def _cost_label(distance: int) -> str:
    return f"{distance % 100:02d}"


def _render_grid(grid: Grid, draw: Callable[[Cell], str]) -> str:
    lines: List[str] = []
    for row in grid.rows:
        lines.append("".join(draw(cell) for cell in row) + "\n")
    return "".join(lines)


def _stage_1_cell(cell: Cell) -> str:
    return _double(cell.symbol)


def _stage_2_cell(cell: Cell) -> str:
    if cell.is_wall:
        return _double(cell.symbol)
    return _double(REACHABLE if cell.reachable else UNREACHABLE)


def _stage_3_cell(cell: Cell) -> str:
    if cell.is_wall:
        return _double(cell.symbol)
    if not cell.reachable:
        return _double(UNREACHABLE)
    if cell.distance is not None and cell.distance % 2 == 0:
        return _cost_label(cell.distance)
    return _double(REACHABLE)


def _stage_4_cell(cell: Cell) -> str:
    if cell.is_wall:
        return _double(cell.symbol)
    if not cell.reachable:
        return _double(UNREACHABLE)
    if not cell.on_solution:
        return _double(NON_SOLUTION)
    if cell.distance is not None and cell.distance % 2 == 0:
        return _cost_label(cell.distance)
    return _double(SOLUTION_ODD)


def render_stage_1(grid: Grid) -> str:
    """Raw cell symbols."""
    return _render_grid(grid, _stage_1_cell)


def render_stage_2(grid: Grid) -> str:
    """Path cells as ``++`` (reachable) or ``--`` (unreachable)."""
    return _render_grid(grid, _stage_2_cell)


def render_stage_3(grid: Grid) -> str:
    """Stage 2 plus even distances (mod 100) as two-digit numbers."""
    return _render_grid(grid, _stage_3_cell)


def render_stage_4(grid: Grid) -> str:
    """Only the solution path, numbered on even steps and ``..`` on odd ones."""
    return _render_grid(grid, _stage_4_cell)


def render_report(grid: Grid) -> str:
    """Render the full four-stage report for a traversed grid.

    Stage 4 is only included when the maze has a solution; in that case the
    report ends directly after its grid, otherwise after Stage 3's.
    """

    parts: List[str] = [
        STAGE_HEADER.format(number=1),
        f"maze has {grid.row_count} rows and {grid.col_count} columns\n",
        render_stage_1(grid),
        "\n",
        STAGE_HEADER.format(number=2),
        "maze has a solution\n" if grid.solved else "maze has no solution\n",
        render_stage_2(grid),
        "\n",
        STAGE_HEADER.format(number=3),
        (
            f"maze has solution with cost {grid.cost}\n"
            if grid.solved
            else "maze has no solution\n"
        ),
        render_stage_3(grid),
    ]

    if grid.solved:
        parts.extend(
            [
                "\n",
                STAGE_HEADER.format(number=4),
                "maze solution\n",
                render_stage_4(grid),
            ]
        )

    return "".join(parts)
