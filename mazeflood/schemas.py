"""Pydantic snapshots of a traversed maze.

These models mirror the dataclasses in ``grid.py`` but keep results
serializable for ``--format json`` output and for callers that want to
store or compare runs.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from .grid import CellType, Grid


class CellState(BaseModel):
    """Traversal outcome for one cell."""

    row: int
    col: int
    kind: CellType
    distance: Optional[int] = Field(
        None, description="Hop count from nearest entrance; None if never reached",
    )
    reachable: bool = False
    on_solution: bool = False


class SolutionSummary(BaseModel):
    """Whether the maze is solvable and the path that was chosen."""

    solved: bool = False
    cost: Optional[int] = None
    exit: Optional[Tuple[int, int]] = None
    path: List[Tuple[int, int]] = Field(
        default_factory=list,
        description=(
            "(row, col) coordinates from entrance to the chosen exit. On a "
            "single-row maze every zero-cost cell is marked on_solution but "
            "only the chosen exit is listed here"
        ),
    )


class GridState(BaseModel):
    """Dense snapshot of a grid after traversal."""

    rows: int
    cols: int
    cells: List[CellState] = Field(
        default_factory=list,
        description="Cells in reading order (row by row, left to right)",
    )
    solution: SolutionSummary = Field(default_factory=SolutionSummary)

    @classmethod
    def from_grid(cls, grid: Grid) -> "GridState":
        """Snapshot ``grid`` without touching it."""
        cells = [
            CellState(
                row=cell.row,
                col=cell.col,
                kind=cell.kind,
                distance=cell.distance,
                reachable=cell.reachable,
                on_solution=cell.on_solution,
            )
            for cell in grid.iter_cells()
        ]
        solution = SolutionSummary(
            solved=grid.solved,
            cost=grid.cost,
            exit=grid.exit,
            path=[cell.coord for cell in grid.solution_path()],
        )
        return cls(rows=grid.row_count, cols=grid.col_count, cells=cells, solution=solution)

    def cell(self, row: int, col: int) -> CellState:
        return self.cells[row * self.cols + col]
