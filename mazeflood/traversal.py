"""Breadth-first flood traversal of a parsed maze.

Every path cell in the first row is a source. The flood labels each
reachable path cell with its hop count from the nearest entrance and records
which cell discovered it. The cheapest reachable exit on the last row is
then traced back through those parent links to mark one shortest path.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Tuple

from .grid import Cell, Grid
from .logging_utils import log_deterministic, log_info, log_success

# Neighbour expansion order: right, down, left, up. Fixed so the traced
# path is reproducible for a given input.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


def flood(grid: Grid) -> int:
    """Run the multi-source BFS over ``grid`` and return how many cells were enqueued."""

    frontier: Deque[Tuple[int, int]] = deque()

    # Entrances are seeded left to right so the initial frontier order is stable.
    for cell in grid.entrances():
        cell.reachable = True
        cell.distance = 0
        frontier.append(cell.coord)
    enqueued = len(frontier)
    log_deterministic(f"Flood seeded with {enqueued} entrance(s)")

    while frontier:
        row, col = frontier.popleft()
        current = grid.rows[row][col]
        offered = current.distance + 1
        for dr, dc in DIRECTIONS:
            nr, nc = row + dr, col + dc
            if not grid.in_bounds(nr, nc):
                continue
            neighbour = grid.rows[nr][nc]
            if not neighbour.is_path:
                continue
            neighbour.reachable = True
            # FIFO order means the first offer is already minimal; a cell is
            # enqueued at most once.
            if neighbour.distance is None or offered < neighbour.distance:
                neighbour.distance = offered
                neighbour.parent = current.coord
                frontier.append(neighbour.coord)
                enqueued += 1

    return enqueued


def find_exit(grid: Grid) -> Optional[Cell]:
    """Return the cheapest reachable last-row path cell, leftmost on ties."""

    best: Optional[Cell] = None
    for cell in grid.exits():
        if not cell.reachable or cell.distance is None:
            continue
        # Only a strictly smaller cost displaces the current best.
        if best is None or cell.distance < best.distance:
            best = cell
    return best


def trace_solution(grid: Grid, exit_cell: Cell) -> List[Cell]:
    """Mark the shortest path ending at ``exit_cell`` and return it entrance-first."""

    path: List[Cell] = []
    cell: Optional[Cell] = exit_cell
    while cell is not None:
        cell.on_solution = True
        path.append(cell)
        cell = grid.cell(*cell.parent) if cell.parent is not None else None
    path.reverse()

    # A zero-cost exit is an entrance on a single-row maze: each one is a
    # complete path of its own.
    if exit_cell.distance == 0:
        for other in grid.exits():
            if other.reachable and other.distance == 0:
                other.on_solution = True

    return path


def traverse(grid: Grid) -> Grid:
    """Flood the grid, pick the exit and mark the solution path.

    Any state from an earlier traversal is cleared first, so calling this
    twice gives the same result. "No solution" is recorded on the grid
    (``solved`` False, ``cost`` None), never raised.
    """

    grid.reset()
    enqueued = flood(grid)
    reachable = sum(1 for cell in grid.iter_cells() if cell.reachable)
    log_info(f"Flood visited {enqueued} cell(s); {reachable} reachable")

    exit_cell = find_exit(grid)
    if exit_cell is None:
        log_deterministic("No reachable exit on the last row")
        return grid

    path = trace_solution(grid, exit_cell)
    grid.solved = True
    grid.cost = exit_cell.distance
    grid.exit = exit_cell.coord
    log_success(
        f"Exit at {exit_cell.coord} with cost {grid.cost} ({len(path)} cell path)"
    )
    return grid
