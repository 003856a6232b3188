"""Grid model for character mazes.

Cells are plain dataclasses owned by a ``Grid``. The parser fixes each
cell's coordinates, kind and symbol; the traversal engine is the only code
that writes the distance/reachability/solution fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

WALL_SYMBOL = "#"


class CellType(str, Enum):
    """Classification of a maze cell."""

    WALL = "wall"
    PATH = "path"

    @classmethod
    def from_symbol(cls, symbol: str) -> "CellType":
        # Anything that is not a wall is open floor, spaces included.
        return cls.WALL if symbol == WALL_SYMBOL else cls.PATH


@dataclass
class Cell:
    """A single grid position plus the state the flood writes onto it."""

    row: int
    col: int
    kind: CellType
    symbol: str = "."
    distance: Optional[int] = None
    reachable: bool = False
    on_solution: bool = False
    # Coordinate of the cell whose expansion discovered this one.
    parent: Optional[Tuple[int, int]] = None

    @property
    def is_path(self) -> bool:
        return self.kind is CellType.PATH

    @property
    def is_wall(self) -> bool:
        return self.kind is CellType.WALL

    @property
    def visited(self) -> bool:
        return self.distance is not None

    @property
    def coord(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def clear(self) -> None:
        """Drop everything a previous traversal recorded."""
        self.distance = None
        self.reachable = False
        self.on_solution = False
        self.parent = None


@dataclass
class Grid:
    """Rectangular collection of cells plus overall solution metadata."""

    rows: List[List[Cell]] = field(default_factory=list)
    solved: bool = False
    cost: Optional[int] = None
    exit: Optional[Tuple[int, int]] = None

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def col_count(self) -> int:
        # Row 0 is the authoritative width; the parser rejects ragged rows.
        return len(self.rows[0]) if self.rows else 0

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.row_count and 0 <= col < self.col_count

    def cell(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) outside {self.row_count}x{self.col_count} grid"
            )
        return self.rows[row][col]

    def iter_cells(self) -> Iterator[Cell]:
        """Yield cells in reading order (row by row, left to right)."""
        for line in self.rows:
            yield from line

    def entrances(self) -> List[Cell]:
        """Path cells of the first row, left to right."""
        if not self.rows:
            return []
        return [cell for cell in self.rows[0] if cell.is_path]

    def exits(self) -> List[Cell]:
        """Path cells of the last row, left to right."""
        if not self.rows:
            return []
        return [cell for cell in self.rows[-1] if cell.is_path]

    def reset(self) -> None:
        """Clear per-cell traversal state and the solution metadata."""
        for cell in self.iter_cells():
            cell.clear()
        self.solved = False
        self.cost = None
        self.exit = None

    def solution_path(self) -> List[Cell]:
        """Cells from the entrance to the chosen exit, following parent links."""
        if self.exit is None:
            return []
        path: List[Cell] = []
        coord: Optional[Tuple[int, int]] = self.exit
        while coord is not None:
            cell = self.cell(*coord)
            path.append(cell)
            coord = cell.parent
        path.reverse()
        return path
