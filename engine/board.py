"""
Board for the tic-tac-toe engine.
Owns the 3x3 grid and derives the eight lines checked for a win.
"""

from enum import Enum
from typing import List, Optional, Tuple
from dataclasses import dataclass

import numpy as np

from .errors import CellOccupiedError, OutOfRangeError
from .game_state import BOARD_SIZE, Cell, Mark


class LineKind(Enum):
    """Orientation of a line."""
    ROW = "row"
    COLUMN = "column"
    DIAGONAL = "diagonal"
    ANTI_DIAGONAL = "anti_diagonal"


@dataclass(frozen=True)
class Line:
    """
    A read-only view of three cells and their occupants.
    """
    kind: LineKind                          # Row, column or diagonal
    index: int                              # Row/column number (0 for diagonals)
    cells: Tuple[Cell, ...]                 # Positions, in board order
    occupants: Tuple[Optional[Mark], ...]   # None = empty

    def __str__(self) -> str:
        if self.kind in (LineKind.ROW, LineKind.COLUMN):
            return f"{self.kind.value} {self.index}"
        return self.kind.value


class Board:
    """
    The 3x3 grid of cells.

    Each entry is None (empty) or the Mark occupying it. The only public
    way to change a cell is place(), which refuses occupied cells.
    """

    def __init__(self):
        self._grid = np.full((BOARD_SIZE, BOARD_SIZE), None, dtype=object)

    @staticmethod
    def _check_range(row: int, col: int):
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise OutOfRangeError(
                f"Invalid position ({row}, {col}). Must be 0-2.",
                context={"row": row, "col": col},
            )

    def get(self, row: int, col: int) -> Optional[Mark]:
        """
        Get the occupant of a cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The Mark in the cell, or None if empty.
        """
        self._check_range(row, col)
        return self._grid[row, col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) is None

    def place(self, row: int, col: int, mark: Mark):
        """
        Put a mark on an empty cell.

        Raises:
            OutOfRangeError: row/col outside 0-2.
            CellOccupiedError: the cell already holds a mark.
        """
        current = self.get(row, col)
        if current is not None:
            raise CellOccupiedError(
                f"Cell ({row}, {col}) is already occupied by {current}",
                context={"row": row, "col": col},
            )
        self._grid[row, col] = mark

    def _restore(self, row: int, col: int, value: Optional[Mark]):
        """Overwrite a cell without the occupancy check. Only for undo."""
        self._check_range(row, col)
        self._grid[row, col] = value

    def lines(self) -> List[Line]:
        """
        All eight lines: row0, col0, row1, col1, row2, col2,
        main diagonal, anti-diagonal.
        """
        lines = []
        for i in range(BOARD_SIZE):
            lines.append(Line(
                LineKind.ROW, i,
                tuple(Cell(i, c) for c in range(BOARD_SIZE)),
                tuple(self._grid[i, :]),
            ))
            lines.append(Line(
                LineKind.COLUMN, i,
                tuple(Cell(r, i) for r in range(BOARD_SIZE)),
                tuple(self._grid[:, i]),
            ))

        lines.append(Line(
            LineKind.DIAGONAL, 0,
            tuple(Cell(i, i) for i in range(BOARD_SIZE)),
            tuple(np.diagonal(self._grid)),
        ))
        # fliplr reverses columns, so the anti-diagonal runs (0,2) -> (2,0)
        lines.append(Line(
            LineKind.ANTI_DIAGONAL, 0,
            tuple(Cell(i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)),
            tuple(np.diagonal(np.fliplr(self._grid))),
        ))
        return lines

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return all(cell is not None for cell in self._grid.flat)

    @property
    def move_count(self) -> int:
        return sum(1 for cell in self._grid.flat if cell is not None)

    def empty_cells(self) -> List[Cell]:
        """
        Get all empty cells on the board.

        Returns:
            List of Cells in row-major order.
        """
        return [
            Cell(row, col)
            for (row, col), cell in np.ndenumerate(self._grid)
            if cell is None
        ]

    def display_grid(self, empty_glyph: str = " ") -> List[List[str]]:
        """The 3x3 grid of glyphs for rendering."""
        return [
            [empty_glyph if cell is None else cell.glyph for cell in row]
            for row in self._grid
        ]
