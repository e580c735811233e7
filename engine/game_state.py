"""
Value types for the tic-tac-toe engine.
Marks (player tokens), cell positions and the overall game status.
"""

from enum import Enum
from typing import Sequence, Tuple
from dataclasses import dataclass

from .errors import OutOfRangeError


BOARD_SIZE = 3


class GameStatus(Enum):
    """Where the game currently stands."""
    AWAITING_MOVE = "awaiting_move"
    WON = "won"
    TIED = "tied"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.AWAITING_MOVE


@dataclass(frozen=True, eq=False)
class Mark:
    """
    A player's token.

    Compared by identity: two marks are never equal even if they share
    a glyph.
    """
    player_id: int      # 0 or 1
    glyph: str          # Display glyph (e.g., "X")

    def __str__(self) -> str:
        return self.glyph


def make_marks(glyphs: Sequence[str] = ("X", "O")) -> Tuple[Mark, Mark]:
    """
    Create the two marks for one game.

    Args:
        glyphs: Display glyph for each player, in player id order.

    Returns:
        (first, second) marks.
    """
    if len(glyphs) != 2:
        raise ValueError(f"Expected 2 glyphs, got {len(glyphs)}")
    return Mark(0, glyphs[0]), Mark(1, glyphs[1])


@dataclass(frozen=True)
class Cell:
    """
    A fixed board position.

    Rows and columns are 0-2. The index numbers cells 1-9 row by row:

         1 | 2 | 3
         4 | 5 | 6
         7 | 8 | 9
    """
    row: int
    col: int

    def __post_init__(self):
        if not (0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE):
            raise OutOfRangeError(
                f"Invalid position ({self.row}, {self.col}). Must be 0-2.",
                context={"row": self.row, "col": self.col},
            )

    @property
    def index(self) -> int:
        return self.row * BOARD_SIZE + self.col + 1

    @classmethod
    def from_index(cls, index: int) -> "Cell":
        """Build a cell from its 1-9 index."""
        if not 1 <= index <= BOARD_SIZE * BOARD_SIZE:
            raise OutOfRangeError(
                f"Invalid cell number {index}. Must be 1-9.",
                context={"index": index},
            )
        row, col = divmod(index - 1, BOARD_SIZE)
        return cls(row, col)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
