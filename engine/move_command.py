"""
Move commands for the tic-tac-toe engine.
A command places one mark and remembers enough to take it back.
"""

import logging
from enum import Enum
from typing import Optional

from .board import Board
from .errors import CellOccupiedError, InvalidCommandStateError
from .game_state import Cell, Mark

logger = logging.getLogger(__name__)


class CommandState(Enum):
    """Lifecycle of a MoveCommand."""
    PENDING = "pending"
    EXECUTED = "executed"
    UNDONE = "undone"


class MoveCommand:
    """
    "Place mark M at (row, col)" as an undoable unit.

    PENDING -> EXECUTED on execute(), EXECUTED -> UNDONE on undo(),
    UNDONE -> EXECUTED on redo(). Anything else raises
    InvalidCommandStateError.
    """

    def __init__(self, board: Board, cell: Cell, mark: Mark):
        self.board = board
        self.cell = cell
        self.mark = mark
        self.previous_value: Optional[Mark] = None
        self.state = CommandState.PENDING

    @property
    def row(self) -> int:
        return self.cell.row

    @property
    def col(self) -> int:
        return self.cell.col

    def execute(self):
        """
        Place the mark.

        Raises:
            CellOccupiedError: the target cell is not empty. The command
                stays in its current state.
            InvalidCommandStateError: the command is already executed.
        """
        if self.state is CommandState.EXECUTED:
            raise InvalidCommandStateError(
                f"Move {self} is already executed",
                context={"state": self.state.value},
            )

        previous = self.board.get(self.row, self.col)
        if previous is not None:
            raise CellOccupiedError(
                f"Cell {self.cell} is already occupied by {previous}",
                context={"row": self.row, "col": self.col},
            )

        self.previous_value = previous
        self.board.place(self.row, self.col, self.mark)
        self.state = CommandState.EXECUTED
        logger.debug(f"Executed {self}")

    def undo(self):
        """Put the cell back the way execute() found it."""
        if self.state is not CommandState.EXECUTED:
            raise InvalidCommandStateError(
                f"Cannot undo move {self} in state {self.state.value}",
                context={"state": self.state.value},
            )

        self.board._restore(self.row, self.col, self.previous_value)
        self.state = CommandState.UNDONE
        logger.debug(f"Undid {self}")

    def redo(self):
        """Execute an undone command again."""
        if self.state is not CommandState.UNDONE:
            raise InvalidCommandStateError(
                f"Cannot redo move {self} in state {self.state.value}",
                context={"state": self.state.value},
            )
        self.execute()

    def __str__(self) -> str:
        return f"{self.mark} -> {self.cell}"

    def __repr__(self) -> str:
        return (
            f"MoveCommand(mark={self.mark.glyph!r}, cell={self.cell}, "
            f"state={self.state.value})"
        )
