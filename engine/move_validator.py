"""
Move validator for the tic-tac-toe engine.
Turns raw player input into a board cell.
"""

import re
from typing import Optional
from dataclasses import dataclass

from .errors import OutOfRangeError
from .game_state import Cell


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    cell: Optional[Cell] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Parses a move typed by a player.

    Accepted forms:
    1. A cell number 1-9, counted row by row from the top-left
    2. "row col" (or "row,col") with rows and columns 0-2

    Only the syntax and range are checked here; whether the cell is
    free is decided by the board.
    """

    _PAIR = re.compile(r"^\s*(-?\d+)\s*[, ]\s*(-?\d+)\s*$")
    _SINGLE = re.compile(r"^\s*(-?\d+)\s*$")

    def parse(self, text: str) -> ValidationResult:
        """
        Validate a typed move.

        Args:
            text: Raw input, e.g. "5" or "1 1".

        Returns:
            ValidationResult with the cell if valid, error_message if not.
        """
        if text is None or not text.strip():
            return ValidationResult(
                is_valid=False,
                error_message="Enter a cell number (1-9) or 'row col'."
            )

        try:
            pair = self._PAIR.match(text)
            if pair:
                cell = Cell(int(pair.group(1)), int(pair.group(2)))
                return ValidationResult(is_valid=True, cell=cell)

            single = self._SINGLE.match(text)
            if single:
                cell = Cell.from_index(int(single.group(1)))
                return ValidationResult(is_valid=True, cell=cell)
        except OutOfRangeError as e:
            return ValidationResult(is_valid=False, error_message=e.message)

        return ValidationResult(
            is_valid=False,
            error_message=f"Could not read move '{text.strip()}'."
        )
