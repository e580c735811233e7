"""
Win checker for the tic-tac-toe engine.
Decides whether a line (and so the board) belongs to one mark.
"""

from typing import Optional

from .board import Board, Line
from .game_state import Mark


class LineEvaluator:
    """
    Checks lines for a win.

    Win condition: all 3 cells of a line hold the same Mark
    (horizontally, vertically, or diagonally). Marks are compared by
    identity, never by glyph.
    """

    def is_winning_for(self, line: Line, mark: Mark) -> bool:
        """
        Check if a single line is owned by a mark.

        Args:
            line: The line to check.
            mark: The candidate owner.

        Returns:
            True if every cell in the line holds exactly this mark.
        """
        for occupant in line.occupants:
            if occupant is not mark:
                return False  # Empty or opponent, no win on this line
        return True

    def find_winning_line(self, board: Board, mark: Mark) -> Optional[Line]:
        """
        Get the first line owned by a mark.

        Args:
            board: The game board.
            mark: The candidate owner.

        Returns:
            The winning Line, or None.
        """
        for line in board.lines():
            if self.is_winning_for(line, mark):
                return line
        return None

    def has_won(self, board: Board, mark: Mark) -> bool:
        return self.find_winning_line(board, mark) is not None
