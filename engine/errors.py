"""
Error hierarchy for the tic-tac-toe engine.

All engine exceptions inherit from GameError so the presentation layer can
catch them in one place.

Usage:
    from engine.errors import CellOccupiedError

    try:
        board.place(row, col, mark)
    except CellOccupiedError as e:
        logger.warning(f"Rejected move: {e.message}")
"""

from typing import Any, Dict, Optional

__all__ = [
    "GameError",
    "OutOfRangeError",
    "CellOccupiedError",
    "InvalidCommandStateError",
    "GameOverError",
]


class GameError(Exception):
    """Base exception for all engine errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        context: Extra details for debugging
    """
    code: str = "GAME_ERROR"

    def __init__(
        self,
        message: str = "",
        *,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.__class__.__doc__ or self.code
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.context:
            details = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({details})"
        return f"[{self.code}] {self.message}"


class OutOfRangeError(GameError):
    """Coordinate outside the board."""
    code = "OUT_OF_RANGE"


class CellOccupiedError(GameError):
    """Target cell already holds a mark."""
    code = "CELL_OCCUPIED"


class InvalidCommandStateError(GameError):
    """Command executed or undone out of sequence."""
    code = "INVALID_COMMAND_STATE"


class GameOverError(GameError):
    """The game has already ended."""
    code = "GAME_OVER"
