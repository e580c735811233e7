"""
Tic-tac-toe game-state engine.
Handles the board, move commands with undo/redo, and win detection.
"""

from .config import GameConfig
from .errors import (
    GameError,
    OutOfRangeError,
    CellOccupiedError,
    InvalidCommandStateError,
    GameOverError,
)
from .game_state import Mark, Cell, GameStatus, make_marks
from .board import Board, Line, LineKind
from .win_checker import LineEvaluator
from .move_command import MoveCommand, CommandState
from .history import MoveHistory
from .move_validator import MoveValidator, ValidationResult
from .controller import GameController, GameEvent, EventKind, SessionState

__version__ = "1.0.0"
