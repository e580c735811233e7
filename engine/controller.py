"""
Game controller for the tic-tac-toe engine.

Ties together the board, the win checker and the move history:

1. A move request becomes a MoveCommand for the current mark
2. The command is executed and recorded
3. The win checker looks at all eight lines, then the board is checked
   for a tie
4. The outcome is sent to every listener as a GameEvent

Undo, redo and reset go through the same path, so listeners always see
the resulting turn or outcome.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple
from dataclasses import dataclass, field

from .board import Board, Line
from .config import GameConfig
from .errors import CellOccupiedError, GameError, GameOverError, OutOfRangeError
from .game_state import Cell, GameStatus, Mark, make_marks
from .history import MoveHistory
from .move_command import MoveCommand
from .win_checker import LineEvaluator

logger = logging.getLogger(__name__)


class EventKind(Enum):
    """Signals sent to the presentation layer."""
    TURN_CHANGED = "turn_changed"
    INVALID_MOVE = "invalid_move"
    WON = "won"
    TIED = "tied"
    RESET = "reset"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameEvent:
    """
    Something that happened in the game.
    """
    kind: EventKind
    mark: Optional[Mark] = None         # Next player (TURN_CHANGED) or winner (WON)
    reason: Optional[str] = None        # Human-readable text for rejections
    error: Optional[GameError] = None   # The rejected move's error
    line: Optional[Line] = None         # The winning line (WON)


GameListener = Callable[[GameEvent], None]


@dataclass
class SessionState:
    """
    Everything that belongs to one game. Replaced wholesale on reset.
    """
    current_mark: Mark
    board: Board = field(default_factory=Board)
    history: MoveHistory = field(default_factory=MoveHistory)
    status: GameStatus = GameStatus.AWAITING_MOVE
    winner: Optional[Mark] = None
    winning_line: Optional[Line] = None


class GameController:
    """
    Runs one game at a time.

    Every request is handled to completion before it returns, and
    returns the event it produced. Listeners registered with subscribe()
    receive the same events.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize the controller.

        Args:
            config: Game settings (default: GameConfig()).
        """
        self.config = config or GameConfig()
        self.marks: Tuple[Mark, Mark] = make_marks(self.config.PLAYER_GLYPHS)
        self.evaluator = LineEvaluator()
        self._listeners: List[GameListener] = []
        self.session = self._new_session()

    # ==================== LISTENERS ====================

    def subscribe(self, listener: GameListener):
        self._listeners.append(listener)

    def unsubscribe(self, listener: GameListener):
        self._listeners.remove(listener)

    def _emit(self, event: GameEvent) -> GameEvent:
        for listener in list(self._listeners):
            listener(event)
        return event

    # ==================== QUERIES ====================

    @property
    def first_mark(self) -> Mark:
        return self.marks[self.config.FIRST_PLAYER]

    @property
    def current_mark(self) -> Mark:
        return self.session.current_mark

    @property
    def status(self) -> GameStatus:
        return self.session.status

    @property
    def is_over(self) -> bool:
        return self.session.status.is_terminal

    @property
    def winner(self) -> Optional[Mark]:
        return self.session.winner

    @property
    def winning_line(self) -> Optional[Line]:
        return self.session.winning_line

    @property
    def board(self) -> Board:
        return self.session.board

    @property
    def can_undo(self) -> bool:
        if self.is_over and not self.config.ALLOW_UNDO_AFTER_GAME_OVER:
            return False
        return self.session.history.can_undo

    @property
    def can_redo(self) -> bool:
        return not self.is_over and self.session.history.can_redo

    def other(self, mark: Mark) -> Mark:
        """Get the opponent of a mark."""
        return self.marks[1] if mark is self.marks[0] else self.marks[0]

    def get_display_state(self) -> List[List[str]]:
        """3x3 grid of glyphs, empty cells shown as EMPTY_GLYPH."""
        return self.session.board.display_grid(self.config.EMPTY_GLYPH)

    def move_log(self) -> Tuple[MoveCommand, ...]:
        return self.session.history.entries()

    def valid_moves(self) -> List[Cell]:
        if self.is_over:
            return []
        return self.session.board.empty_cells()

    # ==================== REQUESTS ====================

    def request_move(self, row: int, col: int) -> GameEvent:
        """
        Play the current mark at (row, col).

        Returns:
            WON, TIED or TURN_CHANGED on success, INVALID_MOVE if the
            cell is off the board or taken, GAME_OVER if the game ended.
        """
        if self.is_over:
            return self._emit(self._game_over_event())

        mark = self.session.current_mark
        try:
            command = MoveCommand(self.session.board, Cell(row, col), mark)
            command.execute()
        except (OutOfRangeError, CellOccupiedError) as e:
            logger.warning(f"Rejected move {mark} at ({row}, {col}): {e.message}")
            return self._emit(GameEvent(
                EventKind.INVALID_MOVE, mark=mark, reason=e.message, error=e
            ))

        self.session.history.push(command)
        return self._emit(self._evaluate(mark))

    def request_move_at(self, index: int) -> GameEvent:
        """
        Play the current mark on a numbered cell (1-9, row by row).
        """
        try:
            cell = Cell.from_index(index)
        except OutOfRangeError as e:
            if self.is_over:
                return self._emit(self._game_over_event())
            logger.warning(f"Rejected move at cell {index}: {e.message}")
            return self._emit(GameEvent(
                EventKind.INVALID_MOVE,
                mark=self.session.current_mark,
                reason=e.message,
                error=e,
            ))
        return self.request_move(cell.row, cell.col)

    def request_undo(self) -> Optional[GameEvent]:
        """
        Take back the last move and give the turn back to its player.

        After a win or tie this reopens the game, unless
        ALLOW_UNDO_AFTER_GAME_OVER is off.

        Returns:
            TURN_CHANGED, GAME_OVER if undo is refused, or None if there
            is nothing to undo.
        """
        if self.is_over and not self.config.ALLOW_UNDO_AFTER_GAME_OVER:
            return self._emit(self._game_over_event())

        command = self.session.history.undo_last()
        if command is None:
            logger.debug("Nothing to undo")
            return None

        if self.is_over:
            logger.info(f"Undo reopened the game ({self.session.status.value})")
        self.session.status = GameStatus.AWAITING_MOVE
        self.session.winner = None
        self.session.winning_line = None
        self.session.current_mark = command.mark
        return self._emit(GameEvent(EventKind.TURN_CHANGED, mark=command.mark))

    def request_redo(self) -> Optional[GameEvent]:
        """
        Replay the last undone move.

        Returns:
            Same events as request_move, GAME_OVER if the game has ended,
            or None if there is nothing to redo.
        """
        if self.is_over:
            return self._emit(self._game_over_event())

        command = self.session.history.redo_last()
        if command is None:
            logger.debug("Nothing to redo")
            return None

        return self._emit(self._evaluate(command.mark))

    def request_reset(self) -> GameEvent:
        """
        Throw the current game away and start a new one.

        Emits RESET, then TURN_CHANGED for the first player.
        """
        self.session = self._new_session()
        logger.info("Game reset")
        event = self._emit(GameEvent(EventKind.RESET))
        self._emit(GameEvent(EventKind.TURN_CHANGED, mark=self.session.current_mark))
        return event

    # ==================== INTERNALS ====================

    def _new_session(self) -> SessionState:
        return SessionState(current_mark=self.first_mark)

    def _evaluate(self, mark: Mark) -> GameEvent:
        """Decide the outcome after `mark` has just been placed."""
        board = self.session.board

        # Win is checked first: a winning move that fills the board is a win
        line = self.evaluator.find_winning_line(board, mark)
        if line is not None:
            self.session.status = GameStatus.WON
            self.session.winner = mark
            self.session.winning_line = line
            logger.info(f"{mark} wins on {line}")
            return GameEvent(EventKind.WON, mark=mark, line=line)

        if board.is_full():
            self.session.status = GameStatus.TIED
            logger.info("Game tied")
            return GameEvent(EventKind.TIED)

        self.session.current_mark = self.other(mark)
        return GameEvent(EventKind.TURN_CHANGED, mark=self.session.current_mark)

    def _game_over_event(self) -> GameEvent:
        error = GameOverError(
            "Game is already over!",
            context={"status": self.session.status.value},
        )
        return GameEvent(
            EventKind.GAME_OVER,
            mark=self.session.winner,
            reason=error.message,
            error=error,
        )
