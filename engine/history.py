"""
Move history for the tic-tac-toe engine.
Stack of executed commands with a single redo slot.
"""

import logging
from typing import List, Optional, Tuple

from .errors import InvalidCommandStateError
from .move_command import CommandState, MoveCommand

logger = logging.getLogger(__name__)


class MoveHistory:
    """
    Executed moves, oldest first.

    Undo pops the newest move and keeps it as the redo candidate. Only
    one candidate is kept: a second undo replaces it, and pushing a new
    move discards it.
    """

    def __init__(self):
        self._commands: List[MoveCommand] = []
        self._redo: Optional[MoveCommand] = None

    def push(self, command: MoveCommand):
        """
        Record an executed command.

        Args:
            command: A command in the EXECUTED state.
        """
        if command.state is not CommandState.EXECUTED:
            raise InvalidCommandStateError(
                f"Only executed moves can be recorded, got {command!r}",
                context={"state": command.state.value},
            )
        self._commands.append(command)
        if self._redo is not None:
            logger.debug(f"Discarded redo candidate {self._redo}")
        self._redo = None

    def undo_last(self) -> Optional[MoveCommand]:
        """
        Take back the newest move.

        Returns:
            The undone command, or None if there is nothing to undo.
        """
        if not self._commands:
            return None

        command = self._commands.pop()
        command.undo()
        self._redo = command
        return command

    def redo_last(self) -> Optional[MoveCommand]:
        """
        Replay the redo candidate.

        Returns:
            The replayed command, or None if there is nothing to redo.
        """
        command = self._redo
        if command is None:
            return None

        command.redo()
        self._redo = None
        self._commands.append(command)
        return command

    def entries(self) -> Tuple[MoveCommand, ...]:
        """Snapshot of executed moves, oldest first."""
        return tuple(self._commands)

    @property
    def can_undo(self) -> bool:
        return bool(self._commands)

    @property
    def can_redo(self) -> bool:
        return self._redo is not None

    def clear(self):
        self._commands.clear()
        self._redo = None

    def __len__(self) -> int:
        return len(self._commands)
