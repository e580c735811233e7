"""
Console front end for the tic-tac-toe engine.

This script ties together:
- Menu (numeric or roman option tokens)
- Engine (game controller, move validation, undo/redo)

Run this script to play TicTacToe against a friend on one keyboard!
"""

import logging
from typing import Callable, List, Optional

from engine.config import GameConfig
from engine.controller import EventKind, GameController, GameEvent
from engine.move_validator import MoveValidator
from menu import MenuAction, get_scheme

logger = logging.getLogger(__name__)


def render_board(grid: List[List[str]]) -> str:
    """
    Draw a glyph grid as a box with row/column numbers.

    Args:
        grid: 3x3 glyphs, e.g. from GameController.get_display_state().
    """
    lines = ["\n    0   1   2", "  ┌───┬───┬───┐"]
    for row, cells in enumerate(grid):
        lines.append(f"{row} │" + "│".join(f" {cell} " for cell in cells) + "│")
        if row < len(grid) - 1:
            lines.append("  ├───┼───┼───┤")
    lines.append("  └───┴───┴───┘")
    return "\n".join(lines)


class TicTacToeConsole:
    """
    Text front end for one TicTacToe controller.

    Game flow:
    1. The menu is shown and the player picks an option
    2. Moves are typed as a cell number (1-9) or "row col"
    3. The controller reports the outcome as an event, which is printed
    4. Repeat until the player quits (a finished game can be undone or
       restarted from the menu)
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        """
        Initialize the console.

        Args:
            config: Game settings.
            input_fn: Reads one line of player input (given a prompt).
            output: Writes one message.
        """
        self.config = config or GameConfig()
        self.input_fn = input_fn
        self.output = output

        self.controller = GameController(self.config)
        self.controller.subscribe(self._on_event)
        self.validator = MoveValidator()
        self.scheme = get_scheme(self.config.MENU_SCHEME)

        self.is_running = False

    def start(self):
        """Start the game."""
        self.output("\n" + "=" * 40)
        self.output("   Welcome to TicTacToe")
        self.output("=" * 40)
        self.output(f"First player: {self.config.first_glyph()}")
        self._show_turn()

        self.is_running = True
        while self.is_running:
            try:
                self._menu_step()
            except EOFError:
                self.output("\nInput closed.")
                self.is_running = False

    def _menu_step(self):
        """Show the menu, read one option and carry it out."""
        self.output("\n" + self.scheme.render())
        token = self.input_fn("Option: ")
        action = self.scheme.parse(token)

        if action is None:
            self.output(f"Unknown option '{token.strip()}'.")
            return

        logger.debug(f"Menu action: {action.name}")
        if action is MenuAction.MOVE:
            self._play_move()
        elif action is MenuAction.UNDO:
            if self.controller.request_undo() is None:
                self.output("Nothing to undo.")
        elif action is MenuAction.REDO:
            if self.controller.request_redo() is None:
                self.output("Nothing to redo.")
        elif action is MenuAction.SHOW_MOVES:
            self._show_moves()
        elif action is MenuAction.RESET:
            self.controller.request_reset()
        elif action is MenuAction.QUIT:
            self.output("\nGame quit by user.")
            self.is_running = False

    def _play_move(self):
        """Ask for a cell and play it."""
        if self.controller.is_over:
            self.output("Game is already over! Undo or start a new game.")
            return

        text = self.input_fn(f"{self.controller.current_mark} move (1-9 or 'row col'): ")
        result = self.validator.parse(text)
        if not result.is_valid:
            self.output(f"Invalid move: {result.error_message}")
            return

        self.controller.request_move(result.cell.row, result.cell.col)

    def _show_moves(self):
        moves = self.controller.move_log()
        if not moves:
            self.output("No moves yet.")
            return

        self.output("\nMoves:")
        for number, command in enumerate(moves, start=1):
            self.output(f"  {number}. {command} [cell {command.cell.index}]")

    def _show_board(self):
        self.output(render_board(self.controller.get_display_state()))

    def _show_turn(self):
        self._show_board()
        self.output(f"\nCurrent turn: {self.controller.current_mark}")

    def _on_event(self, event: GameEvent):
        """Print what the controller reports."""
        if event.kind is EventKind.TURN_CHANGED:
            self._show_turn()
        elif event.kind is EventKind.INVALID_MOVE:
            self.output(f"Invalid move: {event.reason}")
        elif event.kind is EventKind.WON:
            self._show_board()
            self.output(f"\n🏆 {event.mark} WINS! ({event.line})")
        elif event.kind is EventKind.TIED:
            self._show_board()
            self.output("\n🤝 It's a DRAW!")
        elif event.kind is EventKind.RESET:
            self.output("\nNew game started!")
        elif event.kind is EventKind.GAME_OVER:
            self.output(f"{event.reason} Undo or start a new game.")


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--scheme",
        choices=["numeric", "roman"],
        default=GameConfig.MENU_SCHEME,
        help="Menu option tokens (1-6 or I-VI)"
    )
    parser.add_argument(
        "--glyphs",
        nargs=2,
        metavar=("FIRST", "SECOND"),
        default=list(GameConfig.PLAYER_GLYPHS),
        help="Glyphs for player 1 and player 2"
    )
    parser.add_argument(
        "--second-first",
        action="store_true",
        help="Let the second player move first"
    )
    parser.add_argument(
        "--no-undo-after-game-over",
        action="store_true",
        help="Keep a finished game finished until reset"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log engine activity"
    )

    args = parser.parse_args(argv)

    config = GameConfig()
    config.MENU_SCHEME = args.scheme
    config.PLAYER_GLYPHS = tuple(args.glyphs)
    config.FIRST_PLAYER = 1 if args.second_first else 0
    config.ALLOW_UNDO_AFTER_GAME_OVER = not args.no_undo_after_game_over

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )

    console = TicTacToeConsole(config)
    try:
        console.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
