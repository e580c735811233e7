"""
Menu schemes for the tic-tac-toe console.

The same game runs behind every scheme; a scheme only decides which
token the player types for each action.
"""

from enum import Enum
from typing import Dict, List, Optional
from dataclasses import dataclass


class MenuAction(Enum):
    """Things the player can ask for from the menu."""
    MOVE = "Play a move"
    UNDO = "Undo last move"
    REDO = "Redo move"
    SHOW_MOVES = "Show move log"
    RESET = "New game"
    QUIT = "Quit"


# Order the options are listed in
MENU_ORDER = [
    MenuAction.MOVE,
    MenuAction.UNDO,
    MenuAction.REDO,
    MenuAction.SHOW_MOVES,
    MenuAction.RESET,
    MenuAction.QUIT,
]


@dataclass
class MenuScheme:
    """
    Maps typed tokens to menu actions.
    """
    name: str
    tokens: List[str]           # One token per entry of MENU_ORDER
    case_sensitive: bool = True

    def __post_init__(self):
        if len(self.tokens) != len(MENU_ORDER):
            raise ValueError(
                f"Scheme '{self.name}' needs {len(MENU_ORDER)} tokens, "
                f"got {len(self.tokens)}"
            )

    @property
    def options(self) -> Dict[str, MenuAction]:
        return {
            self._normalize(token): action
            for token, action in zip(self.tokens, MENU_ORDER)
        }

    def _normalize(self, token: str) -> str:
        token = token.strip()
        return token if self.case_sensitive else token.upper()

    def parse(self, token: str) -> Optional[MenuAction]:
        """
        Get the action for a typed token.

        Returns:
            The MenuAction, or None if the token is not in this scheme.
        """
        if token is None:
            return None
        return self.options.get(self._normalize(token))

    def render(self) -> str:
        """Menu text, one option per line."""
        width = max(len(token) for token in self.tokens)
        return "\n".join(
            f"  {token.rjust(width)}. {action.value}"
            for token, action in zip(self.tokens, MENU_ORDER)
        )


SCHEMES = {
    "numeric": MenuScheme("numeric", ["1", "2", "3", "4", "5", "6"]),
    "roman": MenuScheme(
        "roman", ["I", "II", "III", "IV", "V", "VI"], case_sensitive=False
    ),
}


def get_scheme(name: str) -> MenuScheme:
    """Look up a scheme by name."""
    try:
        return SCHEMES[name]
    except KeyError:
        raise ValueError(
            f"Unknown menu scheme '{name}'. Choose from: {', '.join(SCHEMES)}"
        ) from None
