"""
Configuration for the tic-tac-toe engine and its console front end.
All the settings for players, undo policy, logging and menus.
"""

import logging


class GameConfig:
    """
    Configuration class for game settings.
    Change these values (or override them on an instance) to suit your setup!
    """

    # ==================== BOARD SETTINGS ====================
    # Glyph shown for a cell nobody has played yet
    EMPTY_GLYPH = " "

    # ==================== PLAYER SETTINGS ====================
    # Display glyphs, one per player (index = player id)
    PLAYER_GLYPHS = ("X", "O")

    # Which player id moves first (0 or 1)
    FIRST_PLAYER = 0

    # ==================== UNDO SETTINGS ====================
    # If True, undo is accepted after a win/tie and reopens the game.
    # If False, the game stays over until reset.
    ALLOW_UNDO_AFTER_GAME_OVER = True

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = logging.WARNING
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # ==================== CONSOLE SETTINGS ====================
    # Menu token scheme: "numeric" (1-6) or "roman" (I-VI)
    MENU_SCHEME = "numeric"

    def first_glyph(self) -> str:
        """Glyph of the player who moves first."""
        return self.PLAYER_GLYPHS[self.FIRST_PLAYER]
