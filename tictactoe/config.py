"""
Game configuration for TicTacToe.
All the settings for players, the computer opponent, and the front ends.
"""

from .board import Player


class GameConfig:
    """
    Configuration class for game settings.
    Override on an instance to change a single game, e.g. config.DEBUG_MODE = True
    """

    # ==================== PLAYERS ====================
    # X always moves first
    FIRST_PLAYER = Player.X

    # Default assignment in human-vs-computer mode
    HUMAN_PLAYER = Player.X
    COMPUTER_PLAYER = Player.O

    # "pvp" (human vs human) or "pvc" (human vs computer)
    DEFAULT_MODE = "pvc"

    # ==================== SEARCH SETTINGS ====================
    # Leaf scores from the computer's point of view
    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0

    # Alpha-beta only skips branches, the chosen move is the same
    USE_ALPHA_BETA = True

    # ==================== PRESENTATION ====================
    # Pause before the computer moves so it looks like it is thinking
    AI_THINK_DELAY_MS = 500

    # Pause before the result dialog so the final board is visible
    RESULT_DELAY_MS = 500

    # ==================== DEBUG SETTINGS ====================
    # Print search statistics after every computer move
    DEBUG_MODE = False
