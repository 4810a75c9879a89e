"""
TicTacToe
=========
A 3x3 TicTacToe game for two humans, or a human against a computer
opponent that searches the whole game tree and never loses.
"""

__version__ = "1.0.0"

from .board import Board, Player, GameError
from .win_checker import WinChecker, Outcome, GameStatus, WINNING_LINES, evaluate
from .move_validator import MoveValidator, IllegalMove, apply_move
from .ai_player import AIPlayer, InvalidSearchState, select_move
from .session import GameController, GameSession, GameMode
from .config import GameConfig
