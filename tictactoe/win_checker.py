"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple
from dataclasses import dataclass

from .board import Board, Cell, Player


Line = Tuple[int, int, int]

# All possible winning lines (cell indices)
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class GameStatus(Enum):
    """Where the game stands after a move."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating a board."""
    status: GameStatus
    winner: Optional[Player] = None
    line: Optional[Line] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameStatus.DRAW)

    @classmethod
    def won(cls, player: Player, line: Line) -> "Outcome":
        return cls(GameStatus.WON, winner=player, line=line)

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def has_won(self, cells: Sequence[Cell], player: Player) -> bool:
        """
        Check if a player holds any complete line.

        Works on a plain cell sequence so the search can pass its scratch list.
        """
        return self._find_line(cells, player) is not None

    def evaluate(self, board: Board, last_mover: Player) -> Outcome:
        """
        Evaluate the board after last_mover has played.

        Args:
            board: The board to evaluate.
            last_mover: The player who made the latest move.

        Returns:
            Won with the first completed line, Draw on a full board,
            otherwise In Progress.
        """
        line = self._find_line(board.cells, last_mover)
        if line is not None:
            return Outcome.won(last_mover, line)

        if board.is_full():
            return Outcome.draw()

        return Outcome.in_progress()

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if either player has a line.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in Player:
            if self.has_won(board.cells, player):
                return player
        return None

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """Get the first completed line for either player, or None."""
        for player in Player:
            line = self._find_line(board.cells, player)
            if line is not None:
                return line
        return None

    def check_draw(self, board: Board) -> bool:
        """A draw is a full board with no winner."""
        return board.is_full() and self.check_winner(board) is None

    def _find_line(self, cells: Sequence[Cell], player: Player) -> Optional[Line]:
        for line in self.WINNING_LINES:
            a, b, c = line
            if cells[a] == player and cells[b] == player and cells[c] == player:
                return line
        return None


_checker = WinChecker()


def evaluate(board: Board, last_mover: Player) -> Outcome:
    """Evaluate a board after last_mover's move. See WinChecker.evaluate."""
    return _checker.evaluate(board, last_mover)
