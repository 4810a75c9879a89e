"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from contextlib import contextmanager
from typing import Optional, Tuple, List

from .board import Board, Cell, Player, GameError
from .config import GameConfig
from .win_checker import WinChecker


class InvalidSearchState(GameError):
    """Search was asked for a move on a full or finished board."""


@contextmanager
def trial_move(scratch: List[Cell], index: int, player: Player):
    """Place a tentative mark on the scratch board and always take it back."""
    scratch[index] = player
    try:
        yield scratch
    finally:
        scratch[index] = None


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    Scores are +10 for a computer line, -10 for an opponent line and 0 for
    a full board. There is no depth bonus, so equal scores are broken only
    by cell order: the lowest index wins.
    """

    def __init__(
        self,
        player: Player = Player.O,
        opponent: Optional[Player] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            opponent: The human's player (default: the other one)
            config: Scores, pruning and debug settings.
        """
        self.player = player
        self.opponent = opponent if opponent is not None else player.opposite()
        self.config = config or GameConfig()
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Board) -> int:
        """
        Get the best move for the current position.

        Args:
            board: Current board. Not modified.

        Returns:
            Index (0-8) of the best move.

        Raises:
            InvalidSearchState: The board is full or already has a line.
        """
        if self.win_checker.check_winner(board) is not None:
            raise InvalidSearchState("Game is already won, there is no move to search")
        if board.is_full():
            raise InvalidSearchState("Board is full, there is no move to search")

        self.positions_evaluated = 0

        # Private scratch copy, restored after every trial move
        scratch = list(board.cells)
        best_move, best_score = self._minimax(
            scratch, self.player, float('-inf'), float('inf')
        )

        if self.config.DEBUG_MODE:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def _minimax(
        self,
        scratch: List[Cell],
        mover: Player,
        alpha: float,
        beta: float
    ) -> Tuple[Optional[int], float]:
        """
        Minimax algorithm with optional alpha-beta pruning.

        Args:
            scratch: Board cells, modified and restored in place.
            mover: Whose turn it is at this node.
            alpha: Best score the maximizer can already force.
            beta: Best score the minimizer can already force.

        Returns:
            (index, score). The index is None at terminal nodes.
        """
        self.positions_evaluated += 1

        # Check terminal states
        if self.win_checker.has_won(scratch, self.opponent):
            return None, self.config.LOSS_SCORE
        elif self.win_checker.has_won(scratch, self.player):
            return None, self.config.WIN_SCORE

        empty_cells = [i for i, cell in enumerate(scratch) if cell is None]
        if not empty_cells:
            return None, self.config.DRAW_SCORE

        is_maximizing = mover == self.player
        best_index = None
        best_score = float('-inf') if is_maximizing else float('inf')

        for index in empty_cells:
            with trial_move(scratch, index, mover):
                _, score = self._minimax(scratch, mover.opposite(), alpha, beta)

            # Strictly better only: the first (lowest) index keeps ties
            if is_maximizing:
                if score > best_score:
                    best_score, best_index = score, index
                alpha = max(alpha, best_score)
            else:
                if score < best_score:
                    best_score, best_index = score, index
                beta = min(beta, best_score)

            if self.config.USE_ALPHA_BETA and beta <= alpha:
                break  # Prune

        return best_index, best_score


def select_move(
    board: Board,
    computer_player: Player,
    human_player: Player,
    config: Optional[GameConfig] = None
) -> int:
    """
    Pick the optimal cell for computer_player.

    Deterministic for a given board; the empty board gives 0.

    Raises:
        InvalidSearchState: The board is full or already has a line.
    """
    ai = AIPlayer(computer_player, human_player, config)
    return ai.get_best_move(board)
