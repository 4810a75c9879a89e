"""
Move validator for TicTacToe.
Validates that moves follow the rules and applies legal ones.
"""

from typing import Optional, List
from dataclasses import dataclass

from .board import Board, Player, GameError, CELL_COUNT


class IllegalMove(GameError):
    """A move was rejected. The board is left unchanged."""


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be a cell on the board (0-8)
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        board: Board,
        index: int,
        is_active: bool = True
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place the mark in (0-8).
            is_active: False once the game has a result.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not is_active:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # bool is an int subclass, but True/False are not cell numbers
        if (not isinstance(index, int) or isinstance(index, bool)
                or not 0 <= index < CELL_COUNT):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be 0-{CELL_COUNT - 1}."
            )

        if not board.is_cell_empty(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board.cells[index].value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board, is_active: bool = True) -> List[int]:
        """Get all legal cell indices, ascending. Empty once the game is over."""
        if not is_active:
            return []
        return board.get_empty_cells()


_validator = MoveValidator()


def apply_move(board: Board, index: int, player: Player, is_active: bool = True) -> Board:
    """
    Place player's mark at index.

    This is the only way a board gains a mark.

    Args:
        board: Board before the move (not modified).
        index: Target cell (0-8).
        player: Who is moving.
        is_active: Whether the game is still running.

    Returns:
        A new Board with the mark placed.

    Raises:
        IllegalMove: Game over, index out of range, or cell occupied.
    """
    result = _validator.validate_move(board, index, is_active)
    if not result.is_valid:
        raise IllegalMove(result.error_message)

    cells = list(board.cells)
    cells[index] = player
    return Board(tuple(cells))
