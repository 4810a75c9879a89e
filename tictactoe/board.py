"""
Board model for TicTacToe.
Holds the 9 cells, the two players, and the board constants.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass


class GameError(Exception):
    """Base class for errors raised by the game engine."""


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


# Board geometry
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# None means the cell is empty
Cell = Optional[Player]

# Characters accepted as an empty cell by Board.from_string
EMPTY_CHARS = ".- "


@dataclass(frozen=True)
class Board:
    """
    The 3x3 board, stored row-major (index = row * 3 + col).

    Boards are values: apply_move() returns a new Board instead
    of writing into an existing one.
    """

    cells: Tuple[Cell, ...] = (None,) * CELL_COUNT

    def __post_init__(self):
        if len(self.cells) != CELL_COUNT:
            raise ValueError(
                f"Board needs {CELL_COUNT} cells, got {len(self.cells)}"
            )

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from a 9 character string.

        Args:
            text: Row-major cells, "X"/"O" for marks and "." "-" or " " for empty.

        Returns:
            The parsed Board.
        """
        if len(text) != CELL_COUNT:
            raise ValueError(f"Expected {CELL_COUNT} characters, got {len(text)}")

        cells = []
        for char in text.upper():
            if char in EMPTY_CHARS:
                cells.append(None)
            else:
                cells.append(Player(char))
        return cls(tuple(cells))

    def get_empty_cells(self) -> List[int]:
        """Get the indices of all empty cells, in ascending order."""
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def is_cell_empty(self, index: int) -> bool:
        return self.cells[index] is None

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def count(self, player: Player) -> int:
        """How many marks a player has on the board."""
        return sum(1 for cell in self.cells if cell == player)

    def render(self, show_indices: bool = False) -> str:
        """
        Draw the board as text.

        Args:
            show_indices: Show 1-9 cell numbers in empty cells (console input hints).

        Returns:
            A multi-line string.
        """
        rows = []
        for row in range(BOARD_SIZE):
            symbols = []
            for col in range(BOARD_SIZE):
                index = row * BOARD_SIZE + col
                cell = self.cells[index]
                if cell is not None:
                    symbols.append(cell.value)
                elif show_indices:
                    symbols.append(str(index + 1))
                else:
                    symbols.append(" ")
            rows.append(" " + " | ".join(symbols))
        return "\n---+---+---\n".join(rows)

    def __str__(self) -> str:
        return "".join(cell.value if cell else "." for cell in self.cells)
