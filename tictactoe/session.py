"""
Game session management for TicTacToe.
Tracks whose turn it is, the game mode, and hands turns to the computer.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .board import Board, Player
from .config import GameConfig
from .move_validator import IllegalMove, apply_move
from .win_checker import GameStatus, Outcome, evaluate
from .ai_player import select_move


class GameMode(Enum):
    """Who is playing."""
    PVP = "pvp"   # Human vs human
    PVC = "pvc"   # Human vs computer


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Which move this is (0-8)


@dataclass
class GameSession:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The board
    - Current player and game mode
    - Which player is human and which is the computer (PvC only)
    - Move history
    - Game status (active until won or drawn)
    """

    mode: GameMode = GameMode.PVC
    human_player: Player = Player.X
    computer_player: Player = Player.O

    board: Board = field(default_factory=Board)
    current_player: Player = Player.X
    is_active: bool = True
    outcome: Outcome = field(default_factory=Outcome.in_progress)
    moves: List[Move] = field(default_factory=list)


class GameController:
    """
    Owns the session and runs the game flow.

    Game flow:
    1. A human move comes in from the front end
    2. It is applied and the board is evaluated
    3. In PvC mode, when the computer is to move, it searches
       for the best reply and plays it through the same path
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        mode: Optional[GameMode] = None,
        computer_first: bool = False,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the controller.

        Args:
            mode: PvP or PvC (default: config.DEFAULT_MODE).
            computer_first: In PvC, let the computer play the first player.
            config: Game settings.
        """
        self.config = config or GameConfig()
        self.mode = mode if mode is not None else GameMode(self.config.DEFAULT_MODE)

        if computer_first:
            self.computer_player = self.config.FIRST_PLAYER
            self.human_player = self.computer_player.opposite()
        else:
            self.human_player = self.config.HUMAN_PLAYER
            self.computer_player = self.config.COMPUTER_PLAYER

        self.session = self._new_session()

    def _new_session(self) -> GameSession:
        return GameSession(
            mode=self.mode,
            human_player=self.human_player,
            computer_player=self.computer_player,
            current_player=self.config.FIRST_PLAYER,
        )

    def reset(self):
        """Start a new game with the same mode and players."""
        self.session = self._new_session()

    def set_mode(self, mode: GameMode) -> bool:
        """
        Switch between PvP and PvC.

        Returns:
            False if already in that mode (nothing changes), True after a reset.
        """
        if mode == self.mode:
            return False

        self.mode = mode
        self.reset()
        return True

    @property
    def board(self) -> Board:
        return self.session.board

    @property
    def outcome(self) -> Outcome:
        return self.session.outcome

    def is_computer_turn(self) -> bool:
        session = self.session
        return (
            session.mode == GameMode.PVC
            and session.is_active
            and session.current_player == session.computer_player
        )

    def play_human_move(self, index: int) -> Outcome:
        """
        Play a move for the player whose turn it is.

        Raises:
            IllegalMove: Bad cell, game over, or it's the computer's turn.
        """
        if self.is_computer_turn():
            raise IllegalMove("Wait for the computer to move!")

        return self._commit(index, self.session.current_player)

    def play_computer_move(self) -> int:
        """
        Let the computer pick and play its move.

        Returns:
            The cell the computer played.

        Raises:
            IllegalMove: It is not the computer's turn.
        """
        if not self.is_computer_turn():
            raise IllegalMove("It is not the computer's turn!")

        session = self.session
        index = select_move(
            session.board,
            session.computer_player,
            session.human_player,
            self.config
        )
        self._commit(index, session.computer_player)
        return index

    def play_turn(self, index: int) -> Outcome:
        """Play a human move, then the computer's reply if one is due."""
        outcome = self.play_human_move(index)
        if self.is_computer_turn():
            self.play_computer_move()
        return self.session.outcome

    def _commit(self, index: int, player: Player) -> Outcome:
        """Apply a move, record it, and update turn and status."""
        session = self.session
        session.board = apply_move(session.board, index, player, session.is_active)
        session.moves.append(Move(
            player=player,
            index=index,
            move_number=len(session.moves)
        ))

        session.outcome = evaluate(session.board, player)
        if session.outcome.is_over:
            session.is_active = False
        else:
            session.current_player = player.opposite()

        return session.outcome

    def status_text(self) -> str:
        """One-line status for the front ends."""
        session = self.session
        outcome = session.outcome

        if outcome.status == GameStatus.WON:
            if session.mode == GameMode.PVC and outcome.winner == session.computer_player:
                return "Computer wins!"
            return f"Player {outcome.winner.value} wins!"

        if outcome.status == GameStatus.DRAW:
            return "It's a draw!"

        if self.is_computer_turn():
            return "Computer is thinking..."
        return f"Player {session.current_player.value}'s turn"

    def result_message(self) -> Tuple[str, str]:
        """
        Title and message for the end-of-game dialog.

        Returns:
            (title, message). Empty strings while the game is running.
        """
        outcome = self.session.outcome
        if outcome.status == GameStatus.DRAW:
            return "Draw", "Evenly matched!"
        if outcome.status == GameStatus.WON:
            return "Victory!", self.status_text()
        return "", ""
