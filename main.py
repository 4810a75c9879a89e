"""
Main script for TicTacToe.

This script ties together:
- Logic (board, move validation, win checking)
- AI (minimax computer opponent)
- Front end (Tkinter UI, or console with --no-ui)

Run this script to play TicTacToe!
"""

import time
from typing import Callable, Optional

from tictactoe.config import GameConfig
from tictactoe.move_validator import IllegalMove
from tictactoe.session import GameController, GameMode
from tictactoe.win_checker import GameStatus


class ConsoleGame:
    """
    Console front end for TicTacToe.

    Cells are typed as 1-9:
        1 | 2 | 3
        4 | 5 | 6
        7 | 8 | 9
    'r' resets the game, 'q' quits.
    """

    def __init__(
        self,
        controller: GameController,
        think_delay: Optional[float] = None,
        input_func: Optional[Callable[[str], str]] = None
    ):
        """
        Initialize the console game.

        Args:
            controller: The game to play.
            think_delay: Seconds to pause before computer moves
                (default: config.AI_THINK_DELAY_MS).
            input_func: Where human moves are read from.
        """
        self.controller = controller
        if think_delay is None:
            think_delay = controller.config.AI_THINK_DELAY_MS / 1000
        self.think_delay = think_delay
        self.input_func = input_func or input
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\n" + "="*40)
        print(f"   TicTacToe - {self._mode_label()}")
        print("="*40)
        print("Type 1-9 to play, 'r' to reset, 'q' to quit\n")

        self.is_running = True
        self._game_loop()

        if self.controller.session.outcome.is_over:
            self._show_game_result()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running and self.controller.session.is_active:
            print(self.controller.board.render(show_indices=True))
            print(f"\n{self.controller.status_text()}")

            if self.controller.is_computer_turn():
                self._computer_move()
            else:
                self._read_human_move()

    def _read_human_move(self):
        """Read and play one human move."""
        session = self.controller.session
        raw = self.input_func(f"Play {session.current_player.value} at [1-9]: ").strip().lower()

        if raw == "q":
            print("\nGame quit by user.")
            self.is_running = False
            return
        if raw == "r":
            self._reset_game()
            return

        try:
            index = int(raw) - 1
        except ValueError:
            print("Please type a number 1-9.")
            return

        try:
            self.controller.play_human_move(index)
        except IllegalMove as e:
            print(f"Illegal move: {e}")

    def _computer_move(self):
        """Execute the computer's move."""
        if self.think_delay > 0:
            time.sleep(self.think_delay)

        index = self.controller.play_computer_move()
        print(f">>> Computer plays at {index + 1}\n")

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)

        print(self.controller.board.render())

        outcome = self.controller.outcome
        if outcome.status == GameStatus.WON:
            cells = ", ".join(str(i + 1) for i in outcome.line)
            print(f"\n{self.controller.status_text()} (cells {cells})")
        else:
            print(f"\n{self.controller.status_text()} Good game!")

        print("="*40)

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.controller.reset()

    def _mode_label(self) -> str:
        if self.controller.mode == GameMode.PVP:
            return "Human vs Human"
        return "Human vs Computer"


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        default=GameConfig.DEFAULT_MODE,
        help="pvp: human vs human, pvc: human vs computer"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--think-delay",
        type=float,
        default=None,
        help="Seconds the computer waits before moving"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print search statistics"
    )

    args = parser.parse_args(argv)

    config = GameConfig()
    config.DEBUG_MODE = args.debug
    if args.think_delay is not None:
        config.AI_THINK_DELAY_MS = int(args.think_delay * 1000)

    controller = GameController(
        mode=GameMode(args.mode),
        computer_first=args.computer_first,
        config=config
    )

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(controller)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(controller)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
