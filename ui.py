"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a cell to play)
- Game status and whose turn it is
- Mode selection (Human vs Human, Human vs Computer)
- Winning line highlight and a result dialog
"""

import tkinter as tk
from tkinter import ttk, messagebox
from typing import Optional

from tictactoe.board import BOARD_SIZE
from tictactoe.move_validator import IllegalMove
from tictactoe.session import GameController, GameMode


CELL_BG = '#16213e'
WIN_BG = '#3b4a6b'
MARK_COLORS = {"X": '#f87171', "O": '#10b981'}


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, controller: Optional[GameController] = None):
        """Initialize the UI."""
        self.controller = controller or GameController()
        self.config = self.controller.config

        # Pending root.after() job for the computer's move
        self.pending_ai_job: Optional[str] = None

        # Create UI
        self._create_ui()
        self._refresh()
        self._schedule_computer_move()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=15, pady=15)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        ttk.Label(main_frame, text="TicTacToe", style='Title.TLabel').pack(pady=(0, 10))

        # Mode buttons
        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(pady=5)

        self.mode_buttons = {}
        for text, mode in (("Human vs Human", GameMode.PVP), ("Human vs Computer", GameMode.PVC)):
            btn = tk.Button(
                mode_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=16,
                command=lambda m=mode: self._set_mode(m)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.mode_buttons[mode] = btn

        # Board
        self.board_frame = ttk.Frame(main_frame)
        self.board_frame.pack(pady=15)

        self.board_cells = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                index = row * BOARD_SIZE + col
                cell = tk.Button(
                    self.board_frame,
                    text="",
                    font=('Segoe UI', 24, 'bold'),
                    width=4,
                    height=2,
                    bg=CELL_BG,
                    fg='white',
                    relief='ridge',
                    borderwidth=2,
                    command=lambda i=index: self._on_cell_click(i)
                )
                cell.grid(row=row, column=col, padx=2, pady=2)
                self.board_cells.append(cell)

        # Status
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        try:
            self.controller.play_human_move(index)
        except IllegalMove:
            # Occupied cell, game over, or computer's turn
            return

        self._after_move()

    def _schedule_computer_move(self):
        """Queue the computer's move after the think delay, if it is due."""
        if self.pending_ai_job is None and self.controller.is_computer_turn():
            self.pending_ai_job = self.root.after(
                self.config.AI_THINK_DELAY_MS, self._computer_move
            )

    def _computer_move(self):
        """Play the computer's move (runs on UI thread)."""
        self.pending_ai_job = None
        if not self.controller.is_computer_turn():
            return

        index = self.controller.play_computer_move()
        if self.config.DEBUG_MODE:
            print(f"Computer plays at {index}")
        self._after_move()

    def _after_move(self):
        """Redraw, then hand over to the computer or finish the game."""
        self._refresh()

        if self.controller.outcome.is_over:
            self.root.after(self.config.RESULT_DELAY_MS, self._show_result)
        else:
            self._schedule_computer_move()

    def _refresh(self):
        """Update board cells, status label and mode buttons."""
        board = self.controller.board
        line = self.controller.outcome.line or ()

        for index, cell in enumerate(self.board_cells):
            mark = board.cells[index]
            if mark is None:
                cell.configure(text="", bg=CELL_BG)
            else:
                cell.configure(
                    text=mark.value,
                    fg=MARK_COLORS[mark.value],
                    bg=WIN_BG if index in line else CELL_BG
                )

        self.status_label.configure(text=self.controller.status_text())

        for mode, btn in self.mode_buttons.items():
            if mode == self.controller.mode:
                btn.configure(bg='#00d4ff', fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _show_result(self):
        """Show the end-of-game dialog."""
        title, message = self.controller.result_message()
        if title:
            messagebox.showinfo(title, message, parent=self.root)

    def _cancel_computer_move(self):
        if self.pending_ai_job is not None:
            self.root.after_cancel(self.pending_ai_job)
            self.pending_ai_job = None

    def _set_mode(self, mode: GameMode):
        """Switch game mode (resets the board)."""
        if not self.controller.set_mode(mode):
            return

        print(f"Mode set to: {mode.value}")
        self._cancel_computer_move()
        self._refresh()
        self._schedule_computer_move()

    def _reset_game(self):
        """Reset the game."""
        self._cancel_computer_move()
        self.controller.reset()
        self._refresh()
        self._schedule_computer_move()

    def _quit(self):
        """Quit the application."""
        self._cancel_computer_move()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
