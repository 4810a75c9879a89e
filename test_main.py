"""Tests for the console front end and command line."""

import main
from main import ConsoleGame
from tictactoe.board import Board, Player
from tictactoe.session import GameController, GameMode
from tictactoe.win_checker import Outcome


def scripted(answers):
    """input() replacement that returns the given answers in order."""
    answers = iter(answers)
    return lambda prompt: next(answers)


def test_console_pvp_win(capsys):
    controller = GameController(GameMode.PVP)
    game = ConsoleGame(controller, think_delay=0, input_func=scripted(["1", "4", "2", "5", "3"]))

    game.start()

    assert controller.outcome == Outcome.won(Player.X, (0, 1, 2))
    out = capsys.readouterr().out
    assert "Human vs Human" in out
    assert "GAME OVER!" in out
    assert "Player X wins! (cells 1, 2, 3)" in out


def test_console_rejects_bad_input(capsys):
    controller = GameController(GameMode.PVP)
    answers = ["abc", "5", "5", "10", "q"]
    game = ConsoleGame(controller, think_delay=0, input_func=scripted(answers))

    game.start()

    out = capsys.readouterr().out
    assert "Please type a number 1-9." in out
    assert "Illegal move: Cell 4 is already occupied by X" in out
    assert "Illegal move: Invalid cell 9" in out
    assert "Game quit by user." in out
    assert "GAME OVER!" not in out
    assert not game.is_running
    assert controller.board == Board.from_string("....X....")


def test_console_reset(capsys):
    controller = GameController(GameMode.PVP)
    game = ConsoleGame(controller, think_delay=0, input_func=scripted(["1", "r", "q"]))

    game.start()

    assert controller.board == Board()
    assert "Resetting game..." in capsys.readouterr().out


def test_console_pvc_plays_to_the_end(capsys):
    controller = GameController(GameMode.PVC)

    def first_free_cell(prompt):
        return str(controller.board.get_empty_cells()[0] + 1)

    game = ConsoleGame(controller, think_delay=0, input_func=first_free_cell)
    game.start()

    assert controller.outcome.is_over
    assert controller.outcome.winner != Player.X
    out = capsys.readouterr().out
    assert ">>> Computer plays at" in out
    assert "GAME OVER!" in out


def test_console_computer_first(capsys):
    controller = GameController(GameMode.PVC, computer_first=True)
    game = ConsoleGame(controller, think_delay=0, input_func=scripted(["q"]))

    game.start()

    assert controller.board.cells[0] == Player.X
    assert ">>> Computer plays at 1" in capsys.readouterr().out


def test_main_console_mode(monkeypatch, capsys):
    answers = iter(["1", "4", "2", "5", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    main.main(["--no-ui", "--mode", "pvp", "--think-delay", "0"])

    out = capsys.readouterr().out
    assert "Player X wins!" in out
    assert out.rstrip().endswith("Goodbye!")


def test_main_handles_end_of_input(monkeypatch, capsys):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)

    main.main(["--no-ui", "--debug"])

    out = capsys.readouterr().out
    assert "Game interrupted by user." in out
    assert "Goodbye!" in out
