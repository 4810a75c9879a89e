"""Tests for the minimax computer opponent."""

import pytest

from tictactoe.ai_player import AIPlayer, InvalidSearchState, select_move, trial_move
from tictactoe.board import Board, Player
from tictactoe.config import GameConfig
from tictactoe.move_validator import apply_move
from tictactoe.win_checker import GameStatus, WinChecker, evaluate


X, O = Player.X, Player.O


def player_to_move(board):
    return X if board.count(X) == board.count(O) else O


def unpruned_config():
    config = GameConfig()
    config.USE_ALPHA_BETA = False
    return config


def test_takes_immediate_win():
    board = Board.from_string("XX..O....")
    assert select_move(board, X, O) == 2


def test_empty_board_opens_in_first_cell():
    # Every opening draws under perfect play, so the lowest index is kept
    assert select_move(Board(), X, O) == 0
    assert select_move(Board(), X, O) == 0


def test_blocks_opponent_line():
    # X threatens 6-7-8, blocking at 8 is the only move that doesn't lose
    board = Board.from_string("....O.XX.")
    assert select_move(board, O, X) == 8


def test_reply_to_centre_opening_is_a_corner():
    assert select_move(Board.from_string("....X...."), O, X) == 0


def test_lost_position_is_not_prolonged():
    # Blocking at 8 only delays the loss; with no depth bonus every
    # move scores -10 and the lowest empty index is chosen.
    board = Board.from_string("X...XO...")
    assert select_move(board, O, X) == 1


def test_does_not_modify_board():
    board = Board.from_string("XX..O....")
    select_move(board, X, O)
    assert board == Board.from_string("XX..O....")


def test_rejects_full_board():
    with pytest.raises(InvalidSearchState, match="full"):
        select_move(Board.from_string("XOXXOOOXX"), X, O)


def test_rejects_finished_board():
    with pytest.raises(InvalidSearchState, match="won"):
        select_move(Board.from_string("XXXOO...."), O, X)


def test_trial_move_restores_scratch_on_error():
    scratch = [None] * 9

    with pytest.raises(RuntimeError):
        with trial_move(scratch, 3, X):
            assert scratch[3] == X
            raise RuntimeError("boom")

    assert scratch == [None] * 9


def test_positions_evaluated_and_debug_output(capsys):
    config = GameConfig()
    config.DEBUG_MODE = True
    ai = AIPlayer(O, config=config)

    move = ai.get_best_move(Board.from_string("XX..O...."))

    assert move == 2
    assert ai.opponent == X
    assert ai.positions_evaluated > 1
    assert "AI evaluated" in capsys.readouterr().out


def test_quiet_without_debug(capsys):
    AIPlayer(O).get_best_move(Board.from_string("X........"))
    assert capsys.readouterr().out == ""


def test_pruning_reduces_work_without_changing_move():
    board = Board.from_string("X...O....")
    pruned = AIPlayer(X, O)
    plain = AIPlayer(X, O, unpruned_config())

    assert pruned.get_best_move(board) == plain.get_best_move(board)
    assert pruned.positions_evaluated < plain.positions_evaluated


def test_never_picks_occupied_cell_and_pruning_agrees():
    checker = WinChecker()
    plain_config = unpruned_config()
    seen = set()

    def explore(board):
        if board in seen:
            return
        seen.add(board)
        if checker.check_winner(board) is not None or board.is_full():
            return

        mover = player_to_move(board)
        move = select_move(board, mover, mover.opposite())
        assert board.is_cell_empty(move)

        # Unpruned search is only affordable on small subtrees
        if len(board.get_empty_cells()) <= 4:
            assert move == select_move(board, mover, mover.opposite(), plain_config)

        for index in board.get_empty_cells():
            explore(apply_move(board, index, mover))

    explore(Board())


def _assert_computer_never_loses(board, human, computer, cache):
    """Try every human reply; the computer answers with select_move."""
    for index in board.get_empty_cells():
        after_human = apply_move(board, index, human)
        outcome = evaluate(after_human, human)
        assert outcome.winner != human
        if outcome.is_over:
            continue

        if after_human not in cache:
            cache[after_human] = select_move(after_human, computer, human)
        after_computer = apply_move(after_human, cache[after_human], computer)
        if evaluate(after_computer, computer).is_over:
            continue

        _assert_computer_never_loses(after_computer, human, computer, cache)


def test_computer_never_loses_moving_second():
    _assert_computer_never_loses(Board(), X, O, {})


def test_computer_never_loses_moving_first():
    opening = apply_move(Board(), select_move(Board(), X, O), X)
    _assert_computer_never_loses(opening, O, X, {})


@pytest.mark.parametrize("opening", [4, 0, 1])
def test_optimal_play_from_fixed_openings_draws(opening):
    board = apply_move(Board(), opening, X)
    mover = O

    while True:
        move = select_move(board, mover, mover.opposite())
        board = apply_move(board, move, mover)
        outcome = evaluate(board, mover)
        if outcome.is_over:
            break
        mover = mover.opposite()

    assert outcome.status == GameStatus.DRAW
