import pytest

from connectn.ai.evaluation import placement_delta, score_board, window_score
from connectn.board import Player, empty_board, place_mark
from connectn.config import WIN_SCORE
from connectn.topology import GOMOKU


def _board(**marks):
    board = list(empty_board(100))
    for mark, cells in marks.items():
        for cell in cells:
            board[cell] = mark
    return tuple(board)


def test_empty_board_scores_zero():
    assert score_board(empty_board(100), Player.X, GOMOKU) == 0


def test_single_corner_mark_opens_three_windows():
    board = _board(X=(0,))
    assert score_board(board, Player.X, GOMOKU) == 3
    assert score_board(board, Player.O, GOMOKU) == -3


def test_single_central_mark_opens_sixteen_windows():
    assert score_board(_board(X=(44,)), Player.X, GOMOKU) == 16


def test_pairs_and_triples_use_window_weights():
    assert score_board(_board(X=(0, 1)), Player.X, GOMOKU) == 15
    assert score_board(_board(X=(0, 1, 2)), Player.X, GOMOKU) == 67


def test_mixed_windows_contribute_nothing():
    board = _board(X=(0,), O=(1,))
    assert score_board(board, Player.X, GOMOKU) == -1
    assert score_board(board, Player.O, GOMOKU) == 1


def test_decided_positions_short_circuit():
    board = _board(O=(0, 1, 2, 3), X=(10, 11, 12))
    assert score_board(board, Player.O, GOMOKU) == WIN_SCORE
    assert score_board(board, Player.X, GOMOKU) == -WIN_SCORE


@pytest.mark.parametrize(
    "index, mark",
    [(43, "X"), (43, "O"), (0, "X"), (99, "O"), (55, "X"), (47, "O")],
)
def test_placement_delta_matches_rescoring(index, mark):
    board = _board(X=(44, 45, 56), O=(54, 46))
    delta, completes = placement_delta(board, index, mark, Player.O, GOMOKU)
    after = place_mark(board, index, mark)
    assert window_score(board, Player.O, GOMOKU) + delta == window_score(after, Player.O, GOMOKU)
    assert not completes


def test_placement_delta_flags_completed_line():
    board = _board(X=(44, 45, 46))
    _, completes = placement_delta(board, 47, "X", Player.O, GOMOKU)
    assert completes
    _, completes = placement_delta(board, 47, "O", Player.O, GOMOKU)
    assert not completes
