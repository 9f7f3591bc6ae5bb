import math

from connectn.ai.evaluation import score_board
from connectn.ai.search import SearchNode, best_move, candidate_moves, minimax
from connectn.board import Player, empty_board, place_mark
from connectn.config import SearchSettings
from connectn.topology import GOMOKU


def _board(**marks):
    board = list(empty_board(100))
    for mark, cells in marks.items():
        for cell in cells:
            board[cell] = mark
    return tuple(board)


def test_empty_board_candidates_are_central_block():
    expected = [row * 10 + col for row in range(3, 7) for col in range(3, 7)]
    assert candidate_moves(empty_board(100), GOMOKU) == expected


def test_candidates_stay_near_existing_marks():
    assert candidate_moves(_board(X=(0,)), GOMOKU) == [1, 2, 10, 11, 12, 20, 21, 22]


def test_candidates_within_two_cells_of_any_mark():
    candidates = candidate_moves(_board(X=(44,), O=(99,)), GOMOKU)
    assert 22 in candidates and 66 in candidates
    assert 21 not in candidates
    assert 77 in candidates and 88 in candidates
    assert candidates == sorted(candidates)


def test_small_empty_sets_are_returned_whole():
    board = tuple("X" if index % 2 else "O" for index in range(80)) + ("",) * 20
    assert candidate_moves(board, GOMOKU) == list(range(80, 100))


def test_fallback_to_first_empty_cells():
    central = [row * 10 + col for row in range(3, 7) for col in range(3, 7)]
    board = _board(X=central[::2], O=central[1::2])
    settings = SearchSettings(neighborhood_radius=0)
    assert candidate_moves(board, GOMOKU, settings) == list(range(10))


def test_minimax_scores_wins_by_depth():
    board = _board(O=(0, 1, 2, 3), X=(10, 11, 12))
    at_root = SearchNode.start(board, Player.X, Player.O, GOMOKU)
    one_down = SearchNode.start(board, Player.X, Player.O, GOMOKU, depth=1)
    losing = SearchNode.start(board, Player.X, Player.X, GOMOKU, depth=1)
    assert minimax(at_root, -math.inf, math.inf, GOMOKU) == 1000
    assert minimax(one_down, -math.inf, math.inf, GOMOKU) == 999
    assert minimax(losing, -math.inf, math.inf, GOMOKU) == -999


def test_minimax_evaluates_at_depth_limit():
    board = _board(X=(44, 45), O=(54,))
    node = SearchNode.start(board, Player.X, Player.O, GOMOKU, depth=2)
    assert minimax(node, -math.inf, math.inf, GOMOKU) == score_board(board, Player.O, GOMOKU)


def test_minimax_with_no_moves_left_scores_zero():
    board = tuple("X" if (index // 2) % 2 else "O" for index in range(100))
    node = SearchNode.start(board, Player.O, Player.O, GOMOKU)
    # pairs alternate along rows and columns, so nobody has four in a row
    assert minimax(node, -math.inf, math.inf, GOMOKU) == 0


def test_child_nodes_track_score_and_winner():
    board = _board(X=(44, 45), O=(54,))
    node = SearchNode.start(board, Player.O, Player.O, GOMOKU)
    for index in (46, 55, 0, 99):
        node = node.child(index, GOMOKU)
        assert node.score == score_board(node.board, Player.O, GOMOKU)
        assert node.winner is None

    finished = SearchNode.start(_board(X=(44, 45, 46)), Player.X, Player.O, GOMOKU).child(47, GOMOKU)
    assert finished.winner == "X"
    assert finished.depth == 1
    assert finished.player_to_move is Player.O


def test_best_move_takes_immediate_win():
    board = _board(O=(0, 1, 2), X=(99, 98))
    assert best_move(board, GOMOKU, Player.O) == 3


def test_best_move_in_a_mid_game_position():
    board = _board(X=(33, 44, 46), O=(45, 54))
    assert best_move(board, GOMOKU, Player.O) == 36


def test_best_move_keeps_first_of_tied_candidates():
    board = empty_board(100)
    candidates = candidate_moves(board, GOMOKU)
    scores = [
        minimax(
            SearchNode.start(
                place_mark(board, index, "O"), Player.X, Player.O, GOMOKU
            ),
            -math.inf,
            math.inf,
            GOMOKU,
        )
        for index in candidates
    ]
    top = max(scores)
    # the central block is symmetric, so the best score is shared
    assert scores.count(top) > 1
    assert best_move(board, GOMOKU, Player.O) == candidates[scores.index(top)]


def test_best_move_on_full_board():
    board = tuple("X" if index % 3 else "O" for index in range(100))
    assert best_move(board, GOMOKU, Player.O) is None
