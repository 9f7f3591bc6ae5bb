"""Heuristic scoring for the four-in-a-row board."""

from __future__ import annotations

from typing import Sequence, Set, Tuple

from ..board import Player, occupied_cells
from ..config import WIN_SCORE, WINDOW_SCORES
from ..rules import detect_winner
from ..topology import Topology


def score_board(board: Sequence[str], perspective: Player, topology: Topology) -> int:
    """Score ``board`` for ``perspective`` by counting open partial lines.

    A decided position scores ``WIN_SCORE`` either way. Otherwise each window
    free of opposing marks adds the ``WINDOW_SCORES`` weight of the marks it
    holds, and each window holding only opposing marks subtracts it. Windows
    with both marks, or none, contribute nothing.
    """

    winner = detect_winner(board, topology.lines).winner
    if winner == perspective.mark:
        return WIN_SCORE
    if winner is not None:
        return -WIN_SCORE
    return window_score(board, perspective, topology)


def window_score(board: Sequence[str], perspective: Player, topology: Topology) -> int:
    """Open-window part of :func:`score_board`, without the win check."""

    return sum(
        _line_value(board, topology.lines[line_index], perspective)
        for line_index in _touched_lines(board, topology)
    )


def placement_delta(
    board: Sequence[str],
    index: int,
    mark: str,
    perspective: Player,
    topology: Topology,
) -> Tuple[int, bool]:
    """Change in :func:`window_score` if ``mark`` is written at empty ``index``.

    Only lines through ``index`` can change. The flag reports whether the new
    mark completes one of them.
    """

    mine = perspective.mark
    delta = 0
    completes = False
    for line_index in topology.lines_by_cell[index]:
        line = topology.lines[line_index]
        own, other = _counts(board, line, perspective)
        before = _window_value(own, other)
        if mark == mine:
            own += 1
            completes = completes or own == len(line)
        else:
            other += 1
            completes = completes or other == len(line)
        delta += _window_value(own, other) - before
    return delta, completes


def _line_value(board: Sequence[str], line: Sequence[int], perspective: Player) -> int:
    return _window_value(*_counts(board, line, perspective))


def _counts(board: Sequence[str], line: Sequence[int], perspective: Player) -> Tuple[int, int]:
    mine = perspective.mark
    theirs = perspective.opponent.mark
    own = 0
    other = 0
    for cell in line:
        value = board[cell]
        if value == mine:
            own += 1
        elif value == theirs:
            other += 1
    return own, other


def _window_value(own: int, other: int) -> int:
    if other == 0:
        return WINDOW_SCORES.get(own, 0)
    if own == 0:
        return -WINDOW_SCORES.get(other, 0)
    return 0


def _touched_lines(board: Sequence[str], topology: Topology) -> Set[int]:
    touched: Set[int] = set()
    for cell in occupied_cells(board):
        touched.update(topology.lines_by_cell[cell])
    return touched
