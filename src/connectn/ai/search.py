"""Depth-limited minimax with alpha-beta pruning for the four-in-a-row board."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from ..board import (
    Board,
    Player,
    coords_2d,
    empty_cells,
    index_2d,
    occupied_cells,
    place_mark,
)
from ..config import DEFAULT_SETTINGS, WIN_SCORE, SearchSettings
from ..rules import detect_winner
from ..topology import Topology
from .evaluation import placement_delta, window_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchNode:
    """A board snapshot inside one search, scored for the searching player.

    ``score`` is the open-window score for ``perspective`` and ``winner`` the
    mark holding a completed line, if any. Children update both from the lines
    through the new mark instead of rescanning the board.
    """

    board: Board
    player_to_move: Player
    perspective: Player
    depth: int = 0
    score: int = 0
    winner: Optional[str] = None

    @classmethod
    def start(
        cls,
        board: Sequence[str],
        player_to_move: Player,
        perspective: Player,
        topology: Topology,
        depth: int = 0,
    ) -> "SearchNode":
        snapshot = tuple(board)
        return cls(
            board=snapshot,
            player_to_move=player_to_move,
            perspective=perspective,
            depth=depth,
            score=window_score(snapshot, perspective, topology),
            winner=detect_winner(snapshot, topology.lines).winner,
        )

    def child(self, index: int, topology: Topology) -> "SearchNode":
        mark = self.player_to_move.mark
        delta, completes = placement_delta(self.board, index, mark, self.perspective, topology)
        mutable = list(self.board)
        mutable[index] = mark
        return SearchNode(
            board=tuple(mutable),
            player_to_move=self.player_to_move.opponent,
            perspective=self.perspective,
            depth=self.depth + 1,
            score=self.score + delta,
            winner=mark if completes else None,
        )


def best_move(
    board: Sequence[str],
    topology: Topology,
    player: Player,
    settings: SearchSettings = DEFAULT_SETTINGS,
) -> Optional[int]:
    """Return the candidate cell with the strictly highest minimax score for ``player``.

    Ties keep the earliest candidate in :func:`candidate_moves` order. Returns
    ``None`` when the board has no empty cell.
    """

    root = tuple(board)
    candidates = candidate_moves(root, topology, settings)
    if not candidates:
        return None

    best_index = candidates[0]
    best_score = -math.inf
    for index in candidates:
        node = SearchNode.start(
            place_mark(root, index, player.mark),
            player_to_move=player.opponent,
            perspective=player,
            topology=topology,
        )
        # A candidate cut off at best_score can only tie it, never beat it.
        score = minimax(node, best_score, math.inf, topology, settings)
        if score > best_score:
            best_score = score
            best_index = index

    logger.debug(
        "minimax picked %d with score %s from %d candidates",
        best_index,
        best_score,
        len(candidates),
    )
    return best_index


def minimax(
    node: SearchNode,
    alpha: float,
    beta: float,
    topology: Topology,
    settings: SearchSettings = DEFAULT_SETTINGS,
) -> float:
    """Score ``node`` from ``node.perspective``'s point of view.

    Faster wins score higher and slower losses score less badly. Nodes at the
    depth limit score their open windows, as :func:`score_board` would.
    """

    if node.winner == node.perspective.mark:
        return WIN_SCORE - node.depth
    if node.winner is not None:
        return node.depth - WIN_SCORE
    if node.depth >= settings.depth:
        return node.score

    moves = candidate_moves(node.board, topology, settings)
    if not moves:
        return 0

    if node.player_to_move is node.perspective:
        value = -math.inf
        for index in moves:
            value = max(value, minimax(node.child(index, topology), alpha, beta, topology, settings))
            alpha = max(alpha, value)
            if beta <= alpha:
                break
        return value

    value = math.inf
    for index in moves:
        value = min(value, minimax(node.child(index, topology), alpha, beta, topology, settings))
        beta = min(beta, value)
        if beta <= alpha:
            break
    return value



def candidate_moves(
    board: Sequence[str],
    topology: Topology,
    settings: SearchSettings = DEFAULT_SETTINGS,
) -> List[int]:
    """Empty cells worth searching, in ascending index order.

    Small sets are returned whole. Otherwise only cells near existing marks are
    kept, then the central sub-grid, then the first few empty cells.
    """

    empties = empty_cells(board)
    if len(empties) <= settings.candidate_threshold:
        return empties

    size = topology.size
    near = _neighborhood(board, size, settings.neighborhood_radius)
    nearby = [index for index in empties if index in near]
    if nearby:
        return nearby

    low = (size - topology.win_length) // 2
    high = low + topology.win_length - 1
    central = [
        index
        for index in empties
        if all(low <= axis <= high for axis in coords_2d(index, size))
    ]
    if central:
        return central

    return empties[: settings.fallback_limit]


def _neighborhood(board: Sequence[str], size: int, radius: int) -> Set[int]:
    """Cells within Chebyshev distance ``radius`` of any occupied cell."""

    near: Set[int] = set()
    for cell in occupied_cells(board):
        row, col = coords_2d(cell, size)
        for r in range(max(0, row - radius), min(size - 1, row + radius) + 1):
            for c in range(max(0, col - radius), min(size - 1, col + radius) + 1):
                near.add(index_2d(r, c, size))
    return near
