"""Fallback move strategies used after the win and block checks."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from ..board import Player, empty_cells
from ..config import DEFAULT_SETTINGS, EMPTY_CELL, SearchSettings
from ..topology import MINIMAX, POSITIONAL, Topology
from .search import best_move


class MovePolicy:
    """Pick a cell when neither side has an immediate win."""

    name: str = ""

    def choose(
        self,
        board: Sequence[str],
        topology: Topology,
        player: Player,
        rng: random.Random,
        settings: SearchSettings = DEFAULT_SETTINGS,
    ) -> Optional[int]:
        raise NotImplementedError


@dataclass(frozen=True)
class PositionalPolicy(MovePolicy):
    """Center first, then a random free corner, then any random empty cell."""

    name: str = POSITIONAL

    def choose(
        self,
        board: Sequence[str],
        topology: Topology,
        player: Player,
        rng: random.Random,
        settings: SearchSettings = DEFAULT_SETTINGS,
    ) -> Optional[int]:
        center = topology.center
        if center is not None and board[center] == EMPTY_CELL:
            return center

        free_corners = [index for index in topology.corners if board[index] == EMPTY_CELL]
        if free_corners:
            return rng.choice(free_corners)

        empties = empty_cells(board)
        if not empties:
            return None
        return rng.choice(empties)


@dataclass(frozen=True)
class MinimaxPolicy(MovePolicy):
    """Alpha-beta search over pruned candidate cells."""

    name: str = MINIMAX

    def choose(
        self,
        board: Sequence[str],
        topology: Topology,
        player: Player,
        rng: random.Random,
        settings: SearchSettings = DEFAULT_SETTINGS,
    ) -> Optional[int]:
        return best_move(board, topology, player, settings)


POLICIES: Dict[str, MovePolicy] = {
    POSITIONAL: PositionalPolicy(),
    MINIMAX: MinimaxPolicy(),
}


def policy_for(topology: Topology) -> MovePolicy:
    try:
        return POLICIES[topology.strategy]
    except KeyError as exc:
        raise KeyError(f"No move policy named {topology.strategy!r}") from exc
