"""Move selection for the computer opponent."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..board import Board, Player, empty_cells, place_mark
from ..config import DEFAULT_SETTINGS, SearchSettings
from ..game import Game, MoveResult
from ..rules import detect_winner
from ..topology import Topology, topology_for_board
from .policies import policy_for

logger = logging.getLogger(__name__)


def select_move(
    board: Sequence[str],
    topology: Optional[Topology] = None,
    *,
    player: Player = Player.O,
    rng: Optional[random.Random] = None,
    settings: Optional[SearchSettings] = None,
) -> Board:
    """Return a new board with ``player``'s next mark placed.

    The result is always a tuple, whatever sequence type was passed in, so a
    full board comes back as an equal tuple. The input is never modified.
    """

    snapshot = tuple(board)
    index = choose_index(snapshot, topology, player=player, rng=rng, settings=settings)
    if index is None:
        return snapshot
    return place_mark(snapshot, index, player.mark)


def choose_index(
    board: Sequence[str],
    topology: Optional[Topology] = None,
    *,
    player: Player = Player.O,
    rng: Optional[random.Random] = None,
    settings: Optional[SearchSettings] = None,
) -> Optional[int]:
    """Return the cell ``player`` should take, or ``None`` when the board is full.

    The cascade is: complete an own line, block the opponent's line, then defer
    to the topology's move policy.
    """

    if topology is None:
        topology = topology_for_board(board)
    elif len(board) != topology.cell_count:
        raise ValueError(
            f"Board has {len(board)} cells but {topology.key} expects {topology.cell_count}"
        )

    empties = empty_cells(board)
    if not empties:
        return None

    winning = _first_completing_cell(board, empties, player, topology)
    if winning is not None:
        logger.debug("%s completes a line at %d", player.mark, winning)
        return winning

    blocking = _first_completing_cell(board, empties, player.opponent, topology)
    if blocking is not None:
        logger.debug("%s blocks %s at %d", player.mark, player.opponent.mark, blocking)
        return blocking

    policy = policy_for(topology)
    index = policy.choose(
        board,
        topology,
        player,
        rng or random.Random(),
        settings or DEFAULT_SETTINGS,
    )
    logger.debug("%s policy chose %s for %s", policy.name, index, player.mark)
    return index


def _first_completing_cell(
    board: Sequence[str],
    empties: Sequence[int],
    player: Player,
    topology: Topology,
) -> Optional[int]:
    for index in empties:
        trial = place_mark(board, index, player.mark)
        if detect_winner(trial, topology.lines).winner == player.mark:
            return index
    return None


@dataclass
class AIOpponent:
    """Plays moves into a :class:`Game` on behalf of one player."""

    player: Player = Player.O
    rng: random.Random = field(default_factory=random.Random)
    settings: SearchSettings = DEFAULT_SETTINGS

    def take_turn(self, game: Game) -> Optional[MoveResult]:
        """Play the selected move if it is this player's turn.

        Returns the recorded move, or ``None`` when nothing was played.
        """

        if game.is_finished or game.current_player is not self.player:
            return None

        index = choose_index(
            game.board,
            game.topology,
            player=self.player,
            rng=self.rng,
            settings=self.settings,
        )
        if index is None:
            return None
        return game.place(index)


def create_ai_opponent(player: Player = Player.O, rng: Optional[random.Random] = None) -> AIOpponent:
    """Factory helper that seeds the opponent's RNG consistently."""

    return AIOpponent(player=player, rng=rng or random.Random())
