"""Turn management for a single connect-N match."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board, Line, Player, empty_board, is_full, place_mark
from .rules import detect_winner
from .topology import Topology, get_topology

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    index: int
    player: Player
    produced_win: bool
    produced_draw: bool


@dataclass
class Game:
    """State manager for a two-player match on one topology."""

    topology: Topology
    board: Board = field(init=False)
    current_player: Player = Player.X
    winner: Optional[Player] = None
    winning_line: Optional[Line] = None
    draw: bool = False
    history: List[MoveResult] = field(default_factory=list)

    @classmethod
    def new(cls, topology: str = "classic") -> "Game":
        return cls(topology=get_topology(topology))

    def __post_init__(self) -> None:
        self.board = empty_board(self.topology.cell_count)

    # ------------------------------------------------------------------
    # Move application
    # ------------------------------------------------------------------
    def place(self, index: int) -> MoveResult:
        """Place the current player's mark at ``index`` and pass the turn."""

        if self.is_finished:
            raise ValueError("The game is already over")

        player = self.current_player
        self.board = place_mark(self.board, index, player.mark)

        result = detect_winner(self.board, self.topology.lines)
        produced_win = result.winner == player.mark
        produced_draw = not produced_win and is_full(self.board)
        if produced_win:
            self.winner = player
            self.winning_line = result.line
        elif produced_draw:
            self.draw = True

        move = MoveResult(
            index=index,
            player=player,
            produced_win=produced_win,
            produced_draw=produced_draw,
        )
        self.history.append(move)
        logger.debug("%s took cell %d on %s", player.mark, index, self.topology.key)

        if not self.is_finished:
            self.current_player = player.opponent
        return move

    # ------------------------------------------------------------------
    # Status helpers
    # ------------------------------------------------------------------
    @property
    def is_finished(self) -> bool:
        return self.winner is not None or self.draw

    @property
    def last_move(self) -> Optional[MoveResult]:
        return self.history[-1] if self.history else None

    def status_message(self) -> str:
        if self.winner:
            return f"{self.winner.mark} wins"
        if self.draw:
            return "Draw"
        return f"{self.current_player.mark} to move"

    def reset(self) -> None:
        self.board = empty_board(self.topology.cell_count)
        self.current_player = Player.X
        self.winner = None
        self.winning_line = None
        self.draw = False
        self.history.clear()
