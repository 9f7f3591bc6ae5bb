"""Configuration constants used across the connectn engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

EMPTY_CELL: str = ""
X_MARK: str = "X"
O_MARK: str = "O"

CLASSIC_SIZE: int = 3
GOMOKU_SIZE: int = 10
GOMOKU_WIN_LENGTH: int = 4
CUBE_SIZE: int = 3

# Terminal score for a decided position; search scores shift it by depth.
WIN_SCORE: int = 1000

# Open-window weights keyed by the number of one player's marks in a 4-window.
WINDOW_SCORES: Dict[int, int] = {
    3: 50,
    2: 10,
    1: 1,
    0: 0,
}


@dataclass(frozen=True)
class SearchSettings:
    """Tunables for the large-board minimax search."""

    depth: int = 2
    candidate_threshold: int = 20
    neighborhood_radius: int = 2
    fallback_limit: int = 10


DEFAULT_SETTINGS = SearchSettings()
