"""Topology descriptors for the three supported boards."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from math import prod
from typing import Dict, Optional, Sequence, Tuple

from .board import Line
from .config import CLASSIC_SIZE, CUBE_SIZE, GOMOKU_SIZE, GOMOKU_WIN_LENGTH
from .lines import cube_lines, grid_lines, square_lines

POSITIONAL = "positional"
MINIMAX = "minimax"


@dataclass(frozen=True)
class Topology:
    """Shape, win condition and line set of one board kind."""

    key: str
    display_name: str
    shape: Tuple[int, ...]
    win_length: int
    lines: Tuple[Line, ...]
    strategy: str
    lines_by_cell: Tuple[Tuple[int, ...], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_cell: list[list[int]] = [[] for _ in range(self.cell_count)]
        for line_index, line in enumerate(self.lines):
            for cell in line:
                by_cell[cell].append(line_index)
        object.__setattr__(self, "lines_by_cell", tuple(tuple(ids) for ids in by_cell))

    @property
    def cell_count(self) -> int:
        return prod(self.shape)

    @property
    def dimensions(self) -> int:
        return len(self.shape)

    @property
    def size(self) -> int:
        return self.shape[0]

    @property
    def center(self) -> Optional[int]:
        """Index of the single middle cell, or ``None`` on even-sized boards."""

        if any(extent % 2 == 0 for extent in self.shape):
            return None
        return self._flatten(tuple(extent // 2 for extent in self.shape))

    @property
    def corners(self) -> Tuple[int, ...]:
        extremes = [(0, extent - 1) for extent in self.shape]
        return tuple(sorted(self._flatten(coord) for coord in itertools.product(*extremes)))

    def _flatten(self, coord: Tuple[int, ...]) -> int:
        index = 0
        for axis_value, extent in zip(coord, self.shape):
            index = index * extent + axis_value
        return index


CLASSIC = Topology(
    key="classic",
    display_name="3x3 tic-tac-toe",
    shape=(CLASSIC_SIZE, CLASSIC_SIZE),
    win_length=CLASSIC_SIZE,
    lines=square_lines(CLASSIC_SIZE),
    strategy=POSITIONAL,
)

GOMOKU = Topology(
    key="gomoku",
    display_name="10x10 four-in-a-row",
    shape=(GOMOKU_SIZE, GOMOKU_SIZE),
    win_length=GOMOKU_WIN_LENGTH,
    lines=grid_lines(GOMOKU_SIZE, GOMOKU_WIN_LENGTH),
    strategy=MINIMAX,
)

CUBE = Topology(
    key="cube",
    display_name="3x3x3 cube",
    shape=(CUBE_SIZE, CUBE_SIZE, CUBE_SIZE),
    win_length=CUBE_SIZE,
    lines=cube_lines(),
    strategy=POSITIONAL,
)


@dataclass(frozen=True)
class TopologyRegistry:
    """Collection of topologies with lookups by key and by cell count."""

    topologies: Tuple[Topology, ...] = field(default_factory=tuple)
    _by_key: Dict[str, Topology] = field(init=False, repr=False)
    _by_cell_count: Dict[int, Topology] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_key", {topology.key: topology for topology in self.topologies})
        object.__setattr__(
            self,
            "_by_cell_count",
            {topology.cell_count: topology for topology in self.topologies},
        )

    def get(self, key: str) -> Topology:
        topology = self._by_key.get(key)
        if topology is None:
            raise KeyError(f"Unknown topology: {key}")
        return topology

    def for_cell_count(self, cell_count: int) -> Topology:
        topology = self._by_cell_count.get(cell_count)
        if topology is None:
            raise ValueError(f"No topology has {cell_count} cells")
        return topology

    def __iter__(self):
        return iter(self.topologies)

    def keys(self):
        return self._by_key.keys()


TOPOLOGIES = TopologyRegistry((CLASSIC, GOMOKU, CUBE))


def get_topology(key: str) -> Topology:
    """Convenience wrapper returning the topology registered under ``key``."""

    return TOPOLOGIES.get(key)


def topology_for_board(board: Sequence[str]) -> Topology:
    """Infer the topology from the board length."""

    return TOPOLOGIES.for_cell_count(len(board))
