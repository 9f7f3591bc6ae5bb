"""Board values and helper functions shared by every topology."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Sequence, Tuple

from .config import CUBE_SIZE, EMPTY_CELL, O_MARK, X_MARK

Board = Tuple[str, ...]
Line = Tuple[int, ...]
Coordinate = Tuple[int, int]
Coordinate3D = Tuple[int, int, int]


class Player(Enum):
    X = X_MARK
    O = O_MARK

    @property
    def mark(self) -> str:
        return self.value

    @property
    def opponent(self) -> "Player":
        return Player.O if self is Player.X else Player.X


def empty_board(cell_count: int) -> Board:
    """Return a board of ``cell_count`` empty cells."""

    if cell_count <= 0:
        raise ValueError("Board must have at least one cell")
    return (EMPTY_CELL,) * cell_count


def empty_cells(board: Sequence[str]) -> List[int]:
    """Return the indices of empty cells in ascending order."""

    return [index for index, cell in enumerate(board) if cell == EMPTY_CELL]


def occupied_cells(board: Sequence[str]) -> Iterable[int]:
    for index, cell in enumerate(board):
        if cell != EMPTY_CELL:
            yield index


def is_full(board: Sequence[str]) -> bool:
    """Return ``True`` when no empty cells remain on the board."""

    return all(cell != EMPTY_CELL for cell in board)


def place_mark(board: Sequence[str], index: int, mark: str) -> Board:
    """Return a new board with ``mark`` written at ``index``.

    The input is left untouched. Raises :class:`ValueError` for an empty mark,
    an out-of-range index, or an occupied cell.
    """

    if not mark:
        raise ValueError("Mark must not be empty")
    if not 0 <= index < len(board):
        raise ValueError(f"Cell {index} is outside the board")
    if board[index] != EMPTY_CELL:
        raise ValueError(f"Cell {index} is already occupied")
    mutable = list(board)
    mutable[index] = mark
    return tuple(mutable)


# ---------------------------------------------------------------------------
# Coordinate conversion
# ---------------------------------------------------------------------------
def index_2d(row: int, col: int, size: int) -> int:
    return row * size + col


def coords_2d(index: int, size: int) -> Coordinate:
    return divmod(index, size)


def index_3d(x: int, y: int, z: int) -> int:
    """Map cube coordinates to a board index (``x`` varies fastest)."""

    return x + y * CUBE_SIZE + z * CUBE_SIZE * CUBE_SIZE


def coords_3d(index: int) -> Coordinate3D:
    """Inverse of :func:`index_3d`, returned as ``(x, y, z)``."""

    layer = CUBE_SIZE * CUBE_SIZE
    z = index // layer
    y = (index % layer) // CUBE_SIZE
    x = index % CUBE_SIZE
    return x, y, z
