"""Winning-line generators for each board shape."""

from __future__ import annotations

from typing import List, Tuple

from .board import Line, index_2d, index_3d
from .config import CUBE_SIZE

Direction = Tuple[int, int]

# Scan order matters: win detection reports the first complete line.
_DIRECTIONS: Tuple[Direction, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def square_lines(size: int) -> Tuple[Line, ...]:
    """Rows, then columns, then both main diagonals of a ``size`` square."""

    lines: List[Line] = []
    for row in range(size):
        lines.append(tuple(index_2d(row, col, size) for col in range(size)))
    for col in range(size):
        lines.append(tuple(index_2d(row, col, size) for row in range(size)))
    lines.append(tuple(index_2d(i, i, size) for i in range(size)))
    lines.append(tuple(index_2d(i, size - 1 - i, size) for i in range(size)))
    return tuple(lines)


def grid_lines(size: int, win_length: int) -> Tuple[Line, ...]:
    """Every ``win_length`` window on a ``size`` square, keyed by its start cell.

    Cells are visited row-major; from each one the right, down, down-right and
    down-left windows are emitted when they fit without wrapping.
    """

    lines: List[Line] = []
    reach = win_length - 1
    for row in range(size):
        for col in range(size):
            for d_row, d_col in _DIRECTIONS:
                end_row = row + reach * d_row
                end_col = col + reach * d_col
                if not (0 <= end_row < size and 0 <= end_col < size):
                    continue
                lines.append(
                    tuple(
                        index_2d(row + step * d_row, col + step * d_col, size)
                        for step in range(win_length)
                    )
                )
    return tuple(lines)


def cube_lines() -> Tuple[Line, ...]:
    """All 49 lines of the 3x3x3 cube.

    27 axis-parallel lines, 18 face diagonals and 4 space diagonals.
    """

    n = CUBE_SIZE
    last = n - 1
    span = range(n)
    lines: List[Line] = []

    for i in span:
        for j in span:
            lines.append(tuple(index_3d(k, i, j) for k in span))
            lines.append(tuple(index_3d(i, k, j) for k in span))
            lines.append(tuple(index_3d(i, j, k) for k in span))

    for i in span:
        # XY plane at z == i
        lines.append(tuple(index_3d(k, k, i) for k in span))
        lines.append(tuple(index_3d(last - k, k, i) for k in span))
        # XZ plane at y == i
        lines.append(tuple(index_3d(k, i, k) for k in span))
        lines.append(tuple(index_3d(last - k, i, k) for k in span))
        # YZ plane at x == i
        lines.append(tuple(index_3d(i, k, k) for k in span))
        lines.append(tuple(index_3d(i, last - k, k) for k in span))

    lines.append(tuple(index_3d(k, k, k) for k in span))
    lines.append(tuple(index_3d(last - k, k, k) for k in span))
    lines.append(tuple(index_3d(k, last - k, k) for k in span))
    lines.append(tuple(index_3d(k, k, last - k) for k in span))
    return tuple(lines)
