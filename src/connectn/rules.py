"""Win detection and end-of-game helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .board import Line, is_full
from .config import EMPTY_CELL


@dataclass(frozen=True)
class WinResult:
    winner: Optional[str] = None
    line: Optional[Line] = None

    def __bool__(self) -> bool:
        return self.winner is not None


NO_WINNER = WinResult()


def detect_winner(board: Sequence[str], lines: Iterable[Line]) -> WinResult:
    """Return the first completed line in ``lines`` order and its mark.

    A result without a winner does not mean a draw; see :func:`is_draw`.
    """

    for line in lines:
        mark = board[line[0]]
        if mark == EMPTY_CELL:
            continue
        if all(board[index] == mark for index in line):
            return WinResult(winner=mark, line=line)
    return NO_WINNER


def is_draw(board: Sequence[str], lines: Iterable[Line]) -> bool:
    """Return ``True`` when the board is full and nobody completed a line."""

    return is_full(board) and not detect_winner(board, lines)


def outcome(board: Sequence[str], lines: Iterable[Line]) -> Optional[str]:
    """Summarise a position as a winning mark, ``"draw"`` or ``None`` if ongoing."""

    result = detect_winner(board, lines)
    if result:
        return result.winner
    if is_full(board):
        return "draw"
    return None
