from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from noughts.core import Board, Cell, InvalidStateError, empty_indices

CENTER = 4
CORNERS: Tuple[int, ...] = (0, 2, 6, 8)
SIDES: Tuple[int, ...] = (1, 3, 5, 7)
# Every corner paired with its point-symmetric opposite; the mirrored pairs are
# kept so the first match follows the source corner order 0, 2, 6, 8.
OPPOSITE_CORNERS: Tuple[Tuple[int, int], ...] = ((0, 8), (2, 6), (6, 2), (8, 0))


def opposite_corner(board: Board, opponent: Cell = Cell.X) -> Optional[int]:
    for corner, opposite in OPPOSITE_CORNERS:
        if board[corner] == opponent and board[opposite] == Cell.EMPTY:
            return opposite
    return None


def any_corner(board: Board) -> Optional[int]:
    for index in CORNERS:
        if board[index] == Cell.EMPTY:
            return index
    return None


def any_side(board: Board) -> Optional[int]:
    for index in SIDES:
        if board[index] == Cell.EMPTY:
            return index
    return None


def center(board: Board) -> Optional[int]:
    return CENTER if board[CENTER] == Cell.EMPTY else None


def random_empty(board: Board, rng: np.random.Generator) -> int:
    candidates = empty_indices(board)
    if not candidates:
        raise InvalidStateError("No empty cell to choose from.")
    return candidates[int(rng.integers(0, len(candidates)))]
