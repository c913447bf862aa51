from __future__ import annotations

from typing import Optional

from .state import Board, Cell, empty_indices, winner


def winning_move(board: Board, symbol: Cell) -> Optional[int]:
    for index in empty_indices(board):
        if winner(board.place(index, symbol)) == symbol:
            return index
    return None


def winning_move_count(board: Board, symbol: Cell) -> int:
    count = 0
    for index in empty_indices(board):
        if winner(board.place(index, symbol)) == symbol:
            count += 1
    return count


def fork_move(board: Board, symbol: Cell) -> Optional[int]:
    """Return the first cell that leaves ``symbol`` with two or more immediate wins."""
    for index in empty_indices(board):
        if winning_move_count(board.place(index, symbol), symbol) >= 2:
            return index
    return None
