"""Board model and single-ply tactics for noughts and crosses."""

from .state import (
    BOARD_CELLS,
    LINES,
    Board,
    Cell,
    InvalidStateError,
    empty_indices,
    is_full,
    legal_mask,
    winner,
    winning_line,
)
from .rules import fork_move, winning_move, winning_move_count

__all__ = [
    "BOARD_CELLS",
    "LINES",
    "Board",
    "Cell",
    "InvalidStateError",
    "empty_indices",
    "is_full",
    "legal_mask",
    "winner",
    "winning_line",
    "fork_move",
    "winning_move",
    "winning_move_count",
]
