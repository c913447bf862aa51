"""Positional preferences and the difficulty-weighted move selector."""

from .positional import (
    CENTER,
    CORNERS,
    OPPOSITE_CORNERS,
    SIDES,
    any_corner,
    any_side,
    center,
    opposite_corner,
    random_empty,
)
from .selector import (
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    STRATEGIES,
    Decision,
    check_difficulty,
    MoveSelector,
    Strategy,
    explain_move,
    first_match,
    optimal_move,
    randomized_move,
    select_move,
)

__all__ = [
    "CENTER",
    "CORNERS",
    "OPPOSITE_CORNERS",
    "SIDES",
    "any_corner",
    "any_side",
    "center",
    "opposite_corner",
    "random_empty",
    "MAX_DIFFICULTY",
    "MIN_DIFFICULTY",
    "STRATEGIES",
    "Decision",
    "check_difficulty",
    "MoveSelector",
    "Strategy",
    "explain_move",
    "first_match",
    "optimal_move",
    "randomized_move",
    "select_move",
]
