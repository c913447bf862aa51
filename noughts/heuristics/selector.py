"""Difficulty-weighted move selection for the automated player.

Immediate wins and blocks are always taken. After that a uniform draw in
[0, 100) decides between the deterministic optimal ladder (draw below the
difficulty) and one of six randomized sub-strategies chosen uniformly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Dict, Optional

import numpy as np

from noughts.core import (
    Board,
    Cell,
    InvalidStateError,
    fork_move,
    is_full,
    winner,
    winning_move,
)

from .positional import CENTER, any_corner, any_side, center, opposite_corner, random_empty

logger = logging.getLogger(__name__)

MIN_DIFFICULTY = 0
MAX_DIFFICULTY = 100

Candidate = Callable[[], Optional[object]]


class Strategy(IntEnum):
    SIDE_FIRST = 0
    CORNER_FIRST = 1
    CENTER_COIN = 2
    OPPOSITE_CORNER_OR_FORK = 3
    RANDOM = 4
    SIDE_OR_CORNER_COIN = 5


@dataclass(frozen=True)
class Decision:
    index: int
    rule: str


def first_match(*candidates: Candidate):
    """Evaluate candidates in order and return the first result that is not None."""
    for candidate in candidates:
        result = candidate()
        if result is not None:
            return result
    return None


def check_difficulty(difficulty: int) -> int:
    if isinstance(difficulty, bool) or not isinstance(difficulty, (int, np.integer)):
        raise ValueError(f"Difficulty must be an integer, got {difficulty!r}.")
    if not MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY:
        raise ValueError(f"Difficulty must be within [0, 100], got {difficulty}.")
    return int(difficulty)


def _side_first(board: Board, symbol: Cell, rng: np.random.Generator) -> Optional[int]:
    return first_match(
        lambda: any_side(board),
        lambda: any_corner(board),
        lambda: random_empty(board, rng),
    )


def _corner_first(board: Board, symbol: Cell, rng: np.random.Generator) -> Optional[int]:
    return first_match(
        lambda: any_corner(board),
        lambda: any_side(board),
        lambda: random_empty(board, rng),
    )


def _center_coin(board: Board, symbol: Cell, rng: np.random.Generator) -> Optional[int]:
    if board[CENTER] == Cell.EMPTY and rng.random() > 0.5:
        return CENTER
    return random_empty(board, rng)


def _opposite_corner_or_fork(board: Board, symbol: Cell, rng: np.random.Generator) -> Optional[int]:
    # Only the acting side's fork is tried here; randomized play never blocks forks.
    return first_match(
        lambda: opposite_corner(board, symbol.opponent()),
        lambda: fork_move(board, symbol),
        lambda: random_empty(board, rng),
    )


def _random(board: Board, symbol: Cell, rng: np.random.Generator) -> Optional[int]:
    return random_empty(board, rng)


def _side_or_corner_coin(board: Board, symbol: Cell, rng: np.random.Generator) -> Optional[int]:
    if rng.random() > 0.5:
        return first_match(lambda: any_side(board), lambda: random_empty(board, rng))
    return first_match(lambda: any_corner(board), lambda: random_empty(board, rng))


STRATEGIES: Dict[Strategy, Callable[[Board, Cell, np.random.Generator], Optional[int]]] = {
    Strategy.SIDE_FIRST: _side_first,
    Strategy.CORNER_FIRST: _corner_first,
    Strategy.CENTER_COIN: _center_coin,
    Strategy.OPPOSITE_CORNER_OR_FORK: _opposite_corner_or_fork,
    Strategy.RANDOM: _random,
    Strategy.SIDE_OR_CORNER_COIN: _side_or_corner_coin,
}


def _named(rule: str, candidate: Callable[[], Optional[int]]) -> Candidate:
    def wrapped() -> Optional[Decision]:
        index = candidate()
        return None if index is None else Decision(index, rule)

    return wrapped


def optimal_move(board: Board, symbol: Cell, rng: np.random.Generator) -> Decision:
    opponent = symbol.opponent()
    return first_match(
        _named("fork", lambda: fork_move(board, symbol)),
        _named("block_fork", lambda: fork_move(board, opponent)),
        _named("center", lambda: center(board)),
        _named("opposite_corner", lambda: opposite_corner(board, opponent)),
        _named("corner", lambda: any_corner(board)),
        _named("side", lambda: any_side(board)),
        _named("random", lambda: random_empty(board, rng)),
    )


def randomized_move(board: Board, symbol: Cell, rng: np.random.Generator) -> Decision:
    strategy = Strategy(int(rng.integers(0, len(Strategy))))
    index = STRATEGIES[strategy](board, symbol, rng)
    if index is None:
        return Decision(random_empty(board, rng), "random")
    return Decision(index, strategy.name.lower())


def explain_move(
    board: Board,
    difficulty: int,
    *,
    rng: Optional[np.random.Generator] = None,
    symbol: Cell = Cell.O,
) -> Decision:
    check_difficulty(difficulty)
    if winner(board) is not None:
        raise InvalidStateError("Board already has a winner.")
    if is_full(board):
        raise InvalidStateError("Board has no empty cell.")
    rng = rng or np.random.default_rng()
    opponent = symbol.opponent()

    win = winning_move(board, symbol)
    if win is not None:
        decision = Decision(win, "win")
    else:
        block = winning_move(board, opponent)
        if block is not None:
            decision = Decision(block, "block")
        elif rng.random() * 100 < difficulty:
            decision = optimal_move(board, symbol, rng)
        else:
            decision = randomized_move(board, symbol, rng)

    logger.debug("%s plays %d via %s (difficulty=%d)", symbol.symbol, decision.index, decision.rule, difficulty)
    return decision


def select_move(
    board: Board,
    difficulty: int,
    *,
    rng: Optional[np.random.Generator] = None,
    symbol: Cell = Cell.O,
) -> int:
    return explain_move(board, difficulty, rng=rng, symbol=symbol).index


@dataclass
class MoveSelector:
    """Long-lived automated player holding its difficulty and random source."""

    difficulty: int = 40
    symbol: Cell = Cell.O
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    def select(self, board: Board) -> int:
        return select_move(board, self.difficulty, rng=self.rng, symbol=self.symbol)

    def explain(self, board: Board) -> Decision:
        return explain_move(board, self.difficulty, rng=self.rng, symbol=self.symbol)
