from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from noughts.core import Board, Cell
from noughts.heuristics import optimal_move, select_move


def sound_move_rate(
    board: Board,
    difficulty: int,
    *,
    trials: int,
    symbol: Cell = Cell.O,
    rng: Optional[np.random.Generator] = None,
) -> float:
    """Fraction of selections on ``board`` that match the optimal ladder's choice.

    Meaningful on boards without a forced win or block, where the ladder is not pre-empted.
    """
    rng = rng or np.random.default_rng()
    # Center, corners and sides cover every cell, so the ladder never reaches its random step.
    target = optimal_move(board, symbol, rng).index
    hits = 0
    for _ in range(trials):
        if select_move(board, difficulty, rng=rng, symbol=symbol) == target:
            hits += 1
    return hits / max(1, trials)


def difficulty_sweep(
    board: Board,
    difficulties: Sequence[int],
    *,
    trials: int,
    symbol: Cell = Cell.O,
    seed: Optional[int] = None,
) -> List[Tuple[int, float]]:
    rng = np.random.default_rng(seed)
    return [
        (int(difficulty), sound_move_rate(board, int(difficulty), trials=trials, symbol=symbol, rng=rng))
        for difficulty in difficulties
    ]
