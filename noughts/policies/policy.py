from __future__ import annotations

from typing import Optional

import numpy as np

from noughts.core import BOARD_CELLS, Board, Cell
from noughts.heuristics import check_difficulty, select_move


class Policy:
    """Policy interface producing move probabilities over the nine cells."""

    def act(self, board: Board, legal_mask: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def spawn(self, seed: Optional[int] = None) -> "Policy":
        """Return a copy of this policy with its own random source."""
        return self


class RandomPolicy(Policy):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def act(self, board: Board, legal_mask: np.ndarray) -> np.ndarray:
        logits = legal_mask.astype(np.float64)
        if logits.sum() == 0:
            return logits.astype(np.float32)
        probs = logits / logits.sum()
        return probs.astype(np.float32, copy=True)

    def spawn(self, seed: Optional[int] = None) -> "RandomPolicy":
        return RandomPolicy(np.random.default_rng(seed))


class HeuristicPolicy(Policy):
    """Puts all probability mass on the cell the heuristic selector picks."""

    def __init__(
        self,
        difficulty: int,
        *,
        symbol: Cell = Cell.O,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.difficulty = check_difficulty(difficulty)
        self.symbol = symbol
        self.rng = rng or np.random.default_rng()

    def act(self, board: Board, legal_mask: np.ndarray) -> np.ndarray:
        move = select_move(board, self.difficulty, rng=self.rng, symbol=self.symbol)
        probs = np.zeros(BOARD_CELLS, dtype=np.float32)
        probs[move] = 1.0
        return probs

    def spawn(self, seed: Optional[int] = None) -> "HeuristicPolicy":
        return HeuristicPolicy(self.difficulty, symbol=self.symbol, rng=np.random.default_rng(seed))


def select_action(probabilities: np.ndarray, rng: np.random.Generator) -> int:
    if probabilities.sum() <= 0:
        raise ValueError("Policy produced zero probability over legal actions.")
    probs = probabilities.astype(np.float64, copy=True)
    probs /= probs.sum()
    return int(rng.choice(len(probs), p=probs))
