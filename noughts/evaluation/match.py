from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from noughts.core import Board, Cell, is_full, legal_mask, winner
from noughts.policies import Policy, select_action


@dataclass
class EvaluationResult:
    games_played: int
    x_wins: int
    o_wins: int
    draws: int
    average_length: float

    def winrate_x(self) -> float:
        return self.x_wins / max(1, self.games_played)

    def winrate_o(self) -> float:
        return self.o_wins / max(1, self.games_played)

    def draw_rate(self) -> float:
        return self.draws / max(1, self.games_played)


def play_game(policy_x: Policy, policy_o: Policy, rng: np.random.Generator) -> Tuple[Board, int]:
    """Play one game with X moving first; returns ``(final_board, plies)``."""
    board = Board.empty()
    mover = Cell.X
    ply = 0
    while winner(board) is None and not is_full(board):
        mask = legal_mask(board)
        policy = policy_x if mover == Cell.X else policy_o
        probs = policy.act(board, mask) * mask
        if probs.sum() <= 0:
            probs = mask.astype(np.float32)
        board = board.place(select_action(probs, rng), mover)
        mover = mover.opponent()
        ply += 1
    return board, ply


def evaluate_policies(
    policy_x: Policy,
    policy_o: Policy,
    *,
    episodes: int,
    rng: Optional[np.random.Generator] = None,
) -> EvaluationResult:
    rng = rng or np.random.default_rng()

    x_wins = 0
    o_wins = 0
    draws = 0
    total_ply = 0

    for _ in range(episodes):
        board, ply = play_game(policy_x, policy_o, rng)
        total_ply += ply
        mark = winner(board)
        if mark == Cell.X:
            x_wins += 1
        elif mark == Cell.O:
            o_wins += 1
        else:
            draws += 1

    return EvaluationResult(
        games_played=episodes,
        x_wins=x_wins,
        o_wins=o_wins,
        draws=draws,
        average_length=total_ply / max(1, episodes),
    )
