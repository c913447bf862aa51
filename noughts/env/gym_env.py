from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from noughts.core import BOARD_CELLS, Board, Cell, is_full, legal_mask, winner
from noughts.heuristics import check_difficulty, select_move

logger = logging.getLogger(__name__)


class GameResult(Enum):
    ONGOING = "ongoing"
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


def game_result(board: Board, player: Cell = Cell.X) -> GameResult:
    """Outcome of ``board`` from the point of view of ``player``."""
    mark = winner(board)
    if mark is not None:
        return GameResult.WIN if mark == player else GameResult.LOSE
    if is_full(board):
        return GameResult.DRAW
    return GameResult.ONGOING


class NoughtsEnv(gym.Env):
    """The agent plays X and moves first; the heuristic player answers as O."""

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        difficulty: int = 40,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.difficulty = check_difficulty(difficulty)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(low=0, high=2, shape=(BOARD_CELLS,), dtype=np.int8)
        self.action_space = spaces.Discrete(BOARD_CELLS)

        self._board = Board.empty()

    @property
    def board(self) -> Board:
        return self._board

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        if options and "difficulty" in options:
            self.difficulty = check_difficulty(options["difficulty"])
        super().reset(seed=seed)
        self._board = Board.empty()
        return self._board.to_numpy(), self._build_info(GameResult.ONGOING, None)

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")
        if game_result(self._board) != GameResult.ONGOING:
            raise ValueError("Game is over; call reset() first.")
        if self._board[int(action_index)] != Cell.EMPTY:
            raise ValueError(f"Cell {action_index} is already occupied.")

        board = self._board.place(int(action_index), Cell.X)
        result = game_result(board)
        opponent_move = None
        if result == GameResult.ONGOING:
            opponent_move = select_move(board, self.difficulty, rng=self.np_random, symbol=Cell.O)
            board = board.place(opponent_move, Cell.O)
            result = game_result(board)
        self._board = board

        terminated = result != GameResult.ONGOING
        if terminated:
            logger.debug("game finished: %s\n%s", result.value, self._board)

        info = self._build_info(result, opponent_move)
        return self._board.to_numpy(), self._compute_reward(result), terminated, False, info

    def legal_action_mask(self) -> np.ndarray:
        return legal_mask(self._board)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return str(self._board)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_info(self, result: GameResult, opponent_move: Optional[int]) -> Dict[str, object]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "result": result,
            "opponent_move": opponent_move,
        }

    def _compute_reward(self, result: GameResult) -> float:
        if result == GameResult.WIN:
            return 1.0
        if result == GameResult.LOSE:
            return -1.0
        return 0.0
