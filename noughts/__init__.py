"""Heuristic noughts-and-crosses player with adjustable difficulty."""

from . import core, env, evaluation, heuristics, policies
from .core import (
    LINES,
    Board,
    Cell,
    InvalidStateError,
    empty_indices,
    fork_move,
    is_full,
    winner,
    winning_move,
    winning_move_count,
)
from .env import GameResult, NoughtsEnv, game_result
from .evaluation import EvaluationConfig, EvaluationResult, difficulty_sweep, evaluate_policies
from .heuristics import Decision, MoveSelector, Strategy, explain_move, select_move
from .policies import HeuristicPolicy, Policy, RandomPolicy

__all__ = [
    "core",
    "env",
    "evaluation",
    "heuristics",
    "policies",
    "LINES",
    "Board",
    "Cell",
    "InvalidStateError",
    "empty_indices",
    "fork_move",
    "is_full",
    "winner",
    "winning_move",
    "winning_move_count",
    "GameResult",
    "NoughtsEnv",
    "game_result",
    "EvaluationConfig",
    "EvaluationResult",
    "difficulty_sweep",
    "evaluate_policies",
    "Decision",
    "MoveSelector",
    "Strategy",
    "explain_move",
    "select_move",
    "HeuristicPolicy",
    "Policy",
    "RandomPolicy",
]
