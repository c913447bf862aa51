"""Gymnasium environment for playing against the heuristic player."""

from .gym_env import GameResult, NoughtsEnv, game_result

__all__ = ["GameResult", "NoughtsEnv", "game_result"]
