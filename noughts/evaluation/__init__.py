"""Match play and difficulty measurements for the heuristic player."""

from .config import EvaluationConfig, load_evaluation_config
from .match import EvaluationResult, evaluate_policies, play_game
from .sweep import difficulty_sweep, sound_move_rate

__all__ = [
    "EvaluationConfig",
    "load_evaluation_config",
    "EvaluationResult",
    "evaluate_policies",
    "play_game",
    "difficulty_sweep",
    "sound_move_rate",
]
