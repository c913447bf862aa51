from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import yaml


@dataclass
class EvaluationConfig:
    episodes: int = 200
    difficulty: int = 40
    seed: Optional[int] = None
    opponent: str = "random"
    sweep_board: str = "X........"
    sweep_difficulties: List[int] = field(default_factory=lambda: [0, 25, 50, 75, 100])
    sweep_trials: int = 1000


def load_evaluation_config(path: Optional[Union[str, Path]]) -> EvaluationConfig:
    if path is None:
        return EvaluationConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        return EvaluationConfig()
    cfg = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    return EvaluationConfig(**cfg)
