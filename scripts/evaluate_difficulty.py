#!/usr/bin/env python3
"""Evaluate the heuristic AI against a baseline and sweep its difficulty."""

import argparse
import json

import numpy as np

from noughts import Board, Cell
from noughts.evaluation import difficulty_sweep, evaluate_policies, load_evaluation_config
from noughts.logging_setup import setup_logging
from noughts.policies import HeuristicPolicy, RandomPolicy


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/evaluate.yaml")
    parser.add_argument("--episodes", type=int)
    parser.add_argument("--difficulty", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--opponent", choices=["random", "heuristic"])
    parser.add_argument("--sweep-trials", type=int)
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args()
    setup_logging(args.log_level)

    cfg = load_evaluation_config(args.config)
    episodes = args.episodes if args.episodes is not None else cfg.episodes
    difficulty = args.difficulty if args.difficulty is not None else cfg.difficulty
    seed = args.seed if args.seed is not None else cfg.seed
    opponent = args.opponent or cfg.opponent
    sweep_trials = args.sweep_trials if args.sweep_trials is not None else cfg.sweep_trials

    seeds = np.random.SeedSequence(seed).spawn(3)
    if opponent == "random":
        baseline = RandomPolicy(np.random.default_rng(seeds[0]))
    else:
        baseline = HeuristicPolicy(difficulty, symbol=Cell.X, rng=np.random.default_rng(seeds[0]))
    ai = HeuristicPolicy(difficulty, symbol=Cell.O, rng=np.random.default_rng(seeds[1]))

    result = evaluate_policies(baseline, ai, episodes=episodes, rng=np.random.default_rng(seeds[2]))
    sweep = difficulty_sweep(
        Board.from_string(cfg.sweep_board),
        cfg.sweep_difficulties,
        trials=sweep_trials,
        seed=seed,
    )

    output = {
        "opponent": opponent,
        "difficulty": difficulty,
        "games": result.games_played,
        "opponent_wins": result.x_wins,
        "ai_wins": result.o_wins,
        "draws": result.draws,
        "average_length": result.average_length,
        "ai_winrate": result.winrate_o(),
        "sound_move_rate": {str(d): rate for d, rate in sweep},
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
