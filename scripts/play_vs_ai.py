#!/usr/bin/env python3
"""Play noughts and crosses against the heuristic AI in the console, with optional logging & replay."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List

from noughts import Board, Cell, GameResult, NoughtsEnv, game_result
from noughts.logging_setup import setup_logging

logger = logging.getLogger("noughts.play")

RESULT_MESSAGES = {
    GameResult.WIN: "You win!",
    GameResult.LOSE: "The AI wins!",
    GameResult.DRAW: "Draw!",
}


def format_board(board: Board) -> str:
    rows = []
    for start in range(0, 9, 3):
        cells = []
        for index in range(start, start + 3):
            cell = board[index]
            cells.append(str(index) if cell == Cell.EMPTY else cell.symbol)
        rows.append(" | ".join(cells))
    return "\n---------\n".join(rows)


def prompt_human_move(board: Board) -> int:
    while True:
        raw = input("Your move, cell 0-8 (q to quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Bye.")
            sys.exit(0)
        if not raw.isdigit():
            print("Please enter a number.")
            continue
        index = int(raw)
        if 0 <= index < 9 and board[index] == Cell.EMPTY:
            return index
        print("That cell is not available, try again.")


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, ensure_ascii=False, indent=2))
    print(f"Game log saved to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    board = Board.empty()
    if verbose:
        print("Replaying game.")
    for entry in moves:
        symbol = Cell[entry["symbol"]]
        board = board.place(int(entry["cell"]), symbol)
        if verbose:
            print(f"{entry.get('actor', 'unknown')} ({symbol.symbol}) -> {entry['cell']}")
            print(format_board(board))
    result = game_result(board)
    summary = {
        "result": result.value,
        "moves": len(moves),
        "board": [int(cell) for cell in board],
    }
    if verbose:
        print(f"Result: {summary['result']}")
    return summary


def play_interactive(args: argparse.Namespace) -> None:
    env = NoughtsEnv(difficulty=args.difficulty)
    _, info = env.reset(seed=args.seed)
    log_records: List[Dict] = []
    logger.info("new game at difficulty %d", args.difficulty)

    terminated = False
    while not terminated:
        print("\n" + format_board(env.board))
        cell = prompt_human_move(env.board)
        log_records.append({"move_index": len(log_records), "actor": "human", "symbol": "X", "cell": cell})
        _, _, terminated, _, info = env.step(cell)
        if info["opponent_move"] is not None:
            print(f"AI plays {info['opponent_move']}")
            log_records.append(
                {"move_index": len(log_records), "actor": "ai", "symbol": "O", "cell": info["opponent_move"]}
            )

    print("\n" + format_board(env.board))
    result = info["result"]
    print(RESULT_MESSAGES[result])

    if args.log_file:
        metadata = {"difficulty": args.difficulty, "seed": args.seed, "result": result.value}
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play noughts and crosses in the console against the AI.")
    parser.add_argument("--difficulty", type=int, default=40, help="Chance (0-100) of optimal play per move")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args()
    setup_logging(args.log_level)

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(args)


if __name__ == "__main__":
    main()
