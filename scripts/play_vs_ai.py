#!/usr/bin/env python3
"""Play the light-cycle arena against the computer in the console, with optional logging & replay."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from lightcycle import GameConfig, GameController, StrategyConfig, load_game_config
from lightcycle.core import KEY_BINDINGS, Agent, Board, BoardConfig


def format_board(board: Board) -> str:
    return repr(board)


def build_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig()
    if args.config:
        cfg_path = Path(args.config)
        if cfg_path.exists():
            config = load_game_config(cfg_path)
    strategy = config.strategy
    mode = args.mode if args.mode is not None else strategy.mode
    depth = args.depth if args.depth is not None else strategy.depth_limit
    alpha_beta = args.alpha_beta or strategy.alpha_beta
    config.strategy = StrategyConfig(mode=mode, depth_limit=depth, alpha_beta=alpha_beta, seed=strategy.seed)
    return config


def prompt_key() -> str:
    while True:
        raw = input("Move (w/a/s/d, q to quit): ").strip().lower()
        if raw in {"q", "quit", "exit"}:
            print("Quitting.")
            sys.exit(0)
        if raw in KEY_BINDINGS:
            return raw
        print("Use w, a, s or d.")


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"Saved game log to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    metadata = data.get("metadata", {})
    moves = data.get("moves", [])
    board_config = BoardConfig(
        rows=metadata.get("rows", 30),
        cols=metadata.get("cols", 30),
        start_a=tuple(metadata.get("start_a", (0, 0))),
        start_b=tuple(metadata.get("start_b", (13, 4))),
    )
    board = Board.from_config(board_config)
    board.mark_occupied(board_config.start_a, Agent.A)
    board.mark_occupied(board_config.start_b, Agent.B)
    if verbose:
        print("Replaying logged game.")
        print(format_board(board))
    for entry in moves:
        agent = Agent(entry["agent"])
        row, col = entry["position"]
        board.mark_occupied((row, col), agent)
        if verbose:
            print(f"{entry.get('actor', 'unknown')} (player {int(agent)}) -> ({row},{col})")
            print(format_board(board))
    summary = {
        "result": metadata.get("result", "unknown"),
        "moves": len(moves),
        "board": board.grid.tolist(),
    }
    if verbose:
        print("Replay finished.")
        print(f"Result: {summary['result']}")
    return summary


def play_interactive(args: argparse.Namespace) -> None:
    config = build_config(args)
    controller = GameController(config)
    controller.start()
    print(f'Playing against "{config.strategy.mode.value}" agent type.')

    result = None
    while result is None or result.continues:
        print()
        print(format_board(controller.state.board))
        result = controller.handle_key(prompt_key())
        if result is not None and result.agent_move is not None:
            print(f"AI -> {result.agent_move}")

    print("\nFinal board:")
    print(format_board(controller.state.board))
    print(f"Player {int(result.winner)} wins!")

    if args.log_file:
        log_records: List[Dict] = [
            {
                "move_index": index,
                "actor": "human" if agent == Agent.A else "ai",
                "agent": int(agent),
                "position": list(position),
            }
            for index, (agent, position) in enumerate(controller.history)
        ]
        metadata = {
            "rows": config.board.rows,
            "cols": config.board.cols,
            "start_a": list(config.board.start_a),
            "start_b": list(config.board.start_b),
            "mode": config.strategy.mode.value,
            "depth_limit": config.strategy.depth_limit,
            "result": controller.state.result.value,
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play the light-cycle arena in the console against the computer.")
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--mode", choices=["random", "minimax"])
    parser.add_argument("--depth", type=int)
    parser.add_argument("--alpha-beta", action="store_true")
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(args)


if __name__ == "__main__":
    main()
