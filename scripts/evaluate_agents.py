#!/usr/bin/env python3
"""Pit two agent strategies against each other and report win rates."""

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from lightcycle import GameConfig, StrategyConfig, load_game_config, make_policy
from lightcycle.core import BoardConfig
from lightcycle.evaluation import evaluate_policies


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--agent-a", choices=["random", "minimax"], default="random")
    parser.add_argument("--agent-b", choices=["random", "minimax"], default="minimax")
    parser.add_argument("--depth", type=int, default=2)
    parser.add_argument("--alpha-beta", action="store_true")
    parser.add_argument("--episodes", type=int, default=10)
    parser.add_argument("--rows", type=int)
    parser.add_argument("--cols", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    config = GameConfig()
    cfg_path = Path(args.config)
    if args.config and cfg_path.exists():
        config = load_game_config(cfg_path)
    board = config.board
    if args.rows is not None or args.cols is not None:
        rows = args.rows if args.rows is not None else board.rows
        cols = args.cols if args.cols is not None else board.cols
        board = BoardConfig(rows=rows, cols=cols, start_a=(0, 0), start_b=(rows - 1, cols - 1))

    policy_a = make_policy(
        StrategyConfig(mode=args.agent_a, depth_limit=args.depth, alpha_beta=args.alpha_beta, seed=args.seed)
    )
    policy_b = make_policy(
        StrategyConfig(
            mode=args.agent_b,
            depth_limit=args.depth,
            alpha_beta=args.alpha_beta,
            seed=None if args.seed is None else args.seed + 1,
        )
    )

    result = evaluate_policies(
        policy_a,
        policy_b,
        episodes=args.episodes,
        board_config=board,
        show_progress=True,
    )

    output = {
        "games": result.games_played,
        "board": [board.rows, board.cols],
        "agent_a": args.agent_a,
        "agent_b": args.agent_b,
        "agent_a_wins": result.agent_a_wins,
        "agent_b_wins": result.agent_b_wins,
        "draws": result.draws,
        "average_length": result.average_length,
        "agent_a_winrate": result.winrate_agent_a(),
        "agent_b_winrate": result.winrate_agent_b(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
