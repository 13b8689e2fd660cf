import json

import numpy as np

from lightcycle.agents import MinimaxPolicy, RandomPolicy
from lightcycle.core import BoardConfig, GameResult
from lightcycle.evaluation import evaluate_policies, play_match
from lightcycle.search import MinimaxConfig

from scripts.evaluate_agents import main

SMALL = BoardConfig(rows=5, cols=5, start_a=(0, 0), start_b=(4, 4))


def test_evaluate_random_vs_random_small():
    policy_a = RandomPolicy(np.random.default_rng(0))
    policy_b = RandomPolicy(np.random.default_rng(1))
    result = evaluate_policies(policy_a, policy_b, episodes=3, board_config=SMALL)
    assert result.games_played == 3
    assert result.agent_a_wins + result.agent_b_wins + result.draws == 3
    assert result.average_length > 0
    assert 0.0 <= result.winrate_agent_a() <= 1.0


def test_minimax_vs_random_finishes():
    result, rounds = play_match(
        MinimaxPolicy(MinimaxConfig(depth_limit=2)),
        RandomPolicy(np.random.default_rng(2)),
        board_config=SMALL,
    )
    assert result in (GameResult.AGENT_A_WIN, GameResult.AGENT_B_WIN)
    assert rounds >= 1


def test_round_limit_is_a_draw():
    result, rounds = play_match(
        RandomPolicy(np.random.default_rng(0)),
        RandomPolicy(np.random.default_rng(1)),
        board_config=SMALL,
        max_rounds=1,
    )
    assert result == GameResult.ONGOING
    assert rounds == 1


def test_winrates_cover_both_agents():
    result = evaluate_policies(
        MinimaxPolicy(MinimaxConfig(depth_limit=2)),
        RandomPolicy(np.random.default_rng(3)),
        episodes=2,
        board_config=SMALL,
        show_progress=True,
    )
    assert result.games_played == 2
    assert result.winrate_agent_a() == result.agent_a_wins / 2
    assert result.winrate_agent_b() == result.agent_b_wins / 2
    assert result.winrate_agent_a() + result.winrate_agent_b() <= 1.0


def test_evaluate_agents_script_reports_summary(tmp_path, capsys):
    main(
        [
            "--config",
            str(tmp_path / "missing.yaml"),
            "--agent-a",
            "random",
            "--agent-b",
            "random",
            "--episodes",
            "3",
            "--rows",
            "5",
            "--cols",
            "5",
            "--seed",
            "0",
        ]
    )
    summary = json.loads(capsys.readouterr().out)
    assert summary["games"] == 3
    assert summary["board"] == [5, 5]
    assert summary["agent_a_wins"] + summary["agent_b_wins"] + summary["draws"] == 3
    assert summary["agent_b_winrate"] == summary["agent_b_wins"] / 3
