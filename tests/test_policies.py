import numpy as np
import pytest

from lightcycle.agents import (
    AgentMode,
    MinimaxPolicy,
    RandomPolicy,
    StrategyConfig,
    UnknownModeError,
    decide_move,
    make_policy,
)
from lightcycle.core import Agent, Board, legal_moves
from lightcycle.search import MinimaxConfig, MinimaxSearch


def open_board() -> Board:
    board = Board(5, 5)
    board.mark_occupied((2, 2), Agent.B)
    board.mark_occupied((4, 4), Agent.A)
    return board


def test_mode_parsing_accepts_known_values() -> None:
    assert AgentMode.parse("random") == AgentMode.RANDOM
    assert AgentMode.parse("Random") == AgentMode.RANDOM
    assert AgentMode.parse(" MINIMAX ") == AgentMode.MINIMAX
    assert AgentMode.parse(AgentMode.MINIMAX) == AgentMode.MINIMAX


def test_unknown_mode_is_rejected() -> None:
    with pytest.raises(UnknownModeError):
        AgentMode.parse("greedy")
    with pytest.raises(UnknownModeError):
        StrategyConfig(mode="alphazero")
    with pytest.raises(ValueError):
        decide_move("nope", (2, 2), (4, 4), open_board())


def test_make_policy_resolves_variants() -> None:
    assert isinstance(make_policy(StrategyConfig(mode="random", seed=0)), RandomPolicy)
    policy = make_policy(StrategyConfig(mode="minimax", depth_limit=2, alpha_beta=True))
    assert isinstance(policy, MinimaxPolicy)
    assert policy.config.depth_limit == 2
    assert policy.config.alpha_beta


def test_random_policy_picks_legal_moves() -> None:
    board = open_board()
    policy = RandomPolicy(np.random.default_rng(0))
    legal = set(legal_moves((2, 2), board))
    seen = set()
    for _ in range(60):
        move = policy.select_move((2, 2), (4, 4), board)
        assert move in legal
        seen.add(move)
    assert len(seen) > 1


def test_random_policy_reports_stuck_agent() -> None:
    board = Board(2, 2)
    board.mark_occupied((0, 0), Agent.B)
    board.mark_occupied((0, 1), Agent.A)
    board.mark_occupied((1, 0), Agent.A)
    assert RandomPolicy().select_move((0, 0), (0, 1), board) is None
    assert decide_move("random", (0, 0), (0, 1), board) is None
    assert decide_move("minimax", (0, 0), (0, 1), board, depth_limit=2) is None


def test_spawned_random_policies_are_reproducible() -> None:
    board = open_board()
    first = RandomPolicy().spawn(42)
    second = RandomPolicy().spawn(42)
    moves_first = [first.select_move((2, 2), (4, 4), board) for _ in range(10)]
    moves_second = [second.select_move((2, 2), (4, 4), board) for _ in range(10)]
    assert moves_first == moves_second


def test_minimax_dispatch_matches_search() -> None:
    board = open_board()
    expected = MinimaxSearch(MinimaxConfig(depth_limit=2)).best_move((2, 2), (4, 4), board)
    assert decide_move("minimax", (2, 2), (4, 4), board, depth_limit=2) == expected
    assert MinimaxPolicy(MinimaxConfig(depth_limit=2)).spawn(1).select_move((2, 2), (4, 4), board) == expected


def test_strategy_rejects_negative_depth() -> None:
    with pytest.raises(ValueError):
        StrategyConfig(mode="minimax", depth_limit=-1)
    assert StrategyConfig(mode="random", depth_limit=0).depth_limit == 0
