from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from tqdm.auto import trange

from lightcycle.agents import Policy
from lightcycle.core import Agent, BoardConfig, GameResult, initialize_game_state


@dataclass
class EvaluationResult:
    games_played: int
    agent_a_wins: int
    agent_b_wins: int
    draws: int
    average_length: float

    def winrate_agent_a(self) -> float:
        return self.agent_a_wins / max(1, self.games_played)

    def winrate_agent_b(self) -> float:
        return self.agent_b_wins / max(1, self.games_played)


def play_match(
    policy_a: Policy,
    policy_b: Policy,
    *,
    board_config: Optional[BoardConfig] = None,
    max_rounds: Optional[int] = None,
) -> Tuple[GameResult, int]:
    """Play one game and return ``(result, rounds)``.

    Agent A moves first each round. A game still running after
    ``max_rounds`` rounds is reported as ``GameResult.ONGOING`` (a draw).
    """
    board_config = board_config or BoardConfig()
    if max_rounds is None:
        max_rounds = board_config.rows * board_config.cols
    state = initialize_game_state(board_config)
    policies = {Agent.A: policy_a, Agent.B: policy_b}

    rounds = 0
    while rounds < max_rounds:
        for agent in (Agent.A, Agent.B):
            move = policies[agent].select_move(
                state.positions[agent], state.positions[agent.opponent], state.board, agent=agent
            )
            if move is None:
                state.result = GameResult.won_by(agent.opponent)
                return state.result, rounds
            state.board.mark_occupied(move, agent)
            state.positions[agent] = move
            state.ply_count += 1
        rounds += 1
    return state.result, rounds


def evaluate_policies(
    policy_agent_a: Policy,
    policy_agent_b: Policy,
    *,
    episodes: int,
    board_config: Optional[BoardConfig] = None,
    max_rounds: Optional[int] = None,
    show_progress: bool = False,
) -> EvaluationResult:
    agent_a_wins = 0
    agent_b_wins = 0
    draws = 0
    total_rounds = 0

    for _ in trange(episodes, desc="Games", disable=not show_progress):
        result, rounds = play_match(
            policy_agent_a,
            policy_agent_b,
            board_config=board_config,
            max_rounds=max_rounds,
        )
        total_rounds += rounds
        if result == GameResult.AGENT_A_WIN:
            agent_a_wins += 1
        elif result == GameResult.AGENT_B_WIN:
            agent_b_wins += 1
        else:
            draws += 1

    average_length = total_rounds / max(1, episodes)
    return EvaluationResult(
        games_played=episodes,
        agent_a_wins=agent_a_wins,
        agent_b_wins=agent_b_wins,
        draws=draws,
        average_length=average_length,
    )
