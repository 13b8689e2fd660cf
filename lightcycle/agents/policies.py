from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import numpy as np

from lightcycle.core import Agent, Board, Position, legal_moves
from lightcycle.search import MinimaxConfig, MinimaxSearch


class UnknownModeError(ValueError):
    pass


class AgentMode(Enum):
    RANDOM = "random"
    MINIMAX = "minimax"

    @classmethod
    def parse(cls, value: Union[str, "AgentMode"]) -> "AgentMode":
        if isinstance(value, AgentMode):
            return value
        if isinstance(value, str):
            normalised = value.strip().lower()
            for mode in cls:
                if mode.value == normalised:
                    return mode
        raise UnknownModeError(f"Unrecognized mode {value!r}.")


@dataclass
class StrategyConfig:
    mode: AgentMode = AgentMode.MINIMAX
    depth_limit: int = 4
    alpha_beta: bool = False
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.mode = AgentMode.parse(self.mode)
        if self.depth_limit < 0:
            raise ValueError(f"depth_limit must be non-negative, got {self.depth_limit}.")


class Policy:
    """Policy interface choosing the next cell for an agent."""

    def select_move(
        self,
        position: Position,
        opponent: Position,
        board: Board,
        *,
        agent: Optional[Agent] = None,
    ) -> Optional[Position]:
        raise NotImplementedError

    def spawn(self, seed: Optional[int] = None) -> "Policy":
        """Return an independent copy of this policy."""
        return self


class RandomPolicy(Policy):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def select_move(
        self,
        position: Position,
        opponent: Position,
        board: Board,
        *,
        agent: Optional[Agent] = None,
    ) -> Optional[Position]:
        moves = legal_moves(position, board)
        if not moves:
            return None
        return moves[int(self.rng.integers(len(moves)))]

    def spawn(self, seed: Optional[int] = None) -> "RandomPolicy":
        return RandomPolicy(np.random.default_rng(seed))


class MinimaxPolicy(Policy):
    def __init__(self, config: Optional[MinimaxConfig] = None) -> None:
        self.config = config or MinimaxConfig()
        self.search = MinimaxSearch(self.config)

    def select_move(
        self,
        position: Position,
        opponent: Position,
        board: Board,
        *,
        agent: Optional[Agent] = None,
    ) -> Optional[Position]:
        return self.search.best_move(position, opponent, board, agent=agent)

    def spawn(self, seed: Optional[int] = None) -> "MinimaxPolicy":
        return MinimaxPolicy(MinimaxConfig(depth_limit=self.config.depth_limit, alpha_beta=self.config.alpha_beta))


def make_policy(config: StrategyConfig) -> Policy:
    mode = AgentMode.parse(config.mode)
    if mode == AgentMode.RANDOM:
        return RandomPolicy(np.random.default_rng(config.seed))
    if mode == AgentMode.MINIMAX:
        return MinimaxPolicy(MinimaxConfig(depth_limit=config.depth_limit, alpha_beta=config.alpha_beta))
    raise UnknownModeError(f"Unrecognized mode {mode!r}.")


def decide_move(
    mode: Union[str, AgentMode],
    position: Position,
    opponent: Position,
    board: Board,
    *,
    depth_limit: int = 4,
    rng: Optional[np.random.Generator] = None,
    agent: Optional[Agent] = None,
) -> Optional[Position]:
    """One-shot strategy dispatch; ``None`` means the agent cannot move."""
    mode = AgentMode.parse(mode)
    if mode == AgentMode.RANDOM:
        policy: Policy = RandomPolicy(rng)
    else:
        policy = make_policy(StrategyConfig(mode=mode, depth_limit=depth_limit))
    return policy.select_move(position, opponent, board, agent=agent)
