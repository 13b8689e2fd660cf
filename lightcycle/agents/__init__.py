"""Agent strategies and mode dispatch."""

from .policies import (
    AgentMode,
    MinimaxPolicy,
    Policy,
    RandomPolicy,
    StrategyConfig,
    UnknownModeError,
    decide_move,
    make_policy,
)

__all__ = [
    "AgentMode",
    "MinimaxPolicy",
    "Policy",
    "RandomPolicy",
    "StrategyConfig",
    "UnknownModeError",
    "decide_move",
    "make_policy",
]
