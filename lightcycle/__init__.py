"""Light-cycle arena with a Voronoi-minimax computer agent."""

from . import agents, core, env, evaluation, game, search
from .agents import (
    AgentMode,
    MinimaxPolicy,
    Policy,
    RandomPolicy,
    StrategyConfig,
    UnknownModeError,
    decide_move,
    make_policy,
)
from .config import ConfigError, GameConfig, game_config_from_dict, load_game_config
from .env import LightCycleEnv
from .evaluation import EvaluationResult, evaluate_policies
from .game import GameController, GamePhase, TurnResult
from .search import MinimaxConfig, MinimaxSearch, evaluate, reachability

__all__ = [
    "agents",
    "core",
    "env",
    "evaluation",
    "game",
    "search",
    "AgentMode",
    "MinimaxPolicy",
    "Policy",
    "RandomPolicy",
    "StrategyConfig",
    "UnknownModeError",
    "decide_move",
    "make_policy",
    "ConfigError",
    "GameConfig",
    "game_config_from_dict",
    "load_game_config",
    "LightCycleEnv",
    "EvaluationResult",
    "evaluate_policies",
    "GameController",
    "GamePhase",
    "TurnResult",
    "MinimaxConfig",
    "MinimaxSearch",
    "evaluate",
    "reachability",
]
