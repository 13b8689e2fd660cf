"""Core game logic for the light-cycle arena."""

from .state import Agent, Board, BoardConfig, Cell, GameResult, GameState, Position
from .rules import (
    DIRECTIONS,
    KEY_BINDINGS,
    Direction,
    check_move,
    initialize_game_state,
    legal_moves,
    simulated_move,
    step,
)

__all__ = [
    "Agent",
    "Board",
    "BoardConfig",
    "Cell",
    "GameResult",
    "GameState",
    "Position",
    "DIRECTIONS",
    "KEY_BINDINGS",
    "Direction",
    "check_move",
    "initialize_game_state",
    "legal_moves",
    "simulated_move",
    "step",
]
