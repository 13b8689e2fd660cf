from __future__ import annotations

from contextlib import contextmanager
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from .state import Agent, Board, BoardConfig, GameState, Position

# Row forward, row backward, column backward, column forward.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, -1), (0, 1))


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


KEY_BINDINGS: Dict[str, Direction] = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


def step(position: Position, direction: Direction) -> Position:
    dr, dc = direction.delta
    return position[0] + dr, position[1] + dc


def check_move(position: Position, board: Board) -> bool:
    """Return whether an agent may enter ``position``: in bounds and empty."""
    return board.in_bounds(position) and board.is_empty(position)


def legal_moves(position: Position, board: Board) -> List[Position]:
    moves: List[Position] = []
    row, col = position
    for dr, dc in DIRECTIONS:
        candidate = (row + dr, col + dc)
        if check_move(candidate, board):
            moves.append(candidate)
    return moves


@contextmanager
def simulated_move(board: Board, position: Position, agent: Agent) -> Iterator[Position]:
    """Occupy ``position`` for the duration of the block, then free it again."""
    board.mark_occupied(position, agent)
    try:
        yield position
    finally:
        board.clear_occupied(position, agent)


def initialize_game_state(config: Optional[BoardConfig] = None) -> GameState:
    config = config or BoardConfig()
    board = Board.from_config(config)
    board.mark_occupied(config.start_a, Agent.A)
    board.mark_occupied(config.start_b, Agent.B)
    return GameState(
        board=board,
        positions={Agent.A: tuple(config.start_a), Agent.B: tuple(config.start_b)},
    )
