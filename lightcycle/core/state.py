from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

BoardArray = NDArray[np.int8]

# Convenient tuple alias used across modules
Position = Tuple[int, int]


class Cell(IntEnum):
    EMPTY = 0
    AGENT_A = 1
    AGENT_B = 2


class Agent(IntEnum):
    A = 1  # player one, usually the human
    B = 2  # player two, the computer

    @property
    def cell(self) -> Cell:
        return Cell(int(self))

    @property
    def opponent(self) -> "Agent":
        return Agent.B if self == Agent.A else Agent.A


class GameResult(Enum):
    ONGOING = "ongoing"
    AGENT_A_WIN = "agent_a_win"
    AGENT_B_WIN = "agent_b_win"

    @property
    def winner(self) -> Optional[Agent]:
        if self == GameResult.AGENT_A_WIN:
            return Agent.A
        if self == GameResult.AGENT_B_WIN:
            return Agent.B
        return None

    @staticmethod
    def won_by(agent: Agent) -> "GameResult":
        return GameResult.AGENT_A_WIN if agent == Agent.A else GameResult.AGENT_B_WIN


@dataclass(frozen=True)
class BoardConfig:
    rows: int = 30
    cols: int = 30
    start_a: Position = (0, 0)
    start_b: Position = (13, 4)

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.rows}x{self.cols}.")
        for name, start in (("start_a", self.start_a), ("start_b", self.start_b)):
            row, col = start
            if not (0 <= row < self.rows and 0 <= col < self.cols):
                raise ValueError(f"{name} {start} lies outside a {self.rows}x{self.cols} board.")
        if tuple(self.start_a) == tuple(self.start_b):
            raise ValueError("Agents cannot start on the same cell.")


class Board:
    """Occupancy grid shared by the controller and the search.

    Cells hold :class:`Cell` codes in an ``int8`` array. A cell only returns to
    ``EMPTY`` through :meth:`clear_occupied`, which the search uses to undo a
    simulated move.
    """

    def __init__(self, rows: int, cols: int, grid: Optional[BoardArray] = None) -> None:
        if grid is None:
            grid = np.zeros((rows, cols), dtype=np.int8)
        elif grid.shape != (rows, cols):
            raise ValueError(f"Grid shape {grid.shape} does not match {rows}x{cols}.")
        self.rows = rows
        self.cols = cols
        self.grid: BoardArray = grid

    @classmethod
    def from_config(cls, config: BoardConfig) -> "Board":
        return cls(config.rows, config.cols)

    def dimensions(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

    def occupancy(self, position: Position) -> Cell:
        return Cell(int(self.grid[position[0], position[1]]))

    def is_empty(self, position: Position) -> bool:
        return self.grid[position[0], position[1]] == Cell.EMPTY

    def mark_occupied(self, position: Position, agent: Agent) -> None:
        if not self.in_bounds(position):
            raise ValueError(f"Position {position} is outside the board.")
        if not self.is_empty(position):
            raise ValueError(f"Cell {position} is already occupied.")
        self.grid[position[0], position[1]] = agent.cell

    def clear_occupied(self, position: Position, agent: Agent) -> None:
        if not self.in_bounds(position):
            raise ValueError(f"Position {position} is outside the board.")
        if self.grid[position[0], position[1]] != agent.cell:
            raise ValueError(f"Cell {position} is not occupied by agent {agent.name}.")
        self.grid[position[0], position[1]] = Cell.EMPTY

    def occupied_count(self, agent: Optional[Agent] = None) -> int:
        if agent is None:
            return int(np.count_nonzero(self.grid))
        return int(np.count_nonzero(self.grid == agent.cell))

    def copy(self) -> "Board":
        return Board(self.rows, self.cols, self.grid.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.dimensions() == other.dimensions() and np.array_equal(self.grid, other.grid)

    def __repr__(self) -> str:
        symbols = {Cell.EMPTY: ".", Cell.AGENT_A: "1", Cell.AGENT_B: "2"}
        rows = ("".join(symbols[Cell(int(cell))] for cell in row) for row in self.grid)
        return "\n".join(rows)


@dataclass
class GameState:
    board: Board
    positions: Dict[Agent, Position] = field(default_factory=dict)
    result: GameResult = GameResult.ONGOING
    ply_count: int = 0

    @property
    def is_terminal(self) -> bool:
        return self.result != GameResult.ONGOING
