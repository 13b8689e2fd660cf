from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from lightcycle.core import Agent, Board, Cell, Position, legal_moves, simulated_move

from .voronoi import evaluate

logger = logging.getLogger(__name__)


@dataclass
class MinimaxConfig:
    depth_limit: int = 4
    alpha_beta: bool = False

    def __post_init__(self) -> None:
        if self.depth_limit < 0:
            raise ValueError(f"depth_limit must be non-negative, got {self.depth_limit}.")


@dataclass
class SearchStats:
    nodes: int = 0
    evaluations: int = 0


class MinimaxSearch:
    """Depth-limited minimax over the Voronoi territory ratio.

    Both sides' hypothetical moves are written into the shared board and
    removed again before each frame returns, so the board is unchanged after
    every call.
    """

    def __init__(self, config: Optional[MinimaxConfig] = None) -> None:
        self.config = config or MinimaxConfig()
        self.stats = SearchStats()

    # ------------------------------------------------------------------
    def best_move(
        self,
        maximizer: Position,
        minimizer: Position,
        board: Board,
        *,
        agent: Optional[Agent] = None,
    ) -> Optional[Position]:
        """Return the maximizer's chosen move, or ``None`` when it has none.

        ``agent`` identifies the maximizer on the board. When omitted it is
        read from the occupant of ``maximizer``, falling back to ``Agent.B``.
        """
        self.stats = SearchStats()
        max_agent = agent or _occupant(board, maximizer, Agent.B)
        min_agent = max_agent.opponent
        depth = self.config.depth_limit

        best_move: Optional[Position] = None
        best_utility = 0.0
        for move in legal_moves(maximizer, board):
            with simulated_move(board, move, max_agent):
                utility = self._min_value(
                    board, move, minimizer, depth - 1, max_agent, min_agent, best_utility, math.inf
                )
            if utility > best_utility:
                best_utility = utility
                best_move = move

        logger.debug(
            "Minimax from %s picked %s (utility=%s, nodes=%d, evaluations=%d)",
            maximizer,
            best_move,
            best_utility,
            self.stats.nodes,
            self.stats.evaluations,
        )
        return best_move

    def value(
        self,
        maximizer: Position,
        minimizer: Position,
        board: Board,
        depth: int,
        *,
        agent: Optional[Agent] = None,
    ) -> float:
        """Utility of a maximizing layer searched ``depth`` plies deep."""
        self.stats = SearchStats()
        max_agent = agent or _occupant(board, maximizer, Agent.B)
        return self._max_value(board, maximizer, minimizer, depth, max_agent, max_agent.opponent, 0.0, math.inf)

    # ------------------------------------------------------------------
    def _evaluate(self, board: Board, maximizer: Position, minimizer: Position) -> float:
        self.stats.evaluations += 1
        return evaluate(board, maximizer, minimizer)

    def _max_value(
        self,
        board: Board,
        maximizer: Position,
        minimizer: Position,
        depth: int,
        max_agent: Agent,
        min_agent: Agent,
        alpha: float,
        beta: float,
    ) -> float:
        self.stats.nodes += 1
        if depth <= 0:
            return self._evaluate(board, maximizer, minimizer)

        best = 0.0
        for move in legal_moves(maximizer, board):
            with simulated_move(board, move, max_agent):
                utility = self._min_value(board, move, minimizer, depth - 1, max_agent, min_agent, alpha, beta)
            best = max(best, utility)
            if self.config.alpha_beta:
                if best >= beta:
                    break
                alpha = max(alpha, best)
        return best

    def _min_value(
        self,
        board: Board,
        maximizer: Position,
        minimizer: Position,
        depth: int,
        max_agent: Agent,
        min_agent: Agent,
        alpha: float,
        beta: float,
    ) -> float:
        self.stats.nodes += 1
        if depth <= 0:
            return self._evaluate(board, maximizer, minimizer)

        best = math.inf
        for move in legal_moves(minimizer, board):
            with simulated_move(board, move, min_agent):
                utility = self._max_value(board, maximizer, move, depth - 1, max_agent, min_agent, alpha, beta)
            best = min(best, utility)
            if self.config.alpha_beta:
                if best <= alpha:
                    break
                beta = min(beta, best)
        return best


def _occupant(board: Board, position: Position, default: Agent) -> Agent:
    cell = board.occupancy(position)
    if cell == Cell.EMPTY:
        return default
    return Agent(int(cell))


def best_move(
    maximizer: Position,
    minimizer: Position,
    board: Board,
    depth_limit: int = 4,
    *,
    agent: Optional[Agent] = None,
) -> Optional[Position]:
    return MinimaxSearch(MinimaxConfig(depth_limit=depth_limit)).best_move(maximizer, minimizer, board, agent=agent)
