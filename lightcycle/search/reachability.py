from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray

from lightcycle.core import Board, Position, legal_moves

UNREACHABLE = np.inf


@dataclass(frozen=True)
class DistanceField:
    """Shortest step counts from ``source``; unreachable cells hold ``inf``."""

    source: Position
    distances: NDArray[np.float64]

    def distance(self, position: Position) -> float:
        return float(self.distances[position[0], position[1]])

    def is_reachable(self, position: Position) -> bool:
        return bool(np.isfinite(self.distances[position[0], position[1]]))

    def reachable_count(self) -> int:
        return int(np.count_nonzero(np.isfinite(self.distances)))


def reachability(board: Board, source: Position) -> DistanceField:
    """Dijkstra relaxation over empty cells with unit step cost.

    The source seeds distance 0 even when its own cell is occupied; occupancy
    only blocks cells from being entered.
    """
    distances = np.full(board.dimensions(), UNREACHABLE, dtype=np.float64)
    explored = np.zeros(board.dimensions(), dtype=bool)
    distances[source[0], source[1]] = 0.0

    frontier: List[Tuple[float, Position]] = [(0.0, source)]
    while frontier:
        dist, current = heapq.heappop(frontier)
        if explored[current[0], current[1]]:
            continue
        explored[current[0], current[1]] = True

        for row, col in legal_moves(current, board):
            if explored[row, col]:
                continue
            if dist + 1 < distances[row, col]:
                distances[row, col] = dist + 1
                heapq.heappush(frontier, (dist + 1, (row, col)))

    return DistanceField(source=source, distances=distances)
