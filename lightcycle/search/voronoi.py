from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from lightcycle.core import Board, Position

from .reachability import reachability


@dataclass(frozen=True)
class TerritoryCounts:
    maximizer: int
    minimizer: int

    def ratio(self) -> float:
        if self.maximizer == 0:
            return 0.0
        if self.minimizer == 0:
            return math.inf
        return self.maximizer / self.minimizer


def territory_counts(board: Board, maximizer: Position, minimizer: Position) -> TerritoryCounts:
    """Partition cells by which agent reaches them first.

    Ties at a finite distance go to the maximizer. Each count excludes the
    agent's own current cell.
    """
    max_field = reachability(board, maximizer).distances
    min_field = reachability(board, minimizer).distances

    closer_to_max = max_field < min_field
    closer_to_min = min_field < max_field
    tied = (max_field == min_field) & np.isfinite(max_field)

    max_count = int(np.count_nonzero(closer_to_max | tied)) - 1
    min_count = int(np.count_nonzero(closer_to_min)) - 1
    return TerritoryCounts(maximizer=max_count, minimizer=min_count)


def evaluate(board: Board, maximizer: Position, minimizer: Position) -> float:
    """Voronoi territory ratio from the maximizer's point of view.

    Returns 0 when the maximizer owns no free cell and ``math.inf`` when the
    minimizer owns none while the maximizer owns some.
    """
    return territory_counts(board, maximizer, minimizer).ratio()
