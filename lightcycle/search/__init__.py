"""Reachability, territory evaluation and minimax search."""

from .reachability import UNREACHABLE, DistanceField, reachability
from .voronoi import TerritoryCounts, evaluate, territory_counts
from .minimax import MinimaxConfig, MinimaxSearch, SearchStats, best_move

__all__ = [
    "UNREACHABLE",
    "DistanceField",
    "reachability",
    "TerritoryCounts",
    "evaluate",
    "territory_counts",
    "MinimaxConfig",
    "MinimaxSearch",
    "SearchStats",
    "best_move",
]
