"""
Graph operation handlers.

This package provides handlers over an in-memory GraphStore:
- traversal: BFS with single-predecessor tracking, hop distance
- pathfinding: path reconstruction, one or all shortest paths
- network: degree/closeness/betweenness centrality, graph statistics
"""

from .base import (
    MAX_NODES,
    LengthMismatchError,
    RouteGraphError,
    SubgraphTooLarge,
    check_limits,
    # Result TypedDicts for type hints
    AllShortestPathsResult,
    BfsResult,
    CentralityResult,
    ClosenessResult,
    HopDistanceResult,
    QueryStatus,
    ShortestPathResult,
)
from .network import (
    betweenness_centrality,
    centrality,
    closeness_centrality,
    degree_centrality,
    graph_stats,
)
from .pathfinding import (
    all_shortest_paths,
    reconstruct_path,
    shortest_path,
)
from .traversal import (
    bfs,
    degrees_of_separation,
    hop_distance,
)

__all__ = [
    # Constants
    "MAX_NODES",
    # Exceptions
    "RouteGraphError",
    "SubgraphTooLarge",
    "LengthMismatchError",
    # Base functions
    "check_limits",
    # Result TypedDicts
    "QueryStatus",
    "BfsResult",
    "HopDistanceResult",
    "ShortestPathResult",
    "AllShortestPathsResult",
    "ClosenessResult",
    "CentralityResult",
    # Traversal handlers
    "bfs",
    "hop_distance",
    "degrees_of_separation",
    # Pathfinding handlers
    "reconstruct_path",
    "shortest_path",
    "all_shortest_paths",
    # Network handlers
    "degree_centrality",
    "closeness_centrality",
    "betweenness_centrality",
    "centrality",
    "graph_stats",
]
