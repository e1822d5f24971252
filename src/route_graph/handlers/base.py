"""
Core handler infrastructure: safety limits, exceptions and result types.

Graph-shape outcomes (unknown node, unreachable node, degenerate metric) are
reported through the `status` field of each result dict, never raised.
Exceptions are reserved for caller errors and safety limits.
"""

from typing import Literal, TypedDict

# Outcome tags shared by every query result
QueryStatus = Literal["ok", "node_not_found", "disconnected", "degenerate"]

CentralityType = Literal["degree", "betweenness", "closeness"]


# === TYPED RESULT DICTIONARIES ===


class BfsResult(TypedDict):
    """Result type for bfs()."""

    distances: dict[str, int]
    """Hop count from start for every discovered node."""

    predecessors: dict[str, str]
    """The single node through which each non-start node was first reached."""

    order: list[str]
    """Nodes in dequeue order."""

    found: bool
    """True if the requested end node was dequeued."""


class HopDistanceResult(TypedDict):
    """Result type for hop_distance()."""

    distance: int | None
    """Number of edges on a shortest path, or None if unavailable."""

    status: QueryStatus
    """"ok", "node_not_found" or "disconnected"."""

    nodes_explored: int
    """Number of nodes dequeued before the search ended."""

    error: str | None
    """Human readable reason when status is not "ok"."""


class ShortestPathResult(TypedDict):
    """Result type for shortest_path()."""

    path: list[str] | None
    """Labels from start to end inclusive, or None if no path found."""

    distance: int | None
    """len(path) - 1, or None if no path found."""

    nodes_explored: int
    """Number of nodes dequeued before the search ended."""

    status: QueryStatus
    """"ok", "node_not_found" or "disconnected"."""

    error: str | None
    """Error message if no path found, None otherwise."""


class AllShortestPathsResult(TypedDict):
    """Result type for all_shortest_paths()."""

    paths: list[list[str]]
    """Every shortest path, each a list of labels from start to end."""

    distance: int | None
    """Common hop count of all paths."""

    path_count: int
    """Number of paths returned (after max_paths capping)."""

    status: QueryStatus
    """"ok", "node_not_found" or "disconnected"."""

    error: str | None
    """Error message if no paths found."""


class ClosenessResult(TypedDict):
    """Result type for closeness_centrality()."""

    node: str
    """The start node the score was computed for."""

    score: float | None
    """1 / total_distance, or None when undefined."""

    total_distance: int
    """Sum of hop distances to every reached node."""

    reachable: int
    """Number of nodes visited, start included."""

    status: QueryStatus
    """"ok", "node_not_found", "disconnected" or "degenerate"."""

    error: str | None
    """Why the score is undefined, None otherwise."""


class CentralityResult(TypedDict):
    """Result type for centrality()."""

    results: list[dict]
    """List of {node: str, score: float} sorted by score descending."""

    centrality_type: str
    """Type of centrality calculated (degree, betweenness, closeness)."""

    graph_stats: dict
    """Basic graph statistics (nodes, edges)."""

    undefined: list[str]
    """Nodes whose score is undefined and were left out of the ranking."""


# === SAFETY LIMITS ===
MAX_NODES = 10_000  # Largest graph betweenness will run on by default


class RouteGraphError(Exception):
    """Base class for route_graph errors."""

    pass


class SubgraphTooLarge(RouteGraphError):
    """Raised when a graph exceeds the node limit for an all-pairs computation."""

    pass


class LengthMismatchError(RouteGraphError, ValueError):
    """Raised when paired sequences differ in length."""

    pass


def check_limits(node_count: int, max_nodes: int | None = None) -> None:
    """
    Check a graph is small enough for an all-pairs computation.

    Args:
        node_count: Number of nodes in the graph
        max_nodes: Override for MAX_NODES (None = use default)

    Raises:
        SubgraphTooLarge: If node_count exceeds the limit
    """
    limit = max_nodes if max_nodes is not None else MAX_NODES
    if node_count > limit:
        raise SubgraphTooLarge(
            f"Graph has {node_count:,} nodes, exceeds limit {limit:,}. "
            "Consider max_nodes=N to raise the limit."
        )
