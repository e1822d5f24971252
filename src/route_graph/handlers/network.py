"""
Network analysis handlers.

Provides degree, closeness and betweenness centrality plus graph-level
statistics. Centrality scores are raw and unnormalized: degree counts every
neighbor entry (parallel edges and self-loops included), and betweenness
credits the single discovered shortest path of each ordered pair.
"""

import logging

import networkx as nx

from ..graph_store import GraphStore
from .base import (
    CentralityResult,
    CentralityType,
    ClosenessResult,
    check_limits,
)
from .pathfinding import shortest_path
from .traversal import _bfs_ids

logger = logging.getLogger(__name__)


def degree_centrality(store: GraphStore) -> dict[str, int]:
    """
    Neighbor-list length of every node.

    Not deduplicated and not normalized: a repeated route counts once per
    insertion, and a self-loop adds 2.
    """
    return {
        store.label_of(node_id): len(store.neighbor_ids(node_id))
        for node_id in store.node_ids()
    }


def closeness_centrality(store: GraphStore, start: str) -> ClosenessResult:
    """
    Reciprocal of the summed hop distance from start to every other node.

    Defined only when BFS from start reaches every node in the graph.

    Args:
        store: Graph to analyze
        start: Node to score

    Returns:
        dict with:
            - node: start
            - score: 1 / total_distance, or None when undefined
            - total_distance: sum of hop distances to reached nodes
            - reachable: nodes visited, start included
            - status:
                - "ok": score is defined
                - "node_not_found": start is not in the graph
                - "disconnected": some node is unreachable from start
                - "degenerate": start is the only node, so the sum is 0
            - error: reason when score is None
    """
    start_id = store.id_of(start)
    if start_id is None:
        return {
            "node": start,
            "score": None,
            "total_distance": 0,
            "reachable": 0,
            "status": "node_not_found",
            "error": f"Node {start} not found in graph",
        }

    distances, _, _, _ = _bfs_ids(store, start_id)
    total_distance = sum(distances.values())
    reachable = len(distances)

    if reachable != store.node_count():
        return {
            "node": start,
            "score": None,
            "total_distance": total_distance,
            "reachable": reachable,
            "status": "disconnected",
            "error": f"{start} is disconnected from {store.node_count() - reachable} node(s)",
        }

    if total_distance == 0:
        return {
            "node": start,
            "score": None,
            "total_distance": 0,
            "reachable": reachable,
            "status": "degenerate",
            "error": f"{start} is the only node in the graph; closeness is undefined",
        }

    return {
        "node": start,
        "score": 1.0 / total_distance,
        "total_distance": total_distance,
        "reachable": reachable,
        "status": "ok",
        "error": None,
    }


def betweenness_centrality(
    store: GraphStore,
    max_nodes: int | None = None,
) -> dict[str, float]:
    """
    Count how often each node lies on the discovered shortest path of a pair.

    For every ordered pair (start, end) of distinct nodes, shortest_path() is
    called and every node on the returned path, endpoints included, gains 1.
    No normalization by pair count or path multiplicity.

    This runs one BFS per ordered pair: O(V^2) searches of O(V+E) each.
    Each pair is credited with exactly the path shortest_path() reports.

    Args:
        store: Graph to analyze
        max_nodes: Override for the MAX_NODES safety limit

    Returns:
        dict mapping every node to its accumulated count (0.0 if on no path)

    Raises:
        SubgraphTooLarge: If the graph exceeds the node limit
    """
    nodes = store.labels()
    check_limits(len(nodes), max_nodes)

    scores: dict[str, float] = {node: 0.0 for node in nodes}
    pairs = 0
    for start in nodes:
        for end in nodes:
            if start == end:
                continue
            result = shortest_path(store, start, end)
            pairs += 1
            for node in result["path"] or []:
                scores[node] += 1.0

    logger.debug("Betweenness over %d nodes evaluated %d ordered pairs", len(nodes), pairs)
    return scores


def centrality(
    store: GraphStore,
    centrality_type: CentralityType = "degree",
    top_n: int = 10,
    start: str | None = None,
    max_nodes: int | None = None,
) -> CentralityResult:
    """
    Rank nodes by centrality.

    Returns the top N most central nodes with their scores.

    Args:
        store: Graph to analyze
        centrality_type: Type of centrality to calculate:
            - "degree": Raw neighbor count (fast)
            - "betweenness": Appearances on discovered shortest paths (slow)
            - "closeness": Reciprocal summed hop distance (medium)
        top_n: Number of top nodes to return (default 10)
        start: For closeness, score only this node instead of every node
        max_nodes: Override for the betweenness node limit

    Returns:
        dict with:
            - results: list of {node: str, score: float} sorted by score desc,
              ties broken by label
            - centrality_type: type of centrality calculated
            - graph_stats: node and edge counts
            - undefined: nodes left out because their score is undefined

    Example:
        >>> result = centrality(store, centrality_type="betweenness", top_n=3)
        >>> print(f"Busiest hub: {result['results'][0]['node']}")
    """
    undefined: list[str] = []

    if centrality_type == "degree":
        scores: dict[str, float] = dict(degree_centrality(store))
    elif centrality_type == "betweenness":
        scores = betweenness_centrality(store, max_nodes=max_nodes)
    elif centrality_type == "closeness":
        targets = [start] if start is not None else store.labels()
        scores = {}
        for node in targets:
            result = closeness_centrality(store, node)
            if result["score"] is None:
                undefined.append(node)
            else:
                scores[node] = result["score"]
    else:
        raise ValueError(f"Unknown centrality type: {centrality_type}")

    ranked = sorted(scores.items(), key=lambda x: (-x[1], x[0]))

    return {
        "results": [{"node": node, "score": score} for node, score in ranked[:top_n]],
        "centrality_type": centrality_type,
        "graph_stats": {
            "nodes": store.node_count(),
            "edges": store.edge_count(),
        },
        "undefined": undefined,
    }


def graph_stats(store: GraphStore) -> dict:
    """
    Calculate basic graph statistics.

    Counts are taken on the multigraph; density is measured on its simple
    projection (parallel edges and self-loops collapsed or dropped).

    Returns:
        dict with nodes, edges, self_loops, component_count, is_connected,
        density and avg/max/min degree
    """
    G = store.to_networkx()
    stats = {
        "nodes": G.number_of_nodes(),
        "edges": G.number_of_edges(),
        "self_loops": nx.number_of_selfloops(G),
        "component_count": 0,
        "is_connected": False,
        "density": 0.0,
    }
    if G.number_of_nodes() == 0:
        return stats

    simple = nx.Graph(G)
    simple.remove_edges_from(list(nx.selfloop_edges(simple)))

    stats["component_count"] = nx.number_connected_components(G)
    stats["is_connected"] = nx.is_connected(G)
    stats["density"] = nx.density(simple)

    degrees = list(degree_centrality(store).values())
    stats["avg_degree"] = sum(degrees) / len(degrees)
    stats["max_degree"] = max(degrees)
    stats["min_degree"] = min(degrees)

    return stats
