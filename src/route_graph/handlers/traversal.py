"""
Breadth-first traversal over a GraphStore.

All handlers here run on interned integer ids and translate to labels only
when building their result. A node is marked visited at the moment it is
first enqueued, so each node records exactly one predecessor: the one whose
edge was processed first.
"""

import logging
from collections import deque

from ..graph_store import GraphStore
from .base import BfsResult, HopDistanceResult

logger = logging.getLogger(__name__)


def _bfs_ids(
    store: GraphStore,
    start_id: int,
    end_id: int | None = None,
) -> tuple[dict[int, int], dict[int, int], list[int], bool]:
    """
    Core BFS over ids.

    Returns (distances, predecessors, order, found). Stops as soon as end_id
    is dequeued when one is given.
    """
    distances: dict[int, int] = {start_id: 0}
    predecessors: dict[int, int] = {}
    order: list[int] = []
    queue: deque[int] = deque([start_id])

    while queue:
        current = queue.popleft()
        order.append(current)
        if current == end_id:
            return distances, predecessors, order, True

        depth = distances[current]
        for neighbor in store.neighbor_ids(current):
            if neighbor not in distances:
                distances[neighbor] = depth + 1
                predecessors[neighbor] = current
                queue.append(neighbor)

    return distances, predecessors, order, False


def bfs(
    store: GraphStore,
    start: str,
    end: str | None = None,
) -> BfsResult:
    """
    Breadth-first search from start.

    Args:
        store: Graph to search
        start: Start label
        end: Optional target label; the search stops once it is dequeued

    Returns:
        dict with:
            - distances: label -> hop count for every discovered node
            - predecessors: label -> the single label it was first reached from
            - order: labels in dequeue order
            - found: whether end was dequeued (False if end is None)

        An unknown start yields empty distances and order.

    Example:
        >>> result = bfs(store, "mumbai")
        >>> result["distances"]["chennai"]
        2
    """
    start_id = store.id_of(start)
    if start_id is None:
        return {"distances": {}, "predecessors": {}, "order": [], "found": False}

    end_id = store.id_of(end) if end is not None else None
    distances, predecessors, order, found = _bfs_ids(store, start_id, end_id)

    label = store.label_of
    return {
        "distances": {label(n): d for n, d in distances.items()},
        "predecessors": {label(n): label(p) for n, p in predecessors.items()},
        "order": [label(n) for n in order],
        "found": found,
    }


def hop_distance(store: GraphStore, start: str, end: str) -> HopDistanceResult:
    """
    Number of edges on a shortest path between start and end.

    Both endpoints are checked before any traversal, so an unknown city is
    reported as "node_not_found" rather than "disconnected".

    Args:
        store: Graph to search
        start: Start label
        end: Target label

    Returns:
        dict with:
            - distance: hop count, 0 when start == end, None on failure
            - status: "ok", "node_not_found" or "disconnected"
            - nodes_explored: nodes dequeued by the search
            - error: message when status is not "ok"
    """
    missing = [label for label in (start, end) if not store.has_node(label)]
    if missing:
        return {
            "distance": None,
            "status": "node_not_found",
            "nodes_explored": 0,
            "error": f"City not found in graph: {', '.join(missing)}",
        }

    start_id = store.id_of(start)
    end_id = store.id_of(end)
    distances, _, order, found = _bfs_ids(store, start_id, end_id)

    logger.debug("BFS %s -> %s explored %d nodes", start, end, len(order))

    if not found:
        return {
            "distance": None,
            "status": "disconnected",
            "nodes_explored": len(order),
            "error": f"No connection between {start} and {end}",
        }

    return {
        "distance": distances[end_id],
        "status": "ok",
        "nodes_explored": len(order),
        "error": None,
    }


def degrees_of_separation(store: GraphStore, start: str, end: str) -> int | None:
    """
    Hop distance as a plain optional integer.

    Returns None both for an unknown city and for an unreachable one; use
    hop_distance() when the caller must tell them apart.
    """
    result = hop_distance(store, start, end)
    if result["status"] != "ok":
        logger.warning(result["error"])
    return result["distance"]
