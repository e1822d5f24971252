"""
Shortest-path handlers built on the BFS core.

shortest_path() returns exactly one path per pair: the one traced through the
single predecessor each node records during BFS. all_shortest_paths() uses a
layer-synchronous BFS that keeps every predecessor at minimal distance, and
enumerates all of them.
"""

import logging
from itertools import islice
from typing import Iterator

from ..graph_store import GraphStore
from .base import AllShortestPathsResult, ShortestPathResult
from .traversal import _bfs_ids

logger = logging.getLogger(__name__)


def reconstruct_path(
    predecessors: dict[str, str],
    start: str,
    end: str,
) -> list[str]:
    """
    Walk the predecessor map backward from end to start.

    Args:
        predecessors: label -> label it was first reached from (as from bfs())
        start: Label the search began at
        end: Label to trace back from

    Returns:
        Labels from start to end inclusive, or [] if end does not lead back
        to start.
    """
    path = [end]
    current = end
    while current != start:
        parent = predecessors.get(current)
        if parent is None:
            return []
        path.append(parent)
        current = parent
    path.reverse()
    return path


def _reconstruct_ids(predecessors: dict[int, int], start_id: int, end_id: int) -> list[int]:
    path = [end_id]
    current = end_id
    while current != start_id:
        current = predecessors[current]
        path.append(current)
    path.reverse()
    return path


def shortest_path(store: GraphStore, start: str, end: str) -> ShortestPathResult:
    """
    Find one shortest path between two nodes.

    BFS from start until end is dequeued, then follow predecessors back.
    Ties between equally short routes are broken by edge insertion order:
    whichever neighbor entry is processed first wins.

    Args:
        store: Graph to search
        start: Start label
        end: Target label

    Returns:
        dict with:
            - path: labels from start to end inclusive (None if no path)
            - distance: hop count (None if no path)
            - nodes_explored: nodes dequeued by the search
            - status: "ok", "node_not_found" or "disconnected"
            - error: message if no path found

    Example:
        >>> result = shortest_path(store, "delhi", "chennai")
        >>> result["path"]
        ['delhi', 'mumbai', 'hyderabad', 'chennai']
    """
    start_id = store.id_of(start)
    end_id = store.id_of(end)

    if start_id is None or end_id is None:
        missing = start if start_id is None else end
        return {
            "path": None,
            "distance": None,
            "nodes_explored": 0,
            "status": "node_not_found",
            "error": f"No path found: node {missing} not in graph",
        }

    _, predecessors, order, found = _bfs_ids(store, start_id, end_id)

    if not found:
        return {
            "path": None,
            "distance": None,
            "nodes_explored": len(order),
            "status": "disconnected",
            "error": "No path found between start and end nodes",
        }

    path = [store.label_of(n) for n in _reconstruct_ids(predecessors, start_id, end_id)]
    return {
        "path": path,
        "distance": len(path) - 1,
        "nodes_explored": len(order),
        "status": "ok",
        "error": None,
    }


def all_shortest_paths(
    store: GraphStore,
    start: str,
    end: str,
    max_paths: int | None = None,
) -> AllShortestPathsResult:
    """
    Find every shortest path between two nodes.

    Expands one full frontier layer at a time and records every predecessor
    found at the minimal distance before committing the layer as visited.
    Parallel edges do not produce duplicate paths.

    Args:
        store: Graph to search
        start: Start label
        end: Target label
        max_paths: Maximum number of paths to return (None = all)

    Returns:
        dict with:
            - paths: list of paths (each a list of labels)
            - distance: common hop count of all paths
            - path_count: number of paths returned
            - status: "ok", "node_not_found" or "disconnected"
            - error: message if no paths found

    Raises:
        ValueError: If max_paths is less than 1
    """
    if max_paths is not None and max_paths < 1:
        raise ValueError(f"max_paths must be positive, got {max_paths}")

    start_id = store.id_of(start)
    end_id = store.id_of(end)

    if start_id is None or end_id is None:
        missing = start if start_id is None else end
        return {
            "paths": [],
            "distance": None,
            "path_count": 0,
            "status": "node_not_found",
            "error": f"No path found: node {missing} not in graph",
        }

    distances: dict[int, int] = {start_id: 0}
    parents: dict[int, list[int]] = {start_id: []}
    frontier = [start_id]
    depth = 0

    while frontier and end_id not in distances:
        depth += 1
        next_frontier: list[int] = []
        for node in frontier:
            for neighbor in store.neighbor_ids(node):
                seen = distances.get(neighbor)
                if seen is None:
                    distances[neighbor] = depth
                    parents[neighbor] = [node]
                    next_frontier.append(neighbor)
                elif seen == depth and node not in parents[neighbor]:
                    parents[neighbor].append(node)
        frontier = next_frontier

    if end_id not in distances:
        return {
            "paths": [],
            "distance": None,
            "path_count": 0,
            "status": "disconnected",
            "error": "No path found",
        }

    paths = _enumerate_paths(parents, start_id, end_id)
    if max_paths is not None:
        paths = islice(paths, max_paths)

    label = store.label_of
    all_paths = [[label(n) for n in path] for path in paths]
    logger.debug("Found %d shortest paths %s -> %s", len(all_paths), start, end)

    return {
        "paths": all_paths,
        "distance": distances[end_id],
        "path_count": len(all_paths),
        "status": "ok",
        "error": None,
    }


def _enumerate_paths(
    parents: dict[int, list[int]],
    start_id: int,
    end_id: int,
) -> Iterator[list[int]]:
    """Yield every start -> end path through the parent DAG."""
    # Iterative DFS from end back to start; stack holds partial reversed paths
    stack: list[list[int]] = [[end_id]]
    while stack:
        partial = stack.pop()
        head = partial[-1]
        if head == start_id:
            yield partial[::-1]
            continue
        # Reverse so the first-recorded parent is explored first
        for parent in reversed(parents[head]):
            stack.append(partial + [parent])
