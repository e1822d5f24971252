"""
In-memory adjacency storage for undirected route graphs.

Labels are interned into a dense integer id space once, at insertion time;
traversals work on integer ids and translate back to labels at the edge of
each handler. Parallel edges and self-loops are stored as-is.
"""

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

import networkx as nx


class LabelIndex:
    """
    Bidirectional label <-> id lookup table.

    Ids are assigned densely in first-seen order, so the i-th interned label
    always has id i.
    """

    def __init__(self) -> None:
        self._ids: dict[str, int] = {}
        self._labels: list[str] = []

    def intern(self, label: str) -> int:
        """Return the id for label, assigning the next free id if unseen."""
        node_id = self._ids.get(label)
        if node_id is None:
            node_id = len(self._labels)
            self._ids[label] = node_id
            self._labels.append(label)
        return node_id

    def id_of(self, label: str) -> int | None:
        return self._ids.get(label)

    def label_of(self, node_id: int) -> str:
        return self._labels[node_id]

    def labels(self) -> list[str]:
        return list(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._ids

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)


class GraphStore:
    """
    Undirected multigraph keyed by opaque string labels.

    A node exists only once an edge touching it has been added. Every
    add_edge() call writes both directions in the same operation, so the
    adjacency stays symmetric without any after-the-fact repair.

    Usage:
        store = GraphStore()
        store.add_edge("mumbai", "delhi")
        store.neighbors("delhi")      # ["mumbai"]
        store.neighbors("unknown")    # []
    """

    def __init__(self, index: LabelIndex | None = None):
        self.index = index if index is not None else LabelIndex()
        self._adjacency: list[list[int]] = [[] for _ in range(len(self.index))]
        self._edge_count = 0
        self._node_count = 0

    # === MUTATION (ingestion time only) ===

    def add_edge(self, u: str, v: str) -> None:
        """
        Add an undirected edge between u and v.

        Appends v to u's neighbors and u to v's neighbors, in that order.
        No deduplication: repeating an edge adds another pair of entries, and
        a self-loop adds two entries to the same list.
        """
        u_id = self._ensure(u)
        v_id = self._ensure(v)
        for node_id in {u_id, v_id}:
            if not self._adjacency[node_id]:
                self._node_count += 1
        self._adjacency[u_id].append(v_id)
        self._adjacency[v_id].append(u_id)
        self._edge_count += 1

    def add_edges(self, pairs: Iterable[tuple[str, str]]) -> None:
        for u, v in pairs:
            self.add_edge(u, v)

    def _ensure(self, label: str) -> int:
        node_id = self.index.intern(label)
        # A shared index may already know labels this store has not seen
        while len(self._adjacency) <= node_id:
            self._adjacency.append([])
        return node_id

    # === LABEL-LEVEL READS ===

    def neighbors(self, label: str) -> list[str]:
        """Neighbor labels of a node, or an empty list if it does not exist."""
        node_id = self.id_of(label)
        if node_id is None:
            return []
        return [self.index.label_of(n) for n in self._adjacency[node_id]]

    def has_node(self, label: str) -> bool:
        return self.id_of(label) is not None

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and self.has_node(label)

    def node_count(self) -> int:
        return self._node_count

    def edge_count(self) -> int:
        """Number of add_edge() calls, counting duplicates and self-loops."""
        return self._edge_count

    def labels(self) -> list[str]:
        """All node labels in first-insertion order."""
        return [self.index.label_of(n) for n in self.node_ids()]

    def adjacency_snapshot(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only view of label -> neighbor labels."""
        return MappingProxyType({
            self.index.label_of(node_id): tuple(
                self.index.label_of(n) for n in self._adjacency[node_id]
            )
            for node_id in self.node_ids()
        })

    # === ID-LEVEL READS (used by the traversal handlers) ===

    def id_of(self, label: str) -> int | None:
        """Id of label in this store, or None if the node does not exist."""
        node_id = self.index.id_of(label)
        if node_id is None or node_id >= len(self._adjacency):
            return None
        if not self._adjacency[node_id]:
            return None
        return node_id

    def label_of(self, node_id: int) -> str:
        return self.index.label_of(node_id)

    def neighbor_ids(self, node_id: int) -> list[int]:
        return self._adjacency[node_id]

    def node_ids(self) -> Iterator[int]:
        # Ids interned through a shared index but never given an edge here
        # have an empty list and are not nodes of this graph
        for node_id, adjacent in enumerate(self._adjacency):
            if adjacent:
                yield node_id

    # === EXPORT ===

    def to_networkx(self) -> nx.MultiGraph:
        """
        Export as a networkx MultiGraph.

        Each add_edge() call becomes one edge, so parallel edges and
        self-loops survive the conversion.
        """
        G = nx.MultiGraph()
        G.add_nodes_from(self.labels())
        for node_id in self.node_ids():
            label = self.index.label_of(node_id)
            seen_self = 0
            for n in self._adjacency[node_id]:
                if n == node_id:
                    # A self-loop contributes two entries for one edge
                    seen_self += 1
                    if seen_self % 2 == 0:
                        G.add_edge(label, label)
                elif n > node_id:
                    G.add_edge(label, self.index.label_of(n))
        return G

    def __repr__(self) -> str:
        return f"GraphStore(nodes={self.node_count()}, edges={self.edge_count()})"
