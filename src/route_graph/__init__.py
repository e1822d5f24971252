"""
Route Graph - reachability and centrality over flight-route networks.

This package builds an undirected multigraph from city-to-city routes and
answers hop-distance, shortest-path and centrality questions over it with
plain breadth-first search.
"""

__version__ = "0.1.0"

from .graph_store import GraphStore, LabelIndex

__all__ = [
    "GraphStore",
    "LabelIndex",
]
