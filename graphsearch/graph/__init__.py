"""
Graph module.

Provides the undirected graph model and the traversal engine:
- Node / Graph: Named vertices with symmetric adjacency
- TraversalEngine: DFS/BFS reachability and path finding
- reconstruct_path / SearchTree: Paths from a predecessor map
"""

from graphsearch.graph.frontier import (
    Frontier,
    QueueFrontier,
    StackFrontier,
    get_frontier,
)
from graphsearch.graph.graph import Graph
from graphsearch.graph.node import Node
from graphsearch.graph.paths import SearchTree, reconstruct_path
from graphsearch.graph.traversal import TraversalEngine

__all__ = [
    "Frontier",
    "Graph",
    "Node",
    "QueueFrontier",
    "SearchTree",
    "StackFrontier",
    "TraversalEngine",
    "get_frontier",
    "reconstruct_path",
]
