"""
Depth-first and breadth-first traversal over a Graph.

Both searches share one algorithm parameterized by frontier discipline.
All working state (frontier, predecessor map, result path) is created
fresh inside each call, so an engine can be queried any number of times.

Usage:
    from graphsearch.graph import Graph, TraversalEngine

    engine = TraversalEngine(Graph.build(edges))
    engine.reachable("A", "C")          # True
    engine.search_bfs("A", "C")         # [Node('A'), Node('B'), Node('C')]
    tree = engine.explore("A", "dfs")   # answers path_to() for any node
"""

from __future__ import annotations

import logging

from graphsearch.config import DEFAULT_STRATEGY
from graphsearch.graph.frontier import get_frontier
from graphsearch.graph.graph import Graph
from graphsearch.graph.node import Node
from graphsearch.graph.paths import SearchTree

logger = logging.getLogger(__name__)


class TraversalEngine:
    """
    Answers reachability and path queries against a read-only Graph.

    The graph is the only state the engine holds. Node lookups raise
    NodeNotFoundError before any traversal starts.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    @property
    def graph(self) -> Graph:
        return self._graph

    # =========================================================================
    # Reachability
    # =========================================================================

    def reachable(self, start: str, finish: str, strategy: str = "dfs") -> bool:
        """
        Check whether any path connects start and finish.

        Stops as soon as finish is removed from the frontier.

        Args:
            start: Name of the node to search from
            finish: Name of the node to look for
            strategy: Frontier discipline, "dfs" (default) or "bfs"

        Returns:
            True if a path exists, False otherwise

        Raises:
            NodeNotFoundError: If either name is not in the graph
        """
        start_node = self._graph.get_node(start)
        finish_node = self._graph.get_node(finish)

        frontier = get_frontier(strategy)
        frontier.push(start_node)
        visited = {start_node}

        while frontier:
            current = frontier.pop()
            if current == finish_node:
                logger.debug(
                    f"'{finish}' reachable from '{start}' ({len(visited)} nodes discovered)"
                )
                return True
            for nbr in current.iter_neighbors():
                if nbr not in visited:
                    visited.add(nbr)
                    frontier.push(nbr)

        logger.debug(f"'{finish}' not reachable from '{start}' ({len(visited)} nodes discovered)")
        return False

    # =========================================================================
    # Full traversals
    # =========================================================================

    def explore(self, start: str, strategy: str = DEFAULT_STRATEGY) -> SearchTree:
        """
        Visit every node reachable from start, recording predecessors.

        Args:
            start: Name of the node to search from
            strategy: Frontier discipline, "dfs" or "bfs"

        Returns:
            SearchTree over the start node's connected component

        Raises:
            NodeNotFoundError: If start is not in the graph
            ValueError: If strategy is unknown
        """
        start_node = self._graph.get_node(start)

        frontier = get_frontier(strategy)
        frontier.push(start_node)

        # Start maps to itself; presence in this map marks a node visited
        predecessors: dict[Node, Node] = {start_node: start_node}
        order: list[Node] = []

        while frontier:
            current = frontier.pop()
            order.append(current)
            for nbr in current.iter_neighbors():
                if nbr not in predecessors:
                    predecessors[nbr] = current
                    frontier.push(nbr)

        logger.debug(
            f"{frontier.name.upper()} from '{start}' reached {len(predecessors):,} nodes"
        )
        return SearchTree(
            start=start_node,
            strategy=frontier.name,
            predecessors=predecessors,
            order=tuple(order),
        )

    def search_dfs(self, start: str, finish: str | None = None) -> list[Node]:
        """
        Depth-first path from start to finish.

        Any path found is valid but not necessarily shortest. With no
        finish, the path to start itself (``[start]``) is returned.

        Raises:
            NodeNotFoundError: If start or finish is not in the graph
        """
        return self._search(start, finish, "dfs")

    def search_bfs(self, start: str, finish: str | None = None) -> list[Node]:
        """
        Breadth-first path from start to finish.

        The path is shortest by edge count. With no finish, the path to
        start itself (``[start]``) is returned.

        Raises:
            NodeNotFoundError: If start or finish is not in the graph
        """
        return self._search(start, finish, "bfs")

    def find_path(
        self, start: str, finish: str, strategy: str = DEFAULT_STRATEGY
    ) -> list[Node]:
        """Path from start to finish using the named strategy; empty if none."""
        return self._search(start, finish, strategy)

    def _search(self, start: str, finish: str | None, strategy: str) -> list[Node]:
        # Resolve finish before traversing so a bad name fails fast
        target = self._graph.get_node(start if finish is None else finish)
        tree = self.explore(start, strategy)
        path = tree.path_to(target)

        if path:
            logger.debug(
                f"{strategy.upper()} path ({len(path) - 1} edges): "
                f"{' -> '.join(n.name for n in path)}"
            )
        else:
            logger.debug(f"{strategy.upper()}: no path from '{start}' to '{target.name}'")
        return path

    # =========================================================================
    # Adjacency
    # =========================================================================

    def all_neighbors(self, name: str) -> list[Node]:
        """Immediate neighbors of a node, in adjacency order."""
        return list(self._graph.get_node(name).neighbors)
