"""
Undirected graph keyed by node name.

Usage:
    from graphsearch.graph import Graph

    graph = Graph.build([("A", "B"), ("B", "C")])
    graph.contains("A")      # True
    graph.all_names()        # {"A", "B", "C"}
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from graphsearch.exceptions import MalformedInputError, NodeNotFoundError
from graphsearch.graph.node import Node

logger = logging.getLogger(__name__)


class Graph:
    """
    Read-only undirected graph built once from an edge list.

    Every node referenced by a neighbor link is also stored in the name
    mapping, and every link is recorded on both endpoints.

    Attributes:
        nodes: Dict mapping node name to Node (creation order)
    """

    def __init__(self, nodes: dict[str, Node]) -> None:
        self._nodes = nodes

    @classmethod
    def build(cls, edges: Iterable[Sequence[str]]) -> Graph:
        """
        Build a graph from (name, name) pairs.

        Args:
            edges: Edge records, each holding exactly two node names

        Returns:
            The constructed graph

        Raises:
            MalformedInputError: If a record does not have exactly two fields.
                No graph is returned in that case.
        """
        nodes: dict[str, Node] = {}
        edge_count = 0

        for record in edges:
            if isinstance(record, str):
                raise MalformedInputError([record])
            try:
                fields = tuple(record)
            except TypeError:
                raise MalformedInputError([repr(record)]) from None
            if len(fields) != 2:
                raise MalformedInputError(fields)

            first, second = fields
            n1 = nodes.get(first)
            if n1 is None:
                n1 = nodes[first] = Node(first)
            n2 = nodes.get(second)
            if n2 is None:
                n2 = nodes[second] = Node(second)

            n1.add_neighbor(n2)
            n2.add_neighbor(n1)
            edge_count += 1

        logger.info(f"Built graph with {len(nodes):,} nodes and {edge_count:,} edges")
        return cls(nodes)

    # =========================================================================
    # Lookups
    # =========================================================================

    def contains(self, name: str) -> bool:
        """Check if a node with this name exists."""
        return name in self._nodes

    def get_node(self, name: str) -> Node:
        """Get node by name, raising NodeNotFoundError if absent."""
        try:
            return self._nodes[name]
        except KeyError:
            raise NodeNotFoundError(name) from None

    def all_names(self) -> set[str]:
        """All node names."""
        return set(self._nodes)

    def edge_count(self) -> int:
        """Number of undirected edges, counting duplicates and self-loops once each."""
        # A self-loop adds two entries to one list, an ordinary edge one to each of two
        return sum(node.degree for node in self._nodes.values()) // 2

    # =========================================================================
    # Display
    # =========================================================================

    def describe(self) -> str:
        """One line per node: ``name: neighbor, neighbor, ...``."""
        return "\n".join(str(node) for node in self._nodes.values())

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={self.edge_count()})"

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())
