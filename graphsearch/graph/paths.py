"""
Path reconstruction from a predecessor map.

A predecessor map records, for every node a traversal discovered, the node
it was first reached from. The start node maps to itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from graphsearch.graph.node import Node


def reconstruct_path(predecessors: Mapping[Node, Node], target: Node) -> list[Node]:
    """
    Walk predecessor links backward from target to the start node.

    Args:
        predecessors: Map of discovered node to the node it was reached from
        target: Node to build the path toward

    Returns:
        Nodes from start to target inclusive, or an empty list if target
        was never reached
    """
    if target not in predecessors:
        return []

    path: list[Node] = []
    current = target
    while True:
        path.append(current)
        previous = predecessors[current]
        if previous == current:
            break
        current = previous

    path.reverse()
    return path


@dataclass(frozen=True)
class SearchTree:
    """
    Result of one full traversal from a start node.

    Attributes:
        start: Node the traversal started from
        strategy: Frontier discipline used ("dfs" or "bfs")
        predecessors: Read-only map of reached node to predecessor
        order: Nodes in the order they were removed from the frontier
    """

    start: Node
    strategy: str
    predecessors: Mapping[Node, Node]
    order: tuple[Node, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.predecessors, MappingProxyType):
            object.__setattr__(
                self, "predecessors", MappingProxyType(dict(self.predecessors))
            )

    def reached(self, node: Node) -> bool:
        """Whether the traversal discovered this node."""
        return node in self.predecessors

    def reached_names(self) -> set[str]:
        """Names of every node in the start node's connected component."""
        return {node.name for node in self.predecessors}

    def path_to(self, target: Node) -> list[Node]:
        """Path from start to target, empty if target is unreached."""
        return reconstruct_path(self.predecessors, target)

    def __len__(self) -> int:
        return len(self.predecessors)
