"""
Graph vertex with a name and an ordered adjacency list.
"""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    """
    A named vertex of an undirected graph.

    Equality and hashing use the name only, so a node compares equal to any
    other Node carrying the same name regardless of object identity.

    Attributes:
        name: Unique identifier of the node
        neighbors: Adjacent nodes in edge-insertion order (duplicates kept)
    """

    __slots__ = ("_name", "_neighbors")

    def __init__(self, name: str) -> None:
        self._name = name
        self._neighbors: list[Node] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def neighbors(self) -> tuple[Node, ...]:
        return tuple(self._neighbors)

    def add_neighbor(self, other: Node) -> None:
        """Append one adjacency link. Only called while a Graph is being built."""
        self._neighbors.append(other)

    def iter_neighbors(self) -> Iterator[Node]:
        """Iterate neighbors in adjacency order without copying."""
        return iter(self._neighbors)

    @property
    def degree(self) -> int:
        return len(self._neighbors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        nbrs = ", ".join(n.name for n in self._neighbors)
        return f"{self._name}: {nbrs}"

    def __repr__(self) -> str:
        return f"Node(name={self._name!r})"
