"""
Frontier disciplines for graph traversal.

A frontier holds discovered-but-not-yet-expanded nodes. Depth-first search
takes from the end it last pushed to (stack); breadth-first search takes
from the opposite end (queue). Everything else about the two searches is
identical, so the traversal code only ever talks to this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque

from graphsearch.graph.node import Node


class Frontier(ABC):
    """Base frontier over a deque. Subclasses choose which end pop() takes from."""

    name: str = ""

    def __init__(self) -> None:
        self._items: deque[Node] = deque()

    def push(self, node: Node) -> None:
        self._items.append(node)

    @abstractmethod
    def pop(self) -> Node:
        """Remove and return the next node to expand."""
        ...

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self._items)})"


class StackFrontier(Frontier):
    """Last-in-first-out frontier (depth-first)."""

    name = "dfs"

    def pop(self) -> Node:
        return self._items.pop()


class QueueFrontier(Frontier):
    """First-in-first-out frontier (breadth-first)."""

    name = "bfs"

    def pop(self) -> Node:
        return self._items.popleft()


FRONTIERS: dict[str, type[Frontier]] = {
    StackFrontier.name: StackFrontier,
    QueueFrontier.name: QueueFrontier,
}


def get_frontier(name: str) -> Frontier:
    """
    Get a fresh, empty frontier by strategy name.

    Args:
        name: Strategy identifier (dfs, bfs)

    Returns:
        New frontier instance

    Raises:
        ValueError: If strategy name is unknown
    """
    key = name.lower()
    if key not in FRONTIERS:
        available = ", ".join(FRONTIERS.keys())
        raise ValueError(f"Unknown strategy '{name}'. Available: {available}")
    return FRONTIERS[key]()
