"""
Error kinds raised while building or querying a graph.

Absence of a path is never an error: searches return an empty path.
"""

from __future__ import annotations

from collections.abc import Sequence


class GraphError(Exception):
    """Base class for graphsearch errors."""


class MalformedInputError(GraphError, ValueError):
    """An edge record does not contain exactly two node names."""

    def __init__(self, record: Sequence[str], line_number: int | None = None) -> None:
        self.record = tuple(record)
        self.line_number = line_number
        where = f" on line {line_number}" if line_number is not None else ""
        super().__init__(
            f"Malformed edge record{where}: expected 2 fields, "
            f"got {len(self.record)} {list(self.record)!r}"
        )


class NodeNotFoundError(GraphError, KeyError):
    """A query referenced a node name that is not in the graph."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Node '{self.name}' not in graph"


class GraphFormatError(GraphError, ValueError):
    """A graph file could not be decoded as an edge list."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read graph file {path}: {reason}")
