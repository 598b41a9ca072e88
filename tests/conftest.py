"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from graphsearch.graph import Graph, TraversalEngine


@pytest.fixture
def diamond_edges() -> list[tuple[str, str]]:
    """Return a four-node cycle A-B-C-D with two equal-length routes A to C."""
    return [("A", "B"), ("B", "C"), ("A", "D"), ("D", "C")]


@pytest.fixture
def diamond_graph(diamond_edges: list[tuple[str, str]]) -> Graph:
    """Return the diamond graph."""
    return Graph.build(diamond_edges)


@pytest.fixture
def chain_and_island_edges() -> list[tuple[str, str]]:
    """Return a long chain with a shortcut, plus a disconnected pair."""
    return [
        ("S", "A"),
        ("A", "B"),
        ("B", "C"),
        ("C", "T"),
        ("S", "T"),
        ("T", "U"),
        ("X", "Y"),
    ]


@pytest.fixture
def engine(chain_and_island_edges: list[tuple[str, str]]) -> TraversalEngine:
    """Return an engine over the chain-and-island graph."""
    return TraversalEngine(Graph.build(chain_and_island_edges))


@pytest.fixture
def edge_file(tmp_path: Path) -> Path:
    """Write a small text edge list and return its path."""
    path = tmp_path / "edges.txt"
    path.write_text("A B\nB C\n\nA D\nD C\nG H\n", encoding="utf-8")
    return path
