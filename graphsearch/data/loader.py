"""
Edge list loading for graph construction.

Two on-disk formats are supported:
- Text: one edge per line, two whitespace-separated node names
- Msgpack: a packed array of two-element [name, name] arrays

Usage:
    from graphsearch.data.loader import load_graph

    graph = load_graph("data/sample_graph.txt")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

import msgpack

from graphsearch.config import MSGPACK_SUFFIX
from graphsearch.exceptions import GraphFormatError, MalformedInputError
from graphsearch.graph.graph import Graph

logger = logging.getLogger(__name__)


def parse_edge_lines(lines: Iterable[str]) -> list[tuple[str, str]]:
    """
    Tokenize edge-list lines into (name, name) pairs.

    Blank lines are skipped.

    Raises:
        MalformedInputError: If a non-blank line does not hold exactly two names
    """
    edges: list[tuple[str, str]] = []
    for line_number, line in enumerate(lines, start=1):
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 2:
            raise MalformedInputError(fields, line_number=line_number)
        edges.append((fields[0], fields[1]))
    return edges


def _read_text(path: Path) -> list[tuple[str, str]]:
    try:
        with open(path, encoding="utf-8") as f:
            return parse_edge_lines(f)
    except UnicodeDecodeError as e:
        raise GraphFormatError(path, f"not valid UTF-8 ({e.reason})") from e


def _read_msgpack(path: Path) -> list[tuple[str, str]]:
    try:
        with open(path, "rb") as f:
            records = msgpack.unpack(f, raw=False)
    except (msgpack.exceptions.UnpackException, ValueError) as e:
        raise GraphFormatError(path, f"corrupt msgpack data ({e})") from e

    if not isinstance(records, list):
        raise GraphFormatError(
            path, f"expected an array of edges, got {type(records).__name__}"
        )

    edges: list[tuple[str, str]] = []
    for index, record in enumerate(records, start=1):
        if not isinstance(record, list) or len(record) != 2:
            fields = record if isinstance(record, list) else [record]
            raise MalformedInputError([repr(x) for x in fields], line_number=index)
        first, second = record
        if not isinstance(first, str) or not isinstance(second, str):
            raise GraphFormatError(
                path, f"edge {index} has non-string node names {record!r}"
            )
        edges.append((first, second))
    return edges


def load_edges(path: str | Path) -> list[tuple[str, str]]:
    """
    Read an edge list from disk.

    Files ending in .msgpack are read as msgpack snapshots, anything else
    as text.

    Raises:
        FileNotFoundError: If the file does not exist
        MalformedInputError: If a record does not hold exactly two names
        GraphFormatError: If the file cannot be decoded as an edge list
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Graph file not found: {path}")

    logger.info(f"Loading edges from {path}...")
    if path.suffix == MSGPACK_SUFFIX:
        edges = _read_msgpack(path)
    else:
        edges = _read_text(path)
    logger.info(f"Loaded {len(edges):,} edges")
    return edges


def load_graph(path: str | Path) -> Graph:
    """Load an edge list file and build a Graph from it."""
    return Graph.build(load_edges(path))


def save_edges(edges: Iterable[Sequence[str]], path: str | Path) -> int:
    """
    Write edges as a msgpack snapshot.

    Returns:
        Number of edges written

    Raises:
        MalformedInputError: If a record does not hold exactly two names
    """
    records: list[list[str]] = []
    for index, record in enumerate(edges, start=1):
        if len(record) != 2:
            raise MalformedInputError(list(record), line_number=index)
        records.append([record[0], record[1]])

    path = Path(path)
    with open(path, "wb") as f:
        msgpack.pack(records, f)
    logger.info(f"Saved {len(records):,} edges to {path}")
    return len(records)
