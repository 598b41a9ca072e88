#!/usr/bin/env python3
"""
Graph Search CLI - Query reachability and paths in an edge-list graph.

Usage:
    python scripts/query.py --start A --target C
    python scripts/query.py --start A --target C --strategy dfs
    python scripts/query.py --start A --target G --reachable
    python scripts/query.py --graph data/graph.msgpack --start A --neighbors
    python scripts/query.py --list

Strategies:
    bfs - Breadth-first search (shortest path by edge count)
    dfs - Depth-first search (any path)

Exit codes:
    0 - Path found / nodes reachable / listing printed
    1 - No path exists
    2 - Input error (missing file, malformed edge, unknown node)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from graphsearch.config import (  # noqa: E402
    DEFAULT_GRAPH_PATH,
    DEFAULT_STRATEGY,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
)
from graphsearch.data import load_graph  # noqa: E402
from graphsearch.exceptions import GraphError  # noqa: E402
from graphsearch.graph import TraversalEngine  # noqa: E402
from graphsearch.graph.frontier import FRONTIERS  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Query paths in an undirected graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--graph",
        type=Path,
        default=DEFAULT_GRAPH_PATH,
        help=f"Edge list file, text or .msgpack (default: {DEFAULT_GRAPH_PATH})",
    )
    parser.add_argument(
        "--start",
        type=str,
        help="Name of the node to search from",
    )
    parser.add_argument(
        "--target",
        type=str,
        help="Name of the node to search for",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        default=DEFAULT_STRATEGY,
        choices=list(FRONTIERS.keys()),
        help=f"Traversal strategy (default: {DEFAULT_STRATEGY})",
    )
    parser.add_argument(
        "--reachable",
        action="store_true",
        help="Only report whether target is reachable from start",
    )
    parser.add_argument(
        "--neighbors",
        action="store_true",
        help="List the immediate neighbors of start",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print every node with its adjacency list",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    if not args.list and not args.start:
        parser.error("--start is required unless --list is given")
    if args.reachable and not args.target:
        parser.error("--reachable requires --target")
    return args


def run(args: argparse.Namespace) -> int:
    """Execute the query described by args and print the result."""
    graph = load_graph(args.graph)
    engine = TraversalEngine(graph)

    if args.list:
        print(f"Graph: {len(graph)} nodes, {graph.edge_count()} edges")
        print(graph.describe())
        return 0

    if args.neighbors:
        neighbors = engine.all_neighbors(args.start)
        print(f"Neighbors of '{args.start}' ({len(neighbors)}):")
        for node in neighbors:
            print(f"  {node.name}")
        return 0

    if args.reachable:
        found = engine.reachable(args.start, args.target, strategy=args.strategy)
        verdict = "reachable" if found else "NOT reachable"
        print(f"'{args.target}' is {verdict} from '{args.start}'")
        return 0 if found else 1

    if not args.target:
        tree = engine.explore(args.start, args.strategy)
        names = sorted(tree.reached_names())
        print(f"Reached {len(names)} nodes from '{args.start}' ({tree.strategy.upper()}):")
        for name in names:
            print(f"  {name}")
        return 0

    path = engine.find_path(args.start, args.target, args.strategy)
    if not path:
        print(f"No path from '{args.start}' to '{args.target}'")
        return 1

    print(f"{args.strategy.upper()} path ({len(path) - 1} edges):")
    for i, node in enumerate(path):
        marker = " (START)" if i == 0 else " (TARGET)" if i == len(path) - 1 else ""
        print(f"  {i}. {node.name}{marker}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    try:
        return run(args)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
