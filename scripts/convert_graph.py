#!/usr/bin/env python3
"""
Convert a text edge list into a msgpack snapshot.

Usage:
    python scripts/convert_graph.py data/sample_graph.txt data/sample_graph.msgpack
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from graphsearch.config import LOG_DATE_FORMAT, LOG_FORMAT  # noqa: E402
from graphsearch.data import load_edges, save_edges  # noqa: E402
from graphsearch.exceptions import GraphError  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Convert an edge list to msgpack")
    parser.add_argument("source", type=Path, help="Text edge list to read")
    parser.add_argument("dest", type=Path, help="Msgpack file to write")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    try:
        edges = load_edges(args.source)
    except (FileNotFoundError, GraphError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    count = save_edges(edges, args.dest)
    print(f"Wrote {count:,} edges to {args.dest}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
