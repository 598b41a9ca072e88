"""
Data loading module.

Reads edge lists from text or msgpack files and builds graphs from them.

Usage:
    from graphsearch.data import load_graph

    graph = load_graph("data/sample_graph.txt")
"""

from graphsearch.data.loader import load_edges, load_graph, parse_edge_lines, save_edges

__all__ = ["load_edges", "load_graph", "parse_edge_lines", "save_edges"]
