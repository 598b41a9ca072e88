"""
Graph Search.

Builds an undirected graph from an edge list of named nodes and answers
reachability and path queries with depth-first and breadth-first search.
"""

__version__ = "0.1.0"
