"""
Utility Module
==============

Graph helpers for the zone layout engine.
"""

from .graph_utils import (
    build_connection_graph,
    has_connection,
    connection_sort_key,
    get_sorted_connections,
    count_synthetic_edges,
)

__all__ = [
    'build_connection_graph',
    'has_connection',
    'connection_sort_key',
    'get_sorted_connections',
    'count_synthetic_edges',
]
