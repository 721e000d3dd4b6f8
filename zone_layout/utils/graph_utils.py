"""
Zone Graph Utilities
====================

Builds the connection graph the layout BFS walks over.

World data stores exits one-directionally: room A may list ``north -> B``
while B lists nothing back. For placement we want to reach B from A *and*
A from B, so every declared exit whose reverse is missing gets a synthetic
reverse edge.

The graph is a NetworkX MultiDiGraph:
- nodes are room ids, with the Room stored under the ``room`` attribute
- edges carry ``direction`` (the exit label) and ``synthetic`` (bool)
- two rooms may be linked by several exits, hence the multigraph

Usage:
    from zone_layout.utils.graph_utils import build_connection_graph

    G = build_connection_graph(rooms)
    for direction, dest in get_sorted_connections(G, room_id):
        ...
"""

import logging
from typing import Iterable, List, Tuple

import networkx as nx

from zone_layout.constants.directions import (
    get_reverse_direction,
    directions_match,
    is_cardinal,
)
from zone_layout.core.definitions import Room

logger = logging.getLogger(__name__)


# ==========================================
# GRAPH CONSTRUCTION
# ==========================================

def build_connection_graph(
    rooms: Iterable[Room],
    infer_reverse: bool = True,
) -> nx.MultiDiGraph:
    """
    Convert rooms and their declared exits into a connection graph.

    Exits without a destination, and exits pointing at rooms outside the
    given set, are left out of the graph. The Room records themselves are
    untouched, so one-way detection still sees them.

    Args:
        rooms: Rooms of one zone, in input order
        infer_reverse: Add a synthetic B->A edge labeled reverse(d) for every
            declared A->B exit via d that has no matching return exit

    Returns:
        MultiDiGraph with one node per room and one edge per usable exit.
        Each edge carries an ``order`` index: declared exits in input order,
        then synthetic edges. Traversal sorts on it, not on adjacency order.

    Example:
        >>> a = Room(1, exits=(Exit('north', 2),))
        >>> b = Room(2)
        >>> G = build_connection_graph([a, b])
        >>> get_sorted_connections(G, 2)
        [('south', 1)]
    """
    rooms = list(rooms)
    G = nx.MultiDiGraph()

    for room in rooms:
        G.add_node(room.id, room=room)

    declared = 0
    for room in rooms:
        for exit_ in room.exits:
            if not exit_.has_destination:
                continue
            if exit_.to_room_id not in G:
                logger.debug(
                    f"Unresolved exit target: room {room.id} {exit_.direction} -> "
                    f"{exit_.to_room_id} (not in room set)"
                )
                continue
            G.add_edge(
                room.id, exit_.to_room_id,
                direction=exit_.direction, synthetic=False, order=declared,
            )
            declared += 1

    synthesized = 0
    if infer_reverse:
        for room in rooms:
            for exit_ in room.exits:
                if not exit_.has_destination or exit_.to_room_id not in G:
                    continue
                reverse = get_reverse_direction(exit_.direction)
                if reverse is None:
                    continue
                if has_connection(G, exit_.to_room_id, room.id, reverse):
                    continue
                G.add_edge(
                    exit_.to_room_id, room.id,
                    direction=reverse, synthetic=True, order=declared + synthesized,
                )
                synthesized += 1

    logger.debug(
        f"Built connection graph: {G.number_of_nodes()} rooms, "
        f"{declared} declared exits -> {declared + synthesized} total connections"
    )
    return G


def has_connection(G: nx.MultiDiGraph, source: int, target: int, direction: str) -> bool:
    """Check for a source->target edge whose label matches ``direction`` (any casing)."""
    edges = G.get_edge_data(source, target)
    if not edges:
        return False
    return any(directions_match(attrs.get('direction'), direction) for attrs in edges.values())


# ==========================================
# TRAVERSAL HELPERS
# ==========================================

def connection_sort_key(direction: str) -> Tuple[bool, str]:
    """Cardinal directions first, then alphabetical (case-insensitive)."""
    return (not is_cardinal(direction), direction.lower())


def get_sorted_connections(G: nx.MultiDiGraph, node: int) -> List[Tuple[str, int]]:
    """
    Get (direction, destination) pairs out of a node in BFS order.

    Ties on the label fall back to the edge's ``order`` index, so equal labels
    keep declared-before-synthetic order. MultiDiGraph groups out-edges by
    neighbor, so adjacency order alone is not enough.
    """
    edges = [
        (attrs.get('direction', ''), dest, attrs.get('order', 0))
        for _, dest, attrs in G.out_edges(node, data=True)
    ]
    edges.sort(key=lambda item: (connection_sort_key(item[0]), item[2]))
    return [(direction, dest) for direction, dest, _ in edges]


def count_synthetic_edges(G: nx.MultiDiGraph) -> int:
    return sum(1 for _, _, synthetic in G.edges(data='synthetic') if synthetic)
