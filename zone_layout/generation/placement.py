"""
Placement Engine
================

Assigns integer grid coordinates to rooms by walking the connection graph
breadth-first from a seed room.

Algorithm:
1. Seed goes to (0, 0, z_hint)
2. Dequeue a room, read its connections (cardinal directions first, then
   alphabetical), and place each unvisited neighbor:
   - up/down: same x/y, z +1/-1
   - anything else: current position + unit offset * spacing
3. Rooms the BFS never reaches are packed row-major into an overflow grid
   to the east of the origin

Overflow rooms never collide with each other but may land on a BFS-placed
room; the overlap detector reports those.
"""

import logging
import math
from collections import deque
from enum import Enum
from typing import Deque, Dict, List, Optional, Sequence, Tuple

import networkx as nx

from zone_layout.constants.directions import (
    VERTICAL_DELTA,
    get_unit_offset,
    is_known_direction,
    normalize_direction,
)
from zone_layout.core.config import LayoutConfig
from zone_layout.core.definitions import LayoutPosition, Room
from zone_layout.utils.graph_utils import get_sorted_connections

logger = logging.getLogger(__name__)


class RoomState(Enum):
    UNVISITED = "unvisited"
    QUEUED = "queued"      # position assigned, connections not yet expanded
    PLACED = "placed"


class PlacementEngine:
    """
    BFS coordinate assignment for one zone.

    The engine keeps no state between calls; ``place`` can be called
    repeatedly (and from several threads) with different inputs.
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or LayoutConfig()

    def place(
        self,
        rooms: Sequence[Room],
        graph: nx.MultiDiGraph,
        seed: Room,
        spacing: int,
    ) -> Dict[int, LayoutPosition]:
        """
        Place every room.

        Args:
            rooms: All rooms of the zone, in input order
            graph: Connection graph from ``build_connection_graph``
            seed: Room to place at the origin
            spacing: Grid units per step

        Returns:
            Dict room_id -> LayoutPosition containing every room exactly once,
            in placement order (BFS order, then overflow)
        """
        positions: Dict[int, LayoutPosition] = {}
        state: Dict[int, RoomState] = {room.id: RoomState.UNVISITED for room in rooms}
        queue: Deque[Tuple[int, LayoutPosition, int]] = deque()

        start = LayoutPosition(0, 0, seed.z_hint)
        positions[seed.id] = start
        state[seed.id] = RoomState.QUEUED
        queue.append((seed.id, start, 0))
        logger.debug(f"Seed room {seed.id} at {start.as_tuple()}")

        while queue:
            room_id, pos, depth = queue.popleft()
            state[room_id] = RoomState.PLACED

            for direction, dest in get_sorted_connections(graph, room_id):
                if state.get(dest, RoomState.PLACED) is not RoomState.UNVISITED:
                    continue

                new_pos = self.step(pos, direction, spacing)
                positions[dest] = new_pos
                state[dest] = RoomState.QUEUED
                queue.append((dest, new_pos, depth + 1))
                logger.debug(
                    f"Placed room {dest} at {new_pos.as_tuple()} via {direction} "
                    f"from room {room_id} (depth {depth + 1})"
                )

        unreached = [room for room in rooms if state[room.id] is RoomState.UNVISITED]
        if unreached:
            positions.update(self.pack_overflow(unreached, spacing))

        logger.debug(
            f"Placement complete: {len(positions)} rooms, "
            f"{len(positions) - len(unreached)} connected, {len(unreached)} in overflow"
        )
        return positions

    def step(self, pos: LayoutPosition, direction: str, spacing: int) -> LayoutPosition:
        """Position one exit away from ``pos``."""
        key = normalize_direction(direction)
        if key in VERTICAL_DELTA:
            return LayoutPosition(pos.x, pos.y, pos.z + VERTICAL_DELTA[key])

        if not is_known_direction(direction):
            logger.debug(f"Unknown direction '{direction}', using default east offset")
        dx, dy = get_unit_offset(direction)
        return LayoutPosition(pos.x + dx * spacing, pos.y + dy * spacing, pos.z)

    def pack_overflow(self, rooms: List[Room], spacing: int) -> Dict[int, LayoutPosition]:
        """Pack unreachable rooms row-major into a grid east of the origin."""
        origin_x = self.config.overflow_origin_x
        if origin_x is None:
            origin_x = spacing * 5
        row_width = max(self.config.overflow_min_row_width, math.ceil(math.sqrt(len(rooms))))

        packed: Dict[int, LayoutPosition] = {}
        for index, room in enumerate(rooms):
            row, col = divmod(index, row_width)
            pos = LayoutPosition(origin_x + col * spacing, row * spacing, 0)
            packed[room.id] = pos
            logger.debug(f"Room {room.id} unreachable from seed, overflow at {pos.as_tuple()}")
        return packed

