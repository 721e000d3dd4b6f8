"""Coordinate collision detection for placed rooms."""

import logging
from typing import Dict, List, Mapping, Tuple

from zone_layout.core.definitions import LayoutPosition, OverlapGroup

logger = logging.getLogger(__name__)


def detect_overlaps(positions: Mapping[int, LayoutPosition]) -> List[OverlapGroup]:
    """
    Group rooms that share an identical (x, y, z).

    Args:
        positions: room_id -> LayoutPosition

    Returns:
        One OverlapGroup per shared coordinate, in the order the coordinate
        was first seen; room ids within a group keep map order
    """
    by_position: Dict[Tuple[int, int, int], List[int]] = {}
    for room_id, pos in positions.items():
        by_position.setdefault(pos.as_tuple(), []).append(room_id)

    overlaps = [
        OverlapGroup(room_ids=room_ids, position=LayoutPosition(*key))
        for key, room_ids in by_position.items()
        if len(room_ids) > 1
    ]

    for group in overlaps:
        logger.debug(f"Overlap at {group.position.as_tuple()}: rooms {group.room_ids}")
    logger.debug(f"Checked {len(positions)} positions, {len(overlaps)} overlap groups")
    return overlaps


def count_overlapping_rooms(overlaps: List[OverlapGroup]) -> int:
    """Rooms beyond the first at each shared coordinate."""
    return sum(group.count - 1 for group in overlaps)


def resolve_overlaps(positions: Mapping[int, LayoutPosition]) -> Dict[int, LayoutPosition]:
    """
    Overlap resolution hook.

    Overlapping rooms are accepted as-is, so this returns an unchanged copy;
    the editor lets builders separate them by hand.
    """
    return dict(positions)
