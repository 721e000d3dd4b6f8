"""
Layout Quality Metrics
======================

Scores a layout by how far apart connected rooms ended up. Lower is
better: a perfect grid layout with spacing ``s`` scores ``s``.

Only declared exits count; synthetic reverse edges added for placement are
ignored. Overlapping rooms are deliberately not penalized, since keeping
connected rooms close matters more to builders than visual separation.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

import numpy as np

from zone_layout.core.definitions import LayoutPosition, OverlapGroup, Room
from .overlaps import count_overlapping_rooms, detect_overlaps

logger = logging.getLogger(__name__)


@dataclass
class LayoutStats:
    """Summary of one layout."""
    edge_count: int
    average_edge_length: float
    overlap_count: int          # rooms beyond the first at shared coordinates
    score: float


def compute_edge_lengths(
    positions: Mapping[int, LayoutPosition],
    rooms: Sequence[Room],
) -> np.ndarray:
    """
    Euclidean length of every declared exit whose endpoints are both placed.

    Returns:
        1-D float array, one entry per measured exit, in room/exit order
    """
    starts = []
    ends = []
    for room in rooms:
        src = positions.get(room.id)
        if src is None:
            continue
        for exit_ in room.exits:
            if exit_.to_room_id is None:
                continue
            dst = positions.get(exit_.to_room_id)
            if dst is None:
                continue
            starts.append(src.as_tuple())
            ends.append(dst.as_tuple())

    if not starts:
        return np.zeros(0, dtype=float)
    deltas = np.asarray(ends, dtype=float) - np.asarray(starts, dtype=float)
    return np.linalg.norm(deltas, axis=1)


def calculate_layout_quality(
    positions: Mapping[int, LayoutPosition],
    rooms: Sequence[Room],
) -> float:
    """
    Mean declared-exit length (0.0 when nothing can be measured).

    Example:
        >>> rooms = [Room(1, exits=(Exit('east', 2),)), Room(2)]
        >>> calculate_layout_quality({1: LayoutPosition(0, 0), 2: LayoutPosition(2, 0)}, rooms)
        2.0
    """
    lengths = compute_edge_lengths(positions, rooms)
    if lengths.size == 0:
        return 0.0
    return float(lengths.mean())


def summarize_layout(
    positions: Mapping[int, LayoutPosition],
    rooms: Sequence[Room],
    overlaps: Optional[Sequence[OverlapGroup]] = None,
) -> LayoutStats:
    """Quality score plus the edge and overlap counts behind it."""
    lengths = compute_edge_lengths(positions, rooms)
    if overlaps is None:
        overlaps = detect_overlaps(positions)

    average = float(lengths.mean()) if lengths.size else 0.0
    stats = LayoutStats(
        edge_count=int(lengths.size),
        average_edge_length=average,
        overlap_count=count_overlapping_rooms(list(overlaps)),
        score=average,
    )
    logger.debug(
        f"Layout quality: avg path length: {stats.average_edge_length:.2f}, "
        f"overlaps: {stats.overlap_count}, score: {stats.score:.2f}"
    )
    return stats
