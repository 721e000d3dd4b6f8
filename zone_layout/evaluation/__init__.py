"""
Evaluation Module
=================

Post-placement analysis of a layout:
- Overlap detection (rooms sharing a coordinate)
- Quality scoring (mean declared-exit length)
- One-way exit detection (asymmetric world data)
"""

from .overlaps import (
    detect_overlaps,
    count_overlapping_rooms,
    resolve_overlaps,
)
from .quality import (
    LayoutStats,
    compute_edge_lengths,
    calculate_layout_quality,
    summarize_layout,
)
from .one_way import (
    detect_one_way_exits,
)

__all__ = [
    # Overlaps
    'detect_overlaps',
    'count_overlapping_rooms',
    'resolve_overlaps',
    # Quality
    'LayoutStats',
    'compute_edge_lengths',
    'calculate_layout_quality',
    'summarize_layout',
    # One-way exits
    'detect_one_way_exits',
]
