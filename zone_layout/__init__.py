"""
Zone Auto-Layout
================

Converts a zone's rooms and direction-labeled exits into integer grid
coordinates for the zone editor.

Components:
    - constants: direction offsets and reverse pairs
    - core: room/exit/position types and LayoutConfig
    - utils: connection graph construction (NetworkX)
    - generation: spacing, start room selection, BFS placement
    - evaluation: overlaps, quality score, one-way exits
    - pipeline: AutoLayoutPipeline tying the stages together
    - data: JSON loaders for world files and layout requests
"""

from .core import (
    Exit,
    Room,
    LayoutRequest,
    LayoutPosition,
    OverlapGroup,
    OneWayReason,
    OneWayExitRecord,
    LayoutResult,
    LayoutConfig,
    CentralityWeights,
)
from .pipeline import AutoLayoutPipeline, auto_layout_rooms

__version__ = "0.1.0"

__all__ = [
    'Exit',
    'Room',
    'LayoutRequest',
    'LayoutPosition',
    'OverlapGroup',
    'OneWayReason',
    'OneWayExitRecord',
    'LayoutResult',
    'LayoutConfig',
    'CentralityWeights',
    'AutoLayoutPipeline',
    'auto_layout_rooms',
]
