"""
Core Module
===========

Data types and configuration for the zone layout engine.
"""

from .definitions import (
    Exit,
    Room,
    LayoutRequest,
    LayoutPosition,
    OverlapGroup,
    OneWayReason,
    OneWayExitRecord,
    LayoutResult,
)
from .config import (
    LayoutConfig,
    CentralityWeights,
    SPACING_DYNAMIC,
    SPACING_FIXED,
    DEFAULT_SPAWN_ROOM_ID,
    DEFAULT_CONVENTIONAL_ROOM_IDS,
)

__all__ = [
    # Definitions
    'Exit',
    'Room',
    'LayoutRequest',
    'LayoutPosition',
    'OverlapGroup',
    'OneWayReason',
    'OneWayExitRecord',
    'LayoutResult',
    # Configuration
    'LayoutConfig',
    'CentralityWeights',
    'SPACING_DYNAMIC',
    'SPACING_FIXED',
    'DEFAULT_SPAWN_ROOM_ID',
    'DEFAULT_CONVENTIONAL_ROOM_IDS',
]
