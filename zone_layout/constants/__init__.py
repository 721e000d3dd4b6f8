"""
Constants Module
================

Direction lookup tables shared by the layout engine.
"""

from .directions import (
    CANONICAL_DIRECTIONS,
    CARDINAL_DIRECTIONS,
    VERTICAL_DIRECTIONS,
    DIRECTION_OFFSETS,
    DEFAULT_OFFSET,
    VERTICAL_DELTA,
    REVERSE_DIRECTIONS,
    normalize_direction,
    is_known_direction,
    is_cardinal,
    is_vertical,
    get_unit_offset,
    get_reverse_direction,
    directions_match,
)

__all__ = [
    'CANONICAL_DIRECTIONS',
    'CARDINAL_DIRECTIONS',
    'VERTICAL_DIRECTIONS',
    'DIRECTION_OFFSETS',
    'DEFAULT_OFFSET',
    'VERTICAL_DELTA',
    'REVERSE_DIRECTIONS',
    'normalize_direction',
    'is_known_direction',
    'is_cardinal',
    'is_vertical',
    'get_unit_offset',
    'get_reverse_direction',
    'directions_match',
]
