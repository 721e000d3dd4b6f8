"""
Generation Module
=================

Turns a zone's rooms into grid coordinates:
- spacing: grid spacing from zone size
- start_selector: seed room heuristic
- placement: BFS coordinate assignment and overflow packing
"""

from .spacing import (
    calculate_dynamic_spacing,
    resolve_spacing,
    MIN_SPACING,
)
from .start_selector import (
    StartSelector,
    select_start_room,
)
from .placement import (
    PlacementEngine,
    RoomState,
)

__all__ = [
    # Spacing
    'calculate_dynamic_spacing',
    'resolve_spacing',
    'MIN_SPACING',
    # Start room
    'StartSelector',
    'select_start_room',
    # Placement
    'PlacementEngine',
    'RoomState',
]
