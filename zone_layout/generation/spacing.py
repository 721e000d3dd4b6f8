"""Grid spacing policy: bigger zones get more room between neighbors."""

import logging
from typing import Optional

from zone_layout.core.config import LayoutConfig, SPACING_FIXED

logger = logging.getLogger(__name__)

MIN_SPACING = 2

# (max room count, spacing), checked in order
SPACING_TIERS = (
    (50, 2),
    (100, 3),
)
LARGE_ZONE_SPACING = 4


def calculate_dynamic_spacing(room_count: int) -> int:
    """
    Grid units between adjacent rooms for a zone of ``room_count`` rooms.

    Examples:
        >>> calculate_dynamic_spacing(10)
        2
        >>> calculate_dynamic_spacing(51)
        3
        >>> calculate_dynamic_spacing(101)
        4
    """
    for max_rooms, spacing in SPACING_TIERS:
        if room_count <= max_rooms:
            return max(spacing, MIN_SPACING)
    return LARGE_ZONE_SPACING


def resolve_spacing(room_count: int, config: Optional[LayoutConfig] = None) -> int:
    """Spacing for a run, honoring a fixed-spacing configuration."""
    config = config or LayoutConfig()
    if config.spacing_mode == SPACING_FIXED:
        spacing = config.fixed_spacing
    else:
        spacing = calculate_dynamic_spacing(room_count)
    logger.debug(f"Spacing: {spacing} units for {room_count} rooms ({config.spacing_mode})")
    return spacing
