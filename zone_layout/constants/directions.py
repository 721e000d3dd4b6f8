"""
Direction Constants
===================

Lookup tables for exit direction labels used by the zone layout engine.

Exit labels in world data come in several casings ("North", "NORTH",
"north"). Every lookup here normalizes to lowercase first, so callers can
pass the raw label straight through.

The tables are read-only mappings built once at import time and shared by
every layout run.

Sources:
- World JSON exit keys (North, East, South, West, Up, Down)
- Zone editor exit labels (adds the four diagonals)
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

# ==========================================
# CANONICAL DIRECTIONS
# ==========================================

NORTH = 'north'
SOUTH = 'south'
EAST = 'east'
WEST = 'west'
NORTHEAST = 'northeast'
NORTHWEST = 'northwest'
SOUTHEAST = 'southeast'
SOUTHWEST = 'southwest'
UP = 'up'
DOWN = 'down'

CANONICAL_DIRECTIONS: Tuple[str, ...] = (
    NORTH, SOUTH, EAST, WEST,
    NORTHEAST, NORTHWEST, SOUTHEAST, SOUTHWEST,
    UP, DOWN,
)

# Main pathways, placed before diagonals and vertical links during BFS
CARDINAL_DIRECTIONS = frozenset({NORTH, SOUTH, EAST, WEST})

VERTICAL_DIRECTIONS = frozenset({UP, DOWN})

# ==========================================
# UNIT OFFSETS
# ==========================================

# Screen coordinates: +x is east, +y is south
DIRECTION_OFFSETS: Mapping[str, Tuple[int, int]] = MappingProxyType({
    NORTH: (0, -1),
    SOUTH: (0, 1),
    EAST: (1, 0),
    WEST: (-1, 0),
    NORTHEAST: (1, -1),
    NORTHWEST: (-1, -1),
    SOUTHEAST: (1, 1),
    SOUTHWEST: (-1, 1),
    UP: (0, 0),     # vertical links keep x/y, change z
    DOWN: (0, 0),
})

DEFAULT_OFFSET: Tuple[int, int] = DIRECTION_OFFSETS[EAST]

# Z change for vertical links
VERTICAL_DELTA: Mapping[str, int] = MappingProxyType({UP: 1, DOWN: -1})

# ==========================================
# REVERSE PAIRS
# ==========================================

REVERSE_DIRECTIONS: Mapping[str, str] = MappingProxyType({
    NORTH: SOUTH,
    SOUTH: NORTH,
    EAST: WEST,
    WEST: EAST,
    NORTHEAST: SOUTHWEST,
    SOUTHWEST: NORTHEAST,
    NORTHWEST: SOUTHEAST,
    SOUTHEAST: NORTHWEST,
    UP: DOWN,
    DOWN: UP,
})


# ==========================================
# HELPER FUNCTIONS
# ==========================================

def normalize_direction(direction: Optional[str]) -> str:
    """
    Normalize a raw exit label for table lookups.

    Examples:
        >>> normalize_direction("North")
        'north'
        >>> normalize_direction("  UP ")
        'up'
        >>> normalize_direction(None)
        ''
    """
    if not direction:
        return ''
    return str(direction).strip().lower()


def is_known_direction(direction: Optional[str]) -> bool:
    """Check if a label is one of the ten canonical directions (any casing)."""
    return normalize_direction(direction) in DIRECTION_OFFSETS


def is_cardinal(direction: Optional[str]) -> bool:
    return normalize_direction(direction) in CARDINAL_DIRECTIONS


def is_vertical(direction: Optional[str]) -> bool:
    return normalize_direction(direction) in VERTICAL_DIRECTIONS


def get_unit_offset(direction: Optional[str]) -> Tuple[int, int]:
    """
    Get the unit (dx, dy) offset for a direction label.

    Unknown labels fall back to the east offset instead of failing;
    callers that care can check ``is_known_direction`` first.

    Examples:
        >>> get_unit_offset("Northwest")
        (-1, -1)
        >>> get_unit_offset("portal")
        (1, 0)
    """
    return DIRECTION_OFFSETS.get(normalize_direction(direction), DEFAULT_OFFSET)


def get_reverse_direction(direction: Optional[str]) -> Optional[str]:
    """
    Get the canonical (lowercase) reverse of a direction label.

    Returns:
        Reverse direction, or None for labels outside the canonical set

    Examples:
        >>> get_reverse_direction("East")
        'west'
        >>> get_reverse_direction("down")
        'up'
        >>> get_reverse_direction("portal") is None
        True
    """
    return REVERSE_DIRECTIONS.get(normalize_direction(direction))


def directions_match(a: Optional[str], b: Optional[str]) -> bool:
    """Case-insensitive label comparison."""
    return normalize_direction(a) == normalize_direction(b)
