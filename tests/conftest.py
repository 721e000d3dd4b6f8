"""Shared fixtures for the zone layout tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from zone_layout.core.definitions import Exit, Room


def make_room(room_id, *exits, name=None, description=None, layout_z=None):
    """Room from (direction, to_room_id) pairs."""
    return Room(
        id=room_id,
        name=name,
        description=description,
        layout_z=layout_z,
        exits=tuple(Exit(direction, dest) for direction, dest in exits),
    )


@pytest.fixture
def linear_zone():
    """1 -north-> 2 -east-> 3, with return exits declared."""
    return [
        make_room(1, ('north', 2)),
        make_room(2, ('south', 1), ('east', 3)),
        make_room(3, ('west', 2)),
    ]


@pytest.fixture
def one_directional_zone():
    """Exits only declared one way: 1 -east-> 2 -east-> 3."""
    return [
        make_room(1, ('east', 2)),
        make_room(2, ('east', 3)),
        make_room(3),
    ]
