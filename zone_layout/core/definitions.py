"""
Zone Layout Definitions
=======================

Data types shared by every stage of the layout engine.

Input side:
- Exit: a direction-labeled edge out of a room
- Room: a graph node with optional text and a persisted z hint
- LayoutRequest: rooms plus an optional caller-chosen start room

Output side:
- LayoutPosition: integer (x, y, z) grid coordinate
- OverlapGroup: rooms sharing one coordinate
- OneWayExitRecord: an exit with no matching return exit
- LayoutResult: everything a single layout run produces

The ``from_dict`` / ``to_dict`` helpers speak the camelCase JSON contract
used by the zone editor (``toRoomId``, ``layoutZ``, ``startRoomId`` ...).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple


def _optional_int(value: Any, what: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{what} must be an integer, got {value!r}") from None


# ==========================================
# INPUT TYPES
# ==========================================

@dataclass(frozen=True)
class Exit:
    """A directed exit. ``to_room_id`` of None means the exit leads nowhere we can place."""
    direction: str
    to_room_id: Optional[int] = None
    to_zone_id: Optional[int] = None

    @property
    def has_destination(self) -> bool:
        return self.to_room_id is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Exit':
        return cls(
            direction=str(data.get('direction') or ''),
            to_room_id=_optional_int(data.get('toRoomId'), 'toRoomId'),
            to_zone_id=_optional_int(data.get('toZoneId'), 'toZoneId'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'direction': self.direction,
            'toRoomId': self.to_room_id,
            'toZoneId': self.to_zone_id,
        }


@dataclass(frozen=True)
class Room:
    """A room as seen by the layout engine."""
    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    layout_z: Optional[int] = None      # persisted z-level hint
    exits: Tuple[Exit, ...] = ()

    def __post_init__(self):
        # Accept any iterable of exits but store an immutable tuple
        if not isinstance(self.exits, tuple):
            object.__setattr__(self, 'exits', tuple(self.exits))

    @property
    def exit_count(self) -> int:
        return len(self.exits)

    @property
    def z_hint(self) -> int:
        return self.layout_z or 0

    @property
    def text(self) -> str:
        """Name and description joined, lowercased, for keyword matching."""
        return f"{self.name or ''} {self.description or ''}".lower()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Room':
        """
        Build a Room from the editor JSON shape.

        Raises:
            ValueError: If ``id`` is missing or not an integer
        """
        if 'id' not in data:
            raise ValueError(f"Room is missing 'id': {dict(data)!r}")
        room_id = _optional_int(data['id'], 'Room id')
        if room_id is None:
            raise ValueError("Room id must not be null")
        return cls(
            id=room_id,
            name=data.get('name'),
            description=data.get('description'),
            layout_z=_optional_int(data.get('layoutZ'), 'layoutZ'),
            exits=tuple(Exit.from_dict(e) for e in data.get('exits') or ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'id': self.id}
        if self.name is not None:
            data['name'] = self.name
        if self.description is not None:
            data['description'] = self.description
        data['layoutZ'] = self.layout_z
        data['exits'] = [e.to_dict() for e in self.exits]
        return data


@dataclass
class LayoutRequest:
    """Input contract of one layout run."""
    rooms: List[Room] = field(default_factory=list)
    start_room_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'LayoutRequest':
        rooms = data.get('rooms')
        if rooms is None:
            raise ValueError("Layout request is missing 'rooms'")
        return cls(
            rooms=[Room.from_dict(r) for r in rooms],
            start_room_id=_optional_int(data.get('startRoomId'), 'startRoomId'),
        )


# ==========================================
# OUTPUT TYPES
# ==========================================

@dataclass(frozen=True)
class LayoutPosition:
    """Integer grid coordinate. +x is east, +y is south, +z is up."""
    x: int
    y: int
    z: int = 0

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def to_dict(self) -> Dict[str, int]:
        return {'x': self.x, 'y': self.y, 'z': self.z}


@dataclass
class OverlapGroup:
    """Two or more rooms placed on the same coordinate."""
    room_ids: List[int]
    position: LayoutPosition

    @property
    def count(self) -> int:
        return len(self.room_ids)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'roomIds': list(self.room_ids),
            'position': self.position.to_dict(),
            'count': self.count,
        }


class OneWayReason(str, Enum):
    """Why an exit was flagged as one-way."""
    NO_RETURN_EXIT = "no_return_exit"              # destination has no exit back at all
    MISMATCHED_DIRECTION = "mismatched_direction"  # exit back exists, wrong direction
    TARGET_NOT_FOUND = "target_not_found"          # destination not in the room set


@dataclass
class OneWayExitRecord:
    from_room: int
    to_room: int
    direction: str
    is_one_way: bool
    reason: OneWayReason

    def to_dict(self) -> Dict[str, Any]:
        return {
            'fromRoom': self.from_room,
            'toRoom': self.to_room,
            'direction': self.direction,
            'isOneWay': self.is_one_way,
            'reason': self.reason.value,
        }


@dataclass
class LayoutResult:
    """Everything produced by one layout run."""
    positions: Dict[int, LayoutPosition] = field(default_factory=dict)
    overlaps: List[OverlapGroup] = field(default_factory=list)
    quality: float = 0.0
    one_way_exits: List[OneWayExitRecord] = field(default_factory=list)
    start_room_id: Optional[int] = None
    spacing: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.positions

    def to_dict(self) -> Dict[str, Any]:
        return {
            'positions': {room_id: pos.to_dict() for room_id, pos in self.positions.items()},
            'overlaps': [o.to_dict() for o in self.overlaps],
            'quality': self.quality,
            'oneWayExits': [r.to_dict() for r in self.one_way_exits],
        }
