"""
Zone Data Loader
================

Reads rooms for the layout engine from JSON files.

Supports:
1. Layout request files (the editor contract):
   {"rooms": [{"id": 1, "layoutZ": 0, "exits": [{"direction": "north",
   "toRoomId": 2, "toZoneId": null}]}], "startRoomId": 1}
2. World files as shipped with the game data:
   {"zone": {...}, "rooms": [{"id": "3001", "name": "...",
   "exits": {"North": {"destination": "3002", "key": "-1"}}}]}
   Ids are decimal strings and a destination of "-1" means the exit
   leads nowhere.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from zone_layout.core.definitions import Exit, LayoutRequest, Room

logger = logging.getLogger(__name__)

NO_DESTINATION = '-1'


def _parse_id(value: Any, what: str) -> int:
    try:
        return int(str(value).strip(), 10)
    except ValueError:
        raise ValueError(f"Invalid {what}: {value!r}") from None


def _read_json(path: Union[str, Path]) -> Any:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Zone file not found: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


# =============================================================================
# WORLD FILES
# =============================================================================

def room_from_world_json(data: Mapping[str, Any]) -> Room:
    """Convert one world-file room entry into a Room."""
    if 'id' not in data:
        raise ValueError(f"World room is missing 'id': {data.get('name', '?')!r}")
    room_id = _parse_id(data['id'], 'room id')

    exits: List[Exit] = []
    for direction, exit_data in (data.get('exits') or {}).items():
        destination = (exit_data or {}).get('destination')
        if destination is None or str(destination).strip() == NO_DESTINATION:
            to_room_id = None
        else:
            to_room_id = _parse_id(destination, f"exit destination of room {room_id}")
        exits.append(Exit(direction=direction, to_room_id=to_room_id))

    return Room(
        id=room_id,
        name=data.get('name'),
        description=data.get('description'),
        exits=tuple(exits),
    )


def rooms_from_world_json(data: Mapping[str, Any]) -> List[Room]:
    """All rooms of a parsed world file, in file order."""
    rooms = [room_from_world_json(r) for r in data.get('rooms') or ()]
    zone = data.get('zone') or {}
    logger.info(f"Loaded {len(rooms)} rooms from zone {zone.get('id', '?')} ({zone.get('name', 'unnamed')})")
    return rooms


def load_world_file(path: Union[str, Path]) -> List[Room]:
    return rooms_from_world_json(_read_json(path))


# =============================================================================
# LAYOUT REQUESTS
# =============================================================================

def load_layout_request(path: Union[str, Path]) -> LayoutRequest:
    request = LayoutRequest.from_dict(_read_json(path))
    logger.info(f"Loaded layout request with {len(request.rooms)} rooms from {path}")
    return request


def is_world_format(data: Any) -> bool:
    """World files carry a zone header and store exits as a direction-keyed object."""
    if not isinstance(data, dict):
        return False
    if 'zone' in data:
        return True
    rooms = data.get('rooms') or []
    return any(isinstance(r, dict) and isinstance(r.get('exits'), dict) for r in rooms)


def load_rooms(path: Union[str, Path], start_room_id: Optional[int] = None) -> LayoutRequest:
    """
    Load either file format.

    Args:
        path: JSON file path
        start_room_id: Overrides the file's startRoomId when given

    Returns:
        LayoutRequest with the rooms and start room

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the content is not a recognizable zone
    """
    data = _read_json(path)
    if not isinstance(data, dict) or 'rooms' not in data:
        raise ValueError(f"{path} does not contain a 'rooms' list")

    if is_world_format(data):
        request = LayoutRequest(rooms=rooms_from_world_json(data))
    else:
        request = LayoutRequest.from_dict(data)
        logger.info(f"Loaded layout request with {len(request.rooms)} rooms from {path}")

    if start_room_id is not None:
        request.start_room_id = start_room_id
    return request
