"""
One-Way Exit Detection
======================

Flags declared exits that have no matching way back.

For an exit A --d--> B:
- B not in the zone                       -> target_not_found
- d has no reverse (non-canonical label)  -> skipped
- B has an exit to A labeled reverse(d)   -> two-way, not reported
- B has exits to A, none labeled reverse(d) -> mismatched_direction
- B has no exit to A at all               -> no_return_exit

Only declared exits are inspected; synthetic reverse edges are a placement
aid and must not hide asymmetric world data.
"""

import logging
from typing import Dict, List, Sequence

from zone_layout.constants.directions import directions_match, get_reverse_direction
from zone_layout.core.definitions import OneWayExitRecord, OneWayReason, Room

logger = logging.getLogger(__name__)


def detect_one_way_exits(rooms: Sequence[Room]) -> List[OneWayExitRecord]:
    """
    Find asymmetric exits in a zone.

    Args:
        rooms: Rooms of the zone with their declared exits

    Returns:
        One record per asymmetric exit, in room/exit order. ``is_one_way`` is
        always True; two-way exits produce no record.
    """
    by_id: Dict[int, Room] = {room.id: room for room in rooms}
    records: List[OneWayExitRecord] = []
    checked = 0

    for room in rooms:
        for exit_ in room.exits:
            if exit_.to_room_id is None:
                continue

            target = by_id.get(exit_.to_room_id)
            if target is None:
                checked += 1
                records.append(OneWayExitRecord(
                    from_room=room.id,
                    to_room=exit_.to_room_id,
                    direction=exit_.direction,
                    is_one_way=True,
                    reason=OneWayReason.TARGET_NOT_FOUND,
                ))
                continue

            expected = get_reverse_direction(exit_.direction)
            if expected is None:
                continue
            checked += 1

            returns = [e for e in target.exits if e.to_room_id == room.id]
            if any(directions_match(e.direction, expected) for e in returns):
                continue

            reason = OneWayReason.MISMATCHED_DIRECTION if returns else OneWayReason.NO_RETURN_EXIT
            records.append(OneWayExitRecord(
                from_room=room.id,
                to_room=exit_.to_room_id,
                direction=exit_.direction,
                is_one_way=True,
                reason=reason,
            ))

    logger.debug(f"One-way exit analysis: {len(records)} one-way exits out of {checked} checked")
    return records
