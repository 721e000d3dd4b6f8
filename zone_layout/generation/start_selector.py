"""
Start Room Selection
====================

Picks the seed room the layout BFS grows from. The seed lands on the
origin, so it should be the room a builder thinks of as the zone's center
or entrance.

Priority:
1. Caller-supplied start room id (if it is in the zone)
2. Configured spawn room id
3. Configured conventional start ids, first match wins
4. Highest centrality score, ties broken by input order
"""

import logging
from typing import Dict, Optional, Sequence

from zone_layout.core.config import LayoutConfig
from zone_layout.core.definitions import Room

logger = logging.getLogger(__name__)


class StartSelector:
    """
    Chooses the BFS seed for a zone.

    Centrality score of a room:

        weights.exit          * own exit count
      + weights.neighbor_exit * sum of exit counts of rooms its exits lead to
      + weights.entrance      if name/description mentions an entrance keyword
      + weights.central       if it mentions a central keyword
      + weights.crossroads    if it mentions a crossroads keyword
      + weights.ground_level  if its z hint is 0
      + weights.low_id        * (max_id - id) / max_id
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or LayoutConfig()

    def select(self, rooms: Sequence[Room], start_room_id: Optional[int] = None) -> Optional[Room]:
        """
        Select the seed room.

        Args:
            rooms: Rooms of the zone, in input order
            start_room_id: Explicit start room requested by the caller

        Returns:
            The seed Room, or None for an empty zone
        """
        if not rooms:
            logger.debug("No rooms, no start room")
            return None

        by_id = {room.id: room for room in rooms}

        if start_room_id is not None:
            if start_room_id in by_id:
                logger.debug(f"Using specified start room {start_room_id}")
                return by_id[start_room_id]
            logger.debug(f"Specified start room {start_room_id} is not in the zone, ignoring")

        spawn_id = self.config.spawn_room_id
        if spawn_id is not None and spawn_id in by_id:
            logger.debug(f"Using spawn room {spawn_id} as layout origin")
            return by_id[spawn_id]

        for room_id in self.config.conventional_room_ids:
            if room_id in by_id:
                logger.debug(f"Using conventional start room {room_id}")
                return by_id[room_id]

        scores = self.compute_centrality_scores(rooms)
        best_room = rooms[0]
        best_score = scores[best_room.id]
        for room in rooms[1:]:
            if scores[room.id] > best_score:
                best_room = room
                best_score = scores[room.id]

        logger.debug(
            f"Selected start room {best_room.id} by centrality "
            f"(score: {best_score:.1f}, exits: {best_room.exit_count})"
        )
        return best_room

    def compute_centrality_scores(self, rooms: Sequence[Room]) -> Dict[int, float]:
        """Centrality score for every room, keyed by room id."""
        if not rooms:
            return {}

        w = self.config.weights
        by_id = {room.id: room for room in rooms}
        max_id = max(room.id for room in rooms)

        scores: Dict[int, float] = {}
        for room in rooms:
            score = w.exit * room.exit_count

            neighbor_exits = sum(
                by_id[e.to_room_id].exit_count
                for e in room.exits
                if e.to_room_id is not None and e.to_room_id in by_id
            )
            score += w.neighbor_exit * neighbor_exits

            text = room.text
            if _mentions(text, self.config.entrance_keywords):
                score += w.entrance
            if _mentions(text, self.config.central_keywords):
                score += w.central
            if _mentions(text, self.config.crossroads_keywords):
                score += w.crossroads

            if room.z_hint == 0:
                score += w.ground_level

            if max_id != 0:
                score += w.low_id * (max_id - room.id) / max_id

            scores[room.id] = score
        return scores


def _mentions(text: str, keywords: Sequence[str]) -> bool:
    return any(keyword.lower() in text for keyword in keywords)


def select_start_room(
    rooms: Sequence[Room],
    start_room_id: Optional[int] = None,
    config: Optional[LayoutConfig] = None,
) -> Optional[Room]:
    """Convenience wrapper around ``StartSelector.select``."""
    return StartSelector(config).select(rooms, start_room_id)
