"""
Zone Auto-Layout Pipeline
=========================

End-to-end layout of one zone.

Pipeline:
    1. Connection graph   (utils/graph_utils.py)
    2. Start room         (generation/start_selector.py)
    3. Spacing            (generation/spacing.py)
    4. BFS placement      (generation/placement.py)
    5. Overlaps           (evaluation/overlaps.py)
    6. Quality score      (evaluation/quality.py, declared exits only)
    7. One-way exits      (evaluation/one_way.py, declared exits only)

Usage:
    pipeline = AutoLayoutPipeline()
    result = pipeline.run(rooms, start_room_id=3001)
    result.positions[3001]       # LayoutPosition(x=0, y=0, z=0)
    payload = result.to_dict()   # JSON-ready editor contract

    # Legacy fixed-spacing behavior
    result = AutoLayoutPipeline(LayoutConfig.classic()).run(rooms)

Every run is computed from its inputs alone, so independent zones can be
laid out concurrently on separate threads.
"""

import logging
from typing import Iterable, List, Optional

from zone_layout.core.config import LayoutConfig
from zone_layout.core.definitions import LayoutRequest, LayoutResult, Room
from zone_layout.evaluation.one_way import detect_one_way_exits
from zone_layout.evaluation.overlaps import detect_overlaps
from zone_layout.evaluation.quality import summarize_layout
from zone_layout.generation.placement import PlacementEngine
from zone_layout.generation.spacing import resolve_spacing
from zone_layout.generation.start_selector import StartSelector
from zone_layout.utils.graph_utils import build_connection_graph, count_synthetic_edges

logger = logging.getLogger(__name__)


class AutoLayoutPipeline:
    """
    Runs all layout stages for a zone.

    Args:
        config: Layout configuration (defaults to the enhanced layout)
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or LayoutConfig()
        self.selector = StartSelector(self.config)
        self.engine = PlacementEngine(self.config)

    def run(self, rooms: Iterable[Room], start_room_id: Optional[int] = None) -> LayoutResult:
        """
        Lay out a zone.

        Args:
            rooms: Rooms of the zone; input order drives tie-breaking
            start_room_id: Optional room to place at the origin

        Returns:
            LayoutResult; empty (quality 0.0) for an empty zone

        Raises:
            ValueError: If two rooms share an id
        """
        rooms = list(rooms)
        _check_unique_ids(rooms)
        logger.debug(f"Auto-layout called with {len(rooms)} rooms, start room: {start_room_id}")

        seed = self.selector.select(rooms, start_room_id)
        if seed is None:
            logger.debug("No start room found, returning empty layout")
            return LayoutResult()

        graph = build_connection_graph(rooms, infer_reverse=self.config.infer_reverse_edges)
        spacing = resolve_spacing(len(rooms), self.config)
        positions = self.engine.place(rooms, graph, seed, spacing)

        overlaps = detect_overlaps(positions)
        stats = summarize_layout(positions, rooms, overlaps)
        one_way = detect_one_way_exits(rooms)

        logger.debug(
            f"Auto-layout complete: {len(positions)} positions from seed {seed.id}, "
            f"spacing {spacing}, {count_synthetic_edges(graph)} inferred connections, "
            f"{len(overlaps)} overlap groups, {len(one_way)} one-way exits"
        )
        return LayoutResult(
            positions=positions,
            overlaps=overlaps,
            quality=stats.score,
            one_way_exits=one_way,
            start_room_id=seed.id,
            spacing=spacing,
        )

    def run_request(self, request: LayoutRequest) -> LayoutResult:
        return self.run(request.rooms, request.start_room_id)


def _check_unique_ids(rooms: List[Room]) -> None:
    seen = set()
    for room in rooms:
        if room.id in seen:
            raise ValueError(f"Duplicate room id {room.id}")
        seen.add(room.id)


def auto_layout_rooms(
    rooms: Iterable[Room],
    start_room_id: Optional[int] = None,
    config: Optional[LayoutConfig] = None,
) -> LayoutResult:
    """Functional entry point: ``AutoLayoutPipeline(config).run(rooms, start_room_id)``."""
    return AutoLayoutPipeline(config).run(rooms, start_room_id)
