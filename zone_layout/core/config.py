"""
Layout Configuration
====================

Tunable knobs of the layout engine. The defaults reproduce the editor's
enhanced auto-layout; ``LayoutConfig.classic()`` reproduces the older
fixed-spacing variant without reverse-edge inference.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

SPACING_DYNAMIC = "dynamic"
SPACING_FIXED = "fixed"

# Global spawn room of the shipped world data
DEFAULT_SPAWN_ROOM_ID = 3001

# Other ids that conventionally mark a starting area
DEFAULT_CONVENTIONAL_ROOM_IDS: Tuple[int, ...] = (3000, 3002, 1, 100, 1000)


@dataclass
class CentralityWeights:
    """Weights of the seed-room score (see StartSelector)."""
    exit: float = 10.0             # per own exit
    neighbor_exit: float = 2.0     # per exit of each neighbor
    entrance: float = 50.0
    central: float = 40.0
    crossroads: float = 30.0
    ground_level: float = 20.0     # z hint == 0
    low_id: float = 5.0            # scaled by (max_id - id) / max_id


@dataclass
class LayoutConfig:
    """Configuration for the zone layout pipeline."""
    # Spacing
    spacing_mode: str = SPACING_DYNAMIC
    fixed_spacing: int = 1

    # Graph construction
    infer_reverse_edges: bool = True

    # Start room selection
    spawn_room_id: Optional[int] = DEFAULT_SPAWN_ROOM_ID
    conventional_room_ids: Tuple[int, ...] = DEFAULT_CONVENTIONAL_ROOM_IDS
    weights: CentralityWeights = field(default_factory=CentralityWeights)
    entrance_keywords: Tuple[str, ...] = ('entrance', 'gate', 'entry')
    central_keywords: Tuple[str, ...] = ('central', 'main', 'plaza', 'square')
    crossroads_keywords: Tuple[str, ...] = ('crossroads', 'intersection', 'junction')

    # Overflow grid for unreachable rooms
    overflow_origin_x: Optional[int] = None   # None -> spacing * 5
    overflow_min_row_width: int = 6

    def __post_init__(self):
        self.conventional_room_ids = tuple(self.conventional_room_ids)
        self.validate()

    def validate(self) -> None:
        """
        Check the configuration for values the engine cannot work with.

        Raises:
            ValueError: On an unknown spacing mode, non-positive fixed
                spacing or non-positive overflow row width
        """
        if self.spacing_mode not in (SPACING_DYNAMIC, SPACING_FIXED):
            raise ValueError(
                f"spacing_mode must be '{SPACING_DYNAMIC}' or '{SPACING_FIXED}', "
                f"got {self.spacing_mode!r}"
            )
        if self.fixed_spacing < 1:
            raise ValueError(f"fixed_spacing must be >= 1, got {self.fixed_spacing}")
        if self.overflow_min_row_width < 1:
            raise ValueError(
                f"overflow_min_row_width must be >= 1, got {self.overflow_min_row_width}"
            )

    @classmethod
    def classic(cls) -> 'LayoutConfig':
        """Legacy editor behavior: 1-unit grid, declared exits only, simple scoring."""
        return cls(
            spacing_mode=SPACING_FIXED,
            fixed_spacing=1,
            infer_reverse_edges=False,
            spawn_room_id=None,
            conventional_room_ids=(),
            weights=CentralityWeights(neighbor_exit=0.0, central=0.0, crossroads=0.0),
            overflow_origin_x=10,
        )
