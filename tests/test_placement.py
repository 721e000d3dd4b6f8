"""Tests for BFS placement and overflow packing."""

import logging

import pytest

from conftest import make_room
from zone_layout.core.config import LayoutConfig
from zone_layout.core.definitions import LayoutPosition
from zone_layout.generation.placement import PlacementEngine
from zone_layout.generation.spacing import calculate_dynamic_spacing, resolve_spacing
from zone_layout.utils.graph_utils import build_connection_graph


def place(rooms, seed_id, spacing=2, config=None):
    engine = PlacementEngine(config)
    graph = build_connection_graph(rooms)
    seed = next(r for r in rooms if r.id == seed_id)
    return engine.place(rooms, graph, seed, spacing)


class TestSpacing:

    @pytest.mark.parametrize("count,expected", [
        (0, 2), (1, 2), (50, 2), (51, 3), (100, 3), (101, 4), (10000, 4),
    ])
    def test_tiers(self, count, expected):
        assert calculate_dynamic_spacing(count) == expected

    def test_non_decreasing_and_at_least_two(self):
        values = [calculate_dynamic_spacing(n) for n in range(0, 300)]
        assert all(v >= 2 for v in values)
        assert values == sorted(values)

    def test_fixed_mode_ignores_size(self):
        config = LayoutConfig(spacing_mode='fixed', fixed_spacing=5)
        assert resolve_spacing(500, config) == 5


class TestBfsPlacement:

    def test_seed_at_origin_with_z_hint(self):
        rooms = [make_room(1, layout_z=3)]
        assert place(rooms, 1) == {1: LayoutPosition(0, 0, 3)}

    def test_offsets_scale_with_spacing(self, linear_zone):
        positions = place(linear_zone, 1, spacing=3)
        assert positions[2] == LayoutPosition(0, -3, 0)
        assert positions[3] == LayoutPosition(3, -3, 0)

    def test_reverse_edges_reach_rooms_with_only_incoming_exits(self, one_directional_zone):
        positions = place(one_directional_zone, 3)
        assert positions == {
            3: LayoutPosition(0, 0, 0),
            2: LayoutPosition(-2, 0, 0),
            1: LayoutPosition(-4, 0, 0),
        }

    def test_up_and_down_change_only_z(self):
        rooms = [
            make_room(1, ('up', 2), ('down', 3)),
            make_room(2, ('down', 1)),
            make_room(3, ('up', 1)),
        ]
        positions = place(rooms, 1)
        assert positions[2] == LayoutPosition(0, 0, 1)
        assert positions[3] == LayoutPosition(0, 0, -1)

    def test_diagonals(self):
        rooms = [make_room(1, ('northeast', 2), ('southwest', 3)), make_room(2), make_room(3)]
        positions = place(rooms, 1)
        assert positions[2] == LayoutPosition(2, -2, 0)
        assert positions[3] == LayoutPosition(-2, 2, 0)

    def test_unknown_direction_steps_east(self, caplog):
        rooms = [make_room(1, ('portal', 2)), make_room(2)]
        with caplog.at_level(logging.DEBUG, logger='zone_layout'):
            positions = place(rooms, 1)
        assert positions[2] == LayoutPosition(2, 0, 0)
        assert "Unknown direction 'portal'" in caplog.text

    def test_cardinal_exit_claims_room_before_diagonal(self):
        # Both exits lead to 2; north is processed first
        rooms = [make_room(1, ('northeast', 2), ('north', 2)), make_room(2)]
        positions = place(rooms, 1)
        assert positions[2] == LayoutPosition(0, -2, 0)

    def test_first_placement_wins(self):
        # 4 is reachable from 2 and 3; 2 is dequeued first
        rooms = [
            make_room(1, ('north', 2), ('east', 3)),
            make_room(2, ('east', 4)),
            make_room(3, ('north', 4)),
            make_room(4),
        ]
        positions = place(rooms, 1)
        assert positions[4] == LayoutPosition(2, -2, 0)

    def test_placement_order_is_bfs_order(self, linear_zone):
        assert list(place(linear_zone, 1)) == [1, 2, 3]

    def test_declared_exit_dequeued_before_synthetic_twin(self):
        # 3 (declared north) and 2 (synthetic north) share a cell; 3 goes first and claims 4
        rooms = [
            make_room(1, ('west', 2), ('north', 3)),
            make_room(2, ('south', 1), ('east', 4)),
            make_room(3, ('west', 4)),
            make_room(4),
        ]
        positions = place(rooms, 1)
        assert list(positions) == [1, 3, 2, 4]
        assert positions == {
            1: LayoutPosition(0, 0, 0),
            3: LayoutPosition(0, -2, 0),
            2: LayoutPosition(0, -2, 0),
            4: LayoutPosition(-2, -2, 0),
        }


class TestOverflow:

    def test_unreachable_rooms_go_to_overflow_grid(self, caplog):
        rooms = [make_room(10), make_room(11)]
        with caplog.at_level(logging.DEBUG, logger='zone_layout'):
            positions = place(rooms, 10)
        assert positions == {10: LayoutPosition(0, 0, 0), 11: LayoutPosition(10, 0, 0)}
        assert "Room 11 unreachable from seed" in caplog.text

    def test_rows_wrap_after_six(self):
        rooms = [make_room(i) for i in range(1, 9)]
        positions = place(rooms, 1)
        # 7 unreachable rooms: six on row 0, one on row 1
        assert positions[2] == LayoutPosition(10, 0, 0)
        assert positions[7] == LayoutPosition(20, 0, 0)
        assert positions[8] == LayoutPosition(10, 2, 0)

    def test_row_width_grows_with_sqrt(self):
        engine = PlacementEngine()
        rooms = [make_room(i) for i in range(50)]
        packed = engine.pack_overflow(rooms, spacing=2)
        # ceil(sqrt(50)) == 8 per row
        assert packed[7] == LayoutPosition(24, 0, 0)
        assert packed[8] == LayoutPosition(10, 2, 0)
        assert len({p.as_tuple() for p in packed.values()}) == 50

    def test_classic_overflow_origin(self):
        engine = PlacementEngine(LayoutConfig.classic())
        packed = engine.pack_overflow([make_room(1), make_room(2)], spacing=1)
        assert packed == {1: LayoutPosition(10, 0, 0), 2: LayoutPosition(11, 0, 0)}

