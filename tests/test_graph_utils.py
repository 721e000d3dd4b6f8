"""Tests for connection graph construction."""

from conftest import make_room
from zone_layout.core.definitions import Exit, Room
from zone_layout.utils.graph_utils import (
    build_connection_graph,
    count_synthetic_edges,
    get_sorted_connections,
    has_connection,
)


class TestBuildConnectionGraph:

    def test_every_room_is_a_node(self, linear_zone):
        G = build_connection_graph(linear_zone)
        assert set(G.nodes()) == {1, 2, 3}
        assert G.nodes[2]['room'] is linear_zone[1]

    def test_symmetric_exits_add_nothing(self, linear_zone):
        G = build_connection_graph(linear_zone)
        assert G.number_of_edges() == 4
        assert count_synthetic_edges(G) == 0

    def test_missing_reverse_is_synthesized(self, one_directional_zone):
        G = build_connection_graph(one_directional_zone)
        assert count_synthetic_edges(G) == 2
        assert get_sorted_connections(G, 2) == [('east', 3), ('west', 1)]
        assert get_sorted_connections(G, 3) == [('west', 2)]
        edge = G.get_edge_data(3, 2)[0]
        assert edge['synthetic'] is True
        assert edge['direction'] == 'west'

    def test_inference_can_be_disabled(self, one_directional_zone):
        G = build_connection_graph(one_directional_zone, infer_reverse=False)
        assert count_synthetic_edges(G) == 0
        assert get_sorted_connections(G, 3) == []

    def test_reverse_match_is_case_insensitive(self):
        rooms = [make_room(1, ('North', 2)), make_room(2, ('SOUTH', 1))]
        G = build_connection_graph(rooms)
        assert count_synthetic_edges(G) == 0

    def test_mismatched_return_still_gets_reverse(self):
        # 2 links back to 1, but via east rather than south
        rooms = [make_room(1, ('north', 2)), make_room(2, ('east', 1))]
        G = build_connection_graph(rooms)
        assert count_synthetic_edges(G) == 2
        assert has_connection(G, 2, 1, 'south')
        assert has_connection(G, 1, 2, 'west')

    def test_unknown_direction_gets_no_reverse(self):
        rooms = [make_room(1, ('portal', 2)), make_room(2)]
        G = build_connection_graph(rooms)
        assert G.number_of_edges() == 1
        assert get_sorted_connections(G, 2) == []

    def test_exits_without_destination_are_dropped(self):
        rooms = [Room(1, exits=(Exit('north'), Exit('east', 2))), make_room(2)]
        G = build_connection_graph(rooms)
        assert get_sorted_connections(G, 1) == [('east', 2)]
        # Room record keeps the exit
        assert rooms[0].exit_count == 2

    def test_exits_to_unknown_rooms_are_dropped(self):
        rooms = [make_room(5, ('north', 99))]
        G = build_connection_graph(rooms)
        assert 99 not in G
        assert G.number_of_edges() == 0


class TestSortedConnections:

    def test_cardinal_first_then_alphabetical(self):
        rooms = [
            make_room(1, ('up', 2), ('southeast', 3), ('West', 4), ('north', 5), ('down', 6)),
            make_room(2), make_room(3), make_room(4), make_room(5), make_room(6),
        ]
        G = build_connection_graph(rooms, infer_reverse=False)
        order = [direction for direction, _ in get_sorted_connections(G, 1)]
        assert order == ['north', 'West', 'down', 'southeast', 'up']

    def test_parallel_exits_between_same_rooms(self):
        rooms = [make_room(1, ('north', 2), ('up', 2)), make_room(2)]
        G = build_connection_graph(rooms)
        assert get_sorted_connections(G, 1) == [('north', 2), ('up', 2)]
        assert get_sorted_connections(G, 2) == [('south', 1), ('down', 1)]

    def test_declared_edge_sorts_before_synthetic_edge_with_same_label(self):
        # 1 -> 2 north is synthesized from 2's south exit; 1 -> 3 north is declared
        rooms = [
            make_room(1, ('west', 2), ('north', 3)),
            make_room(2, ('south', 1), ('east', 4)),
            make_room(3, ('west', 4)),
            make_room(4),
        ]
        G = build_connection_graph(rooms)
        assert get_sorted_connections(G, 1) == [('north', 3), ('north', 2), ('west', 2)]

    def test_edges_carry_insertion_order(self):
        rooms = [make_room(1, ('east', 2)), make_room(2)]
        G = build_connection_graph(rooms)
        assert G.get_edge_data(1, 2)[0]['order'] == 0
        assert G.get_edge_data(2, 1)[0]['order'] == 1
