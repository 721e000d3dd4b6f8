"""Tests for seed room selection."""

import pytest

from conftest import make_room
from zone_layout.core.config import CentralityWeights, LayoutConfig
from zone_layout.generation.start_selector import StartSelector, select_start_room


class TestPriorityOrder:

    def test_empty_zone_has_no_seed(self):
        assert StartSelector().select([]) is None

    def test_explicit_start_wins(self):
        rooms = [make_room(3001), make_room(7), make_room(8)]
        assert select_start_room(rooms, start_room_id=8).id == 8

    def test_explicit_start_zero_is_honored(self):
        rooms = [make_room(5), make_room(0)]
        assert select_start_room(rooms, start_room_id=0).id == 0

    def test_missing_explicit_start_falls_through(self):
        rooms = [make_room(3001), make_room(7)]
        assert select_start_room(rooms, start_room_id=42).id == 3001

    def test_spawn_room_beats_conventional_ids(self):
        rooms = [make_room(3000), make_room(1), make_room(3001)]
        assert select_start_room(rooms).id == 3001

    def test_spawn_room_is_configurable(self):
        rooms = [make_room(3001), make_room(77)]
        config = LayoutConfig(spawn_room_id=77)
        assert select_start_room(rooms, config=config).id == 77

    def test_conventional_ids_in_configured_order(self):
        rooms = [make_room(1000), make_room(100), make_room(1)]
        assert select_start_room(rooms).id == 1

    def test_conventional_ids_can_be_disabled(self):
        rooms = [make_room(1), make_room(2, ('north', 1), ('south', 1))]
        config = LayoutConfig(spawn_room_id=None, conventional_room_ids=())
        assert select_start_room(rooms, config=config).id == 2


class TestCentralityScores:

    @pytest.fixture
    def selector(self):
        return StartSelector(LayoutConfig(spawn_room_id=None, conventional_room_ids=()))

    def test_score_formula(self, selector):
        rooms = [
            make_room(10, ('north', 20), ('east', 30), name='Main Gate'),
            make_room(20, ('south', 10)),
            make_room(30, layout_z=1),
        ]
        scores = selector.compute_centrality_scores(rooms)
        # 2 exits, neighbors 1 + 0 exits, entrance + central keywords, ground level
        assert scores[10] == pytest.approx(20 + 2 + 50 + 40 + 20 + 5 * 20 / 30)
        assert scores[20] == pytest.approx(10 + 4 + 20 + 5 * 10 / 30)
        # z hint 1 and highest id: nothing
        assert scores[30] == pytest.approx(0.0)

    def test_keywords_match_description_case_insensitively(self, selector):
        rooms = [
            make_room(50, description='A busy CROSSROADS of the city'),
            make_room(51),
        ]
        scores = selector.compute_centrality_scores(rooms)
        assert scores[50] - scores[51] == pytest.approx(30 + 5 / 51)

    def test_highest_score_selected(self, selector):
        rooms = [
            make_room(10),
            make_room(11, ('north', 12), ('south', 13)),
            make_room(12),
            make_room(13),
        ]
        assert selector.select(rooms).id == 11

    def test_ties_broken_by_input_order(self):
        weights = CentralityWeights(low_id=0.0)
        selector = StartSelector(LayoutConfig(
            spawn_room_id=None, conventional_room_ids=(), weights=weights,
        ))
        rooms = [make_room(9), make_room(4), make_room(6)]
        assert selector.select(rooms).id == 9

    def test_zero_max_id_does_not_divide_by_zero(self, selector):
        rooms = [make_room(0), make_room(-1)]
        scores = selector.compute_centrality_scores(rooms)
        assert scores[0] == pytest.approx(20.0)
        assert scores[-1] == pytest.approx(20.0)
