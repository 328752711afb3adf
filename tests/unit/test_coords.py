"""Tests for layout.coords — soft grid placement, jitter bounds, seeded determinism."""

from __future__ import annotations

import random

import pytest

from ambush_graph.config import LayoutConfig
from ambush_graph.errors import InvalidRegionError
from ambush_graph.layout.coords import SoftGrid, soft_grid_point
from ambush_graph.layout.regions import RegionAssignment


def make_assignment() -> RegionAssignment:
    """head(0) in column 1, nodes 1 and 2 in column 2, node 3 in column 3."""
    return RegionAssignment(
        regions={0: (1, 1), 1: (2, 1), 2: (2, 2), 3: (3, 1)},
        columns={1: [0], 2: [1, 2], 3: [3]},
    )


class TestSoftGridPoint:
    def test_region_below_one(self):
        with pytest.raises(InvalidRegionError):
            soft_grid_point(0, 3, 600, random.Random(1), 50, 50)

    def test_region_beyond_total(self):
        with pytest.raises(InvalidRegionError):
            soft_grid_point(4, 3, 600, random.Random(1), 50, 50)

    def test_invalid_region_is_value_error(self):
        with pytest.raises(ValueError):
            soft_grid_point(-2, 3, 600, random.Random(1), 50, 50)

    def test_slot_centre_without_softness(self):
        rng = random.Random(3)
        assert soft_grid_point(1, 4, 400, rng, 0, 10) == 50
        assert soft_grid_point(2, 4, 400, rng, 0, 10) == 150
        assert soft_grid_point(4, 4, 400, rng, 0, 10) == 350

    def test_jitter_bounded_by_half_softness(self):
        rng = random.Random(11)
        for _ in range(200):
            pos = soft_grid_point(3, 5, 1000, rng, 40, 10)
            assert abs(pos - 500) < 20

    def test_near_edge_pushes_inward(self):
        rng = random.Random(5)
        for _ in range(200):
            # slot centre 25 sits inside the 40px margin
            pos = soft_grid_point(1, 20, 1000, rng, 50, 40)
            assert 40 <= pos <= 49

    def test_within_margins(self):
        rng = random.Random(7)
        for dimension in (100, 137, 400, 1024):
            for total in (1, 2, 3, 7, 20):
                for region in range(1, total + 1):
                    pos = soft_grid_point(region, total, dimension, rng, 50, 50)
                    assert 50 <= pos <= dimension - 50

    def test_deterministic_for_seed(self):
        first = [soft_grid_point(r, 6, 900, random.Random(42), 50, 50) for r in range(1, 7)]
        second = [soft_grid_point(r, 6, 900, random.Random(42), 50, 50) for r in range(1, 7)]
        assert first == second


class TestSoftGrid:
    def test_head_column_pinned(self):
        grid = SoftGrid(make_assignment(), 600, 400, random.Random(1))
        for _ in range(20):
            x, _y = grid.point_for(1, 1)
            assert x == LayoutConfig().edge_margin

    def test_points_within_canvas(self):
        grid = SoftGrid(make_assignment(), 300, 200, random.Random(9))
        for x_region, y_region in [(1, 1), (2, 1), (2, 2), (3, 1)]:
            x, y = grid.point_for(x_region, y_region)
            assert 50 <= x <= 250
            assert 50 <= y <= 150

    def test_same_seed_same_points(self):
        regions = [(1, 1), (2, 1), (2, 2), (3, 1)]
        a = SoftGrid(make_assignment(), 800, 600, random.Random(123))
        b = SoftGrid(make_assignment(), 800, 600, random.Random(123))
        assert [a.point_for(*r) for r in regions] == [b.point_for(*r) for r in regions]

    def test_y_region_beyond_column(self):
        grid = SoftGrid(make_assignment(), 600, 400, random.Random(1))
        with pytest.raises(InvalidRegionError):
            grid.point_for(3, 2)

    def test_unknown_column(self):
        grid = SoftGrid(make_assignment(), 600, 400, random.Random(1))
        with pytest.raises(InvalidRegionError):
            grid.point_for(4, 1)

    def test_canvas_too_small(self):
        with pytest.raises(ValueError):
            SoftGrid(make_assignment(), 99, 400, random.Random(1))

    def test_custom_margin(self):
        config = LayoutConfig(edge_margin=10, grid_softness=0)
        grid = SoftGrid(make_assignment(), 300, 200, random.Random(1), config)
        assert grid.point_for(1, 1) == (10, 100)
        assert grid.point_for(2, 1) == (150, 50)

    def test_random_color_range(self):
        grid = SoftGrid(make_assignment(), 300, 200, random.Random(1))
        for _ in range(50):
            assert all(0 <= c < 150 for c in grid.random_color())
