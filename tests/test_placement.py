"""Tests for child placement and connector geometry."""

import math

import pytest

from layout.placement import (
    Direction,
    GeometryFault,
    LayoutConfig,
    connector_geometry,
    place_child,
    spread_for,
)

CFG = LayoutConfig(vertical_spacing=90.0, base_spread=120.0, growth_factor=1.25)


class TestSpread:
    """Spread grows geometrically with the parent's generation."""

    def test_root_spread_is_base(self):
        assert spread_for(0, CFG) == 120.0

    def test_geometric_growth(self):
        assert spread_for(3, CFG) == pytest.approx(120.0 * 1.25 ** 3)

    def test_strictly_increasing(self):
        spreads = [spread_for(g, CFG) for g in range(20)]
        assert all(b > a for a, b in zip(spreads, spreads[1:]))

    def test_flat_when_growth_is_one(self):
        cfg = LayoutConfig(base_spread=50.0, growth_factor=1.0)
        assert spread_for(10, cfg) == 50.0

    def test_overflow_is_geometry_fault(self):
        cfg = LayoutConfig(growth_factor=10.0)
        with pytest.raises(GeometryFault):
            spread_for(400, cfg)


class TestPlaceChild:
    """Children sit one step down and symmetric around the parent."""

    def test_vertical_step(self):
        _, y = place_child((10.0, 20.0), 0, Direction.LEFT, CFG)
        assert y == 110.0

    def test_left_right_symmetric(self):
        parent = (300.0, 40.0)
        for gen in range(6):
            lx, ly = place_child(parent, gen, Direction.LEFT, CFG)
            rx, ry = place_child(parent, gen, Direction.RIGHT, CFG)
            assert ly == ry == 130.0
            assert parent[0] - lx == pytest.approx(rx - parent[0])
            assert rx - parent[0] == pytest.approx(spread_for(gen, CFG))

    def test_non_finite_parent_is_fault(self):
        with pytest.raises(GeometryFault):
            place_child((float("nan"), 0.0), 0, Direction.RIGHT, CFG)

    def test_infinite_spacing_is_fault(self):
        cfg = LayoutConfig(vertical_spacing=float("inf"))
        with pytest.raises(GeometryFault):
            place_child((0.0, 0.0), 0, Direction.RIGHT, cfg)


class TestConnectorGeometry:
    """Length and angle of a parent -> child segment."""

    def test_straight_down(self):
        length, angle = connector_geometry((0.0, 0.0), (0.0, 90.0))
        assert length == 90.0
        assert angle == 90.0

    def test_diagonal(self):
        length, angle = connector_geometry((0.0, 0.0), (-120.0, 90.0))
        assert length == pytest.approx(150.0)
        assert angle == pytest.approx(math.degrees(math.atan2(90.0, -120.0)))

    def test_zero_length_is_fault(self):
        with pytest.raises(GeometryFault):
            connector_geometry((5.0, 5.0), (5.0, 5.0))

    def test_nan_is_fault(self):
        with pytest.raises(GeometryFault):
            connector_geometry((0.0, 0.0), (float("nan"), 1.0))
