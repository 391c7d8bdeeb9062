"""Tests for trait mutation."""

import logging
import math
import random

from evolution.mutate import MutationConfig, mutate_border_radius, mutate_traits
from species.traits import (
    BORDER_RADIUS_RANGE,
    DEFAULTS,
    DIMENSION_RANGE,
    EYE_OFFSET_RANGE,
    EYE_SIZE_RANGE,
    HSL,
    LIGHTNESS_RANGE,
    SATURATION_RANGE,
    EyeGeometry,
    Shape,
    Traits,
)


def _within(value, bounds):
    lo, hi = bounds
    return lo <= value <= hi


def _random_parent(rng):
    return Traits(
        width=rng.uniform(*DIMENSION_RANGE),
        height=rng.uniform(*DIMENSION_RANGE),
        border_radius=rng.uniform(*BORDER_RADIUS_RANGE),
        color=HSL(rng.uniform(0.0, 359.999), rng.uniform(*SATURATION_RANGE), rng.uniform(*LIGHTNESS_RANGE)),
        eyes=EyeGeometry(size=rng.uniform(*EYE_SIZE_RANGE), offset=rng.uniform(*EYE_OFFSET_RANGE)),
    )


def _assert_in_bounds(t):
    assert 0.0 <= t.color.h < 360.0
    assert _within(t.color.s, SATURATION_RANGE)
    assert _within(t.color.l, LIGHTNESS_RANGE)
    assert _within(t.width, DIMENSION_RANGE)
    assert _within(t.height, DIMENSION_RANGE)
    assert _within(t.border_radius, BORDER_RADIUS_RANGE)
    assert _within(t.eyes.size, EYE_SIZE_RANGE)
    assert _within(t.eyes.offset, EYE_OFFSET_RANGE)


class TestBounds:
    """Every mutated trait stays inside its declared range."""

    def test_random_parents(self):
        rng = random.Random(11)
        for _ in range(2000):
            _assert_in_bounds(mutate_traits(_random_parent(rng), rng))

    def test_long_lineage(self):
        rng = random.Random(12)
        traits = Traits.starter()
        for _ in range(2000):
            traits = mutate_traits(traits, rng)
            _assert_in_bounds(traits)

    def test_extreme_shifts_still_clamped(self):
        cfg = MutationConfig(
            hue_shift=1000.0, saturation_shift=500.0, lightness_shift=500.0,
            size_change_factor=5.0, border_radius_shift=500.0, eye_change_factor=5.0,
        )
        rng = random.Random(13)
        for _ in range(500):
            _assert_in_bounds(mutate_traits(_random_parent(rng), rng, cfg))

    def test_parent_untouched(self):
        parent = Traits.starter()
        mutate_traits(parent, random.Random(1))
        assert parent == Traits.starter()


class TestHue:
    """Hue wraps rather than clamps."""

    def test_near_zero_and_359(self):
        rng = random.Random(21)
        for h in (0.0, 0.001, 359.9, 359.999):
            parent = Traits(color=HSL(h, 50.0, 50.0))
            for _ in range(500):
                child = mutate_traits(parent, rng)
                assert 0.0 <= child.color.h < 360.0

    def test_hue_wraps_below_zero(self):
        cfg = MutationConfig(hue_shift=10.0)
        rng = random.Random(22)
        hues = [mutate_traits(Traits(color=HSL(1.0, 50.0, 50.0)), rng, cfg).color.h for _ in range(300)]
        assert any(h > 350.0 for h in hues)
        assert any(h < 11.0 for h in hues)

    def test_zero_shift_keeps_color(self):
        cfg = MutationConfig(hue_shift=0.0, saturation_shift=0.0, lightness_shift=0.0)
        child = mutate_traits(Traits(color=HSL(120.0, 60.0, 40.0)), random.Random(1), cfg)
        assert child.color == HSL(120.0, 60.0, 40.0)


class TestSize:
    """Width and height scale by 1 +/- the change factor."""

    def test_scale_band(self):
        cfg = MutationConfig(size_change_factor=0.2)
        rng = random.Random(31)
        for _ in range(500):
            child = mutate_traits(Traits(width=50.0, height=40.0), rng, cfg)
            assert 40.0 - 1e-9 <= child.width <= 60.0 + 1e-9
            assert 32.0 - 1e-9 <= child.height <= 48.0 + 1e-9

    def test_dimensions_vary_independently(self):
        rng = random.Random(32)
        children = [mutate_traits(Traits(width=50.0, height=50.0), rng) for _ in range(50)]
        assert any(not math.isclose(c.width, c.height) for c in children)


class TestShape:
    """Border radius jitters, or flips in discrete mode."""

    def test_continuous_stays_near_parent(self):
        cfg = MutationConfig(border_radius_shift=8.0)
        rng = random.Random(41)
        for _ in range(300):
            r = mutate_border_radius(20.0, rng, cfg)
            assert 12.0 <= r <= 28.0

    def test_discrete_always_flips(self):
        cfg = MutationConfig(discrete_shape=True, shape_mutation_chance=1.0)
        rng = random.Random(42)
        square = Traits(border_radius=0.0)
        circle = Traits(border_radius=50.0)
        assert mutate_traits(square, rng, cfg).shape is Shape.CIRCLE
        assert mutate_traits(circle, rng, cfg).shape is Shape.SQUARE

    def test_discrete_never_flips(self):
        cfg = MutationConfig(discrete_shape=True, shape_mutation_chance=0.0)
        rng = random.Random(43)
        for _ in range(100):
            assert mutate_traits(Traits(border_radius=0.0), rng, cfg).border_radius == 0.0


class TestEyes:
    """Eye geometry scales multiplicatively then clamps."""

    def test_scale_band(self):
        cfg = MutationConfig(eye_change_factor=0.1)
        rng = random.Random(51)
        for _ in range(300):
            eyes = mutate_traits(Traits(eyes=EyeGeometry(size=0.2, offset=0.2)), rng, cfg).eyes
            assert 0.18 - 1e-9 <= eyes.size <= 0.22 + 1e-9
            assert 0.18 - 1e-9 <= eyes.offset <= 0.22 + 1e-9

    def test_low_offset_clamped_up(self):
        cfg = MutationConfig(eye_change_factor=0.0)
        eyes = mutate_traits(Traits(eyes=EyeGeometry(size=0.01, offset=0.0)), random.Random(1), cfg).eyes
        assert eyes.size == EYE_SIZE_RANGE[0]
        assert eyes.offset == EYE_OFFSET_RANGE[0]


class TestMalformedParent:
    """Bad parent values are replaced by defaults, never propagated."""

    def test_nan_and_none_replaced(self, caplog):
        parent = Traits(
            width=float("nan"),
            height=None,
            border_radius=float("inf"),
            color=HSL(float("nan"), "bright", None),
            eyes=EyeGeometry(size=None, offset=float("-inf")),
        )
        cfg = MutationConfig(
            hue_shift=0.0, saturation_shift=0.0, lightness_shift=0.0,
            size_change_factor=0.0, border_radius_shift=0.0, eye_change_factor=0.0,
        )
        with caplog.at_level(logging.WARNING):
            child = mutate_traits(parent, random.Random(1), cfg)

        _assert_in_bounds(child)
        assert child.width == DEFAULTS["width"]
        assert child.height == DEFAULTS["height"]
        assert child.border_radius == DEFAULTS["border_radius"]
        assert child.color == HSL(DEFAULTS["hue"], DEFAULTS["saturation"], DEFAULTS["lightness"])
        assert child.eyes == EyeGeometry(size=DEFAULTS["eye_size"], offset=DEFAULTS["eye_offset"])
        assert "Malformed parent trait" in caplog.text

    def test_missing_color_record(self):
        parent = Traits(color=None, eyes=None)
        child = mutate_traits(parent, random.Random(2))
        _assert_in_bounds(child)

    def test_bool_is_not_a_number(self, caplog):
        with caplog.at_level(logging.WARNING):
            child = mutate_traits(Traits(width=True), random.Random(3))
        assert "width" in caplog.text
        _assert_in_bounds(child)
