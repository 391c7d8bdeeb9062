"""
speciation_tree module: evolution/mutate.py

Mutation operators for species traits (color, body, eyes).
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import math
import random
from typing import Any

import config
from evolution.jitter import clamp, jitter, jitter_factor, wrap_hue
from species.traits import (
    BORDER_RADIUS_RANGE,
    CIRCLE_THRESHOLD,
    DEFAULTS,
    DIMENSION_RANGE,
    EYE_OFFSET_RANGE,
    EYE_SIZE_RANGE,
    HSL,
    LIGHTNESS_RANGE,
    SATURATION_RANGE,
    EyeGeometry,
    Traits,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MutationConfig:
    hue_shift: float = config.HUE_SHIFT
    saturation_shift: float = config.SATURATION_SHIFT
    lightness_shift: float = config.LIGHTNESS_SHIFT
    size_change_factor: float = config.SIZE_CHANGE_FACTOR
    border_radius_shift: float = config.BORDER_RADIUS_SHIFT
    discrete_shape: bool = config.DISCRETE_SHAPE
    shape_mutation_chance: float = config.SHAPE_MUTATION_CHANCE
    eye_change_factor: float = config.EYE_CHANGE_FACTOR


def _finite(value: Any, field_name: str) -> float:
    """
    Return ``value`` as a float, or the documented default for ``field_name``
    when the parent carries something missing or non-finite.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value):
        return float(value)
    default = DEFAULTS[field_name]
    logger.warning("Malformed parent trait %s=%r; using default %s", field_name, value, default)
    return default


def mutate_color(color: HSL, rng: random.Random, cfg: MutationConfig) -> HSL:
    h = _finite(getattr(color, "h", None), "hue")
    s = _finite(getattr(color, "s", None), "saturation")
    l = _finite(getattr(color, "l", None), "lightness")
    return HSL(
        h=wrap_hue(h + jitter(rng, cfg.hue_shift)),
        s=clamp(s + jitter(rng, cfg.saturation_shift), *SATURATION_RANGE),
        l=clamp(l + jitter(rng, cfg.lightness_shift), *LIGHTNESS_RANGE),
    )


def mutate_dimension(value: float, rng: random.Random, cfg: MutationConfig) -> float:
    return clamp(value * jitter_factor(rng, cfg.size_change_factor), *DIMENSION_RANGE)


def mutate_border_radius(radius: float, rng: random.Random, cfg: MutationConfig) -> float:
    """
    Continuous mode: additive jitter clamped to [0, 50].
    Discrete mode: flip square <-> circle with ``shape_mutation_chance``,
    otherwise keep the parent's radius.
    """
    if cfg.discrete_shape:
        if rng.random() < cfg.shape_mutation_chance:
            return BORDER_RADIUS_RANGE[0] if radius >= CIRCLE_THRESHOLD else BORDER_RADIUS_RANGE[1]
        return clamp(radius, *BORDER_RADIUS_RANGE)
    return clamp(radius + jitter(rng, cfg.border_radius_shift), *BORDER_RADIUS_RANGE)


def mutate_eyes(eyes: EyeGeometry, rng: random.Random, cfg: MutationConfig) -> EyeGeometry:
    size = _finite(getattr(eyes, "size", None), "eye_size")
    offset = _finite(getattr(eyes, "offset", None), "eye_offset")
    return EyeGeometry(
        size=clamp(size * jitter_factor(rng, cfg.eye_change_factor), *EYE_SIZE_RANGE),
        offset=clamp(offset * jitter_factor(rng, cfg.eye_change_factor), *EYE_OFFSET_RANGE),
    )


def mutate_traits(parent: Traits, rng: random.Random, cfg: MutationConfig = MutationConfig()) -> Traits:
    """
    Return a mutated child of ``parent``; ``parent`` is left untouched.

    - Hue wraps modulo 360, saturation/lightness clamp.
    - Width and height scale independently by 1 +/- size_change_factor.
    - Border radius jitters (or flips, in discrete mode).
    - Eye size/offset scale by 1 +/- eye_change_factor.
    """
    width = _finite(parent.width, "width")
    height = _finite(parent.height, "height")
    radius = _finite(parent.border_radius, "border_radius")

    return Traits(
        width=mutate_dimension(width, rng, cfg),
        height=mutate_dimension(height, rng, cfg),
        border_radius=mutate_border_radius(radius, rng, cfg),
        color=mutate_color(parent.color, rng, cfg),
        eyes=mutate_eyes(parent.eyes, rng, cfg),
    )
