"""
speciation_tree module: layout/placement.py

Child placement for the species tree.

- children sit one fixed ``vertical_spacing`` below their parent
- left/right children sit ``spread`` either side of the parent's x
- spread grows geometrically with the parent's generation so deep
  branches fan out wider (no collision detection; dense deep trees can
  still overlap)

Coordinates are world pixels; the camera/screen mapping lives in render/.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
import math
from typing import Tuple

import config

Point = Tuple[float, float]


class GeometryFault(ArithmeticError):
    """A position, length or angle came out non-finite (or degenerate)."""


class Direction(IntEnum):
    LEFT = -1
    RIGHT = 1


@dataclass(frozen=True)
class LayoutConfig:
    vertical_spacing: float = config.VERTICAL_SPACING
    base_spread: float = config.BASE_SPREAD
    growth_factor: float = config.SPREAD_GROWTH


def spread_for(parent_generation: int, cfg: LayoutConfig = LayoutConfig()) -> float:
    """Horizontal offset of each child of a parent at ``parent_generation``."""
    try:
        spread = cfg.base_spread * cfg.growth_factor ** parent_generation
    except OverflowError as exc:
        raise GeometryFault(f"spread overflow at generation {parent_generation}") from exc
    if not math.isfinite(spread):
        raise GeometryFault(f"non-finite spread {spread!r} at generation {parent_generation}")
    return spread


def place_child(
    parent_pos: Point,
    parent_generation: int,
    direction: Direction,
    cfg: LayoutConfig = LayoutConfig(),
) -> Point:
    px, py = parent_pos
    x = px + spread_for(parent_generation, cfg) * int(direction)
    y = py + cfg.vertical_spacing
    if not (math.isfinite(x) and math.isfinite(y)):
        raise GeometryFault(f"non-finite child position ({x!r}, {y!r})")
    return (x, y)


def connector_geometry(a: Point, b: Point) -> Tuple[float, float]:
    """
    Length and angle (degrees, atan2 of the delta) of the segment a -> b.
    Raises GeometryFault for non-finite or zero-length segments.
    """
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    length = math.hypot(dx, dy)
    angle = math.degrees(math.atan2(dy, dx))
    if not (math.isfinite(length) and math.isfinite(angle)) or length <= 0.0:
        raise GeometryFault(f"invalid connector {a!r} -> {b!r}")
    return length, angle
