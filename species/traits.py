"""
speciation_tree module: species/traits.py

Visual trait record for one species.

One canonical schema for every species:
- body: independent width/height plus a border-radius percentage
  (0 = square corners, 50 = fully round)
- color: HSL
- eyes: size and horizontal offset, both relative to the body

The discrete square/circle shape is derived from the border radius
instead of stored.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

import config

# Declared bounds; every mutation clamps into these.
HUE_RANGE = (0.0, 360.0)  # wraps, upper bound exclusive
SATURATION_RANGE = (30.0, 100.0)
LIGHTNESS_RANGE = (30.0, 80.0)
DIMENSION_RANGE = (10.0, 100.0)
BORDER_RADIUS_RANGE = (0.0, 50.0)
EYE_SIZE_RANGE = (0.05, 0.35)
EYE_OFFSET_RANGE = (0.05, 0.4)

CIRCLE_THRESHOLD = 25.0


class Shape(Enum):
    SQUARE = "square"
    CIRCLE = "circle"


@dataclass(frozen=True)
class HSL:
    h: float
    s: float
    l: float


@dataclass(frozen=True)
class EyeGeometry:
    """
    size:
      - eye diameter as a fraction of the average body dimension
    offset:
      - horizontal distance of each eye from the body centre, as a fraction of width
    """
    size: float = config.ROOT_EYE_SIZE
    offset: float = config.ROOT_EYE_OFFSET


@dataclass(frozen=True)
class Traits:
    width: float = config.ROOT_SIZE
    height: float = config.ROOT_SIZE
    border_radius: float = config.ROOT_BORDER_RADIUS
    color: HSL = field(default_factory=lambda: HSL(*config.ROOT_HSL))
    eyes: EyeGeometry = field(default_factory=EyeGeometry)

    @property
    def shape(self) -> Shape:
        return Shape.CIRCLE if self.border_radius >= CIRCLE_THRESHOLD else Shape.SQUARE

    @property
    def average_dimension(self) -> float:
        return (self.width + self.height) / 2.0

    @staticmethod
    def starter() -> "Traits":
        """Traits of the root species."""
        return Traits()


# Substituted for a malformed parent value before mutating.
DEFAULTS = {
    "hue": config.ROOT_HSL[0],
    "saturation": config.ROOT_HSL[1],
    "lightness": config.ROOT_HSL[2],
    "width": config.ROOT_SIZE,
    "height": config.ROOT_SIZE,
    "border_radius": config.ROOT_BORDER_RADIUS,
    "eye_size": config.ROOT_EYE_SIZE,
    "eye_offset": config.ROOT_EYE_OFFSET,
}
