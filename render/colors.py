"""
speciation_tree module: render/colors.py

Central color palette.
"""

from __future__ import annotations
from typing import Tuple

import pygame

from species.traits import HSL

BG = (245, 245, 240)
CONNECTOR = (150, 150, 160)
OUTLINE = (40, 40, 48)
LOCKED_OUTLINE = (160, 160, 168)
EYE_WHITE = (250, 250, 250)
PUPIL = (20, 20, 24)
TEXT = (30, 30, 36)
LABEL = (90, 90, 100)


def hsl_to_rgb(color: HSL) -> Tuple[int, int, int]:
    c = pygame.Color(0, 0, 0)
    c.hsla = (color.h % 360.0, color.s, color.l, 100.0)
    return (c.r, c.g, c.b)
