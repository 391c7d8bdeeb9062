"""
speciation_tree module: render/camera.py

Pan-only camera: maps world pixels to screen pixels by an offset and
turns mouse drags into pans.
"""

from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Optional, Tuple

import config


@dataclass
class Camera:
    offset_x: float = 0.0
    offset_y: float = 0.0
    click_slop: float = config.CLICK_SLOP

    # drag bookkeeping
    _press: Optional[Tuple[float, float]] = None
    _press_offset: Tuple[float, float] = (0.0, 0.0)
    _panning: bool = False

    def world_to_screen(self, x: float, y: float) -> Tuple[float, float]:
        return (x - self.offset_x, y - self.offset_y)

    def screen_to_world(self, sx: float, sy: float) -> Tuple[float, float]:
        return (sx + self.offset_x, sy + self.offset_y)

    def center_on(self, x: float, y: float, screen_w: float, top_margin: float = config.TOP_MARGIN) -> None:
        """Put world (x, y) at the horizontal centre, ``top_margin`` px from the top."""
        self.offset_x = x - screen_w / 2.0
        self.offset_y = y - top_margin

    def press(self, sx: float, sy: float) -> None:
        self._press = (sx, sy)
        self._press_offset = (self.offset_x, self.offset_y)
        self._panning = False

    def drag(self, sx: float, sy: float) -> None:
        if self._press is None:
            return
        dx = sx - self._press[0]
        dy = sy - self._press[1]
        if not self._panning and math.hypot(dx, dy) > self.click_slop:
            self._panning = True
        if self._panning:
            self.offset_x = self._press_offset[0] - dx
            self.offset_y = self._press_offset[1] - dy

    def release(self, sx: float, sy: float) -> bool:
        """
        End the gesture. Returns True when it was a click (never turned
        into a pan), False after a pan or without a matching press.
        """
        if self._press is None:
            return False
        self.drag(sx, sy)
        was_click = not self._panning
        self._press = None
        self._panning = False
        return was_click

    @property
    def panning(self) -> bool:
        return self._panning
