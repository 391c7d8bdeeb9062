"""
speciation_tree module: species/node.py

One species in the tree.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from species.traits import Traits


@dataclass
class Species:
    id: int
    parent_id: Optional[int]
    generation: int
    x: float
    y: float
    traits: Traits
    name: str
    branchable: bool = True

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    def contains(self, px: float, py: float) -> bool:
        """Point-in-body test against the axis-aligned body rectangle."""
        half_w = self.traits.width / 2.0
        half_h = self.traits.height / 2.0
        return abs(px - self.x) <= half_w and abs(py - self.y) <= half_h
