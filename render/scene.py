"""
speciation_tree module: render/scene.py

Retained draw list built from the simulation's notifications.

Wire ``Scene.on_node_created`` / ``Scene.on_edge_created`` into a
Simulation; the renderer then draws ``sprites`` and ``connectors`` every
frame without touching the simulation. A root species (no parent) means
the run was reset, so the scene starts over.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import List, Tuple

from layout.placement import GeometryFault, connector_geometry
from render.colors import hsl_to_rgb
from species.node import Species

logger = logging.getLogger(__name__)


@dataclass
class Eye:
    x: float
    y: float
    radius: float


@dataclass
class SpeciesSprite:
    species: Species
    rect: Tuple[float, float, float, float]  # world left, top, width, height
    color: Tuple[int, int, int]
    corner_radius: int
    eyes: List[Eye]


@dataclass
class Connector:
    start: Tuple[float, float]
    end: Tuple[float, float]
    length: float
    angle: float  # degrees


def build_sprite(node: Species) -> SpeciesSprite:
    t = node.traits
    left = node.x - t.width / 2.0
    top = node.y - t.height / 2.0

    # border_radius is a percentage of the shorter side, 50 = fully round
    corner = int(round(min(t.width, t.height) * t.border_radius / 100.0))

    eye_r = max(1.0, t.eyes.size * t.average_dimension / 2.0)
    eye_dx = t.eyes.offset * t.width
    eye_y = node.y - t.height * 0.15
    eyes = [Eye(node.x - eye_dx, eye_y, eye_r), Eye(node.x + eye_dx, eye_y, eye_r)]

    return SpeciesSprite(
        species=node,
        rect=(left, top, t.width, t.height),
        color=hsl_to_rgb(t.color),
        corner_radius=corner,
        eyes=eyes,
    )


@dataclass
class Scene:
    sprites: List[SpeciesSprite] = field(default_factory=list)
    connectors: List[Connector] = field(default_factory=list)

    def clear(self) -> None:
        self.sprites.clear()
        self.connectors.clear()

    def on_node_created(self, node: Species) -> None:
        if node.is_root:
            self.clear()
        self.sprites.append(build_sprite(node))

    def on_edge_created(self, parent: Species, child: Species) -> None:
        try:
            length, angle = connector_geometry(parent.pos, child.pos)
        except GeometryFault as exc:
            logger.error("Not drawing connector %d -> %d: %s", parent.id, child.id, exc)
            return
        self.connectors.append(Connector(start=parent.pos, end=child.pos, length=length, angle=angle))

