"""
speciation_tree module: render/renderer.py

Pygame rendering of the species tree.
"""

from __future__ import annotations
from typing import Optional

import pygame

from render import colors
from render.camera import Camera
from render.scene import Scene, SpeciesSprite
from species.node import Species


def _draw_sprite(screen: pygame.Surface, sprite: SpeciesSprite, cam: Camera) -> None:
    left, top, w, h = sprite.rect
    sx, sy = cam.world_to_screen(left, top)
    rect = pygame.Rect(int(sx), int(sy), max(1, int(w)), max(1, int(h)))

    pygame.draw.rect(screen, sprite.color, rect, border_radius=sprite.corner_radius)

    # speciated species keep a faded outline
    outline = colors.OUTLINE if sprite.species.branchable else colors.LOCKED_OUTLINE
    pygame.draw.rect(screen, outline, rect, width=2, border_radius=sprite.corner_radius)

    for eye in sprite.eyes:
        ex, ey = cam.world_to_screen(eye.x, eye.y)
        pygame.draw.circle(screen, colors.EYE_WHITE, (int(ex), int(ey)), max(1, int(eye.radius)))
        pygame.draw.circle(screen, colors.PUPIL, (int(ex), int(ey)), max(1, int(eye.radius * 0.5)))


def draw_scene(screen: pygame.Surface, scene: Scene, cam: Camera, labels: bool = False) -> None:
    # connectors first so bodies sit on top
    for c in scene.connectors:
        a = cam.world_to_screen(*c.start)
        b = cam.world_to_screen(*c.end)
        pygame.draw.line(screen, colors.CONNECTOR, a, b, 2)

    for sprite in scene.sprites:
        _draw_sprite(screen, sprite, cam)

    if labels:
        font = pygame.font.Font(None, 16)
        for sprite in scene.sprites:
            node = sprite.species
            sx, sy = cam.world_to_screen(node.x, node.y + node.traits.height / 2.0 + 4)
            txt = font.render(node.name, True, colors.LABEL)
            screen.blit(txt, (sx - txt.get_width() / 2, sy))


def draw_hud(screen: pygame.Surface, stats: dict, hovered: Optional[Species] = None) -> None:
    font = pygame.font.Font(None, 24)

    lines = [
        f"Species: {stats.get('species', 0)}",
        f"Generations: {stats.get('generations', 0)}  Open branches: {stats.get('open', 0)}",
        "Click: speciate   Drag: pan   R: reset   TAB: names",
    ]
    if hovered is not None:
        lines.append(f"{hovered.name}  (gen {hovered.generation}, {hovered.traits.shape.value})")

    y = 10
    for line in lines:
        txt = font.render(line, True, colors.TEXT)
        screen.blit(txt, (12, y))
        y += 20
