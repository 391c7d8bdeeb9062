"""
Interactive species tree: click a species to split it into two mutated
descendants, drag the background to pan, R to start over.
"""

from __future__ import annotations
import logging
from typing import Optional

import pygame

import config
from evolution.speciation import SimConfig, Simulation
from logging_config import setup_logging
from render import colors
from render.camera import Camera
from render.renderer import draw_hud, draw_scene
from render.scene import Scene
from species.node import Species

logger = logging.getLogger(__name__)


def reset_view(sim: Simulation, cam: Camera) -> None:
    root = sim.reset()
    cam.center_on(root.x, root.y, config.SCREEN_W)


def hovered_species(sim: Simulation, cam: Camera) -> Optional[Species]:
    wx, wy = cam.screen_to_world(*pygame.mouse.get_pos())
    return sim.tree.node_at(wx, wy)


def tree_stats(sim: Simulation) -> dict:
    return {
        "species": len(sim.tree),
        "generations": sim.tree.max_generation(),
        "open": len(sim.tree.branchable_nodes()),
    }


def main():
    setup_logging()

    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    pygame.display.set_caption("speciation_tree")
    clock = pygame.time.Clock()

    scene = Scene()
    cam = Camera()
    sim = Simulation(
        SimConfig(),
        on_node_created=scene.on_node_created,
        on_edge_created=scene.on_edge_created,
    )
    reset_view(sim, cam)

    labels = False
    running = True

    while running:
        clock.tick(config.FPS)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    running = False
                elif e.key == pygame.K_r:
                    reset_view(sim, cam)
                elif e.key == pygame.K_TAB:
                    labels = not labels
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                cam.press(*e.pos)
            elif e.type == pygame.MOUSEMOTION and e.buttons[0]:
                cam.drag(*e.pos)
            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                if cam.release(*e.pos):
                    wx, wy = cam.screen_to_world(*e.pos)
                    target = sim.tree.node_at(wx, wy)
                    if target is not None:
                        sim.request_branch(target.id)

        screen.fill(colors.BG)
        draw_scene(screen, scene, cam, labels=labels)
        draw_hud(screen, tree_stats(sim), hovered=hovered_species(sim, cam))
        pygame.display.flip()

    logger.info("Closing with %d species", len(sim.tree))
    pygame.quit()


if __name__ == "__main__":
    main()
