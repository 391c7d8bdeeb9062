"""
speciation_tree module: evolution/speciation.py

Simulation controller: owns the species tree, the name registry and the
random source for one run, and exposes the two commands the UI calls:

- reset():            discard everything and seed a fresh root
- request_branch(id): lock a branchable species and spawn two mutated children

Rendering is not done here. Listeners passed in as ``on_node_created`` and
``on_edge_created`` are told about every species/connector as it appears.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import random
from typing import Callable, List, Optional, Set, Tuple

import config
from evolution.mutate import MutationConfig, mutate_traits
from layout.placement import Direction, GeometryFault, LayoutConfig, Point, place_child
from species.naming import NameConfig, generate_unique_name
from species.node import Species
from species.traits import Traits
from species.tree import SpeciesTree

logger = logging.getLogger(__name__)

NodeListener = Callable[[Species], None]
EdgeListener = Callable[[Species, Species], None]


@dataclass(frozen=True)
class SimConfig:
    mutation: MutationConfig = field(default_factory=MutationConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    naming: NameConfig = field(default_factory=NameConfig)
    root_traits: Traits = field(default_factory=Traits.starter)
    root_pos: Point = (config.ROOT_X, config.ROOT_Y)
    seed: Optional[int] = config.SEED


class Simulation:
    def __init__(
        self,
        cfg: SimConfig = SimConfig(),
        on_node_created: Optional[NodeListener] = None,
        on_edge_created: Optional[EdgeListener] = None,
    ) -> None:
        self.cfg = cfg
        self.rng = random.Random(cfg.seed)
        self.tree = SpeciesTree()
        self.names: Set[str] = set()
        self.on_node_created = on_node_created
        self.on_edge_created = on_edge_created

    def reset(self) -> Species:
        self.tree.reset()
        self.names.clear()

        name = self._claim_name()
        x, y = self.cfg.root_pos
        root = self.tree.add_root(self.cfg.root_traits, x, y, name)
        logger.info("Simulation reset: root %s (%d)", root.name, root.id)

        if self.on_node_created is not None:
            self.on_node_created(root)
        return root

    def request_branch(self, node_id: int) -> List[Species]:
        """
        Speciate ``node_id`` into a left and a right child.

        Unknown or already-branched ids are ignored (stale or duplicate
        clicks) and return an empty list. A child whose position cannot be
        computed is skipped; if neither child can be placed the parent stays
        branchable.
        """
        parent = self.tree.find_by_id(node_id)
        if parent is None or not parent.branchable:
            logger.debug("Ignoring branch request for %r", node_id)
            return []

        planned: List[Tuple[Traits, Point]] = []
        for direction in (Direction.LEFT, Direction.RIGHT):
            traits = mutate_traits(parent.traits, self.rng, self.cfg.mutation)
            try:
                pos = place_child(parent.pos, parent.generation, direction, self.cfg.layout)
            except GeometryFault as exc:
                logger.error("Skipping %s child of %s: %s", direction.name.lower(), parent.name, exc)
                continue
            planned.append((traits, pos))

        if not planned:
            return []

        self.tree.lock_branch(parent.id)

        children: List[Species] = []
        for traits, (x, y) in planned:
            child = self.tree.add_child(parent.id, traits, x, y, self._claim_name())
            children.append(child)
        logger.debug(
            "%s (%d) speciated into %s",
            parent.name,
            parent.id,
            ", ".join(c.name for c in children),
        )

        for child in children:
            if self.on_node_created is not None:
                self.on_node_created(child)
            if self.on_edge_created is not None:
                self.on_edge_created(parent, child)
        return children

    def _claim_name(self) -> str:
        name = generate_unique_name(self.names, self.rng, self.cfg.naming)
        self.names.add(name)
        return name
