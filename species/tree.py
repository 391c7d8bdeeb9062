"""
speciation_tree module: species/tree.py

Species tree container: every species of the current run, in creation
order, linked to its parent by id.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from species.node import Species
from species.traits import Traits


class UnknownParent(KeyError):
    pass


class AlreadyLocked(RuntimeError):
    pass


@dataclass
class SpeciesTree:
    nodes: List[Species] = field(default_factory=list)
    by_id: Dict[int, Species] = field(default_factory=dict)
    next_id: int = 0

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Species]:
        return iter(self.nodes)

    def reset(self) -> None:
        self.nodes.clear()
        self.by_id.clear()
        self.next_id = 0

    def _register(self, node: Species) -> Species:
        self.nodes.append(node)
        self.by_id[node.id] = node
        self.next_id += 1
        return node

    def add_root(self, traits: Traits, x: float, y: float, name: str) -> Species:
        if self.nodes:
            raise RuntimeError("Tree already has a root; reset() first")
        return self._register(
            Species(id=self.next_id, parent_id=None, generation=0, x=x, y=y, traits=traits, name=name)
        )

    def add_child(self, parent_id: int, traits: Traits, x: float, y: float, name: str) -> Species:
        parent = self.by_id.get(parent_id)
        if parent is None:
            raise UnknownParent(parent_id)
        return self._register(
            Species(
                id=self.next_id,
                parent_id=parent.id,
                generation=parent.generation + 1,
                x=x,
                y=y,
                traits=traits,
                name=name,
            )
        )

    def find_by_id(self, node_id: int) -> Optional[Species]:
        return self.by_id.get(node_id)

    def lock_branch(self, node_id: int) -> Species:
        node = self.by_id.get(node_id)
        if node is None:
            raise UnknownParent(node_id)
        if not node.branchable:
            raise AlreadyLocked(f"species {node_id} has already branched")
        node.branchable = False
        return node

    # Queries

    @property
    def root(self) -> Optional[Species]:
        return self.nodes[0] if self.nodes else None

    def children_of(self, node_id: int) -> List[Species]:
        return [n for n in self.nodes if n.parent_id == node_id]

    def ancestors(self, node_id: int) -> List[Species]:
        """Lineage from the parent of ``node_id`` up to the root."""
        out: List[Species] = []
        node = self.by_id.get(node_id)
        while node is not None and node.parent_id is not None:
            node = self.by_id.get(node.parent_id)
            if node is not None:
                out.append(node)
        return out

    def branchable_nodes(self) -> List[Species]:
        return [n for n in self.nodes if n.branchable]

    def max_generation(self) -> int:
        return max((n.generation for n in self.nodes), default=0)

    def node_at(self, x: float, y: float) -> Optional[Species]:
        """Topmost (most recently created) species whose body contains (x, y)."""
        for node in reversed(self.nodes):
            if node.contains(x, y):
                return node
        return None
