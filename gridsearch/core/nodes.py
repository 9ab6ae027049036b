# gridsearch/core/nodes.py
#!/usr/bin/env python3
"""
Position nodes held in an arena.

A node is an index into NodeArena; its parent index is written once by
add() and never changed, so parent chains are acyclic and end at a root
(parent == NO_PARENT).
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple

from gridsearch.core.types import Cell

NO_PARENT = -1


class PendingMove(NamedTuple):
    x: int
    y: int
    origin: int   # arena index of the node this move was expanded from


@dataclass
class NodeArena:
    xs: List[int] = field(default_factory=list)
    ys: List[int] = field(default_factory=list)
    parents: List[int] = field(default_factory=list)

    def add(self, x: int, y: int, parent: int = NO_PARENT) -> int:
        if parent != NO_PARENT and not (0 <= parent < len(self.parents)):
            raise IndexError(f"unknown parent node {parent}")
        self.xs.append(x)
        self.ys.append(y)
        self.parents.append(parent)
        return len(self.parents) - 1

    def root(self, c: Cell) -> int:
        return self.add(c[0], c[1], NO_PARENT)

    def cell(self, node: int) -> Cell:
        return (self.xs[node], self.ys[node])

    def parent(self, node: int) -> int:
        return self.parents[node]

    def is_root(self, node: int) -> bool:
        return self.parents[node] == NO_PARENT

    def reverse_path(self, node: int) -> List[Cell]:
        """Coordinates from `node` back to its root, root included."""
        path: List[Cell] = []
        cur = node
        while cur != NO_PARENT:
            path.append(self.cell(cur))
            cur = self.parents[cur]
        return path

    def path_to(self, node: int) -> List[Cell]:
        path = self.reverse_path(node)
        path.reverse()
        return path

    def clear(self) -> None:
        self.xs.clear(); self.ys.clear(); self.parents.clear()

    def __len__(self) -> int:
        return len(self.parents)
