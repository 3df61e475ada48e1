from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple


@dataclass(frozen=True)
class Edge:
    """Weighted connection between two nodes.

    Stored in adjacency lists as a directed entry ``u -> v``; the graph keeps
    one entry per direction so the logical edge stays undirected.
    """
    u: str
    v: str
    weight: int = 0

    def reversed(self) -> "Edge":
        return Edge(self.v, self.u, self.weight)


@dataclass
class MSTResult:
    """Per-node state left behind by Prim's algorithm."""

    start: Optional[str]
    min_edge_weight: Dict[str, float] = field(default_factory=dict)
    predecessor: Dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def total_cost(self) -> int:
        """Sum of connecting weights over every node that joined the tree."""
        return int(sum(
            self.min_edge_weight[n]
            for n, p in self.predecessor.items()
            if p is not None
        ))

    def tree_edges(self) -> List[Tuple[str, str, int]]:
        return [
            (p, n, int(self.min_edge_weight[n]))
            for n, p in self.predecessor.items()
            if p is not None
        ]

    def spans(self, node: str) -> bool:
        # The root has key 0 and no predecessor; everything else needs a link.
        return node == self.start or self.predecessor.get(node) is not None

    @property
    def tree_nodes(self) -> List[str]:
        return [n for n in self.predecessor if self.spans(n)]


@dataclass(eq=False)
class Entity:
    """A record grouped by a shared attribute (e.g. a user and their country).

    Hashing is by identity so two rows with the same fields stay distinct.
    """

    id: int
    name: str
    attribute: str
    connections: Set["Entity"] = field(default_factory=set, repr=False)

    def add_connection(self, other: "Entity") -> None:
        if other is not self:
            self.connections.add(other)

    def __str__(self) -> str:
        return f"{self.name} ({self.attribute})"
