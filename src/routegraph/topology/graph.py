from __future__ import annotations

from typing import Dict, Iterable, List

from routegraph.models import Edge


def _check_weight(weight: int) -> int:
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise ValueError(f"Edge weight must be an integer, got {weight!r}")
    if weight < 0:
        raise ValueError(f"Edge weight must be non-negative, got {weight}")
    return weight


class Graph:
    """Adjacency-list graph over string node labels with integer edge weights.

    Undirected: every edge is stored twice, once per direction, and each
    adjacency list keeps insertion order so frontier exploration is
    deterministic. The graph is built once and treated as read-only by the
    MST and shortest-path engines.
    """

    def __init__(self) -> None:
        # dict preserves discovery order of nodes
        self._adj: Dict[str, List[Edge]] = {}
        self._edges: List[Edge] = []

    @property
    def nodes(self) -> List[str]:
        return list(self._adj)

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def add_edge(self, u: str, v: str, weight: int) -> Edge:
        u, v = str(u).strip(), str(v).strip()
        if not u or not v:
            raise ValueError("Edge endpoints must be non-empty labels")
        edge = Edge(u, v, _check_weight(weight))
        self._edges.append(edge)
        # Parallel edges are kept; relaxation naturally prefers the lighter one.
        self._adj.setdefault(u, []).append(edge)
        self._adj.setdefault(v, []).append(edge.reversed())
        return edge

    def neighbors(self, node: str) -> List[Edge]:
        return list(self._adj.get(node, []))

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> "Graph":
        g = cls()
        for e in edges:
            g.add_edge(e.u, e.v, e.weight)
        return g
