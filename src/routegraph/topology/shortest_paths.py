from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple
import heapq
import logging
import math

from routegraph.topology.graph import Graph

logger = logging.getLogger(__name__)

Distances = Dict[str, float]
Predecessors = Dict[str, Optional[str]]


def dijkstra(graph: Graph, origin: str) -> Tuple[Distances, Predecessors]:
    """Single-source shortest paths over non-negative integer weights.

    Returns (distances, predecessors) covering every graph node. Unreachable
    nodes keep ``math.inf`` and a ``None`` predecessor. Negative weights are
    not supported.
    """
    dist: Distances = {n: math.inf for n in graph.nodes}
    prev: Predecessors = {n: None for n in graph.nodes}
    if origin not in graph:
        return dist, prev

    dist[origin] = 0
    tie = 0
    pq: List[Tuple[float, int, str]] = [(0, tie, origin)]

    while pq:
        d, _, u = heapq.heappop(pq)
        if d > dist[u]:
            # superseded by a shorter entry pushed later
            continue
        for e in graph.neighbors(u):
            nd = d + e.weight
            if nd < dist[e.v]:
                dist[e.v] = nd
                prev[e.v] = u
                tie += 1
                heapq.heappush(pq, (nd, tie, e.v))

    return dist, prev


class ShortestPathTable:
    """All-pairs shortest distances built from one Dijkstra run per origin.

    Predecessors are kept per origin so any origin/destination pair can be
    turned back into a node sequence. Queries for unknown origins or
    destinations answer "unreachable" rather than raising.
    """

    def __init__(self, graph: Graph):
        self.graph = graph
        self.distances: Dict[str, Distances] = {}
        self.predecessors: Dict[str, Predecessors] = {}

    @property
    def nodes(self) -> List[str]:
        return self.graph.nodes

    def compute_from(self, origin: str) -> Distances:
        dist, prev = dijkstra(self.graph, origin)
        self.distances[origin] = dist
        self.predecessors[origin] = prev
        return dist

    def build(self) -> "ShortestPathTable":
        for origin in self.graph.nodes:
            self.compute_from(origin)
        logger.debug("Shortest-path table built for %d origin(s)", len(self.distances))
        return self

    def distance(self, origin: str, destination: str) -> float:
        return self.distances.get(origin, {}).get(destination, math.inf)

    def is_reachable(self, origin: str, destination: str) -> bool:
        return not math.isinf(self.distance(origin, destination))

    def matrix(self) -> Dict[str, Dict[str, float]]:
        order = self.nodes
        return {o: {d: self.distance(o, d) for d in order} for o in order}

    def reconstruct_path(self, origin: str, destination: str) -> List[str]:
        """Node sequence from origin to destination, or [] when there is none."""
        if origin == destination:
            return [origin]
        if not self.is_reachable(origin, destination):
            return []

        prev = self.predecessors[origin]
        path: List[str] = []
        seen: Set[str] = set()
        step: Optional[str] = destination
        # A valid chain never revisits a node, so it is at most len(prev) long.
        while step is not None:
            if step in seen or len(path) > len(prev):
                raise ValueError(
                    f"Predecessor chain from {destination!r} back to {origin!r} does not terminate"
                )
            seen.add(step)
            path.append(step)
            step = prev.get(step)
        path.reverse()

        if path[0] != origin:
            raise ValueError(f"Predecessor chain for {destination!r} does not lead back to {origin!r}")
        return path
