from __future__ import annotations

from typing import List, Optional, Set, Tuple
import heapq
import logging
import math

from routegraph.models import MSTResult
from routegraph.topology.graph import Graph

logger = logging.getLogger(__name__)


def prim_mst(graph: Graph, start: Optional[str] = None) -> MSTResult:
    """Prim's minimum spanning tree grown from ``start``.

    ``start`` defaults to the first node the graph discovered. Only the
    component containing ``start`` is spanned; nodes outside it keep an
    infinite key and no predecessor, and contribute nothing to the cost.

    The frontier is a heap with lazy deletion: a node can sit in it several
    times, and entries popped after the node is already in the tree are
    skipped. Ties on key fall back to push order.
    """
    nodes = graph.nodes
    if start is None:
        start = nodes[0] if nodes else None

    result = MSTResult(start=start)
    for n in nodes:
        result.min_edge_weight[n] = math.inf
        result.predecessor[n] = None

    if start is None:
        return result
    if start not in graph:
        logger.warning("MST start node %r is not in the graph; tree is empty", start)
        return result

    key = result.min_edge_weight
    pred = result.predecessor
    key[start] = 0

    visited: Set[str] = set()
    tie = 0
    frontier: List[Tuple[float, int, str]] = [(0, tie, start)]

    while frontier:
        _, _, current = heapq.heappop(frontier)
        if current in visited:
            continue
        visited.add(current)

        for edge in graph.neighbors(current):
            nxt = edge.v
            if nxt in visited or edge.weight >= key[nxt]:
                continue
            key[nxt] = edge.weight
            pred[nxt] = current
            tie += 1
            heapq.heappush(frontier, (edge.weight, tie, nxt))

    logger.debug(
        "Prim from %s reached %d of %d node(s), cost=%d",
        start, len(visited), len(nodes), result.total_cost,
    )
    return result
