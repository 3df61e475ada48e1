from .graph import Graph
from .mst import prim_mst
from .shortest_paths import ShortestPathTable, dijkstra

__all__ = [
    "Graph",
    "prim_mst",
    "ShortestPathTable",
    "dijkstra",
]
