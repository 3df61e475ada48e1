"""Weighted graph analyses: Prim's MST, all-pairs Dijkstra and attribute-clique connectivity."""

__version__ = "0.1.0"
