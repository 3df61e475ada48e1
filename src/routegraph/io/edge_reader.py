from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union
import logging

from routegraph.models import Edge
from routegraph.topology.graph import Graph

logger = logging.getLogger(__name__)


class EdgeListError(ValueError):
    """A line of the edge list could not be parsed."""

    def __init__(self, line_no: int, line: str, reason: str):
        self.line_no = line_no
        self.line = line
        super().__init__(f"line {line_no}: {reason}: {line!r}")


def parse_edge_line(line: str, line_no: int) -> Edge:
    parts = line.split()
    if len(parts) < 3:
        raise EdgeListError(line_no, line, "expected 'origin destination weight'")
    origin, destination, raw = parts[0], parts[1], parts[2]
    try:
        weight = int(raw)
    except ValueError as e:
        raise EdgeListError(line_no, line, f"weight {raw!r} is not an integer") from e
    if weight < 0:
        raise EdgeListError(line_no, line, "negative weights are not supported")
    return Edge(origin, destination, weight)


def read_edges(stream: Iterable[str]) -> List[Edge]:
    """Parse an edge list.

    The first line is a header and is discarded. Every other non-blank line is
    ``origin destination weight`` separated by whitespace; extra fields are
    ignored. Any malformed line aborts the whole read.
    """
    edges: List[Edge] = []
    for line_no, line in enumerate(stream, start=1):
        if line_no == 1:
            continue
        line = line.strip()
        if not line:
            continue
        edges.append(parse_edge_line(line, line_no))
    return edges


def load_edges(path: Union[str, Path]) -> List[Edge]:
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Edge list not found: {filepath}")
    with filepath.open("r", encoding="utf-8-sig") as f:
        edges = read_edges(f)
    logger.info("Loaded %d edge(s) from %s", len(edges), filepath)
    return edges


def load_graph(path: Union[str, Path]) -> Graph:
    return Graph.from_edges(load_edges(path))
