import math
import random

import pytest

from routegraph.models import Edge
from routegraph.topology import Graph, ShortestPathTable, dijkstra


def _scenario():
    return Graph.from_edges([Edge("A", "B", 4), Edge("A", "C", 2), Edge("C", "B", 1)])


def _random_graph(seed, n=6, m=9, max_w=15):
    rng = random.Random(seed)
    nodes = [f"N{i}" for i in range(n)]
    g = Graph()
    for _ in range(m):
        a, b = rng.sample(nodes, 2)
        g.add_edge(a, b, rng.randint(0, max_w))
    return g


def _path_weight(graph, path):
    """Sum of the lightest edge between each consecutive pair of the path."""
    total = 0
    for a, b in zip(path, path[1:]):
        weights = [e.weight for e in graph.neighbors(a) if e.v == b]
        assert weights, f"no edge between {a} and {b}"
        total += min(weights)
    return total


def _brute_force(graph, src, dst):
    """Shortest simple-path length by exhaustive DFS (small graphs only)."""
    best = math.inf

    def walk(node, seen, total):
        nonlocal best
        if node == dst:
            best = min(best, total)
            return
        for e in graph.neighbors(node):
            if e.v not in seen:
                walk(e.v, seen | {e.v}, total + e.weight)

    if src in graph:
        walk(src, {src}, 0)
    return best


def test_dijkstra_concrete_scenario():
    dist, prev = dijkstra(_scenario(), "A")
    assert dist == {"A": 0, "B": 3, "C": 2}
    assert prev == {"A": None, "B": "C", "C": "A"}


def test_scenario_path_and_table():
    table = ShortestPathTable(_scenario()).build()
    assert table.reconstruct_path("A", "B") == ["A", "C", "B"]
    assert table.reconstruct_path("B", "A") == ["B", "C", "A"]
    assert table.distance("B", "C") == 1
    assert table.matrix()["C"] == {"A": 2, "B": 1, "C": 0}


@pytest.mark.parametrize("seed", range(10))
def test_distances_match_brute_force(seed):
    g = _random_graph(seed)
    table = ShortestPathTable(g).build()
    for o in g.nodes:
        for d in g.nodes:
            assert table.distance(o, d) == _brute_force(g, o, d)


@pytest.mark.parametrize("seed", range(10))
def test_paths_follow_edges_and_sum_to_distance(seed):
    g = _random_graph(seed)
    table = ShortestPathTable(g).build()
    for o in g.nodes:
        for d in g.nodes:
            path = table.reconstruct_path(o, d)
            if not table.is_reachable(o, d):
                assert path == []
                continue
            assert path[0] == o
            assert path[-1] == d
            assert _path_weight(g, path) == table.distance(o, d)


def test_self_distance_and_self_path():
    table = ShortestPathTable(_scenario()).build()
    for n in ("A", "B", "C"):
        assert table.distance(n, n) == 0
        assert table.reconstruct_path(n, n) == [n]


def test_unreachable_destination():
    g = Graph.from_edges([Edge("A", "B", 1), Edge("C", "D", 1)])
    table = ShortestPathTable(g).build()
    assert math.isinf(table.distance("A", "D"))
    assert not table.is_reachable("A", "D")
    assert table.reconstruct_path("A", "D") == []
    assert table.reconstruct_path("A", "B") == ["A", "B"]


def test_lookup_misses_are_unreachable():
    table = ShortestPathTable(_scenario()).build()
    assert math.isinf(table.distance("A", "ZZZ"))
    assert math.isinf(table.distance("ZZZ", "A"))
    assert table.reconstruct_path("ZZZ", "A") == []
    assert table.reconstruct_path("A", "ZZZ") == []


def test_origin_not_computed_yields_no_path():
    table = ShortestPathTable(_scenario())
    table.compute_from("A")
    assert table.reconstruct_path("A", "B") == ["A", "C", "B"]
    assert table.reconstruct_path("B", "A") == []
    assert math.isinf(table.distance("B", "A"))


def test_dijkstra_from_unknown_origin():
    dist, prev = dijkstra(_scenario(), "Q")
    assert all(math.isinf(d) for d in dist.values())
    assert all(p is None for p in prev.values())


def test_parallel_edges_prefer_lighter_weight():
    g = Graph.from_edges([Edge("A", "B", 10), Edge("A", "B", 3)])
    dist, _ = dijkstra(g, "A")
    assert dist["B"] == 3


def test_corrupted_predecessors_do_not_loop_forever():
    table = ShortestPathTable(_scenario()).build()
    table.predecessors["A"]["C"] = "B"
    table.predecessors["A"]["B"] = "C"
    with pytest.raises(ValueError):
        table.reconstruct_path("A", "B")


def test_equal_distances_keep_the_first_pushed_predecessor():
    # A-B and A-C tie, so B is settled first and relaxes D before C can.
    g = Graph.from_edges([Edge("A", "B", 1), Edge("A", "C", 1), Edge("B", "D", 1), Edge("C", "D", 1)])
    dist, prev = dijkstra(g, "A")
    assert dist["D"] == 2
    assert prev["D"] == "B"
    assert ShortestPathTable(g).build().reconstruct_path("A", "D") == ["A", "B", "D"]

    flipped = Graph.from_edges([Edge("A", "C", 1), Edge("A", "B", 1), Edge("C", "D", 1), Edge("B", "D", 1)])
    assert dijkstra(flipped, "A")[1]["D"] == "C"
