import random

import pytest

from algotemplates.shortest_path import (
    bellman_ford,
    dijkstra,
    dijkstra_dense,
    floyd_warshall,
    has_negative_cycle,
    spfa,
)


def _random_graph(seed, n, m, low, high):
    rng = random.Random(seed)
    return [(rng.randint(1, n), rng.randint(1, n), rng.randint(low, high)) for _ in range(m)]


def _random_dag(seed, n, m, low, high):
    rng = random.Random(seed)
    edges = []
    for _ in range(m):
        a, b = sorted(rng.sample(range(1, n + 1), 2))
        edges.append((a, b, rng.randint(low, high)))
    return edges


@pytest.mark.parametrize("seed", range(12))
def test_all_algorithms_agree_on_nonnegative_graphs(seed):
    n = 8
    edges = _random_graph(seed, n, 14, 0, 20)
    expected = dijkstra(n, edges)
    assert dijkstra_dense(n, edges) == expected
    via_spfa = spfa(n, edges)
    assert (via_spfa if via_spfa is not None else -1) == expected
    via_floyd = floyd_warshall(n, edges)[1, n]
    assert (via_floyd if via_floyd is not None else -1) == expected
    via_bf = bellman_ford(n, edges, n - 1)
    assert (via_bf if via_bf is not None else -1) == expected


def test_single_edge_distance_is_its_weight():
    edges = [(1, 2, 7)]
    assert dijkstra(2, edges) == 7
    assert dijkstra_dense(2, edges) == 7
    assert spfa(2, edges) == 7


def test_unreachable_target():
    edges = [(2, 1, 3)]
    assert dijkstra(2, edges) == -1
    assert dijkstra_dense(2, edges) == -1
    assert spfa(2, edges) is None
    assert bellman_ford(2, edges, 5) is None


def test_bellman_ford_respects_edge_limit():
    edges = [(1, 2, 1), (2, 3, 1), (1, 3, 5)]
    assert bellman_ford(3, edges, 1) == 5
    assert bellman_ford(3, edges, 2) == 2
    assert bellman_ford(3, edges, 0) is None


@pytest.mark.parametrize("seed", range(10))
def test_negative_weights_without_cycles(seed):
    n = 7
    edges = _random_dag(seed, n, 12, -10, 10)
    assert not has_negative_cycle(n, edges)
    assert bellman_ford(n, edges, n - 1) == spfa(n, edges)
    assert floyd_warshall(n, edges)[1, n] == spfa(n, edges)


def test_negative_cycle_detection():
    cycle = [(1, 2, 1), (2, 3, -4), (3, 1, 1)]
    assert has_negative_cycle(3, cycle)
    assert not has_negative_cycle(3, [(a, b, abs(w)) for a, b, w in cycle])


def test_spfa_raises_on_reachable_negative_cycle():
    with pytest.raises(ValueError):
        spfa(3, [(1, 2, 1), (2, 3, -4), (3, 2, 1)])


def test_unreachable_negative_cycle_is_found_but_spfa_ignores_it():
    edges = [(1, 2, 3), (3, 4, -1), (4, 3, -1)]
    assert has_negative_cycle(4, edges)
    assert spfa(4, edges) is None
    assert spfa(2, [(1, 2, 3)]) == 3


@pytest.mark.parametrize("seed", range(6))
def test_floyd_distances_satisfy_triangle_inequality(seed):
    n = 6
    table = floyd_warshall(n, _random_graph(seed, n, 12, 0, 9))
    for i in range(1, n + 1):
        assert table[i, i] == 0
        for j in range(1, n + 1):
            for k in range(1, n + 1):
                if None not in (table[i, j], table[i, k], table[k, j]):
                    assert table[i, j] <= table[i, k] + table[k, j]
                if table[i, k] is not None and table[k, j] is not None:
                    assert table[i, j] is not None


def test_floyd_keeps_cheapest_parallel_edge():
    table = floyd_warshall(2, [(1, 2, 9), (1, 2, 4)])
    assert table[1, 2] == 4
    assert table[2, 1] is None


def test_edge_outside_node_range_raises():
    with pytest.raises(IndexError):
        dijkstra(2, [(1, 3, 1)])