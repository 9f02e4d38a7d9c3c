import random

import pytest

from algotemplates.spanning import kruskal, max_bipartite_matching, prim


def _connected_graph(seed, n, extra):
    rng = random.Random(seed)
    chain = [(i, i + 1, rng.randint(-5, 20)) for i in range(1, n)]
    more = [(rng.randint(1, n), rng.randint(1, n), rng.randint(-5, 20)) for _ in range(extra)]
    return chain, chain + more


@pytest.mark.parametrize("seed", range(12))
def test_prim_and_kruskal_agree(seed):
    n = 9
    chain, edges = _connected_graph(seed, n, 15)
    total = kruskal(n, edges)
    assert prim(n, edges) == total
    assert total <= sum(w for _, _, w in chain)


def test_tree_weight_is_sum_of_its_edges():
    edges = [(1, 2, 4), (1, 3, 6), (3, 4, -2)]
    expected = sum(w for _, _, w in edges)
    assert prim(4, edges) == expected
    assert kruskal(4, edges) == expected


def test_disconnected_graph_has_no_spanning_tree():
    edges = [(1, 2, 1), (3, 4, 1)]
    assert prim(4, edges) is None
    assert kruskal(4, edges) is None


def test_cheapest_parallel_edge_is_used():
    edges = [(1, 2, 8), (2, 1, 3)]
    assert prim(2, edges) == 3
    assert kruskal(2, edges) == 3


def test_single_node_tree_is_empty():
    assert prim(1, []) == 0
    assert kruskal(1, []) == 0


def test_identity_edges_give_perfect_matching():
    n = 6
    assert max_bipartite_matching(n, n, [(i, i) for i in range(1, n + 1)]) == n


def test_complete_bipartite_matching_is_smaller_side():
    n1, n2 = 3, 5
    edges = [(a, b) for a in range(1, n1 + 1) for b in range(1, n2 + 1)]
    assert max_bipartite_matching(n1, n2, edges) == min(n1, n2)


def test_shared_right_node_matches_once():
    assert max_bipartite_matching(4, 2, [(a, 1) for a in range(1, 5)]) == 1


def test_augmenting_path_is_found():
    edges = [(1, 1), (1, 2), (2, 1)]
    assert max_bipartite_matching(2, 2, edges) == 2


@pytest.mark.parametrize("seed", range(8))
def test_matching_bounded_by_endpoints(seed):
    rng = random.Random(seed)
    n1, n2 = 6, 5
    edges = [(rng.randint(1, n1), rng.randint(1, n2)) for _ in range(8)]
    size = max_bipartite_matching(n1, n2, edges)
    assert size <= min(len({a for a, _ in edges}), len({b for _, b in edges}))
    assert size >= (1 if edges else 0)


def test_matching_rejects_out_of_range_edge():
    with pytest.raises(IndexError):
        max_bipartite_matching(2, 2, [(1, 3)])