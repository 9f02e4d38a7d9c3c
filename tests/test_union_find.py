import random

import pytest

from algotemplates.union_find import DisjointSet, count_false_statements


def test_union_connects_and_separate_sets_stay_apart():
    ds = DisjointSet(5)
    ds.union(1, 2)
    ds.union(4, 5)
    assert ds.connected(1, 2)
    assert ds.connected(5, 4)
    assert not ds.connected(2, 4)
    assert not ds.connected(3, 1)


def test_size_counts_members():
    ds = DisjointSet(6)
    members = [1, 2, 3, 6]
    for a, b in zip(members, members[1:]):
        ds.union(a, b)
    for m in members:
        assert ds.size(m) == len(members)
    assert ds.size(4) == 1


def test_union_of_same_set_reports_false_and_keeps_size():
    ds = DisjointSet(3)
    assert ds.union(1, 2) is True
    assert ds.union(2, 1) is False
    assert ds.size(1) == 2


def test_find_agrees_with_connected():
    rng = random.Random(7)
    ds = DisjointSet(30)
    for _ in range(20):
        ds.union(rng.randint(1, 30), rng.randint(1, 30))
    for a in range(1, 31):
        for b in range(1, 31):
            assert ds.connected(a, b) == (ds.find(a) == ds.find(b))


def test_sizes_sum_to_element_count():
    rng = random.Random(3)
    ds = DisjointSet(40)
    for _ in range(25):
        ds.union(rng.randint(1, 40), rng.randint(1, 40))
    roots = {ds.find(x) for x in range(1, 41)}
    assert sum(ds.size(r) for r in roots) == len(ds)


@pytest.mark.parametrize("x", [0, 4, -1])
def test_out_of_range_element_raises(x):
    ds = DisjointSet(3)
    with pytest.raises(IndexError):
        ds.find(x)


def test_food_chain_worked_example():
    statements = [
        (1, 101, 1),
        (2, 1, 2),
        (2, 2, 3),
        (2, 3, 3),
        (1, 1, 3),
        (2, 3, 1),
        (1, 5, 5),
    ]
    assert count_false_statements(100, statements) == 3


def test_food_chain_consistent_cycle_has_no_lies():
    statements = [(2, 1, 2), (2, 2, 3), (2, 3, 1), (1, 4, 4)]
    assert count_false_statements(4, statements) == 0


def test_food_chain_out_of_range_animals_are_lies():
    bad = [(1, 5, 1), (2, 1, 6)]
    assert count_false_statements(4, bad) == len(bad)


def test_food_chain_animal_eating_itself_is_a_lie():
    statements = [(2, 2, 2)]
    assert count_false_statements(3, statements) == len(statements)


def test_food_chain_contradiction_after_same_kind():
    statements = [(1, 1, 2), (2, 1, 2), (2, 2, 1)]
    assert count_false_statements(2, statements) == len(statements) - 1


def test_food_chain_rejects_unknown_kind():
    with pytest.raises(ValueError):
        count_false_statements(3, [(3, 1, 2)])