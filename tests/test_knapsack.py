import pytest

from algotemplates.knapsack import (
    bounded_knapsack,
    bounded_knapsack_binary,
    grouped_knapsack,
    unbounded_knapsack,
    zero_one_knapsack,
)

ITEMS = [(1, 2), (2, 4), (3, 4), (4, 5)]
COUNTED = [(1, 2, 3), (2, 4, 1), (3, 4, 3), (4, 5, 2)]


def test_zero_one_sample():
    assert zero_one_knapsack(5, ITEMS) == 8


def test_unbounded_sample():
    assert unbounded_knapsack(5, ITEMS) == 10


def test_bounded_sample():
    assert bounded_knapsack(5, COUNTED) == 10


@pytest.mark.parametrize("capacity", range(0, 16))
def test_binary_split_matches_naive(capacity):
    assert bounded_knapsack_binary(capacity, COUNTED) == bounded_knapsack(capacity, COUNTED)


@pytest.mark.parametrize("capacity", [0, 3, 7, 12])
def test_bounded_matches_expanded_zero_one(capacity):
    expanded = [(v, w) for v, w, s in COUNTED for _ in range(s)]
    assert bounded_knapsack(capacity, COUNTED) == zero_one_knapsack(capacity, expanded)


@pytest.mark.parametrize("capacity", [1, 5, 9])
def test_grouped_with_singletons_is_zero_one(capacity):
    groups = [[item] for item in ITEMS]
    assert grouped_knapsack(capacity, groups) == zero_one_knapsack(capacity, ITEMS)


@pytest.mark.parametrize("capacity", [2, 6, 11])
def test_unbounded_equals_bounded_with_enough_copies(capacity):
    counted = [(v, w, capacity // v) for v, w in ITEMS]
    assert unbounded_knapsack(capacity, ITEMS) == bounded_knapsack(capacity, counted)


def test_grouped_takes_one_per_group():
    assert grouped_knapsack(3, [[(1, 2), (2, 4)]]) == 4


def test_value_grows_with_capacity():
    values = [zero_one_knapsack(c, ITEMS) for c in range(12)]
    assert values == sorted(values)
    assert unbounded_knapsack(7, ITEMS) >= zero_one_knapsack(7, ITEMS)


def test_empty_and_zero_capacity():
    assert zero_one_knapsack(10, []) == 0
    assert unbounded_knapsack(0, ITEMS) == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        zero_one_knapsack(-1, ITEMS)


def test_negative_volume_rejected():
    with pytest.raises(ValueError):
        unbounded_knapsack(5, [(-1, 3)])


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        bounded_knapsack_binary(5, [(1, 1, -2)])