import random

import pytest

from algotemplates.two_pointers import (
    count_set_bits,
    discretized_range_sums,
    find_pair_with_sum,
    is_subsequence,
    lowbit,
    merge_intervals,
)


def test_find_pair_with_sum_finds_valid_pair():
    rng = random.Random(5)
    for _ in range(20):
        a = sorted(rng.sample(range(0, 200), 15))
        b = sorted(rng.sample(range(0, 200), 12))
        target = a[rng.randrange(15)] + b[rng.randrange(12)]
        i, j = find_pair_with_sum(a, b, target)
        assert a[i] + b[j] == target


def test_find_pair_with_sum_missing():
    with pytest.raises(ValueError):
        find_pair_with_sum([1, 2], [3, 4], 100)


def test_is_subsequence():
    rng = random.Random(8)
    b = [rng.randint(0, 5) for _ in range(30)]
    kept = sorted(rng.sample(range(30), 10))
    assert is_subsequence([b[k] for k in kept], b) is True
    assert is_subsequence([], b) is True
    assert is_subsequence([99], b) is False
    assert is_subsequence([1, 2], [2, 1]) is False


def test_lowbit_is_lowest_power_of_two():
    for x in range(1, 300):
        bit = lowbit(x)
        assert bit & (bit - 1) == 0
        assert x % bit == 0
        assert (x // bit) % 2 == 1


def test_count_set_bits_matches_bin():
    for x in list(range(0, 200)) + [2 ** 31 - 1, 123456789]:
        assert count_set_bits(x) == bin(x).count("1")


def test_count_set_bits_negative_uses_32_bits():
    assert count_set_bits(-1) == 32


def test_discretized_range_sums_match_direct_sum():
    rng = random.Random(13)
    additions = [(rng.randint(-10 ** 9, 10 ** 9), rng.randint(-5, 5)) for _ in range(40)]
    additions += [(additions[0][0], 7)]
    queries = []
    for _ in range(30):
        low = rng.randint(-10 ** 9, 10 ** 9)
        queries.append((low, rng.randint(low, 10 ** 9)))
    expected = [sum(c for x, c in additions if l <= x <= r) for l, r in queries]
    assert discretized_range_sums(additions, queries) == expected


def test_merge_intervals_invariants():
    rng = random.Random(21)
    segments = []
    for _ in range(50):
        start = rng.randint(-100, 100)
        segments.append((start, start + rng.randint(0, 15)))
    merged = merge_intervals(segments)
    assert len(merged) >= 1
    neighbours = list(zip(merged, merged[1:]))
    assert all(prev_end < next_start for (_, prev_end), (next_start, _) in neighbours)
    assert all(
        any(s <= start and end <= e for s, e in merged) for start, end in segments
    )
    assert all(any(start == s for start, _ in segments) for s, _ in merged)
    assert all(any(end == e for _, end in segments) for _, e in merged)


def test_merge_intervals_separate_segments_stay_apart():
    assert merge_intervals([(1, 2), (4, 5), (3, 3)]) == [(1, 2), (3, 3), (4, 5)]


def test_merge_intervals_touching_and_empty():
    assert merge_intervals([(2, 3), (1, 2)]) == [(1, 3)]
    assert merge_intervals([]) == []