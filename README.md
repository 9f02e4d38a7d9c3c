# algotemplates

A library of classic algorithm templates written as plain Python functions and
small classes. It covers sorting and binary search, digit-string arithmetic,
prefix sums and difference arrays, linked lists, stacks and monotonic queues,
string matching and hashing, union–find, indexed heaps, graph search and
shortest paths, spanning trees and bipartite matching, number theory, linear
systems, combinatorics, impartial games, knapsack and other dynamic programming
problems, and greedy interval methods.

It has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algotemplates.sorting` | `quick_sort`, `merge_sort`, `equal_range` |
| `algotemplates.bignum` | `add`, `subtract`, `multiply`, `divide` on non-negative decimal digit strings |
| `algotemplates.prefix` | `range_sums`, `matrix_range_sums`, `apply_range_additions`, `apply_matrix_additions` |
| `algotemplates.two_pointers` | `find_pair_with_sum`, `is_subsequence`, `lowbit`, `count_set_bits`, `discretized_range_sums`, `merge_intervals` |
| `algotemplates.structures` | `IndexedLinkedList`, `IndexedDoublyLinkedList`, `run_stack_commands`, `run_queue_commands`, `previous_smaller`, `sliding_window_extremes` |
| `algotemplates.strings` | `kmp_find_all`, `Trie`, `max_xor_pair`, `IntHashSet`, `StringHasher` |
| `algotemplates.union_find` | `DisjointSet`, `count_false_statements` |
| `algotemplates.heap` | `smallest_k`, `IndexedHeap` |
| `algotemplates.graph_search` | `permutations`, `n_queens`, `maze_shortest_path`, `eight_puzzle_steps`, `tree_centroid_balance`, `shortest_hops`, `topological_order` |
| `algotemplates.shortest_path` | `dijkstra_dense`, `dijkstra`, `bellman_ford`, `spfa`, `has_negative_cycle`, `floyd_warshall` |
| `algotemplates.spanning` | `prim`, `kruskal`, `max_bipartite_matching` |
| `algotemplates.number_theory` | `is_prime`, `prime_factors`, `primes_up_to`, `divisors`, `divisor_count`, `divisor_sum`, `gcd`, `euler_phi`, `phi_sum`, `quick_pow`, `mod_inverse`, `exgcd`, `solve_linear_congruence`, `chinese_remainder` |
| `algotemplates.linear_system` | `Solution`, `solve_real_system`, `solve_xor_system` |
| `algotemplates.combinatorics` | `binomial_table`, `binomial_mod`, `lucas`, `exact_binomial`, `catalan_mod`, `count_divisible` |
| `algotemplates.games` | `nim_first_wins`, `staircase_nim_first_wins`, `set_nim_first_wins`, `split_nim_first_wins` |
| `algotemplates.knapsack` | `zero_one_knapsack`, `unbounded_knapsack`, `bounded_knapsack`, `bounded_knapsack_binary`, `grouped_knapsack` |
| `algotemplates.dp` | `triangle_max_path`, `lis_length`, `lcs_length`, `edit_distance`, `count_within_distance`, `merge_stones_cost`, `partition_count`, `digit_counts`, `mondrian_tilings`, `shortest_hamilton_path`, `max_party_happiness`, `longest_ski_run` |
| `algotemplates.greedy` | `min_points_cover`, `max_disjoint_intervals`, `min_groups`, `min_cover`, `huffman_merge_cost`, `min_total_wait`, `min_distance_sum`, `min_max_risk` |

## Examples

```python
from algotemplates.sorting import quick_sort
from algotemplates.bignum import add, divide
from algotemplates.number_theory import gcd, primes_up_to
from algotemplates.knapsack import zero_one_knapsack

quick_sort([3, 1, 2])                       # [1, 2, 3]
add("999", "1")                             # "1000"
divide("100", 7)                            # ("14", 2)
gcd(12, 18)                                 # 6
primes_up_to(10)                            # [2, 3, 5, 7]
zero_one_knapsack(5, [(1, 2), (2, 4), (3, 4), (4, 5)])  # 8
```

## Conventions

Graph functions number nodes from 1; edges are `(a, b)` pairs or `(a, b, w)`
weighted triples. Range queries in `algotemplates.prefix` and
`StringHasher` use 1-based inclusive bounds.

When a problem has no answer, the result depends on the function:

- `-1`: `maze_shortest_path`, `eight_puzzle_steps`, `shortest_hops`,
  `dijkstra_dense`, `dijkstra`; `equal_range` returns `(-1, -1)`.
- `None`: `bellman_ford`, `spfa`, `prim`, `kruskal`, `min_cover`, and the
  unreachable pairs in the mapping from `floyd_warshall`.
- `ValueError`: `find_pair_with_sum`, `topological_order` on a cycle, `spfa`
  when a negative cycle is reachable from node 1, `mod_inverse`,
  `solve_linear_congruence`, `chinese_remainder`.
- `solve_real_system` and `solve_xor_system` return a `Solution` member with
  the values only when the solution is `Solution.UNIQUE`, otherwise `None`.

Out-of-range indices and node numbers raise `IndexError`; malformed input such
as a non-digit string or a ragged matrix raises `ValueError`.

## What it does not do

The package is a library only. It has no command-line tool and does not read
problem input from standard input or files; every function takes ordinary
Python values and returns its answer.