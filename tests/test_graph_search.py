import itertools
import math

import pytest

from algotemplates.graph_search import (
    eight_puzzle_steps,
    maze_shortest_path,
    n_queens,
    permutations,
    shortest_hops,
    tree_centroid_balance,
    topological_order,
)


@pytest.mark.parametrize("n", [1, 3, 5])
def test_permutations_are_all_orderings_in_order(n):
    result = permutations(n)
    assert len(result) == math.factorial(n)
    assert result == sorted(itertools.permutations(range(1, n + 1)))


def _valid_board(board, n):
    cols = [row.index("Q") for row in board]
    assert all(row.count("Q") == 1 and len(row) == n for row in board)
    assert sorted(cols) == list(range(n))
    assert len({r + c for r, c in enumerate(cols)}) == n
    assert len({r - c for r, c in enumerate(cols)}) == n


@pytest.mark.parametrize("n", [4, 5, 6])
def test_n_queens_boards_are_valid_and_distinct(n):
    boards = n_queens(n)
    for board in boards:
        _valid_board(board, n)
    assert len({tuple(b) for b in boards}) == len(boards)
    assert boards == sorted(boards, key=lambda b: [row.index("Q") for row in b])


def test_eight_queens_count():
    assert len(n_queens(8)) == 92


def test_one_queen_board():
    assert n_queens(1) == [["Q"]]


@pytest.mark.parametrize("rows,cols", [(1, 1), (3, 4), (5, 2)])
def test_open_maze_distance_is_manhattan(rows, cols):
    grid = [[0] * cols for _ in range(rows)]
    assert maze_shortest_path(grid) == rows + cols - 2


def test_walled_off_maze_is_unreachable():
    grid = [[0, 1, 0], [1, 1, 0], [0, 0, 0]]
    assert maze_shortest_path(grid) == -1


def test_maze_detour_is_longer_than_manhattan():
    grid = [[0, 1, 0], [0, 1, 0], [0, 0, 0]]
    assert maze_shortest_path(grid) == 4
    assert maze_shortest_path([[0, 0, 0], [0, 1, 0], [0, 0, 0]]) == 4


def test_empty_maze_rejected():
    with pytest.raises(ValueError):
        maze_shortest_path([])


def test_eight_puzzle_goal_and_neighbours():
    assert eight_puzzle_steps("12345678x") == 0
    assert eight_puzzle_steps("1234567x8") == 1
    assert eight_puzzle_steps(list("1 2 3 4 5 6 7 8 x".split())) == 0


def test_eight_puzzle_unsolvable():
    assert eight_puzzle_steps("21345678x") == -1


def test_eight_puzzle_rejects_bad_state():
    with pytest.raises(ValueError):
        eight_puzzle_steps("1234567xx")


@pytest.mark.parametrize("n", [1, 2, 5, 8])
def test_path_centroid_balance(n):
    edges = [(i, i + 1) for i in range(1, n)]
    assert tree_centroid_balance(n, edges) == n // 2


def test_star_centroid_balance():
    n = 7
    assert tree_centroid_balance(n, [(1, i) for i in range(2, n + 1)]) == 1
    assert tree_centroid_balance(n, [(i, n) for i in range(1, n)]) == 1


def test_shortest_hops_chain_and_shortcut():
    n = 6
    chain = [(i, i + 1) for i in range(1, n)]
    assert shortest_hops(n, chain) == n - 1
    assert shortest_hops(n, chain + [(1, n)]) == 1
    assert shortest_hops(1, []) == 0


def test_shortest_hops_respects_direction():
    assert shortest_hops(3, [(2, 1), (3, 2)]) == -1


def test_topological_order_respects_edges():
    edges = [(1, 3), (2, 3), (3, 4), (1, 4), (5, 2)]
    order = topological_order(5, edges)
    assert sorted(order) == [1, 2, 3, 4, 5]
    position = {node: i for i, node in enumerate(order)}
    assert all(position[a] < position[b] for a, b in edges)


def test_topological_order_rejects_cycle():
    with pytest.raises(ValueError):
        topological_order(3, [(1, 2), (2, 3), (3, 1)])