import math
import random

import pytest

from Algorithms.Dijkstra import minimax_dijkstra_early_stop, reconstruct_path
from Graph_Generation.generator import edges_to_adjacency, generate_connected_weighted


def test_square():
    adj = edges_to_adjacency(4, [(1, 2, 5), (2, 3, 3), (3, 4, 7), (1, 3, 10)])
    res = minimax_dijkstra_early_stop(adj, 1, 4)
    assert res.value == 7
    assert res.path == [1, 2, 3, 4]
    res = minimax_dijkstra_early_stop(adj, 1, 3)
    assert res.value == 5
    assert res.path == [1, 2, 3]


def test_same_node():
    adj = edges_to_adjacency(2, [(1, 2, 3)])
    res = minimax_dijkstra_early_stop(adj, 2, 2)
    assert res.value == 0
    assert res.path == [2]


def test_unreachable():
    adj = edges_to_adjacency(3, [(1, 2, 3)])
    res = minimax_dijkstra_early_stop(adj, 1, 3)
    assert math.isinf(res.value)
    assert res.path == []


@pytest.mark.parametrize("seed", range(5))
def test_path_realizes_value(seed):
    adj = generate_connected_weighted(50, extra_edges=100, seed=seed)
    weight = {}
    for u in range(1, 51):
        for v, w in adj[u]:
            weight[(u, v)] = min(w, weight.get((u, v), w))
    rng = random.Random(seed)
    for _ in range(30):
        s, t = rng.randint(1, 50), rng.randint(1, 50)
        res = minimax_dijkstra_early_stop(adj, s, t)
        assert res.path[0] == s and res.path[-1] == t
        assert max((weight[e] for e in zip(res.path, res.path[1:])), default=0) == res.value


def test_reconstruct_path():
    parent = [-1, -1, 1, 2, 2]
    assert reconstruct_path(parent, 1, 4) == [1, 2, 4]
    assert reconstruct_path(parent, 1, 1) == [1]
    assert reconstruct_path(parent, 3, 4) == []
