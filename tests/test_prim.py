import pytest

from Algorithms.Prim import prim_spanning_tree, DisconnectedGraphError
from Graph_Generation.generator import edges_to_adjacency, generate_connected_weighted, adjacency_to_edges


SQUARE = [(1, 2, 5), (2, 3, 3), (3, 4, 7), (1, 3, 10)]


def test_square_drops_heaviest_cycle_edge():
    res = prim_spanning_tree(edges_to_adjacency(4, SQUARE))
    assert res.edges == [(1, 2, 5), (2, 3, 3), (3, 4, 7)]
    assert res.total_weight == 15
    assert res.included == 4
    assert res.order == [1, 2, 3, 4]
    # (10, 3, 1) is still queued when 3 joins through node 2
    assert res.stale_pops == 1
    assert res.pops == 5
    assert sorted(res.tree[3]) == [(2, 3), (4, 7)]
    assert res.tree[0] == []


def test_tree_is_symmetric_and_spanning():
    adj = generate_connected_weighted(60, extra_edges=200, seed=7)
    res = prim_spanning_tree(adj)
    assert len(res.edges) == 59
    for u, v, w in res.edges:
        assert (v, w) in res.tree[u]
        assert (u, w) in res.tree[v]
    assert sorted(res.order) == list(range(1, 61))


def _kruskal_weight(n, edges):
    parent = list(range(n + 1))

    def find(x):
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    total = 0
    for u, v, w in sorted(edges, key=lambda e: e[2]):
        ru, rv = find(u), find(v)
        if ru != rv:
            parent[ru] = rv
            total += w
    return total


@pytest.mark.parametrize("seed", range(10))
def test_total_weight_is_minimum(seed):
    adj = generate_connected_weighted(40, extra_edges=80, w_min=0, w_max=20, seed=seed)
    res = prim_spanning_tree(adj)
    assert res.total_weight == _kruskal_weight(40, adjacency_to_edges(adj))


def test_single_node():
    res = prim_spanning_tree(edges_to_adjacency(1, []))
    assert res.edges == []
    assert res.included == 1
    assert res.total_weight == 0


def test_self_loop_and_parallel_edges():
    adj = edges_to_adjacency(2, [(1, 1, 0), (1, 2, 9), (2, 1, 4)])
    res = prim_spanning_tree(adj)
    assert res.edges == [(1, 2, 4)]


def test_zero_weights():
    res = prim_spanning_tree(edges_to_adjacency(3, [(1, 2, 0), (2, 3, 0)]))
    assert res.total_weight == 0
    assert len(res.edges) == 2


def test_disconnected_graph_raises():
    adj = edges_to_adjacency(4, [(1, 2, 1), (3, 4, 1)])
    with pytest.raises(DisconnectedGraphError):
        prim_spanning_tree(adj)


def test_disconnected_is_value_error():
    with pytest.raises(ValueError):
        prim_spanning_tree(edges_to_adjacency(2, []))


def test_bad_root():
    with pytest.raises(ValueError):
        prim_spanning_tree(edges_to_adjacency(2, [(1, 2, 1)]), root=3)
