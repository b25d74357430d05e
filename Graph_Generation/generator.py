import random
from typing import List, Tuple, Optional, Iterable

Adjacency = List[List[Tuple[int, int]]]


def edges_to_adjacency(n: int, edges: Iterable[Tuple[int, int, int]]) -> Adjacency:
    """1-based adjacency list (adj[0] unused) from undirected (u, v, w) triples."""
    adj: Adjacency = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        adj[u].append((v, w))
        adj[v].append((u, w))
    return adj


def adjacency_to_edges(adj: Adjacency) -> List[Tuple[int, int, int]]:
    """
    Undirected edge list from a symmetric adjacency list, one triple per edge.
    Parallel edges are kept; self-loops appear twice in adj and once here.
    """
    edges = []
    for u in range(len(adj)):
        loops = 0
        for v, w in adj[u]:
            if u < v:
                edges.append((u, v, w))
            elif u == v:
                loops += 1
                if loops % 2:
                    edges.append((u, v, w))
    return edges


def generate_connected_weighted(
    n: int,
    extra_edges: int = 0,
    w_min: int = 0,
    w_max: int = 100,
    seed: Optional[int] = None,
) -> Adjacency:
    """
    Connected undirected graph on nodes 1..n with integer weights in
    [w_min, w_max]: a random tree (each node i > 1 hooks onto an earlier
    node) plus `extra_edges` uniformly random edges, which may repeat pairs.
    Returns adjacency list: adj[u] = [(v, w), ...], adj[0] unused.
    """
    if n < 1:
        raise ValueError("n must be >= 1")
    if extra_edges < 0:
        raise ValueError("extra_edges must be non-negative")
    if w_min < 0 or w_min > w_max:
        raise ValueError("w_min/w_max must be non-negative and w_min <= w_max")

    rng = random.Random(seed)

    # shuffle labels so node 1 is not always the tree's natural root
    labels = list(range(1, n + 1))
    rng.shuffle(labels)

    edges = []
    for i in range(1, n):
        u = labels[i]
        v = labels[rng.randrange(i)]
        edges.append((u, v, rng.randint(w_min, w_max)))

    if n > 1:
        for _ in range(extra_edges):
            u = rng.randint(1, n)
            v = rng.randint(1, n)
            while v == u:
                v = rng.randint(1, n)
            edges.append((u, v, rng.randint(w_min, w_max)))

    rng.shuffle(edges)
    return edges_to_adjacency(n, edges)


def generate_path_graph(n: int, w_min: int = 0, w_max: int = 100, seed: Optional[int] = None) -> Adjacency:
    """Path 1 - 2 - ... - n, the deepest tree the lifting index can see."""
    if n < 1:
        raise ValueError("n must be >= 1")
    rng = random.Random(seed)
    return edges_to_adjacency(n, [(i, i + 1, rng.randint(w_min, w_max)) for i in range(1, n)])


def has_path(adj: Adjacency, s: int, t: int) -> bool:
    """Unweighted reachability check via DFS."""
    n = len(adj)
    seen = [False] * n
    stack = [s]
    seen[s] = True
    while stack:
        u = stack.pop()
        if u == t:
            return True
        for v, _ in adj[u]:
            if not seen[v]:
                seen[v] = True
                stack.append(v)
    return False


def is_connected(adj: Adjacency) -> bool:
    """True iff nodes 1..n of a 1-based adjacency list form one component."""
    n = len(adj) - 1
    if n <= 1:
        return True
    seen = [False] * (n + 1)
    stack = [1]
    seen[1] = True
    count = 1
    while stack:
        u = stack.pop()
        for v, _ in adj[u]:
            if not seen[v]:
                seen[v] = True
                count += 1
                stack.append(v)
    return count == n
