import heapq
import logging
import time
from dataclasses import dataclass, field
from typing import List, Tuple, Optional

logger = logging.getLogger(__name__)

# ----------------------------
# Prim spanning tree with lazy deletion
# ----------------------------


class DisconnectedGraphError(ValueError):
    """Raised when the frontier expansion cannot reach every node."""


@dataclass
class PrimResult:
    tree: List[List[Tuple[int, int]]]
    edges: List[Tuple[int, int, int]]
    included: int
    total_weight: int
    pops: int
    pushes: int
    stale_pops: int
    time_sec: float
    root: int = 1
    # order in which nodes joined the tree, root first
    order: List[int] = field(default_factory=list)


def prim_spanning_tree(adj: List[List[Tuple[int, int]]], root: int = 1) -> PrimResult:
    """
    Minimum spanning tree by frontier expansion from `root`.

    adj is indexed 1..N (adj[0] unused), adj[u] = [(v, w), ...] with every
    undirected edge stored in both directions. The heap holds
    (weight, node, origin) candidates; entries for nodes that are already in
    the tree are discarded when popped instead of being removed eagerly.

    Returns the tree as an adjacency list of the same shape. Raises
    DisconnectedGraphError if some node is never reached.
    """
    n = len(adj) - 1
    if n < 1:
        raise ValueError("graph must have at least one node")
    if not 1 <= root <= n:
        raise ValueError(f"root {root} out of range 1..{n}")

    tree: List[List[Tuple[int, int]]] = [[] for _ in range(n + 1)]
    edges: List[Tuple[int, int, int]] = []
    included = [False] * (n + 1)
    order: List[int] = []

    # seed: -1 marks "no real edge" for the root
    pq: List[Tuple[int, int, Optional[int]]] = [(-1, root, None)]
    pops = 0
    pushes = 1
    stale_pops = 0
    total = 0

    start = time.perf_counter()

    while pq:
        w, u, origin = heapq.heappop(pq)
        pops += 1
        if included[u]:
            stale_pops += 1
            continue
        included[u] = True
        order.append(u)

        if origin is not None:
            tree[u].append((origin, w))
            tree[origin].append((u, w))
            edges.append((origin, u, w))
            total += w

        for v, wv in adj[u]:
            if not included[v]:
                # tie on (weight, node) falls back to comparing origins, all ints
                heapq.heappush(pq, (wv, v, u))
                pushes += 1

    end = time.perf_counter()

    if len(order) != n:
        missing = n - len(order)
        raise DisconnectedGraphError(
            f"{missing} of {n} nodes unreachable from root {root}"
        )

    logger.debug(
        "prim: %d nodes, %d tree edges, weight %d, %d pops (%d stale) in %.6fs",
        n, len(edges), total, pops, stale_pops, end - start,
    )

    return PrimResult(
        tree=tree,
        edges=edges,
        included=len(order),
        total_weight=total,
        pops=pops,
        pushes=pushes,
        stale_pops=stale_pops,
        time_sec=end - start,
        root=root,
        order=order,
    )
