import logging
import time
from dataclasses import dataclass
from typing import List, Tuple, Optional, Iterable

from Algorithms.Prim import prim_spanning_tree, PrimResult
from Algorithms.LiftingIndex import LiftingIndex

logger = logging.getLogger(__name__)

ROOT = 1

# ----------------------------
# LCA and bottleneck queries on a lifting index
# ----------------------------


def lca(index: LiftingIndex, u: int, v: int) -> int:
    depth = index.depth
    up = index.up
    if depth(u) < depth(v):
        u, v = v, u

    # bring u up to v's level
    target = depth(v)
    for i in range(index.levels - 1, -1, -1):
        if depth(up[i][u]) >= target:
            u = up[i][u]
    if u == v:
        return u

    for i in range(index.levels - 1, -1, -1):
        if up[i][u] != up[i][v]:
            u = up[i][u]
            v = up[i][v]
    return up[0][u]


def max_edge_to_ancestor(index: LiftingIndex, node: int, ancestor: int) -> int:
    """Heaviest edge on the tree path from node up to one of its ancestors."""
    distance = index.depth(node) - index.depth(ancestor)
    best = 0
    for i in range(index.levels - 1, -1, -1):
        if distance >> i & 1:
            best = max(best, index.best[i][node])
            node = index.up[i][node]
    return best


def query(index: LiftingIndex, u: int, v: int) -> int:
    top = lca(index, u, v)
    return max(max_edge_to_ancestor(index, u, top), max_edge_to_ancestor(index, v, top))


def tree_path(index: LiftingIndex, u: int, v: int) -> List[int]:
    """Nodes of the unique tree path from u to v, both ends included."""
    top = lca(index, u, v)
    left = [u]
    while left[-1] != top:
        left.append(index.up[0][left[-1]])
    right = []
    cur = v
    while cur != top:
        right.append(cur)
        cur = index.up[0][cur]
    right.reverse()
    return left + right


# ----------------------------
# Per-test-case context
# ----------------------------

@dataclass
class BottleneckResult:
    value: int
    path: List[int]
    lca: int


class BottleneckOracle:
    """
    Owns everything one test case needs: the input graph, its spanning tree
    and the lifting index. Lifecycle is reset -> add_edge* -> build -> query*.
    """

    def __init__(self, max_nodes: int = 1):
        self.reset(max_nodes)

    def reset(self, max_nodes: int) -> None:
        if max_nodes < 1:
            raise ValueError("max_nodes must be >= 1")
        self.n = max_nodes
        self.adj: List[List[Tuple[int, int]]] = [[] for _ in range(max_nodes + 1)]
        self.edge_count = 0
        self._prim: Optional[PrimResult] = None
        self._index: Optional[LiftingIndex] = None

    def _check_node(self, u: int) -> None:
        if not 1 <= u <= self.n:
            raise ValueError(f"node {u} out of range 1..{self.n}")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        if self._index is not None:
            raise RuntimeError("cannot add edges after the index is built; reset first")
        self._check_node(u)
        self._check_node(v)
        if weight < 0:
            raise ValueError(f"negative weight {weight} on edge ({u}, {v})")
        self.adj[u].append((v, weight))
        self.adj[v].append((u, weight))
        self.edge_count += 1

    def build_spanning_tree_and_index(self) -> None:
        if self._index is not None:
            raise RuntimeError("index already built; reset before building again")
        start = time.perf_counter()
        prim = prim_spanning_tree(self.adj, root=ROOT)
        self._index = LiftingIndex.build(prim.tree, self.n, root=ROOT)
        self._prim = prim
        logger.debug(
            "built oracle for %d nodes / %d edges in %.6fs",
            self.n, self.edge_count, time.perf_counter() - start,
        )

    @property
    def built(self) -> bool:
        return self._index is not None

    @property
    def index(self) -> LiftingIndex:
        if self._index is None:
            raise RuntimeError("query before build_spanning_tree_and_index()")
        return self._index

    @property
    def spanning_tree(self) -> PrimResult:
        if self._prim is None:
            raise RuntimeError("query before build_spanning_tree_and_index()")
        return self._prim

    def lca(self, u: int, v: int) -> int:
        index = self.index
        self._check_node(u)
        self._check_node(v)
        return lca(index, u, v)

    def query(self, u: int, v: int) -> int:
        index = self.index
        self._check_node(u)
        self._check_node(v)
        return query(index, u, v)

    def query_many(self, pairs: Iterable[Tuple[int, int]]) -> List[int]:
        return [self.query(u, v) for u, v in pairs]

    def bottleneck_path(self, u: int, v: int) -> BottleneckResult:
        index = self.index
        self._check_node(u)
        self._check_node(v)
        top = lca(index, u, v)
        value = max(max_edge_to_ancestor(index, u, top), max_edge_to_ancestor(index, v, top))
        return BottleneckResult(value=value, path=tree_path(index, u, v), lca=top)
