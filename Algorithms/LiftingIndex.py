import logging
import time
from typing import List, Tuple, Optional

logger = logging.getLogger(__name__)

# ----------------------------
# Binary lifting over a rooted spanning tree
# ----------------------------


def lifting_levels(n: int) -> int:
    """Number of levels L so that 2^L exceeds any depth in an n-node tree."""
    return max(1, n.bit_length())


class LiftingIndex:
    """
    Ancestor / max-edge table for a tree on nodes 1..n.

    up[i][u] is the 2^i-th ancestor of u and best[i][u] the heaviest edge on
    the way there. The parent of the root is a virtual node (index n + 1,
    depth 0) whose own entries point back to itself with max-edge 0, so
    composing jumps past the root stays well defined.
    """

    def __init__(self, n: int, levels: Optional[int] = None):
        if n < 1:
            raise ValueError("index needs at least one node")
        self.n = n
        self.levels = levels if levels is not None else lifting_levels(n)
        self.sentinel = n + 1
        self.root: Optional[int] = None

        size = n + 2
        self._depth = [0] * size
        self.up: List[List[int]] = [[self.sentinel] * size for _ in range(self.levels)]
        self.best: List[List[int]] = [[0] * size for _ in range(self.levels)]

    @classmethod
    def build(cls, tree: List[List[Tuple[int, int]]], n: int, root: int = 1) -> "LiftingIndex":
        index = cls(n)
        index._populate(tree, root)
        return index

    def _populate(self, tree: List[List[Tuple[int, int]]], root: int) -> None:
        if not 1 <= root <= self.n:
            raise ValueError(f"root {root} out of range 1..{self.n}")
        start = time.perf_counter()
        self.root = root

        visited = 0
        self._visit(root, self.sentinel, 0)
        visited += 1

        # frames: (node, parent, iterator over tree[node])
        stack = [(root, self.sentinel, iter(tree[root]))]
        while stack:
            u, parent, children = stack[-1]
            for v, w in children:
                if v == parent:
                    continue
                self._visit(v, u, w)
                visited += 1
                stack.append((v, u, iter(tree[v])))
                break
            else:
                stack.pop()

        end = time.perf_counter()
        logger.debug(
            "lifting index: %d nodes, %d levels, max depth %d in %.6fs",
            visited, self.levels, max(self._depth), end - start,
        )

    def _visit(self, u: int, parent: int, w: int) -> None:
        up = self.up
        best = self.best
        self._depth[u] = self._depth[parent] + 1
        up[0][u] = parent
        best[0][u] = w
        for i in range(1, self.levels):
            mid = up[i - 1][u]
            up[i][u] = up[i - 1][mid]
            best[i][u] = max(best[i - 1][u], best[i - 1][mid])

    def depth(self, u: int) -> int:
        return self._depth[u]

    def parent(self, u: int) -> Optional[int]:
        p = self.up[0][u]
        return None if p == self.sentinel else p

    def ancestor(self, u: int, i: int) -> int:
        return self.up[i][u]

    def max_edge(self, u: int, i: int) -> int:
        return self.best[i][u]

    def kth_ancestor(self, u: int, k: int) -> Optional[int]:
        """Return the k-th ancestor of u, or None when it would pass the root."""
        if k < 0:
            raise ValueError("k must be non-negative")
        if k >= self._depth[u]:
            return None
        for i in range(self.levels - 1, -1, -1):
            if k >> i & 1:
                u = self.up[i][u]
        return u
