import heapq
import math
import time
from dataclasses import dataclass
from typing import List, Tuple

# ----------------------------
# Minimax Dijkstra (single-source) with early stop
# ----------------------------

@dataclass
class MinimaxResult:
    value: float
    path: List[int]
    pops: int
    relaxations: int
    time_sec: float


def minimax_dijkstra_early_stop(adj: List[List[Tuple[int, int]]], s: int, t: int) -> MinimaxResult:
    """
    Dijkstra where a path costs its heaviest edge instead of its total weight.
    Terminates as soon as t is closed; the popped key is then the smallest
    achievable maximum edge weight between s and t.

    Works on any adjacency list, 0- or 1-based. Returns value inf and an
    empty path when t is unreachable.
    """
    n = len(adj)
    INF = math.inf
    cost = [INF] * n
    parent = [-1] * n
    closed = [False] * n

    cost[s] = 0
    pq = [(0, s)]
    pops = 0
    relaxations = 0

    start = time.perf_counter()

    while pq:
        cu, u = heapq.heappop(pq)
        pops += 1
        if closed[u]:
            continue
        closed[u] = True

        if u == t:
            break

        for v, w in adj[u]:
            relaxations += 1
            if closed[v]:
                continue
            nc = max(cu, w)
            if nc < cost[v]:
                cost[v] = nc
                parent[v] = u
                heapq.heappush(pq, (nc, v))

    end = time.perf_counter()

    path = reconstruct_path(parent, s, t) if cost[t] < INF else []
    return MinimaxResult(value=cost[t], path=path, pops=pops, relaxations=relaxations, time_sec=end - start)


def reconstruct_path(parent: List[int], s: int, t: int) -> List[int]:
    if s == t:
        return [s]
    if parent[t] == -1:
        return []
    cur = t
    out = []
    while cur != -1:
        out.append(cur)
        if cur == s:
            break
        cur = parent[cur]
    out.reverse()
    return out if out and out[0] == s else []
