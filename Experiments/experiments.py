import random
import time
from typing import List, Dict, Any

from Graph_Generation.generator import generate_connected_weighted, generate_path_graph
from Algorithms.Dijkstra import minimax_dijkstra_early_stop
from Algorithms.Bottleneck import BottleneckOracle

# ----------------------------
# Empirical evaluation harness
# ----------------------------

def run_experiment(
    n_values=(200, 500, 1000),
    density_values=(0, 1, 4),
    trials_per_setting=5,
    queries_per_trial=50,
    weight_range=(0, 1000),
    seed=12345,
) -> List[Dict[str, Any]]:
    """
    Builds the lifting oracle on random connected graphs with n nodes and
    about n * (1 + density) edges, then answers random (s,t) queries with both
    the oracle and per-query minimax Dijkstra.
    Returns list of dict rows, one per (n, density, trial).
    """
    base_rng = random.Random(seed)
    rows: List[Dict[str, Any]] = []
    wmin, wmax = weight_range
    oracle = BottleneckOracle()

    for n in n_values:
        for density in density_values:
            for trial in range(trials_per_setting):
                g_seed = base_rng.randrange(10**9)
                adj = generate_connected_weighted(n, extra_edges=density * n, w_min=wmin, w_max=wmax, seed=g_seed)
                pairs = [(base_rng.randint(1, n), base_rng.randint(1, n)) for _ in range(queries_per_trial)]
                rows.append(_measure(oracle, adj, pairs, n=n, density=density, trial=trial))

    return rows


def run_experiment_path(
    n_values=(1000, 10000, 50000),
    queries_per_trial=200,
    seed=12345,
) -> List[Dict[str, Any]]:
    """Same comparison on path graphs, where the tree depth equals n."""
    base_rng = random.Random(seed)
    rows: List[Dict[str, Any]] = []
    oracle = BottleneckOracle()
    for n in n_values:
        adj = generate_path_graph(n, seed=base_rng.randrange(10**9))
        pairs = [(base_rng.randint(1, n), base_rng.randint(1, n)) for _ in range(queries_per_trial)]
        rows.append(_measure(oracle, adj, pairs, n=n, density=0, trial=0))
    return rows


def _measure(oracle: BottleneckOracle, adj, pairs, **meta) -> Dict[str, Any]:
    n = len(adj) - 1

    t0 = time.perf_counter()
    oracle.reset(n)
    for u in range(1, n + 1):
        for v, w in adj[u]:
            if u <= v:
                oracle.add_edge(u, v, w)
    oracle.build_spanning_tree_and_index()
    t1 = time.perf_counter()
    answers = oracle.query_many(pairs)
    t2 = time.perf_counter()

    reference = [minimax_dijkstra_early_stop(adj, s, t) for s, t in pairs]
    t3 = time.perf_counter()

    mismatches = sum(1 for a, r in zip(answers, reference) if a != r.value)
    prim = oracle.spanning_tree

    row = dict(meta)
    row.update({
        "m": oracle.edge_count,
        "queries": len(pairs),
        "time_build_sec": t1 - t0,
        "time_query_sec": t2 - t1,
        "time_dijkstra_sec": t3 - t2,
        "prim_pops": prim.pops,
        "prim_stale_pops": prim.stale_pops,
        "dijkstra_relax": sum(r.relaxations for r in reference),
        "mismatches": mismatches,
        "status": "ok" if mismatches == 0 else "mismatch",
    })
    return row


def summarize(rows: List[Dict[str, Any]]) -> None:
    ok = [r for r in rows if r.get("status") == "ok"]
    bad = [r for r in rows if r.get("status") == "mismatch"]

    print(f"Total rows: {len(rows)} | ok: {len(ok)} | mismatches: {len(bad)}")
    if bad:
        print("Example mismatch row:")
        print(bad[0])

    # Aggregate by (n, density)
    by = {}
    for r in ok:
        key = (r["n"], r["density"])
        by.setdefault(key, []).append(r)

    print("\nAverages (only ok runs):")
    for (n, density), group in sorted(by.items()):
        avg = lambda k: sum(x[k] for x in group) / len(group)
        print(
            f"n={n:6d} density={density:2d} | "
            f"build={avg('time_build_sec'):.6f}s "
            f"lifting q={avg('time_query_sec'):.6f}s "
            f"dijkstra q={avg('time_dijkstra_sec'):.6f}s | "
            f"stale pops={avg('prim_stale_pops'):.1f} "
            f"relax dijk={avg('dijkstra_relax'):.1f}"
        )


if __name__ == "__main__":
    summarize(run_experiment())
    summarize(run_experiment_path())
