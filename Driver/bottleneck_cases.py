import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import List, Tuple, Optional, Iterator

from Algorithms.Bottleneck import BottleneckOracle

logger = logging.getLogger(__name__)

# ----------------------------
# Test-case driver: parse, solve, print "Case k:" blocks
# ----------------------------

@dataclass
class QueryCase:
    n: int
    edges: List[Tuple[int, int, int]]
    queries: List[Tuple[int, int]]


def _ints(tokens: Iterator[str], what: str, count: int = 1) -> List[int]:
    out = []
    for _ in range(count):
        try:
            out.append(int(next(tokens)))
        except StopIteration:
            raise ValueError(f"unexpected end of input while reading {what}") from None
    return out


def parse_cases(tokens: List[str]) -> List[QueryCase]:
    """
    Token layout: T, then per case `N M`, M triples `u v w`, `Q`, Q pairs.
    """
    it = iter(tokens)
    (t,) = _ints(it, "test case count")
    cases = []
    for k in range(1, t + 1):
        n, m = _ints(it, f"case {k} header", 2)
        if n < 1 or m < 0:
            raise ValueError(f"case {k}: bad header N={n} M={m}")
        edges = []
        for _ in range(m):
            u, v, w = _ints(it, f"case {k} edges", 3)
            edges.append((u, v, w))
        (q,) = _ints(it, f"case {k} query count")
        queries = []
        for _ in range(q):
            s, d = _ints(it, f"case {k} queries", 2)
            queries.append((s, d))
        cases.append(QueryCase(n=n, edges=edges, queries=queries))
    return cases


def solve_case(case: QueryCase, oracle: Optional[BottleneckOracle] = None) -> List[int]:
    if oracle is None:
        oracle = BottleneckOracle(case.n)
    else:
        oracle.reset(case.n)
    for u, v, w in case.edges:
        oracle.add_edge(u, v, w)
    oracle.build_spanning_tree_and_index()
    return oracle.query_many(case.queries)


def run(text: str) -> str:
    cases = parse_cases(text.split())
    oracle = BottleneckOracle()
    lines = []
    for k, case in enumerate(cases, start=1):
        start = time.perf_counter()
        answers = solve_case(case, oracle)
        logger.info(
            "case %d: n=%d m=%d q=%d in %.4fs",
            k, case.n, len(case.edges), len(case.queries), time.perf_counter() - start,
        )
        lines.append(f"Case {k}:")
        lines.extend(str(a) for a in answers)
    return "\n".join(lines) + ("\n" if lines else "")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Answer minimax (bottleneck) path queries per test case.")
    parser.add_argument('--input', type=str, default='-', help='input file, - for stdin')
    parser.add_argument('--output', type=str, default='-', help='output file, - for stdout')
    parser.add_argument('--log', type=str, default='warning', help='{debug, info, warning}')
    args = parser.parse_args(argv)

    logging.basicConfig(format='%(message)s', level=getattr(logging, args.log.upper()))

    if args.input == '-':
        text = sys.stdin.read()
    else:
        with open(args.input) as f:
            text = f.read()

    try:
        result = run(text)
    except ValueError as e:
        logger.error("bad input: %s", e)
        return 1

    if args.output == '-':
        sys.stdout.write(result)
    else:
        with open(args.output, 'w') as f:
            f.write(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
