#!/usr/bin/env python3
"""
Random input files for the graph tools.

Weighted graphs are a random spanning tree (so they are connected) plus `extra`
additional edges with no self loops or parallel edges. Vertices are 1-based.
"""
import argparse
import random
import sys
from typing import List, Tuple


def make_random_connected_graph(n: int, extra: int = None, wmax: int = 20,
                                seed: int = None) -> List[Tuple[int, int, int]]:
    """Returns [(u, v, w), ...]; `extra` defaults to n - 1 (capped at the free pairs)."""
    rng = random.Random(seed)
    if extra is None:
        extra = n - 1
    extra = min(extra, n * (n - 1) // 2 - max(n - 1, 0))

    edges = []
    existing_edges = set()

    # Step 1: spanning tree
    for i in range(2, n + 1):
        j = rng.randint(1, i - 1)
        edges.append((j, i, rng.randint(1, wmax)))
        existing_edges.add((j, i))

    # Step 2: extra edges
    count = 0
    while count < extra:
        u = rng.randint(1, n)
        v = rng.randint(1, n)
        if u == v:
            continue
        edge = (min(u, v), max(u, v))
        if edge in existing_edges:
            continue
        edges.append((u, v, rng.randint(1, wmax)))
        existing_edges.add(edge)
        count += 1

    rng.shuffle(edges)
    return edges


def make_random_digraph(n: int, m: int, seed: int = None) -> List[Tuple[int, int]]:
    """m random arcs (u, v), self loops and repeats allowed."""
    rng = random.Random(seed)
    if n == 0:
        return []
    return [(rng.randint(1, n), rng.randint(1, n)) for _ in range(m)]


def format_graph(n: int, edges) -> str:
    lines = [f"{n} {len(edges)}"]
    lines.extend(" ".join(str(x) for x in edge) for edge in edges)
    return "\n".join(lines) + "\n"


def write_graph(path: str, n: int, edges):
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_graph(n, edges))


def main(argv=None):
    ap = argparse.ArgumentParser(description="Generate a random graph input file")
    ap.add_argument("-n", type=int, required=True, help="number of vertices")
    ap.add_argument("--extra", type=int, default=None,
                    help="extra edges beyond the spanning tree (default: n - 1); arc count with --directed")
    ap.add_argument("--wmax", type=int, default=20, help="maximum edge weight")
    ap.add_argument("--directed", action="store_true", help="unweighted directed arcs (kosaraju input)")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("-o", dest="output", default=None, help="output file (default: stdout)")
    args = ap.parse_args(argv)

    if args.directed:
        m = args.extra if args.extra is not None else 2 * args.n
        edges = make_random_digraph(args.n, m, seed=args.seed)
    else:
        edges = make_random_connected_graph(args.n, args.extra, args.wmax, seed=args.seed)

    if args.output:
        write_graph(args.output, args.n, edges)
    else:
        sys.stdout.write(format_graph(args.n, edges))
    return 0


if __name__ == "__main__":
    sys.exit(main())
