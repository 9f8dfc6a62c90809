# prim.py
import heapq
import sys
from typing import List, Tuple

from cli import build_parser, run_tool
from dijkstra import infinity_for
from graph_loader import load_weighted_graph
from kruskal import format_edges

WeightedGraph = List[List[Tuple[int, int]]]


def prim(adj: WeightedGraph, num_vertices: int, start: int) -> Tuple[int, List[Tuple[int, int]]]:
    """
    Grow a minimum spanning tree from `start` with a lazy-deletion heap of
    (edge weight, vertex) candidates.

    Only the component containing `start` is spanned; vertices it cannot reach
    are left out (unlike kruskal(), which returns the whole forest).
    """
    if not 1 <= start <= num_vertices:
        raise ValueError(f"start vertex {start} outside the range [1, {num_vertices}]")

    in_mst = [False] * (num_vertices + 1)
    min_weight = [infinity_for(adj)] * (num_vertices + 1)
    parent_vertex = [None] * (num_vertices + 1)

    total_cost = 0
    mst_edges = []
    min_weight[start] = 0
    pq = [(0, start)]
    while pq and len(mst_edges) < num_vertices - 1:
        weight, u = heapq.heappop(pq)
        if in_mst[u]:
            continue    # stale
        in_mst[u] = True

        p = parent_vertex[u]
        if p is not None:    # the seed (0, start) is not an edge
            total_cost += weight
            mst_edges.append((min(u, p), max(u, p)))

        for v, w in adj[u]:
            if not in_mst[v] and w < min_weight[v]:
                min_weight[v] = w
                parent_vertex[v] = u
                heapq.heappush(pq, (w, v))
    return total_cost, mst_edges


def main(argv=None):
    ap = build_parser("prim", "Minimum spanning tree cost (Prim).",
                      start="required", solution=True,
                      solution_help="also print the tree edges after the cost")
    args = ap.parse_args(argv)

    def compute(args):
        num_vertices, adj = load_weighted_graph(args.file)
        cost, mst_edges = prim(adj, num_vertices, args.start)
        lines = [str(cost)]
        if args.show_solution:
            lines.append(format_edges(mst_edges))
        return lines

    return run_tool(args, compute)


if __name__ == "__main__":
    sys.exit(main())
