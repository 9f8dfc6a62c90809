# dijkstra.py
import heapq
import sys
from typing import List, Tuple

from cli import build_parser, run_tool
from frontier import SortedFrontier
from graph_loader import load_weighted_graph

WeightedGraph = List[List[Tuple[int, int]]]


def infinity_for(adj: WeightedGraph) -> int:
    """Unreachable sentinel: strictly larger than any path or edge weight sum in `adj`."""
    return sum(abs(w) for nbrs in adj for _, w in nbrs) + 1


def _check_start(num_vertices: int, start: int):
    if not 1 <= start <= num_vertices:
        raise ValueError(f"start vertex {start} outside the range [1, {num_vertices}]")


def _finalize(dist: List[int], INF: int) -> List[int]:
    return [-1 if d == INF else d for d in dist]


def dijkstra(adj: WeightedGraph, num_vertices: int, start: int) -> List[int]:
    """
    Standard Dijkstra with a lazy-deletion binary heap over (distance, vertex).
    Returns dist with V + 1 slots (slot 0 unused); unreachable vertices get -1.
    Weights must be non-negative.
    """
    _check_start(num_vertices, start)
    INF = infinity_for(adj)
    dist = [INF] * (num_vertices + 1)
    dist[start] = 0
    pq = [(0, start)]
    while pq:
        d, u = heapq.heappop(pq)
        if d > dist[u]:
            continue    # stale
        for v, w in adj[u]:
            nd = d + w
            if nd < dist[v]:
                dist[v] = nd
                heapq.heappush(pq, (nd, v))
    return _finalize(dist, INF)


def dijkstra_sorted(adj: WeightedGraph, num_vertices: int, start: int) -> List[int]:
    """Same contract as dijkstra(), driven by a decrease-key SortedFrontier."""
    _check_start(num_vertices, start)
    INF = infinity_for(adj)
    dist = [INF] * (num_vertices + 1)
    dist[start] = 0
    frontier = SortedFrontier()
    frontier.push(start, 0)
    while frontier:
        d, u = frontier.pop()
        for v, w in adj[u]:
            nd = d + w
            if nd < dist[v]:
                dist[v] = nd
                frontier.push(v, nd)
    return _finalize(dist, INF)


QUEUES = {"heap": dijkstra, "sorted": dijkstra_sorted}


def format_distances(dist: List[int], num_vertices: int) -> str:
    return " ".join(f"{v}:{dist[v]}" for v in range(1, num_vertices + 1))


def main(argv=None):
    ap = build_parser("dijkstra", "Single-source shortest distances (Dijkstra).",
                      start="required", solution=True, solution_help="accepted, not used")
    ap.add_argument("--queue", choices=sorted(QUEUES), default="heap",
                    help="priority queue driving the relaxation loop (default: heap)")
    args = ap.parse_args(argv)

    def compute(args):
        num_vertices, adj = load_weighted_graph(args.file)
        dist = QUEUES[args.queue](adj, num_vertices, args.start)
        return [format_distances(dist, num_vertices)]

    return run_tool(args, compute)


if __name__ == "__main__":
    sys.exit(main())
