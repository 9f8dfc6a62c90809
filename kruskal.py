# kruskal.py
import sys
from typing import List, Tuple

from cli import build_parser, run_tool
from graph_loader import load_edge_list


class UnionFind:
    """Disjoint-set forest over vertices 1..n with path compression (no union by rank)."""
    def __init__(self, n: int):
        self.parent = list(range(n + 1))

    def find(self, i: int) -> int:
        root = i
        while self.parent[root] != root:
            root = self.parent[root]
        # path compression: point everything on the walk straight at the root
        while self.parent[i] != root:
            self.parent[i], i = root, self.parent[i]
        return root

    def union(self, i: int, j: int) -> bool:
        """Attach j's root under i's root. False if both are already in one set."""
        root_i = self.find(i)
        root_j = self.find(j)
        if root_i == root_j:
            return False
        self.parent[root_j] = root_i
        return True


def kruskal(edges: List[Tuple[int, int, int]], num_vertices: int) -> Tuple[int, List[Tuple[int, int]]]:
    """
    Minimum spanning forest from (w, u, v) edges.
    Returns (total cost, accepted edges as (min(u, v), max(u, v)) in acceptance order).
    """
    uf = UnionFind(num_vertices)
    total_cost = 0
    mst_edges = []
    for w, u, v in sorted(edges):
        if not uf.union(u, v):
            continue    # would close a cycle
        total_cost += w
        mst_edges.append((min(u, v), max(u, v)))
        if len(mst_edges) == num_vertices - 1:
            break
    return total_cost, mst_edges


def format_edges(mst_edges: List[Tuple[int, int]]) -> str:
    return " ".join(f"({u},{v})" for u, v in mst_edges)


def main(argv=None):
    ap = build_parser("kruskal", "Minimum spanning tree/forest cost (Kruskal).",
                      start="ignored", solution=True,
                      solution_help="print the tree edges instead of the cost")
    args = ap.parse_args(argv)

    def compute(args):
        num_vertices, edges = load_edge_list(args.file)
        cost, mst_edges = kruskal(edges, num_vertices)
        if args.show_solution:
            return [format_edges(mst_edges)]
        return [str(cost)]

    return run_tool(args, compute)


if __name__ == "__main__":
    sys.exit(main())
