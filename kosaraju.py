# kosaraju.py
"""
Strongly connected components (Kosaraju).

Pass 1 records vertices of G in post-order (finishing order); pass 2 pops that
order and collects each unvisited vertex's reachable set in the transpose GT.
Both depth-first searches keep an explicit stack of (vertex, neighbor iterator)
so deep graphs do not hit the recursion limit; the visiting order is the same
as the recursive formulation.
"""

import sys
from typing import List

from cli import build_parser, run_tool
from graph_loader import load_directed_graph

DirectedGraph = List[List[int]]


def _finish_order(G: DirectedGraph, root: int, visited: List[bool], order: List[int]):
    visited[root] = True
    stack = [(root, iter(G[root]))]
    while stack:
        u, it = stack[-1]
        for v in it:
            if not visited[v]:
                visited[v] = True
                stack.append((v, iter(G[v])))
                break
        else:
            # every descendant of u is finished
            stack.pop()
            order.append(u)


def _collect(GT: DirectedGraph, root: int, visited: List[bool]) -> List[int]:
    visited[root] = True
    component = [root]
    stack = [iter(GT[root])]
    while stack:
        for v in stack[-1]:
            if not visited[v]:
                visited[v] = True
                component.append(v)
                stack.append(iter(GT[v]))
                break
        else:
            stack.pop()
    return component


def kosaraju(G: DirectedGraph, GT: DirectedGraph, num_vertices: int) -> List[List[int]]:
    """
    Returns the components in discovery order. Every vertex 1..V is in exactly
    one component, and an arc u -> v of G between two different components
    always leads from an earlier component to a later one.
    """
    visited = [False] * (num_vertices + 1)
    order: List[int] = []
    for u in range(1, num_vertices + 1):
        if not visited[u]:
            _finish_order(G, u, visited, order)

    visited = [False] * (num_vertices + 1)
    components: List[List[int]] = []
    while order:
        u = order.pop()
        if not visited[u]:
            components.append(_collect(GT, u, visited))
    return components


def format_components(components: List[List[int]]) -> List[str]:
    return [" ".join(str(v) for v in comp) for comp in components]


def main(argv=None):
    ap = build_parser("kosaraju", "Strongly connected components (Kosaraju).")
    args = ap.parse_args(argv)

    def compute(args):
        num_vertices, G, GT = load_directed_graph(args.file)
        return format_components(kosaraju(G, GT, num_vertices))

    return run_tool(args, compute)


if __name__ == "__main__":
    sys.exit(main())
