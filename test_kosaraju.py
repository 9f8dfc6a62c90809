# test_kosaraju.py
import io
import random

import networkx as nx

import testcase_generator as tg
from graph_loader import load_directed_graph
from kosaraju import format_components, kosaraju


def build(n, arcs):
    G = [[] for _ in range(n + 1)]
    GT = [[] for _ in range(n + 1)]
    for u, v in arcs:
        G[u].append(v)
        GT[v].append(u)
    return G, GT


def test_chain_gives_singletons():
    n, G, GT = load_directed_graph(io.StringIO("3 2\n1 2\n2 3\n"))
    components = kosaraju(G, GT, n)
    assert components == [[1], [2], [3]]
    assert format_components(components) == ["1", "2", "3"]


def test_cycle_and_tail():
    # 1 -> 2 -> 3 -> 1 is one component, 4 hangs off it, 5 is isolated
    G, GT = build(5, [(1, 2), (2, 3), (3, 1), (3, 4)])
    components = kosaraju(G, GT, 5)
    assert components == [[5], [1, 3, 2], [4]]


def test_self_loops_and_repeated_arcs():
    G, GT = build(2, [(1, 1), (1, 2), (1, 2), (2, 1)])
    assert [sorted(c) for c in kosaraju(G, GT, 2)] == [[1, 2]]


def test_deep_path_no_recursion_limit():
    n = 20000
    arcs = [(i, i + 1) for i in range(1, n)] + [(n, 1)]
    G, GT = build(n, arcs)
    components = kosaraju(G, GT, n)
    assert len(components) == 1 and len(components[0]) == n


def test_random_digraphs(TRIALS=30):
    rng = random.Random(3)
    for i in range(TRIALS):
        n = rng.randint(1, 40)
        arcs = tg.make_random_digraph(n, rng.randint(0, 3 * n), seed=rng.random())
        G, GT = build(n, arcs)
        components = kosaraju(G, GT, n)

        # partition of 1..n
        seen = [v for comp in components for v in comp]
        assert sorted(seen) == list(range(1, n + 1)), f"[{i}] not a partition: {components}"

        D = nx.DiGraph()
        D.add_nodes_from(range(1, n + 1))
        D.add_edges_from(arcs)
        expected = {frozenset(c) for c in nx.strongly_connected_components(D)}
        assert {frozenset(c) for c in components} == expected, f"[{i}] wrong components"

        # arcs between components only go forward in discovery order
        index = {v: k for k, comp in enumerate(components) for v in comp}
        for u, v in arcs:
            assert index[u] <= index[v], f"[{i}] arc {u}->{v} goes back from {index[u]} to {index[v]}"

        assert kosaraju(G, GT, n) == components, f"[{i}] second run differs"


if __name__ == "__main__":
    test_random_digraphs()
    print("✅ kosaraju tests passed.")
